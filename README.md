# txledger

`txledger` reads a CSV file of client transactions, replays them in order and
writes one summary row per client account to standard output.

## Installation

```
pip install .
```

## Usage

```
txledger transactions.csv > accounts.csv
```

To report rows that could not be parsed, add `-e` / `--log-errors`. The
messages (`error parsing row N: ...`, counting data rows from 1) are printed
to standard output before the summary:

```
txledger --log-errors transactions.csv
```

If the path does not exist or is not a regular file, the command exits with
an error message.

### Input

The input file has a header row naming the columns `type`, `client`, `tx`
and `amount`. Whitespace around each field is ignored, as are blank lines.

```
type,       client, tx, amount
deposit,    1,      1,  1.0
deposit,    2,      2,  2.0
withdrawal, 1,      3,  0.5
dispute,    2,      2,
chargeback, 2,      2,
```

- `type` is one of `deposit`, `withdrawal`, `dispute`, `resolve`,
  `chargeback` (lower case). Any other name is read as an unknown type: the
  row is accepted and creates the client's account, but changes nothing else.
- `client` is an unsigned 16-bit client id and `tx` is an unsigned 32-bit
  transaction id.
- `amount` is a plain decimal number such as `1`, `-2.5` or `.75`, rounded
  to four decimal places (halves to even). It may be empty or the column may
  be missing.
- A row is skipped when it has a different number of fields from the header,
  when `type`, `client` or `tx` is missing, or when a field is malformed or
  out of range.

### Transaction rules

- Every accepted row creates its client's account if it does not exist yet.
- **deposit** adds the amount to the available and total funds.
- **withdrawal** takes the amount from the available and total funds. It is
  ignored if the amount exceeds the available funds.
- **dispute** moves the amount of an earlier deposit or withdrawal from
  available to held.
- **resolve** moves a disputed amount from held back to available. A dispute
  is resolved at most once.
- **chargeback** removes a disputed amount from held and total, and locks
  the account. If the dispute had already been resolved, the resolve is
  undone first.
- A locked account ignores all further transactions.
- A deposit or withdrawal without an amount, and a dispute, resolve or
  chargeback that names an unknown transaction id or one of a different
  client, changes nothing.

### Output

```
client,available,held,total,locked
1,0.5,0,0.5,false
2,0,0,0,true
```

Accounts appear in the order their clients first occur in the input.
Amounts are printed with at most four decimal places, without trailing
zeros. When no row was accepted, nothing is printed.

## Use from Python

```python
import sys
from txledger.cli import process

with open("transactions.csv", newline="") as source:
    process(source, sys.stdout, log_errors=False)
```

`process` returns the `AccountService` it used.

The pieces can also be used on their own:

- `txledger.models.parse_transaction(row)` builds a `Transaction` from a
  mapping of column names to text and raises `ValueError` if it is invalid.
- `txledger.service.AccountService.record_transaction(transaction)` applies
  one `Transaction`; `summary()` returns a read-only mapping of client id to
  `Account`, and `Account.to_row()` gives the output columns as text.
- `txledger.decimals` provides `parse_amount`, `parse_optional_amount` and
  `format_amount`.

## Running the tests

```
pip install ".[test]"
pytest
```