"""Command line entry point: read transactions as CSV, print account states as CSV."""

from __future__ import annotations

import argparse
import csv
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from .models import Account, parse_transaction
from .service import AccountService


def _records(source: Iterable[str]) -> Iterator[list[str]]:
    """Yield non-blank CSV records with surrounding whitespace trimmed from every field."""
    for fields in csv.reader(source):
        if fields:
            yield [field.strip() for field in fields]


def process(source: Iterable[str], out: TextIO, log_errors: bool = False) -> AccountService:
    """Apply the CSV transactions in source and write the account summary to out.

    Rows that cannot be parsed are skipped; with log_errors a message is
    written to out for each of them.
    """
    service = AccountService()
    records = _records(source)
    header = next(records, None)

    if header is not None:
        for row_number, fields in enumerate(records, start=1):
            try:
                if len(fields) != len(header):
                    raise ValueError(
                        f"found record with {len(fields)} fields, "
                        f"but the header has {len(header)} fields"
                    )
                transaction = parse_transaction(dict(zip(header, fields)))
            except ValueError as err:
                if log_errors:
                    out.write(f"error parsing row {row_number}: {err}\n")
                    out.flush()
                continue
            service.record_transaction(transaction)

    accounts = service.summary()
    if accounts:
        writer = csv.DictWriter(out, fieldnames=Account.FIELDS, lineterminator="\n")
        writer.writeheader()
        writer.writerows(account.to_row() for account in accounts.values())
    out.flush()
    return service


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Apply account transactions and print the resulting accounts."
    )
    parser.add_argument(
        "transactions_file", type=Path, help="Path to the transactions .csv file"
    )
    parser.add_argument(
        "-e",
        "--log-errors",
        action="store_true",
        help="Whether to log errors to the stdout",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command; returns the exit status."""
    args = _build_parser().parse_args(argv)
    path: Path = args.transactions_file

    if not path.exists():
        raise SystemExit(f"transaction file '{path}' doesn't exist")
    if not path.is_file():
        raise SystemExit(f"'{path}' is not a file")

    try:
        with path.open(encoding="utf-8", errors="replace", newline="") as source:
            process(source, sys.stdout, args.log_errors)
    except OSError as err:
        raise SystemExit(f"failed to open transactions file: {err}") from err
    return 0


if __name__ == "__main__":
    sys.exit(main())