"""Bookkeeping of client accounts driven by a stream of transactions."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType

from .models import Account, Transaction, TransactionType


class AccountService:
    """Applies transactions to client accounts.

    Invalid transactions are ignored rather than reported: they leave
    every account unchanged.
    """

    def __init__(self) -> None:
        self.accounts: dict[int, Account] = {}
        # Deposits and withdrawals that may later be disputed, by transaction id.
        self.disputable_transactions: dict[int, Transaction] = {}
        self.disputed_transaction_ids: set[int] = set()
        self.resolved_dispute_ids: set[int] = set()

    def record_transaction(self, transaction: Transaction) -> None:
        """Apply one transaction to its client's account, creating the account if needed."""
        account = self.accounts.get(transaction.client)
        if account is None:
            account = Account(client=transaction.client)
            self.accounts[transaction.client] = account

        if account.locked:
            return

        match transaction.kind:
            case TransactionType.DEPOSIT:
                self._deposit(account, transaction)
            case TransactionType.WITHDRAWAL:
                self._withdraw(account, transaction)
            case TransactionType.DISPUTE:
                self._dispute(account, transaction)
            case TransactionType.RESOLVE:
                self._resolve(account, transaction)
            case TransactionType.CHARGEBACK:
                self._chargeback(account, transaction)
            case _:
                pass

    def summary(self) -> Mapping[int, Account]:
        """Return a read-only view of all accounts keyed by client id."""
        return MappingProxyType(self.accounts)

    def _referenced_amount(self, transaction: Transaction) -> Decimal | None:
        """Amount of the earlier transaction this one refers to, if it is valid for this client."""
        referenced = self.disputable_transactions.get(transaction.tx)
        if referenced is None or referenced.client != transaction.client:
            return None
        return referenced.amount

    def _deposit(self, account: Account, transaction: Transaction) -> None:
        amount = transaction.amount
        if amount is None:
            return
        account.available += amount
        account.total += amount
        self.disputable_transactions[transaction.tx] = transaction

    def _withdraw(self, account: Account, transaction: Transaction) -> None:
        amount = transaction.amount
        if amount is None or amount > account.available:
            return
        account.available -= amount
        account.total -= amount
        self.disputable_transactions[transaction.tx] = transaction

    def _dispute(self, account: Account, transaction: Transaction) -> None:
        amount = self._referenced_amount(transaction)
        if amount is None:
            return
        account.available -= amount
        account.held += amount
        self.disputed_transaction_ids.add(transaction.tx)

    def _resolve(self, account: Account, transaction: Transaction) -> None:
        if transaction.tx not in self.disputed_transaction_ids:
            return
        if transaction.tx in self.resolved_dispute_ids:
            return
        amount = self._referenced_amount(transaction)
        if amount is None:
            return
        account.held -= amount
        account.available += amount
        self.resolved_dispute_ids.add(transaction.tx)

    def _chargeback(self, account: Account, transaction: Transaction) -> None:
        if transaction.tx not in self.disputed_transaction_ids:
            return
        amount = self._referenced_amount(transaction)
        if amount is None:
            return
        # A resolved dispute being charged back: undo the resolve first.
        if transaction.tx in self.resolved_dispute_ids:
            account.held += amount
            account.available -= amount
            self.resolved_dispute_ids.discard(transaction.tx)
        account.held -= amount
        account.total -= amount
        account.locked = True