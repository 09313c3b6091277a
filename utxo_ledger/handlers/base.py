# utxo_ledger/handlers/base.py
from abc import ABC, abstractmethod
from typing import List, Sequence, Set

from utxo_ledger.models.transaction import Transaction
from utxo_ledger.state.mutator import commit_transaction
from utxo_ledger.state.utxo_pool import UTXOPool
from utxo_ledger.validation.transaction_validator import RejectionReason, TransactionValidator


class BaseTxHandler(ABC):
    """
    Public ledger fed one batch of proposed transactions per epoch.

    The handler copies the pool it is given and never hands out its own copy,
    so the ledger state only changes through ``handle_txs``. Hashes of every
    committed transaction are kept for the handler's lifetime: an input-free
    transaction would otherwise validate again in a later epoch and recreate
    outputs that have since been spent.
    """

    def __init__(self, utxo_pool: UTXOPool):
        self._pool = UTXOPool(utxo_pool)
        self._validator = TransactionValidator(self._pool)
        self._committed: Set[bytes] = set()

    @property
    def utxo_pool(self) -> UTXOPool:
        """Snapshot of the current ledger state"""
        return self._pool.copy()

    def is_valid_tx(self, transaction: Transaction) -> bool:
        return self.check_tx(transaction) is RejectionReason.NONE

    def check_tx(self, transaction: Transaction) -> RejectionReason:
        if self.is_committed(transaction):
            return RejectionReason.ALREADY_COMMITTED
        return self._validator.check(transaction)

    def is_committed(self, transaction: Transaction) -> bool:
        return transaction.calculate_hash() in self._committed

    def _accept(self, transaction: Transaction) -> None:
        commit_transaction(self._pool, transaction)
        self._committed.add(transaction.hash)

    @abstractmethod
    def handle_txs(self, possible_txs: Sequence[Transaction]) -> List[Transaction]:
        """
        Handle one epoch: select a mutually valid subset of ``possible_txs``,
        commit it to the pool and return it as a new list.
        """
        pass

    @abstractmethod
    def get_strategy_name(self) -> str:
        pass
