# utxo_ledger/handlers/tx_handler.py
from typing import List, Sequence

from utxo_ledger.handlers.base import BaseTxHandler
from utxo_ledger.models.transaction import Transaction
from utxo_ledger.utils.logging_config import logger


class TxHandler(BaseTxHandler):
    """
    First-come-first-served acceptance.

    Transactions are validated and committed one at a time in the order
    given, so a transaction may spend outputs of one accepted earlier in the
    same batch but never of one that comes after it.
    """

    def handle_txs(self, possible_txs: Sequence[Transaction]) -> List[Transaction]:
        accepted: List[Transaction] = []

        for tx in possible_txs:
            if self.is_valid_tx(tx):
                accepted.append(tx)
                self._accept(tx)

        logger.info(f"Accepted {len(accepted)} of {len(possible_txs)} transactions")
        return accepted

    def get_strategy_name(self) -> str:
        return "naive"
