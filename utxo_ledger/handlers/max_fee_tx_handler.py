# utxo_ledger/handlers/max_fee_tx_handler.py
from typing import List, Sequence, Set, Tuple

from utxo_ledger.handlers.base import BaseTxHandler
from utxo_ledger.models.transaction import Transaction
from utxo_ledger.models.utxo import UTXO
from utxo_ledger.utils.helpers import format_amount
from utxo_ledger.utils.logging_config import logger


class MaxFeeTxHandler(BaseTxHandler):
    """
    Greedy fee-maximizing acceptance.

    Picking the fee-maximal set of transactions with pairwise disjoint inputs
    is a multidimensional knapsack problem. Conflicting claims are assumed to
    be rare, so candidates are taken in descending fee order and each one is
    kept only if none of its UTXOs was claimed by a transaction kept before.

    Every candidate is validated against the pool as it stood at the start
    of the batch, so outputs created within the batch cannot be spent in it.
    """

    def handle_txs(self, possible_txs: Sequence[Transaction]) -> List[Transaction]:
        # Validation and fees both read the unmutated pool
        candidates: List[Tuple[float, Transaction]] = [
            (self._validator.calculate_fee(tx), tx)
            for tx in possible_txs
            if self.is_valid_tx(tx)
        ]
        # Stable sort: equal fees keep batch order
        candidates.sort(key=lambda item: item[0], reverse=True)

        accepted: List[Transaction] = []
        claimed: Set[UTXO] = set()
        total_fee = 0.0

        for fee, tx in candidates:
            outpoints = [tx_input.outpoint for tx_input in tx.inputs]
            if any(utxo in claimed for utxo in outpoints):
                logger.debug(f"Skipped {tx!r}: conflicts with a higher-fee transaction")
                continue
            if self.is_committed(tx):
                continue

            accepted.append(tx)
            self._accept(tx)
            claimed.update(outpoints)
            total_fee += fee

        logger.info(f"Accepted {len(accepted)} of {len(possible_txs)} transactions, "
                    f"total fee {format_amount(total_fee)}")
        return accepted

    def get_strategy_name(self) -> str:
        return "max_fee"
