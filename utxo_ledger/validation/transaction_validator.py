# utxo_ledger/validation/transaction_validator.py
import math
from enum import Enum
from typing import Set

from utxo_ledger.crypto.signatures import verify_signature
from utxo_ledger.models.transaction import Transaction
from utxo_ledger.models.utxo import UTXO
from utxo_ledger.state.utxo_pool import UTXOPool
from utxo_ledger.utils.helpers import format_amount
from utxo_ledger.utils.logging_config import logger


class RejectionReason(Enum):
    """Why a transaction failed validation"""
    NONE = "none"
    MISSING_UTXO = "missing_utxo"
    MISSING_SIGNATURE = "missing_signature"
    INVALID_SIGNATURE = "invalid_signature"
    DOUBLE_SPEND = "double_spend"
    NEGATIVE_OUTPUT = "negative_output"
    INSUFFICIENT_INPUTS = "insufficient_inputs"
    ALREADY_COMMITTED = "already_committed"


class TransactionValidator:
    """
    Read-only validity checks of a transaction against a UTXO pool.

    A transaction is valid when
    (1) every UTXO it claims is in the pool,
    (2) every input carries a signature by the owner of the claimed output,
    (3) no UTXO is claimed twice by the transaction,
    (4) no output value is negative, and
    (5) its outputs do not exceed its inputs in total value.
    """

    def __init__(self, utxo_pool: UTXOPool):
        self.utxo_pool = utxo_pool

    def check(self, transaction: Transaction) -> RejectionReason:
        """Run all checks in order and return the first failure, or NONE"""
        # All claimed outputs are in the current pool
        for tx_input in transaction.inputs:
            if not self.utxo_pool.contains(tx_input.outpoint):
                return self._reject(transaction, RejectionReason.MISSING_UTXO, tx_input.outpoint.id)

        # Each input is signed by the owner of the output it claims
        for index, tx_input in enumerate(transaction.inputs):
            if tx_input.signature is None:
                return self._reject(transaction, RejectionReason.MISSING_SIGNATURE, f"input {index}")
            tx_output = self.utxo_pool.get_tx_output(tx_input.outpoint)
            message = transaction.get_raw_data_to_sign(index)
            if not verify_signature(tx_output.public_key, message, tx_input.signature):
                return self._reject(transaction, RejectionReason.INVALID_SIGNATURE, f"input {index}")

        # No UTXO is claimed more than once
        claimed: Set[UTXO] = set()
        for tx_input in transaction.inputs:
            if tx_input.outpoint in claimed:
                return self._reject(transaction, RejectionReason.DOUBLE_SPEND, tx_input.outpoint.id)
            claimed.add(tx_input.outpoint)

        for index, tx_output in enumerate(transaction.outputs):
            if not (math.isfinite(tx_output.value) and tx_output.value >= 0):
                return self._reject(transaction, RejectionReason.NEGATIVE_OUTPUT, f"output {index}")

        input_total = self.input_sum(transaction)
        output_total = self.output_sum(transaction)
        if not (math.isfinite(input_total) and output_total <= input_total):
            return self._reject(
                transaction, RejectionReason.INSUFFICIENT_INPUTS,
                f"{format_amount(output_total)} > {format_amount(input_total)}")

        return RejectionReason.NONE

    def is_valid(self, transaction: Transaction) -> bool:
        return self.check(transaction) is RejectionReason.NONE

    def input_sum(self, transaction: Transaction) -> float:
        """Total value of the claimed outputs that are present in the pool"""
        total = 0.0
        for tx_input in transaction.inputs:
            tx_output = self.utxo_pool.get_tx_output(tx_input.outpoint)
            if tx_output is not None:
                total += tx_output.value
        return total

    @staticmethod
    def output_sum(transaction: Transaction) -> float:
        return sum(out.value for out in transaction.outputs)

    def calculate_fee(self, transaction: Transaction) -> float:
        """Surplus of inputs over outputs, floored at zero"""
        return max(self.input_sum(transaction) - self.output_sum(transaction), 0.0)

    @staticmethod
    def _reject(transaction: Transaction, reason: RejectionReason, detail: str) -> RejectionReason:
        logger.debug(f"Rejected {transaction!r}: {reason.value} ({detail})")
        return reason


def is_valid_tx(utxo_pool: UTXOPool, transaction: Transaction) -> bool:
    return TransactionValidator(utxo_pool).is_valid(transaction)
