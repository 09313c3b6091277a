# utxo_ledger/validation/__init__.py
from utxo_ledger.validation.transaction_validator import (
    RejectionReason,
    TransactionValidator,
    is_valid_tx
)

__all__ = ['RejectionReason', 'TransactionValidator', 'is_valid_tx']
