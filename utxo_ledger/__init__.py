# utxo_ledger/__init__.py
from utxo_ledger.models import UTXO, Transaction, TransactionInput, TransactionOutput
from utxo_ledger.state import UTXOPool, commit_transaction
from utxo_ledger.crypto import sign_message, verify_signature
from utxo_ledger.validation import RejectionReason, TransactionValidator, is_valid_tx
from utxo_ledger.handlers import BaseTxHandler, TxHandler, MaxFeeTxHandler, create_handler
from utxo_ledger.config import LedgerConfig
from utxo_ledger.exceptions import (
    SerializationError,
    DeserializationError,
    ValidationError,
    TransactionFinalizedError,
    TransactionNotFinalizedError,
    UnsupportedKeyError,
    ConfigurationError
)

__version__ = "1.0.0"
__all__ = [
    'UTXO',
    'Transaction',
    'TransactionInput',
    'TransactionOutput',
    'UTXOPool',
    'commit_transaction',
    'sign_message',
    'verify_signature',
    'RejectionReason',
    'TransactionValidator',
    'is_valid_tx',
    'BaseTxHandler',
    'TxHandler',
    'MaxFeeTxHandler',
    'create_handler',
    'LedgerConfig',
    'SerializationError',
    'DeserializationError',
    'ValidationError',
    'TransactionFinalizedError',
    'TransactionNotFinalizedError',
    'UnsupportedKeyError',
    'ConfigurationError'
]
