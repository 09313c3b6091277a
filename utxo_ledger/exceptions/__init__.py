# utxo_ledger/exceptions/__init__.py
from utxo_ledger.exceptions.custom_errors import (
    SerializationError,
    DeserializationError,
    ValidationError,
    TransactionFinalizedError,
    TransactionNotFinalizedError,
    UnsupportedKeyError,
    ConfigurationError
)

__all__ = [
    'SerializationError',
    'DeserializationError',
    'ValidationError',
    'TransactionFinalizedError',
    'TransactionNotFinalizedError',
    'UnsupportedKeyError',
    'ConfigurationError'
]
