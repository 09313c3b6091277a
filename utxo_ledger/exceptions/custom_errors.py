# utxo_ledger/exceptions/custom_errors.py
class SerializationError(Exception):
    """Raised when serialization fails"""
    pass

class DeserializationError(Exception):
    """Raised when deserialization fails"""
    pass

class ValidationError(Exception):
    """Raised when a transaction is built or used incorrectly"""
    pass

class TransactionFinalizedError(ValidationError):
    """Raised when modifying a transaction whose content is frozen"""
    pass

class TransactionNotFinalizedError(ValidationError):
    """Raised when a transaction hash is needed before finalization"""
    pass

class UnsupportedKeyError(Exception):
    """Raised when a signature primitive cannot handle the given key"""
    pass

class ConfigurationError(Exception):
    """Raised for invalid or unreadable configuration"""
    pass
