# utxo_ledger/utils/__init__.py
from utxo_ledger.utils.logging_config import logger, setup_logging
from utxo_ledger.utils.helpers import short_hash, format_amount

__all__ = ['logger', 'setup_logging', 'short_hash', 'format_amount']
