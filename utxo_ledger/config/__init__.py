# utxo_ledger/config/__init__.py
from utxo_ledger.config.config import HandlerConfig, LedgerConfig, LoggingConfig, STRATEGIES

__all__ = ['HandlerConfig', 'LedgerConfig', 'LoggingConfig', 'STRATEGIES']
