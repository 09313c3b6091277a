# utxo_ledger/handlers/factory.py
from typing import Dict, List, Optional, Type

from utxo_ledger.config.config import LedgerConfig
from utxo_ledger.exceptions import ConfigurationError
from utxo_ledger.handlers.base import BaseTxHandler
from utxo_ledger.handlers.max_fee_tx_handler import MaxFeeTxHandler
from utxo_ledger.handlers.tx_handler import TxHandler
from utxo_ledger.state.utxo_pool import UTXOPool
from utxo_ledger.utils.logging_config import logger, setup_logging


class TxHandlerFactory:
    """Builds batch handlers by strategy name"""

    def __init__(self):
        self._strategies: Dict[str, Type[BaseTxHandler]] = {
            'naive': TxHandler,
            'max_fee': MaxFeeTxHandler
        }

    def get_handler_class(self, strategy_name: str) -> Type[BaseTxHandler]:
        if strategy_name not in self._strategies:
            raise ConfigurationError(f"Unknown handler strategy: {strategy_name!r}")
        return self._strategies[strategy_name]

    def get_available_strategies(self) -> List[str]:
        return list(self._strategies.keys())

    def create(self, strategy_name: str, utxo_pool: UTXOPool) -> BaseTxHandler:
        handler = self.get_handler_class(strategy_name)(utxo_pool)
        logger.info(f"Created {strategy_name} handler over {len(utxo_pool)} UTXOs")
        return handler


def create_handler(utxo_pool: UTXOPool, config: Optional[LedgerConfig] = None,
                   configure_logging: bool = False) -> BaseTxHandler:
    """
    Build the handler selected by ``config.handler.strategy``.

    With ``configure_logging`` the package logger is set up from
    ``config.logging`` first.
    """
    config = config or LedgerConfig()
    config.validate()
    if configure_logging:
        setup_logging(
            level=config.logging.level,
            log_file=config.logging.file,
            max_bytes=config.logging.max_size,
            backup_count=config.logging.backup_count,
            fmt=config.logging.format
        )
    return TxHandlerFactory().create(config.handler.strategy, utxo_pool)
