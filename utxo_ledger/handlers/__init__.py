# utxo_ledger/handlers/__init__.py
from utxo_ledger.handlers.base import BaseTxHandler
from utxo_ledger.handlers.tx_handler import TxHandler
from utxo_ledger.handlers.max_fee_tx_handler import MaxFeeTxHandler
from utxo_ledger.handlers.factory import TxHandlerFactory, create_handler

__all__ = ['BaseTxHandler', 'TxHandler', 'MaxFeeTxHandler', 'TxHandlerFactory', 'create_handler']
