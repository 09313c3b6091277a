# utxo_ledger/models/__init__.py
from utxo_ledger.models.utxo import UTXO
from utxo_ledger.models.transaction import Transaction, TransactionInput, TransactionOutput

__all__ = ['UTXO', 'Transaction', 'TransactionInput', 'TransactionOutput']
