# utxo_ledger/state/__init__.py
from utxo_ledger.state.utxo_pool import UTXOPool
from utxo_ledger.state.mutator import commit_transaction

__all__ = ['UTXOPool', 'commit_transaction']
