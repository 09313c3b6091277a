# utxo_ledger/state/mutator.py
from utxo_ledger.models.transaction import Transaction
from utxo_ledger.state.utxo_pool import UTXOPool
from utxo_ledger.utils.helpers import short_hash
from utxo_ledger.utils.logging_config import logger


def commit_transaction(utxo_pool: UTXOPool, transaction: Transaction) -> None:
    """
    Apply an already-validated transaction to ``utxo_pool``.

    Finalizes the transaction, removes every UTXO its inputs claim and adds
    one UTXO per output under the transaction hash. There is no rollback:
    the transaction must have been validated against this exact pool state.
    """
    tx_hash = transaction.finalize()

    # Spend the inputs
    for tx_input in transaction.inputs:
        utxo_pool.remove_utxo(tx_input.outpoint)

    # Create new UTXOs from outputs
    for index, tx_output in enumerate(transaction.outputs):
        utxo_pool.add_utxo(transaction.get_utxo(index), tx_output)

    logger.debug(f"Committed transaction {short_hash(tx_hash)}: "
                 f"spent {len(transaction.inputs)}, created {len(transaction.outputs)}")
