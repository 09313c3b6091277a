from utxo_ledger.handlers import MaxFeeTxHandler
from utxo_ledger.models import UTXO, Transaction
from utxo_ledger.validation import RejectionReason
from tests.utility import make_tx


def test_highest_fee_wins_conflict(pool, genesis, private_keys, public_keys):
    handler = MaxFeeTxHandler(pool)
    x = UTXO(genesis.hash, 0)
    y = UTXO(genesis.hash, 1)
    t1 = make_tx([(x, private_keys[0])], [(92.0, public_keys[1])])
    t2 = make_tx([(y, private_keys[0])], [(95.0, public_keys[1])])
    t3 = make_tx([(x, private_keys[0])], [(86.0, public_keys[1])])

    assert handler.handle_txs([t1, t2, t3]) == [t3, t2]

    state = handler.utxo_pool
    assert x not in state and y not in state
    assert UTXO(t3.hash, 0) in state
    assert UTXO(t2.hash, 0) in state
    assert not t1.is_finalized
    assert state.total_value() == 86.0 + 95.0


def test_returned_in_descending_fee_order(pool, genesis, private_keys, public_keys):
    handler = MaxFeeTxHandler(pool)
    cheap = make_tx([(UTXO(genesis.hash, 0), private_keys[0])], [(99.0, public_keys[1])])
    rich = make_tx([(UTXO(genesis.hash, 1), private_keys[0])], [(10.0, public_keys[1])])
    assert handler.handle_txs([cheap, rich]) == [rich, cheap]


def test_equal_fees_keep_batch_order(pool, genesis, private_keys, public_keys):
    handler = MaxFeeTxHandler(pool)
    first = make_tx([(UTXO(genesis.hash, 0), private_keys[0])], [(95.0, public_keys[1])])
    second = make_tx([(UTXO(genesis.hash, 0), private_keys[0])], [(95.0, public_keys[2])])
    other = make_tx([(UTXO(genesis.hash, 1), private_keys[0])], [(95.0, public_keys[2])])
    assert handler.handle_txs([first, second, other]) == [first, other]


def test_no_chains_within_a_batch(pool, genesis, private_keys, public_keys):
    handler = MaxFeeTxHandler(pool)
    parent = make_tx([(UTXO(genesis.hash, 0), private_keys[0])], [(100.0, public_keys[1])], finalize=True)
    child = make_tx([(UTXO(parent.hash, 0), private_keys[1])], [(50.0, public_keys[2])])
    assert handler.handle_txs([parent, child]) == [parent]
    assert handler.handle_txs([child]) == [child]


def test_double_spend_across_epochs(pool, genesis, private_keys, public_keys):
    handler = MaxFeeTxHandler(pool)
    first = make_tx([(UTXO(genesis.hash, 0), private_keys[0])], [(100.0, public_keys[1])])
    assert handler.handle_txs([first]) == [first]
    second = make_tx([(UTXO(genesis.hash, 0), private_keys[0])], [(1.0, public_keys[2])])
    assert handler.handle_txs([second]) == []


def test_conflicting_multi_input_transaction_is_dropped_whole(pool, genesis, private_keys, public_keys):
    handler = MaxFeeTxHandler(pool)
    x = UTXO(genesis.hash, 0)
    y = UTXO(genesis.hash, 1)
    single = make_tx([(x, private_keys[0])], [(50.0, public_keys[1])])
    both = make_tx([(x, private_keys[0]), (y, private_keys[0])], [(170.0, public_keys[1])])
    assert handler.handle_txs([both, single]) == [single]
    assert y in handler.utxo_pool


def test_invalid_transactions_are_filtered(pool, genesis, private_keys, public_keys):
    handler = MaxFeeTxHandler(pool)
    overspend = make_tx([(UTXO(genesis.hash, 0), private_keys[0])], [(101.0, public_keys[1])])
    forged = make_tx([(UTXO(genesis.hash, 1), private_keys[1])], [(1.0, public_keys[1])])
    assert handler.handle_txs([overspend, forged]) == []
    assert len(handler.utxo_pool) == 2


def test_same_transaction_returned_once(pool, genesis, private_keys, public_keys):
    handler = MaxFeeTxHandler(pool)
    tx = make_tx([(UTXO(genesis.hash, 0), private_keys[0])], [(10.0, public_keys[1])])
    batch = [tx, tx]
    accepted = handler.handle_txs(batch)
    assert accepted == [tx]
    assert accepted is not batch


def test_strategy_name(pool):
    assert MaxFeeTxHandler(pool).get_strategy_name() == "max_fee"


def test_input_free_twins_accepted_once(pool, public_keys):
    handler = MaxFeeTxHandler(pool)
    mint = Transaction()
    mint.add_output(0.0, public_keys[0])
    twin = Transaction()
    twin.add_output(0.0, public_keys[0])
    assert handler.handle_txs([mint, twin]) == [mint]
    assert not twin.is_finalized


def test_input_free_transaction_not_replayed_in_later_epoch(pool, private_keys, public_keys):
    handler = MaxFeeTxHandler(pool)
    mint = Transaction()
    mint.add_output(0.0, public_keys[0])
    assert handler.handle_txs([mint]) == [mint]
    spend = make_tx([(UTXO(mint.hash, 0), private_keys[0])], [(0.0, public_keys[1])])
    assert handler.handle_txs([spend]) == [spend]
    size = len(handler.utxo_pool)

    replay = Transaction()
    replay.add_output(0.0, public_keys[0])
    assert handler.check_tx(replay) is RejectionReason.ALREADY_COMMITTED
    assert handler.handle_txs([replay]) == []
    assert UTXO(mint.hash, 0) not in handler.utxo_pool
    assert len(handler.utxo_pool) == size
