# utxo_ledger/utils/helpers.py
from typing import Optional


def short_hash(tx_hash: Optional[bytes], length: int = 16) -> str:
    """Abbreviated hex rendering of a transaction hash for log lines"""
    if tx_hash is None:
        return "<unfinalized>"
    return tx_hash.hex()[:length]


def format_amount(amount: float, decimals: int = 8) -> str:
    """Format amount with specified decimal places"""
    return f"{amount:.{decimals}f}"
