# utxo_ledger/models/utxo.py
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class UTXO:
    """
    Reference to one output of a finalized transaction.

    Equality and hashing are structural over ``(tx_hash, output_index)`` so
    two independently built references to the same output are interchangeable
    as pool keys and set members.
    """
    tx_hash: Optional[bytes]
    output_index: int

    @property
    def id(self) -> str:
        prefix = self.tx_hash.hex() if self.tx_hash is not None else "null"
        return f"{prefix}:{self.output_index}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'tx_hash': self.tx_hash.hex() if self.tx_hash is not None else None,
            'output_index': self.output_index
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UTXO':
        return cls(
            tx_hash=bytes.fromhex(data['tx_hash']) if data['tx_hash'] is not None else None,
            output_index=data['output_index']
        )

    def __str__(self) -> str:
        return self.id
