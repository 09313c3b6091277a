# utxo_ledger/state/utxo_pool.py
from typing import Any, Dict, Iterator, List, Optional

from utxo_ledger.crypto.signatures import encode_public_key
from utxo_ledger.models.transaction import TransactionOutput
from utxo_ledger.models.utxo import UTXO


class UTXOPool:
    """
    The set of outputs spendable right now, keyed by UTXO.

    Passing another pool to the constructor copies it. Keys and outputs are
    immutable values, so the copy shares no mutable state with the source.
    """

    def __init__(self, other: Optional['UTXOPool'] = None):
        self._utxos: Dict[UTXO, TransactionOutput] = dict(other._utxos) if other is not None else {}

    def copy(self) -> 'UTXOPool':
        return UTXOPool(self)

    def add_utxo(self, utxo: UTXO, tx_output: TransactionOutput) -> None:
        """Add (or overwrite) the output stored under ``utxo``"""
        self._utxos[utxo] = tx_output

    def remove_utxo(self, utxo: UTXO) -> bool:
        """Drop ``utxo``; returns False if it was not present"""
        return self._utxos.pop(utxo, None) is not None

    def get_tx_output(self, utxo: UTXO) -> Optional[TransactionOutput]:
        return self._utxos.get(utxo)

    def contains(self, utxo: UTXO) -> bool:
        return utxo in self._utxos

    def get_all_utxos(self) -> List[UTXO]:
        return list(self._utxos)

    def get_balance(self, public_key: Any) -> float:
        """Total value spendable by the holder of ``public_key``"""
        owner = encode_public_key(public_key)
        return sum(out.value for out in self._utxos.values()
                   if encode_public_key(out.public_key) == owner)

    def total_value(self) -> float:
        return sum(out.value for out in self._utxos.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            'utxos': [
                {'utxo': utxo.to_dict(), 'output': out.to_dict()}
                for utxo, out in self._utxos.items()
            ]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UTXOPool':
        pool = cls()
        for entry in data.get('utxos', []):
            pool.add_utxo(UTXO.from_dict(entry['utxo']),
                          TransactionOutput.from_dict(entry['output']))
        return pool

    def __contains__(self, utxo: object) -> bool:
        return utxo in self._utxos

    def __len__(self) -> int:
        return len(self._utxos)

    def __iter__(self) -> Iterator[UTXO]:
        return iter(list(self._utxos))

    def __repr__(self) -> str:
        return f"UTXOPool(utxos={len(self._utxos)})"
