# utxo_ledger/models/transaction.py
import hashlib
import math
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Tuple

import msgpack

from utxo_ledger.crypto.signatures import (
    decode_public_key,
    encode_public_key,
    sign_message
)
from utxo_ledger.exceptions import (
    DeserializationError,
    SerializationError,
    TransactionFinalizedError,
    TransactionNotFinalizedError,
    ValidationError
)
from utxo_ledger.models.utxo import UTXO
from utxo_ledger.utils.helpers import short_hash
from utxo_ledger.utils.logging_config import logger


@dataclass(frozen=True)
class TransactionInput:
    """Claim on a previous output, plus the signature authorising it"""
    prev_tx_hash: Optional[bytes]
    output_index: int
    signature: Optional[bytes] = None

    @property
    def outpoint(self) -> UTXO:
        return UTXO(self.prev_tx_hash, self.output_index)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'prev_tx_hash': self.prev_tx_hash.hex() if self.prev_tx_hash is not None else None,
            'output_index': self.output_index,
            'signature': self.signature.hex() if self.signature is not None else None
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TransactionInput':
        prev_tx_hash = data.get('prev_tx_hash')
        signature = data.get('signature')
        return cls(
            prev_tx_hash=bytes.fromhex(prev_tx_hash) if prev_tx_hash is not None else None,
            output_index=data['output_index'],
            signature=bytes.fromhex(signature) if signature is not None else None
        )


@dataclass(frozen=True)
class TransactionOutput:
    """
    Value locked to the holder of ``public_key``.

    Only finite int or float values are accepted. Negative values are
    representable: rejecting them is the validator's job.
    """
    value: float
    public_key: Any

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValidationError(f"Output value must be an int or float: {self.value!r}")
        value = float(self.value)
        if not math.isfinite(value):
            raise ValidationError(f"Output value must be finite: {self.value!r}")
        object.__setattr__(self, 'value', value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'value': self.value,
            'public_key': encode_public_key(self.public_key).hex()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TransactionOutput':
        return cls(
            value=data['value'],
            public_key=decode_public_key(bytes.fromhex(data['public_key']))
        )


class Transaction:
    """
    Ordered inputs and outputs with a content hash fixed at finalization.

    A transaction is built incrementally (inputs, outputs, then one signature
    per input) and frozen by ``finalize()``. Only then does ``hash`` exist and
    only then may its outputs be referenced as UTXOs.
    """

    def __init__(self, inputs: Optional[List[TransactionInput]] = None,
                 outputs: Optional[List[TransactionOutput]] = None):
        self._inputs: List[TransactionInput] = list(inputs or [])
        self._outputs: List[TransactionOutput] = list(outputs or [])
        self._hash: Optional[bytes] = None

    @property
    def inputs(self) -> Tuple[TransactionInput, ...]:
        return tuple(self._inputs)

    @property
    def outputs(self) -> Tuple[TransactionOutput, ...]:
        return tuple(self._outputs)

    @property
    def hash(self) -> Optional[bytes]:
        return self._hash

    @property
    def is_finalized(self) -> bool:
        return self._hash is not None

    def _ensure_mutable(self) -> None:
        if self._hash is not None:
            raise TransactionFinalizedError(
                f"Transaction {short_hash(self._hash)} is finalized and cannot be modified")

    def _check_input_index(self, index: int) -> None:
        if index < 0 or index >= len(self._inputs):
            raise ValidationError(f"Invalid input index: {index}")

    def add_input(self, prev_tx_hash: Optional[bytes], output_index: int) -> TransactionInput:
        self._ensure_mutable()
        tx_input = TransactionInput(prev_tx_hash, output_index)
        self._inputs.append(tx_input)
        return tx_input

    def remove_input(self, index: int) -> TransactionInput:
        self._ensure_mutable()
        self._check_input_index(index)
        return self._inputs.pop(index)

    def add_output(self, value: float, public_key: Any) -> TransactionOutput:
        self._ensure_mutable()
        tx_output = TransactionOutput(value, public_key)
        self._outputs.append(tx_output)
        return tx_output

    def add_signature(self, signature: bytes, index: int) -> None:
        self._ensure_mutable()
        self._check_input_index(index)
        self._inputs[index] = replace(self._inputs[index], signature=signature)

    def sign_input(self, index: int, private_key: Any) -> bytes:
        """Sign input ``index`` with ``private_key`` and attach the signature"""
        self._check_input_index(index)
        signature = sign_message(private_key, self.get_raw_data_to_sign(index))
        self.add_signature(signature, index)
        return signature

    def get_input(self, index: int) -> TransactionInput:
        self._check_input_index(index)
        return self._inputs[index]

    def get_output(self, index: int) -> TransactionOutput:
        if index < 0 or index >= len(self._outputs):
            raise ValidationError(f"Invalid output index: {index}")
        return self._outputs[index]

    def get_utxo(self, index: int) -> UTXO:
        """The UTXO that output ``index`` becomes once this transaction is committed"""
        if self._hash is None:
            raise TransactionNotFinalizedError("Transaction must be finalized before its outputs are referenced")
        self.get_output(index)
        return UTXO(self._hash, index)

    def _packed_outputs(self) -> List[List[Any]]:
        return [[out.value, encode_public_key(out.public_key)] for out in self._outputs]

    def get_raw_data_to_sign(self, index: int) -> bytes:
        """
        Canonical bytes the owner of input ``index`` must sign.

        Covers every input's outpoint, every output and the input position.
        No signature is included, so inputs can be signed in any order.
        """
        self._check_input_index(index)
        data = {
            'index': index,
            'inputs': [[inp.prev_tx_hash, inp.output_index] for inp in self._inputs],
            'outputs': self._packed_outputs()
        }
        return msgpack.packb(data, use_bin_type=True, strict_types=True)

    def get_raw_tx(self) -> bytes:
        """Full content encoding, signatures included"""
        data = {
            'inputs': [[inp.prev_tx_hash, inp.output_index, inp.signature] for inp in self._inputs],
            'outputs': self._packed_outputs()
        }
        return msgpack.packb(data, use_bin_type=True, strict_types=True)

    def calculate_hash(self) -> bytes:
        """Double SHA256 of the raw content; does not freeze the transaction"""
        return hashlib.sha256(hashlib.sha256(self.get_raw_tx()).digest()).digest()

    def finalize(self) -> bytes:
        """Freeze the content and fix the hash. Safe to call repeatedly."""
        if self._hash is None:
            self._hash = self.calculate_hash()
            logger.debug(f"Finalized transaction {short_hash(self._hash)}")
        return self._hash

    def to_dict(self) -> Dict[str, Any]:
        return {
            'hash': self._hash.hex() if self._hash is not None else None,
            'inputs': [inp.to_dict() for inp in self._inputs],
            'outputs': [out.to_dict() for out in self._outputs]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Transaction':
        """
        Rebuild a transaction, re-finalizing it when a hash is present.

        Raises:
            ValidationError: If the stored hash does not match the content
        """
        tx = cls(
            inputs=[TransactionInput.from_dict(inp) for inp in data.get('inputs', [])],
            outputs=[TransactionOutput.from_dict(out) for out in data.get('outputs', [])]
        )
        stored_hash = data.get('hash')
        if stored_hash is not None:
            if tx.finalize().hex() != stored_hash:
                raise ValidationError("Transaction hash mismatch")
        return tx

    def to_bytes(self) -> bytes:
        try:
            return msgpack.packb(self.to_dict(), use_bin_type=True)
        except (TypeError, ValueError) as e:
            logger.error(f"Transaction serialization error: {e}")
            raise SerializationError(f"Transaction cannot be serialized: {e}")

    @classmethod
    def from_bytes(cls, data: bytes) -> 'Transaction':
        if not data:
            raise DeserializationError("Empty transaction data")
        try:
            tx_data = msgpack.unpackb(data, raw=False)
            return cls.from_dict(tx_data)
        except ValidationError:
            raise
        except Exception as e:
            logger.error(f"Transaction deserialization error: {e}")
            raise DeserializationError(f"Failed to deserialize transaction: {e}")

    def __repr__(self) -> str:
        return (f"Transaction(hash={short_hash(self._hash)}, inputs={len(self._inputs)}, "
                f"outputs={len(self._outputs)})")
