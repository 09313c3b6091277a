# utxo_ledger/crypto/__init__.py
from utxo_ledger.crypto.signatures import (
    generate_private_key,
    sign_message,
    verify_signature,
    encode_public_key,
    decode_public_key
)

__all__ = [
    'generate_private_key',
    'sign_message',
    'verify_signature',
    'encode_public_key',
    'decode_public_key'
]
