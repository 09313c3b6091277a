import pytest
from cryptography.hazmat.primitives.asymmetric import ed25519, rsa, x25519

from utxo_ledger.crypto import (
    decode_public_key,
    encode_public_key,
    sign_message,
    verify_signature
)
from utxo_ledger.exceptions import UnsupportedKeyError

MESSAGE = b"pay 10 to bob"


@pytest.fixture(scope="module")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


def test_ecdsa_roundtrip(private_keys):
    signature = sign_message(private_keys[0], MESSAGE)
    assert verify_signature(private_keys[0].public_key(), MESSAGE, signature)


def test_ecdsa_wrong_key(private_keys):
    signature = sign_message(private_keys[0], MESSAGE)
    assert not verify_signature(private_keys[1].public_key(), MESSAGE, signature)


def test_ecdsa_tampered_message(private_keys):
    signature = sign_message(private_keys[0], MESSAGE)
    assert not verify_signature(private_keys[0].public_key(), MESSAGE + b"0", signature)


def test_garbage_signature_is_rejected(private_keys):
    assert not verify_signature(private_keys[0].public_key(), MESSAGE, b"not a signature")


def test_rsa_roundtrip(rsa_key):
    signature = sign_message(rsa_key, MESSAGE)
    assert verify_signature(rsa_key.public_key(), MESSAGE, signature)
    assert not verify_signature(rsa_key.public_key(), b"other", signature)


def test_ed25519_roundtrip():
    key = ed25519.Ed25519PrivateKey.generate()
    signature = sign_message(key, MESSAGE)
    assert verify_signature(key.public_key(), MESSAGE, signature)
    assert not verify_signature(key.public_key(), b"other", signature)


def test_unsupported_public_key_raises():
    key = x25519.X25519PrivateKey.generate()
    with pytest.raises(UnsupportedKeyError):
        verify_signature(key.public_key(), MESSAGE, b"sig")


def test_unsupported_private_key_raises():
    with pytest.raises(UnsupportedKeyError):
        sign_message(x25519.X25519PrivateKey.generate(), MESSAGE)


def test_public_key_encoding_roundtrip(public_keys):
    encoded = encode_public_key(public_keys[0])
    assert encode_public_key(decode_public_key(encoded)) == encoded


def test_decode_malformed_key():
    with pytest.raises(UnsupportedKeyError):
        decode_public_key(b"\x00\x01\x02")


def test_encode_non_key():
    with pytest.raises(UnsupportedKeyError):
        encode_public_key("not a key")
