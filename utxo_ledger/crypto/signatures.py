# utxo_ledger/crypto/signatures.py
from typing import Any, Optional

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, padding, rsa

from utxo_ledger.exceptions import UnsupportedKeyError
from utxo_ledger.utils.logging_config import logger


def generate_private_key(curve: Optional[ec.EllipticCurve] = None) -> ec.EllipticCurvePrivateKey:
    """Create a fresh secp256k1 signing key (or one on ``curve``)"""
    return ec.generate_private_key(curve or ec.SECP256K1())


def sign_message(private_key: Any, message: bytes) -> bytes:
    """
    Sign ``message`` with the scheme matching the key type.

    EC keys use ECDSA over SHA-256, RSA keys PKCS#1 v1.5 over SHA-256 and
    Ed25519 keys their native scheme.
    """
    if isinstance(private_key, ec.EllipticCurvePrivateKey):
        return private_key.sign(message, ec.ECDSA(hashes.SHA256()))
    if isinstance(private_key, rsa.RSAPrivateKey):
        return private_key.sign(message, padding.PKCS1v15(), hashes.SHA256())
    if isinstance(private_key, ed25519.Ed25519PrivateKey):
        return private_key.sign(message)
    raise UnsupportedKeyError(f"Unsupported private key type: {type(private_key).__name__}")


def verify_signature(public_key: Any, message: bytes, signature: bytes) -> bool:
    """
    Check ``signature`` over ``message`` against ``public_key``.

    Returns False only when the primitive positively rejects the signature.
    Keys the primitive cannot handle raise UnsupportedKeyError instead, since
    no determination was made.
    """
    try:
        if isinstance(public_key, ec.EllipticCurvePublicKey):
            public_key.verify(signature, message, ec.ECDSA(hashes.SHA256()))
        elif isinstance(public_key, rsa.RSAPublicKey):
            public_key.verify(signature, message, padding.PKCS1v15(), hashes.SHA256())
        elif isinstance(public_key, ed25519.Ed25519PublicKey):
            public_key.verify(signature, message)
        else:
            raise UnsupportedKeyError(f"Unsupported public key type: {type(public_key).__name__}")
        return True
    except InvalidSignature:
        logger.debug("Signature verification failed")
        return False


def encode_public_key(public_key: Any) -> bytes:
    """DER SubjectPublicKeyInfo encoding used for hashing and the wire form"""
    try:
        return public_key.public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo
        )
    except AttributeError:
        raise UnsupportedKeyError(f"Not a public key: {type(public_key).__name__}")


def decode_public_key(data: bytes) -> Any:
    try:
        return serialization.load_der_public_key(data)
    except (ValueError, UnsupportedAlgorithm) as e:
        raise UnsupportedKeyError(f"Malformed public key: {e}")
