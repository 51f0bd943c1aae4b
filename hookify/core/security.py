"""
Security utilities for webhook signature validation.

This module provides HMAC SHA-256 signature computation and
constant-time verification for raw webhook payloads, plus helpers
for moving signatures in and out of HTTP headers.
"""

import base64
import binascii
import hashlib
import hmac
import logging
from typing import Optional, Union

logger = logging.getLogger(__name__)

SIGNATURE_PREFIX = "sha256="
SUPPORTED_ENCODINGS = ("hex", "base64")


class SignatureValidator:
    """
    Computes and verifies HMAC SHA-256 signatures under a shared secret.

    The secret is fixed at construction and never exposed. Instances hold
    no other state, so one validator can be shared by every request.

    Example:
        >>> validator = SignatureValidator("test-secret-key")
        >>> signature = validator.compute_signature(b"test payload")
        >>> validator.verify(b"test payload", signature)
        True
    """

    digest_size = hashlib.sha256().digest_size

    __slots__ = ("_secret",)

    def __init__(self, secret: Union[str, bytes]) -> None:
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        self._secret = bytes(secret)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(secret=**********)"

    def compute_signature(self, payload: bytes) -> bytes:
        """
        Compute the raw HMAC SHA-256 digest of a payload.

        Args:
            payload: The raw request body bytes.

        Returns:
            bytes: The 32-byte signature.
        """
        return hmac.new(
            key=self._secret,
            msg=payload,
            digestmod=hashlib.sha256,
        ).digest()

    def verify(self, payload: bytes, received_signature: Optional[bytes]) -> bool:
        """
        Verify a received signature against the payload.

        The comparison runs in constant time. A signature of the wrong
        length, an empty one, or anything that is not bytes-like is
        reported as a mismatch rather than an error.

        Args:
            payload: The raw request body bytes.
            received_signature: The decoded signature sent by the caller.

        Returns:
            bool: True if the signature is valid, False otherwise.
        """
        if not isinstance(received_signature, (bytes, bytearray, memoryview)):
            return False

        expected_signature = self.compute_signature(payload)

        # Use constant-time comparison to prevent timing attacks
        return hmac.compare_digest(expected_signature, bytes(received_signature))


def decode_signature(header_value: Optional[str], encoding: str = "hex") -> bytes:
    """
    Decode a signature header into raw bytes.

    Accepts an optional ``sha256=`` prefix. Anything that cannot be
    decoded comes back as empty bytes so that verification fails.

    Args:
        header_value: The signature header value, if present.
        encoding: Either "hex" or "base64".

    Returns:
        bytes: The decoded signature, or b"" if it could not be decoded.
    """
    if not header_value:
        return b""

    value = header_value.strip()
    if value.lower().startswith(SIGNATURE_PREFIX):
        value = value[len(SIGNATURE_PREFIX):]

    try:
        if encoding == "hex":
            return bytes.fromhex(value)
        if encoding == "base64":
            return base64.b64decode(value, validate=True)
    except (ValueError, binascii.Error):
        logger.debug(f"Could not decode {encoding} signature header")
        return b""

    logger.warning(f"Unsupported signature encoding: {encoding}")
    return b""


def encode_signature(signature: bytes, encoding: str = "hex") -> str:
    """
    Encode raw signature bytes for an HTTP header.

    Args:
        signature: The raw signature bytes.
        encoding: Either "hex" or "base64".

    Returns:
        str: The encoded signature.

    Raises:
        ValueError: If the encoding is not supported.
    """
    if encoding == "hex":
        return signature.hex()
    if encoding == "base64":
        return base64.b64encode(signature).decode("ascii")
    raise ValueError(f"Unsupported signature encoding: {encoding}")
