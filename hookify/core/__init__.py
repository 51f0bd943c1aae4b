"""Core module containing configuration and security utilities."""

from hookify.core.config import Settings, get_settings
from hookify.core.security import SignatureValidator, decode_signature, encode_signature

__all__ = [
    "Settings",
    "get_settings",
    "SignatureValidator",
    "decode_signature",
    "encode_signature",
]
