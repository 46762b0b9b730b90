"""Content fingerprinting used to derive collision-resistant internal names."""

from __future__ import annotations

from hashlib import md5
from typing import TYPE_CHECKING

from libmacropub.lexer.serializer import serialize_tokens

if TYPE_CHECKING:
    from libmacropub.lexer.tokens import TokenSequence

FINGERPRINT_BITS = 128


def hash128(data: bytes) -> int:
    """Get deterministic 128-bit digest of given bytes as an integer (big-endian)."""
    digest = md5(data, usedforsecurity=False).digest()
    return int.from_bytes(digest, byteorder="big")


def fingerprint_item(item: TokenSequence) -> int:
    """Fingerprint of an whole annotated item by its serialized form.

    Locations are not part of serialized form, so same text anywhere gives same fingerprint.
    """
    return hash128(serialize_tokens(item).encode())
