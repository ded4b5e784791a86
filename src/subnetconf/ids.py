# -*- coding: utf-8 -*-
"""
Avalanche ID (CB58) 검증
- CB58 = base58(32바이트 ID + sha256(ID)의 마지막 4바이트)
- parse_id는 검증된 정규 문자열을 돌려주고, 실패 시 InvalidIdentifier
"""

import hashlib

from subnetconf.errors import InvalidIdentifier

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {c: i for i, c in enumerate(ALPHABET)}

ID_LEN = 32
CHECKSUM_LEN = 4


def _b58decode(text: str) -> bytes:
    n = 0
    for c in text:
        n = n * 58 + _INDEX[c]
    body = n.to_bytes((n.bit_length() + 7) // 8, "big") if n else b""
    pad = len(text) - len(text.lstrip(ALPHABET[0]))
    return b"\x00" * pad + body


def _b58encode(raw: bytes) -> str:
    n = int.from_bytes(raw, "big")
    out = []
    while n:
        n, r = divmod(n, 58)
        out.append(ALPHABET[r])
    pad = len(raw) - len(raw.lstrip(b"\x00"))
    return ALPHABET[0] * pad + "".join(reversed(out))


def _checksum(raw: bytes) -> bytes:
    return hashlib.sha256(raw).digest()[-CHECKSUM_LEN:]


def encode_cb58(raw: bytes) -> str:
    if len(raw) != ID_LEN:
        raise ValueError(f"expected {ID_LEN} bytes, got {len(raw)}")
    return _b58encode(raw + _checksum(raw))


def parse_id(text: str) -> str:
    """Validate a CB58 subnet ID and return its canonical string form."""
    if not text:
        raise InvalidIdentifier(text, "empty")
    bad = sorted({c for c in text if c not in _INDEX})
    if bad:
        raise InvalidIdentifier(text, f"non-base58 characters {''.join(bad)!r}")
    decoded = _b58decode(text)
    if len(decoded) != ID_LEN + CHECKSUM_LEN:
        raise InvalidIdentifier(text, f"expected {ID_LEN + CHECKSUM_LEN} bytes, decoded {len(decoded)}")
    raw, checksum = decoded[:ID_LEN], decoded[ID_LEN:]
    if _checksum(raw) != checksum:
        raise InvalidIdentifier(text, "checksum mismatch")
    return encode_cb58(raw)
