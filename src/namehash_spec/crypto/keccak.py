"""Keccak-256 (the pre-standard SHA-3 variant used by Ethereum and ENS)."""

from __future__ import annotations

from Cryptodome.Hash import keccak


KECCAK256_SIZE = 32
KECCAK256_BLOCK_SIZE = 136


def keccak256(data: bytes) -> bytes:
    return keccak.new(digest_bits=256, data=data).digest()


def keccak256_concat(*parts: bytes) -> bytes:
    """Hash the concatenation of ``parts`` without building the joined buffer."""
    hasher = keccak.new(digest_bits=256)
    for part in parts:
        hasher.update(part)
    return hasher.digest()
