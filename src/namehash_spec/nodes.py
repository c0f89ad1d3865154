"""Well-known ENS nodes."""

from __future__ import annotations

from .config import ADDR_REVERSE_NAME, REVERSE_TLD, ZERO_HASH
from .namehash import namehash

ROOT_NODE = ZERO_HASH
ETH_NODE = namehash("eth")
LIT_NODE = namehash("lit")
REVERSE_NODE = namehash(REVERSE_TLD)
ADDR_REVERSE_NODE = namehash(ADDR_REVERSE_NAME)

WELL_KNOWN_NODES = {
    "": ROOT_NODE,
    "eth": ETH_NODE,
    "lit": LIT_NODE,
    REVERSE_TLD: REVERSE_NODE,
    ADDR_REVERSE_NAME: ADDR_REVERSE_NODE,
}
