"""ENS namehash (EIP-137) and the helpers ethers ships alongside it.

The namehash of a name is a right-to-left fold over its labels:

    node = 0x00 * 32
    for label in reversed(labels):
        node = keccak256(node || keccak256(utf8(label)))

``""`` is the root name and hashes to the zero node.
"""

from __future__ import annotations

import re
import unicodedata

from eth_utils import is_checksum_address

from .config import (
    ADDR_REVERSE_NAME,
    ADDRESS_SIZE,
    HASH_SIZE,
    LABEL_SEPARATOR,
    MAX_DNS_LABEL_LENGTH,
    ZERO_HASH,
)
from .crypto.keccak import keccak256, keccak256_concat
from .errors import ErrorCode, SpecError

_HEX_ADDRESS_RE = re.compile(r"(0x)?[0-9a-fA-F]{%d}" % (ADDRESS_SIZE * 2))


def _require_str(value: object, what: str) -> str:
    if not isinstance(value, str):
        raise SpecError(
            ErrorCode.INVALID_INPUT, f"{what} must be string, got {type(value).__name__}"
        )
    return value


def _utf8(label: str) -> bytes:
    try:
        return label.encode("utf-8")
    except UnicodeEncodeError as e:
        raise SpecError(
            ErrorCode.INVALID_INPUT, f"label {label!r} is not valid UTF-8 text: {e.reason}"
        ) from e


def normalize_name(name: str) -> str:
    """Fold a name before hashing: Unicode NFC, then lowercase.

    This is a minimal folding that makes ``"Addr.Reverse"`` and
    ``"addr.reverse"`` hash alike. It is not ENSIP-15 normalization and does
    not reject disallowed code points.
    """
    name = _require_str(name, "name")
    return unicodedata.normalize("NFC", name).lower()


def split_labels(name: str) -> list[str]:
    name = _require_str(name, "name")
    if name == "":
        return []
    labels = name.split(LABEL_SEPARATOR)
    for index, label in enumerate(labels):
        if label == "":
            raise SpecError(
                ErrorCode.EMPTY_LABEL, f"empty label at position {index} in {name!r}"
            )
    return labels


def labelhash(label: str) -> bytes:
    label = _require_str(label, "label")
    if label == "":
        raise SpecError(ErrorCode.EMPTY_LABEL, "label must not be empty")
    return keccak256(_utf8(label))


def subnode(node: bytes, label: str) -> bytes:
    """Node of ``label`` directly under ``node`` (ENS registry ``setSubnodeOwner``)."""
    if not isinstance(node, (bytes, bytearray)) or len(node) != HASH_SIZE:
        raise SpecError(ErrorCode.INVALID_NODE, f"node must be {HASH_SIZE} bytes")
    return keccak256_concat(bytes(node), labelhash(label))


def namehash(name: str, normalize: bool = False) -> bytes:
    if normalize:
        name = normalize_name(name)
    node = ZERO_HASH
    for label in reversed(split_labels(name)):
        node = subnode(node, label)
    return node


def namehash_hex(name: str, normalize: bool = False) -> str:
    return "0x" + namehash(name, normalize=normalize).hex()


def reverse_name(address: str) -> str:
    """``0xAbC...`` -> ``abc....addr.reverse``.

    All-lowercase and all-uppercase hex are accepted as is; mixed case must
    carry a valid EIP-55 checksum.
    """
    address = _require_str(address, "address")
    if not _HEX_ADDRESS_RE.fullmatch(address):
        raise SpecError(
            ErrorCode.INVALID_ADDRESS,
            f"address must be {ADDRESS_SIZE} bytes of hex: {address!r}",
        )
    if address[:2] == "0x":
        address = address[2:]
    if address not in (address.lower(), address.upper()) and not is_checksum_address(
        "0x" + address
    ):
        raise SpecError(ErrorCode.INVALID_ADDRESS, f"bad address checksum: 0x{address}")
    return f"{address.lower()}{LABEL_SEPARATOR}{ADDR_REVERSE_NAME}"


def reverse_node(address: str) -> bytes:
    return namehash(reverse_name(address))


def dns_encode(name: str, max_label_length: int = MAX_DNS_LABEL_LENGTH) -> bytes:
    """DNS wire format of ``name`` (ENSIP-10 wildcard resolution).

    Each label is written as a length byte followed by its UTF-8 bytes; the
    root label (a single zero byte) terminates the sequence.
    """
    if not 0 < max_label_length <= 0xFF:
        raise SpecError(
            ErrorCode.INVALID_INPUT, f"max_label_length out of range: {max_label_length}"
        )
    out = bytearray()
    for label in split_labels(name):
        encoded = _utf8(label)
        if len(encoded) > max_label_length:
            raise SpecError(
                ErrorCode.LABEL_TOO_LONG,
                f"label {label!r} is {len(encoded)} bytes (max {max_label_length})",
            )
        out.append(len(encoded))
        out += encoded
    out.append(0)
    return bytes(out)
