"""Namehash fold, labelhash and subnode composition."""

from __future__ import annotations

import pytest
from Cryptodome.Hash import keccak

from namehash_spec.errors import ErrorCategory, ErrorCode, SpecError
from namehash_spec.namehash import (
    labelhash,
    namehash,
    namehash_hex,
    normalize_name,
    split_labels,
    subnode,
)
from namehash_spec.nodes import (
    ADDR_REVERSE_NODE,
    ETH_NODE,
    LIT_NODE,
    REVERSE_NODE,
    ROOT_NODE,
    WELL_KNOWN_NODES,
)

ETH_NODE_HEX = "0x93cdeb708b7545dc668eb9280176169d1c33cfd8ed6f04690a0bcc88a93fc4ae"
ADDR_REVERSE_NODE_HEX = "0x91d1777781884d03a6757a803996e38de2a42967fb37eeaca72729271025a9e2"
ETH_LABELHASH_HEX = "4f5b812789fc606be1b3b16908db13fc7a9adf7ca72641f84d75b47069d3d7f0"


def _keccak(data: bytes) -> bytes:
    return keccak.new(digest_bits=256, data=data).digest()


def test_root_is_zero_node() -> None:
    assert namehash("") == b"\x00" * 32
    assert ROOT_NODE == namehash("")
    assert namehash_hex("") == "0x" + "00" * 32


def test_published_nodes() -> None:
    assert namehash_hex("eth") == ETH_NODE_HEX
    assert namehash_hex("addr.reverse") == ADDR_REVERSE_NODE_HEX
    assert ETH_NODE.hex() == ETH_NODE_HEX[2:]
    assert ADDR_REVERSE_NODE.hex() == ADDR_REVERSE_NODE_HEX[2:]


def test_labelhash_is_keccak_of_utf8() -> None:
    assert labelhash("eth").hex() == ETH_LABELHASH_HEX
    assert labelhash("café") == _keccak("café".encode("utf-8"))


def test_single_label_step() -> None:
    assert namehash("lit") == _keccak(b"\x00" * 32 + _keccak(b"lit"))
    assert LIT_NODE == namehash("lit")


def test_addr_reverse_step_by_step() -> None:
    node1 = _keccak(b"\x00" * 32 + _keccak(b"reverse"))
    node2 = _keccak(node1 + _keccak(b"addr"))
    assert REVERSE_NODE == node1
    assert namehash("addr.reverse") == node2


@pytest.mark.parametrize(
    "first,rest",
    [("a", "b"), ("addr", "reverse"), ("foo", "bar.eth"), ("ñ", "eth")],
)
def test_composition_law(first: str, rest: str) -> None:
    name = f"{first}.{rest}"
    assert namehash(name) == _keccak(namehash(rest) + _keccak(first.encode("utf-8")))
    assert namehash(name) == subnode(namehash(rest), first)


def test_label_order_matters() -> None:
    assert namehash("a.b") != namehash("b.a")
    assert namehash("foo.eth") != namehash("eth.foo")


def test_deterministic() -> None:
    assert namehash("sub.foo.eth") == namehash("sub.foo.eth")
    assert len(namehash("sub.foo.eth")) == 32


def test_hex_format() -> None:
    value = namehash_hex("reverse")
    assert len(value) == 66
    assert value.startswith("0x")
    assert value == value.lower()


def test_no_implicit_case_folding() -> None:
    assert namehash("ETH") != ETH_NODE
    assert namehash("ETH", normalize=True) == ETH_NODE
    assert namehash("Addr.Reverse", normalize=True) == ADDR_REVERSE_NODE


def test_normalize_name_composes_unicode() -> None:
    decomposed = "cafe\u0301.ETH"
    assert normalize_name(decomposed) == "café.eth"
    assert namehash(decomposed, normalize=True) == namehash("café.eth")
    assert namehash(decomposed) != namehash("café.eth")


def test_split_labels() -> None:
    assert split_labels("") == []
    assert split_labels("eth") == ["eth"]
    assert split_labels("addr.reverse") == ["addr", "reverse"]


@pytest.mark.parametrize("name", ["a..b", ".eth", "eth.", "."])
def test_empty_label_rejected(name: str) -> None:
    with pytest.raises(SpecError) as exc_info:
        namehash(name)
    assert exc_info.value.code == ErrorCode.EMPTY_LABEL
    assert exc_info.value.category == ErrorCategory.VALIDATION


@pytest.mark.parametrize("value", [None, b"eth", 1, ["eth"]])
def test_non_string_rejected(value: object) -> None:
    with pytest.raises(SpecError) as exc_info:
        namehash(value)  # type: ignore[arg-type]
    assert exc_info.value.code == ErrorCode.INVALID_INPUT


@pytest.mark.parametrize("name", ["\udcff.eth", "eth.\ud800", "a\udfffb"])
def test_unencodable_label_rejected(name: str) -> None:
    with pytest.raises(SpecError) as exc_info:
        namehash(name)
    assert exc_info.value.code == ErrorCode.INVALID_INPUT


def test_labelhash_rejects_empty_label() -> None:
    with pytest.raises(SpecError) as exc_info:
        labelhash("")
    assert exc_info.value.code == ErrorCode.EMPTY_LABEL


@pytest.mark.parametrize("node", [b"\x00" * 31, b"\x00" * 33, "00" * 32])
def test_subnode_requires_32_byte_node(node: object) -> None:
    with pytest.raises(SpecError) as exc_info:
        subnode(node, "eth")  # type: ignore[arg-type]
    assert exc_info.value.code == ErrorCode.INVALID_NODE


def test_spec_error_str() -> None:
    error = SpecError(ErrorCode.EMPTY_LABEL, "boom")
    assert str(error) == "EMPTY_LABEL(0x0101): boom"
    assert ErrorCode.INTERNAL_ERROR.category == ErrorCategory.INTERNAL


def test_well_known_nodes_table() -> None:
    for name, node in WELL_KNOWN_NODES.items():
        assert namehash(name) == node
