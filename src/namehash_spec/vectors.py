"""Namehash test vector generators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .config import DEFAULT_NAMES, HASH_SIZE
from .namehash import dns_encode, labelhash, namehash, split_labels


@dataclass
class NamehashVector:
    name: str
    description: Optional[str]
    input_name: str
    labels: List[str]
    expected_hex: str


@dataclass
class LabelhashVector:
    name: str
    description: Optional[str]
    label: str
    input_hex: str
    expected_hex: str


@dataclass
class DnsEncodeVector:
    name: str
    description: Optional[str]
    input_name: str
    expected_hex: str


def _namehash_vector(name: str, input_name: str, description: Optional[str] = None) -> NamehashVector:
    return NamehashVector(
        name=name,
        description=description,
        input_name=input_name,
        labels=split_labels(input_name),
        expected_hex=namehash(input_name).hex(),
    )


def namehash_vectors() -> Dict[str, Any]:
    vectors: List[NamehashVector] = []

    vectors.append(_namehash_vector("root", "", "Empty name is the zero node"))
    vectors.append(_namehash_vector("eth", "eth", "Published ENS .eth node"))

    for input_name in DEFAULT_NAMES:
        vectors.append(
            _namehash_vector(
                input_name.replace(".", "_"),
                input_name,
                "Printed by compute-hashes",
            )
        )

    vectors.append(_namehash_vector("foo_eth", "foo.eth"))
    vectors.append(_namehash_vector("sub_foo_eth", "sub.foo.eth", "Three labels"))
    vectors.append(
        _namehash_vector("eth_foo", "eth.foo", "Label order reversed relative to foo_eth")
    )
    vectors.append(
        _namehash_vector("uppercase", "Foo.ETH", "No implicit case folding")
    )
    vectors.append(
        _namehash_vector("unicode_label", "café.eth", "Multi-byte UTF-8 label")
    )
    vectors.append(_namehash_vector("emoji_label", "\U0001f525.eth", "Four-byte UTF-8 label"))
    vectors.append(
        _namehash_vector(
            "reverse_address",
            "d8da6bf26964af9d7eed9e03e53415d37aa96045.addr.reverse",
            "Reverse record for an address",
        )
    )

    return {
        "algorithm": "ENS-Namehash",
        "output_size": HASH_SIZE,
        "test_vectors": [v.__dict__ for v in vectors],
    }


def labelhash_vectors() -> Dict[str, Any]:
    vectors: List[LabelhashVector] = []

    for label in ("eth", "reverse", "addr", "lit", "café"):
        data = label.encode("utf-8")
        vectors.append(
            LabelhashVector(
                name=f"label_{data.hex()}",
                description=None,
                label=label,
                input_hex=data.hex(),
                expected_hex=labelhash(label).hex(),
            )
        )

    data = b"a" * 64
    vectors.append(
        LabelhashVector(
            name="long_label",
            description="Label longer than the DNS label limit",
            label=data.decode("ascii"),
            input_hex=data.hex(),
            expected_hex=labelhash(data.decode("ascii")).hex(),
        )
    )

    return {
        "algorithm": "Keccak256",
        "output_size": HASH_SIZE,
        "test_vectors": [v.__dict__ for v in vectors],
    }


def dns_encode_vectors() -> Dict[str, Any]:
    vectors: List[DnsEncodeVector] = []

    for name, input_name, description in (
        ("root", "", "Root is a single zero byte"),
        ("eth", "eth", None),
        ("addr_reverse", "addr.reverse", None),
        ("unicode_label", "café.eth", "Length counts UTF-8 bytes"),
    ):
        vectors.append(
            DnsEncodeVector(
                name=name,
                description=description,
                input_name=input_name,
                expected_hex=dns_encode(input_name).hex(),
            )
        )

    return {
        "encoding": "DNS-Wire",
        "test_vectors": [v.__dict__ for v in vectors],
    }
