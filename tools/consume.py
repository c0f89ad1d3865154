"""Consume fixtures and validate against Python specs."""

from __future__ import annotations

from pathlib import Path
import sys

import yaml

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))

from namehash_spec.namehash import dns_encode, labelhash, namehash  # noqa: E402


def _load(path: Path) -> dict:
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def _check_namehash(path: Path) -> list[str]:
    failures: list[str] = []
    for vec in _load(path).get("test_vectors", []):
        if namehash(vec["input_name"]).hex() != vec["expected_hex"]:
            failures.append(f"{vec['name']}: namehash_mismatch")
    return failures


def _check_labelhash(path: Path) -> list[str]:
    failures: list[str] = []
    for vec in _load(path).get("test_vectors", []):
        if labelhash(vec["label"]).hex() != vec["expected_hex"]:
            failures.append(f"{vec['name']}: labelhash_mismatch")
    return failures


def _check_dns_encode(path: Path) -> list[str]:
    failures: list[str] = []
    for vec in _load(path).get("test_vectors", []):
        if dns_encode(vec["input_name"]).hex() != vec["expected_hex"]:
            failures.append(f"{vec['name']}: dns_encode_mismatch")
    return failures


def main(fixtures: Path = ROOT / "fixtures" / "ens") -> None:
    failures: list[str] = []

    for filename, check in (
        ("namehash.yaml", _check_namehash),
        ("labelhash.yaml", _check_labelhash),
        ("dns_encode.yaml", _check_dns_encode),
    ):
        path = fixtures / filename
        if path.exists():
            failures.extend(check(path))

    if failures:
        for f in failures:
            print("FAIL", f)
        raise SystemExit(1)

    print("All fixtures passed")


if __name__ == "__main__":
    main()
