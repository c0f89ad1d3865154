"""Generate namehash/labelhash/dns YAML vectors from Python specs."""

from __future__ import annotations

from pathlib import Path
import logging
import sys

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT / "tools"))

from namehash_spec.config import LOG_FORMAT  # noqa: E402
from namehash_spec.vectors import (  # noqa: E402
    dns_encode_vectors,
    labelhash_vectors,
    namehash_vectors,
)
from yaml_dump import write_yaml  # noqa: E402

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    out = ROOT / "fixtures" / "ens"
    out.mkdir(parents=True, exist_ok=True)

    for filename, data in (
        ("namehash.yaml", namehash_vectors()),
        ("labelhash.yaml", labelhash_vectors()),
        ("dns_encode.yaml", dns_encode_vectors()),
    ):
        write_yaml(out / filename, data)
        logger.info("wrote %d vectors to %s", len(data["test_vectors"]), out / filename)


if __name__ == "__main__":
    main()
