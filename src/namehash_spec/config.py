"""namehash spec configuration constants.

Keep this file aligned with the ENS constants used by ethers
(`hash/namehash.ts`) and the ENS registry contracts.
"""

# Digests
HASH_SIZE = 32
ZERO_HASH = b"\x00" * HASH_SIZE

# Names
LABEL_SEPARATOR = "."
MAX_DNS_LABEL_LENGTH = 63  # DNS wire format length byte limit used by ethers
ADDRESS_SIZE = 20

# Reverse resolution
REVERSE_TLD = "reverse"
ADDR_REVERSE_NAME = "addr.reverse"

# Names printed by the compute-hashes command, in output order
DEFAULT_NAMES = ("lit", "reverse", "addr.reverse")

# Environment
ENV_NORMALIZE = "NAMEHASH_NORMALIZE"
ENV_LOG_LEVEL = "NAMEHASH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
