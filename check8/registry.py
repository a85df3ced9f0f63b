"""Select a checksum algorithm by name.

Names are matched case-insensitively against the CRC-8 catalogue, its
aliases, and the plain "SUM" and "XOR" checksums. Unknown names raise
KeyError; there is no fallback variant.
"""

import logging
from typing import Optional

from .catalog import ALIASES, CATALOG
from .checksum import ChecksumAlgorithm, SumChecksum, XorChecksum
from .config import settings
from .crc import Crc8
from .schemas import AlgorithmConfig

logger = logging.getLogger(__name__)

SIMPLE_CHECKSUMS: dict[str, type[ChecksumAlgorithm]] = {
    SumChecksum.name: SumChecksum,
    XorChecksum.name: XorChecksum,
}


def available_algorithms() -> list[str]:
    """Canonical names of every selectable algorithm."""
    return sorted([*CATALOG, *SIMPLE_CHECKSUMS])


def resolve_name(name: str) -> str:
    """Map a user-supplied name (any case, aliases allowed) to its canonical name."""
    key = name.strip().upper()
    key = ALIASES.get(key, key)
    if key in CATALOG or key in SIMPLE_CHECKSUMS:
        return key
    raise KeyError(f"Unknown checksum algorithm: {name}")


def get_config(name: str) -> AlgorithmConfig:
    """Return the shared CRC-8 parameters for a variant name."""
    canonical = resolve_name(name)
    if canonical not in CATALOG:
        raise KeyError(f"{canonical} is not a CRC-8 variant")
    return CATALOG[canonical]


def get_algorithm(name: Optional[str] = None) -> ChecksumAlgorithm:
    """Create a fresh checksum instance, defaulting to settings.default_algorithm."""
    if name is None:
        name = settings.default_algorithm
    canonical = resolve_name(name)
    logger.debug("Selected checksum algorithm %s (requested %r)", canonical, name)
    if canonical in SIMPLE_CHECKSUMS:
        return SIMPLE_CHECKSUMS[canonical]()
    return Crc8(CATALOG[canonical])
