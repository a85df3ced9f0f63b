"""Generic parameterized CRC-8 engine.

The bit-level loop in ``crc8_bitwise`` is the reference definition: the
register is processed MSB first, input bytes are reflected before being
XORed in when ``refin`` is set, and the output reflection and final XOR are
applied only when a digest is read. The 256-entry lookup table is derived
from that same shift loop and produces identical results.
"""

import logging
from functools import lru_cache
from typing import Iterable, Optional

from .catalog import CHECK_INPUT
from .checksum import ChecksumAlgorithm, check_byte
from .config import settings
from .schemas import AlgorithmConfig

logger = logging.getLogger(__name__)


def reflect8(value: int) -> int:
    """Reverse the bit order of one byte: 0x01 -> 0x80, 0x0F -> 0xF0."""
    result = 0
    for _ in range(8):
        result = (result << 1) | (value & 0x01)
        value >>= 1
    return result


REFLECT_TABLE = tuple(reflect8(i) for i in range(256))


def _shift8(register: int, poly: int) -> int:
    """Run the register through eight shift/XOR steps."""
    for _ in range(8):
        if register & 0x80:
            register = (register << 1) ^ poly
        else:
            register = register << 1
        register &= 0xFF
    return register


def _finalize(register: int, config: AlgorithmConfig) -> int:
    if config.refout:
        register = REFLECT_TABLE[register]
    return register ^ config.xor_out


@lru_cache(maxsize=None)
def crc_table(poly: int) -> tuple[int, ...]:
    """Generate the 256-entry lookup table for a polynomial."""
    logger.debug("Generating CRC-8 table for polynomial 0x%02X", poly)
    return tuple(_shift8(i, poly) for i in range(256))


def crc8_bitwise(data: Iterable[int], config: AlgorithmConfig) -> int:
    """Compute a CRC-8 one bit at a time, without any lookup table."""
    register = config.init
    for byte in data:
        if config.refin:
            byte = reflect8(byte)
        register = _shift8(register ^ byte, config.poly)
    return _finalize(register, config)


class Crc8(ChecksumAlgorithm):
    """CRC-8 checksum bound to one AlgorithmConfig.

    >>> from check8.catalog import CRC_8_ROHC
    >>> Crc8.checksum(b"123456789", CRC_8_ROHC)
    208
    """

    def __init__(self, config: AlgorithmConfig, table_driven: Optional[bool] = None) -> None:
        self._config = config
        if table_driven is None:
            table_driven = settings.table_driven
        self._table = crc_table(config.poly) if table_driven else None
        self._register = config.init

    @property
    def config(self) -> AlgorithmConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def table_driven(self) -> bool:
        return self._table is not None

    @property
    def accumulator(self) -> int:
        return self._register

    def initialize(self, value: Optional[int] = None) -> int:
        self._register = self._config.init if value is None else check_byte(value)
        return self._register

    def update(self, byte: int) -> int:
        check_byte(byte)
        if self._config.refin:
            byte = REFLECT_TABLE[byte]
        if self._table is not None:
            self._register = self._table[self._register ^ byte]
        else:
            self._register = _shift8(self._register ^ byte, self._config.poly)
        return self._register

    def digest(self) -> int:
        return _finalize(self._register, self._config)

    def verify(self) -> bool:
        """Check this engine's parameters against the catalogue check value.

        Configs without a check value have nothing to compare against and pass.
        """
        if self._config.check is None:
            logger.debug("%s has no check value, skipping verification", self.name)
            return True
        checker = type(self)(self._config, table_driven=self.table_driven)
        result = checker.calculate(CHECK_INPUT)
        if result != self._config.check:
            logger.warning(
                "%s check value mismatch: computed 0x%02X, expected 0x%02X",
                self.name, result, self._config.check,
            )
            return False
        return True
