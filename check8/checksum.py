"""Common 8-bit checksum interface plus the running-sum and running-XOR checksums.

Every algorithm keeps a single 8-bit register. ``update`` folds one byte into
it, ``digest`` derives the published value without touching it, so a caller
can keep feeding bytes after reading an intermediate result.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional


def check_byte(value: int) -> int:
    """Return value if it fits in one byte, raise ValueError otherwise."""
    if not 0 <= value <= 0xFF:
        raise ValueError("byte must be in range(0, 256)")
    return value


def check_bytes(data: Iterable[int]) -> list[int]:
    """Validate a whole byte sequence up front, so a bad byte changes nothing."""
    return [check_byte(byte) for byte in data]


class ChecksumAlgorithm(ABC):
    """Contract shared by every 8-bit checksum.

    Subclasses own their state; the helpers here are written purely in
    terms of initialize/update/digest.
    """

    name: str = ""

    @abstractmethod
    def initialize(self, value: Optional[int] = None) -> int:
        """Put the register back to its starting value (or seed it with value).

        Returns the new accumulator.
        """

    @abstractmethod
    def update(self, byte: int) -> int:
        """Consume one input byte and return the updated accumulator."""

    @abstractmethod
    def digest(self) -> int:
        """Return the finalized checksum of everything consumed so far."""

    @property
    @abstractmethod
    def accumulator(self) -> int:
        """Raw register value, before any output transform."""

    def reset(self) -> int:
        return self.initialize()

    def update_all(self, data: Iterable[int]) -> None:
        """Consume a sequence of bytes in order."""
        for byte in check_bytes(data):
            self.update(byte)

    def update_string(self, text: str, encoding: str = "utf-8") -> None:
        self.update_all(text.encode(encoding))

    def calculate(self, data: Iterable[int]) -> int:
        """Continue the running checksum over data and return the digest."""
        self.update_all(data)
        return self.digest()

    def calculate_from_string(self, text: str, encoding: str = "utf-8") -> int:
        return self.calculate(text.encode(encoding))

    @classmethod
    def checksum(cls, data: Iterable[int], *args, **kwargs) -> int:
        """One-shot digest of data using a fresh instance."""
        algorithm = cls(*args, **kwargs)
        algorithm.update_all(data)
        return algorithm.digest()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} accumulator=0x{self.accumulator:02X}>"


class SumChecksum(ChecksumAlgorithm):
    """8-bit wrapping arithmetic sum."""

    name = "SUM"

    def __init__(self, initial: int = 0x00) -> None:
        self._initial = check_byte(initial)
        self._state = self._initial

    def initialize(self, value: Optional[int] = None) -> int:
        self._state = self._initial if value is None else check_byte(value)
        return self._state

    def update(self, byte: int) -> int:
        self._state = (self._state + check_byte(byte)) & 0xFF
        return self._state

    def update_all(self, data: Iterable[int]) -> None:
        self._state = (self._state + sum(check_bytes(data))) & 0xFF

    def digest(self) -> int:
        return self._state

    @property
    def accumulator(self) -> int:
        return self._state


class XorChecksum(ChecksumAlgorithm):
    """8-bit XOR of all bytes (longitudinal parity)."""

    name = "XOR"

    def __init__(self, initial: int = 0x00) -> None:
        self._initial = check_byte(initial)
        self._state = self._initial

    def initialize(self, value: Optional[int] = None) -> int:
        self._state = self._initial if value is None else check_byte(value)
        return self._state

    def update(self, byte: int) -> int:
        self._state ^= check_byte(byte)
        return self._state

    def digest(self) -> int:
        return self._state

    @property
    def accumulator(self) -> int:
        return self._state
