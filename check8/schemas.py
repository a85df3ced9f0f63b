"""Pydantic schema for CRC-8 algorithm parameters."""

from typing import Optional

from pydantic import BaseModel, Field


class AlgorithmConfig(BaseModel):
    """Parameters of one CRC-8 variant, in the usual catalogue notation.

    ``check`` is the digest of the ASCII string "123456789", or None for an
    ad-hoc polynomial with no published check value.
    Instances are frozen and hashable, so one config is shared by every
    engine bound to that variant.
    """

    name: str
    poly: int = Field(ge=0, le=0xFF)
    init: int = Field(default=0x00, ge=0, le=0xFF)
    refin: bool = False
    refout: bool = False
    xor_out: int = Field(default=0x00, ge=0, le=0xFF)
    check: Optional[int] = Field(default=None, ge=0, le=0xFF)

    model_config = {"frozen": True}
