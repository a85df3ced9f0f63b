"""Named CRC-8 variants.

Parameters and check values follow the standard CRC catalogue notation.
This table is the only place variant parameters are defined.
"""

from types import MappingProxyType

from .schemas import AlgorithmConfig

# Canonical conformance input for every variant
CHECK_INPUT = b"123456789"

CRC_8 = AlgorithmConfig(name="CRC-8", poly=0x07, init=0x00, refin=False, refout=False, xor_out=0x00, check=0xF4)

# ITU-T I.432.1 header error control (coset 0x55)
CRC_8_ATM = AlgorithmConfig(name="CRC-8/ATM", poly=0x07, init=0x00, refin=False, refout=False, xor_out=0x55, check=0xA1)

CRC_8_CDMA2000 = AlgorithmConfig(name="CRC-8/CDMA2000", poly=0x9B, init=0xFF, refin=False, refout=False, xor_out=0x00, check=0xDA)

CRC_8_DARC = AlgorithmConfig(name="CRC-8/DARC", poly=0x39, init=0x00, refin=True, refout=True, xor_out=0x00, check=0x15)

# ETSI EN 302 307 (DVB-S2) baseband header CRC
CRC_8_ETSI = AlgorithmConfig(name="CRC-8/ETSI", poly=0xD5, init=0x00, refin=False, refout=False, xor_out=0x00, check=0xBC)

CRC_8_ROHC = AlgorithmConfig(name="CRC-8/ROHC", poly=0x07, init=0xFF, refin=True, refout=True, xor_out=0x00, check=0xD0)

CRC_8_SMBUS = AlgorithmConfig(name="CRC-8/SMBUS", poly=0x07, init=0x00, refin=False, refout=False, xor_out=0x00, check=0xF4)

CRC_8_WCDMA = AlgorithmConfig(name="CRC-8/WCDMA", poly=0x9B, init=0x00, refin=True, refout=True, xor_out=0x00, check=0x25)

# Dallas/Maxim 1-Wire
CRC_8_MAXIM_DOW = AlgorithmConfig(name="CRC-8/MAXIM-DOW", poly=0x31, init=0x00, refin=True, refout=True, xor_out=0x00, check=0xA1)

# Sensirion SHT/SCD sensors
CRC_8_NRSC_5 = AlgorithmConfig(name="CRC-8/NRSC-5", poly=0x31, init=0xFF, refin=False, refout=False, xor_out=0x00, check=0xF7)

CATALOG = MappingProxyType({
    config.name: config
    for config in (
        CRC_8,
        CRC_8_ATM,
        CRC_8_CDMA2000,
        CRC_8_DARC,
        CRC_8_ETSI,
        CRC_8_ROHC,
        CRC_8_SMBUS,
        CRC_8_WCDMA,
        CRC_8_MAXIM_DOW,
        CRC_8_NRSC_5,
    )
})

# Alternative names used by other catalogues and datasheets
ALIASES = MappingProxyType({
    "CRC-8/I-432-1": CRC_8_ATM.name,
    "CRC-8/ITU": CRC_8_ATM.name,
    "CRC-8/DVB-S2": CRC_8_ETSI.name,
    "CRC-8/MAXIM": CRC_8_MAXIM_DOW.name,
    "CRC-8/SENSIRION": CRC_8_NRSC_5.name,
    "DOW-CRC": CRC_8_MAXIM_DOW.name,
})
