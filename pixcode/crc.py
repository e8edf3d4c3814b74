"""CRC-16/CCITT-FALSE checksum used by the BR Code CRC field (tag 63)."""
from __future__ import annotations

CRC16_POLY = 0x1021
CRC16_INIT = 0xFFFF

# Tag 63 with a fixed length of 04, declared before the checksum is computed.
CRC_FIELD_PREFIX = "6304"


def crc16_ccitt_false(data: bytes) -> int:
    """Compute CRC-16/CCITT-FALSE (poly 0x1021, init 0xFFFF, no reflection, no final XOR)."""

    checksum = CRC16_INIT
    for byte in data:
        checksum ^= byte << 8
        for _ in range(8):
            if checksum & 0x8000:
                checksum = ((checksum << 1) ^ CRC16_POLY) & 0xFFFF
            else:
                checksum = (checksum << 1) & 0xFFFF
    return checksum


def crc16_hex(payload: str) -> str:
    return f"{crc16_ccitt_false(payload.encode('utf-8')):04X}"
