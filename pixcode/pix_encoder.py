"""Pix BR Code payload encoder ("copy and paste" string)."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from .builder import build_tree
from .crc import CRC_FIELD_PREFIX, crc16_hex
from .models import DEFAULT_TRANSACTION_ID, EncodingRequest
from .tlv import serialize
from .validation import validate

logger = logging.getLogger("pixcode.encoder")


@dataclass(frozen=True)
class EncodedPayload:
    payload: str
    crc: str


def finalize(body: str) -> str:
    """Append the tag 63 header and the CRC computed over body + header."""

    crc_input = f"{body}{CRC_FIELD_PREFIX}"
    return f"{crc_input}{crc16_hex(crc_input)}"


def encode(request: EncodingRequest) -> EncodedPayload:
    """Validate, serialize and checksum a request."""

    validate(request)
    body = serialize(build_tree(request))
    payload = finalize(body)
    crc = payload[-4:]
    logger.debug(
        "pix payload encoded",
        extra={"payload_length": len(payload), "crc": crc, "transaction_id": request.transaction_id},
    )
    return EncodedPayload(payload=payload, crc=crc)


def pix(
    *,
    key: str,
    name: str,
    city: str,
    amount: Decimal | float | int | None = None,
    description: str = "",
    transaction_id: str = DEFAULT_TRANSACTION_ID,
) -> str:
    request = EncodingRequest(
        key=key,
        name=name,
        city=city,
        amount=amount,
        description=description,
        transaction_id=transaction_id,
    )
    return encode(request).payload
