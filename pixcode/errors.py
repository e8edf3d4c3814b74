"""Error types raised by the encoder, the renderer and the HTTP layer."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class PixError(Exception):
    code: str
    message: str
    status_code: int = 400

    def __str__(self) -> str:  # noqa: D401 override
        return self.message


class ValidationError(PixError):
    """Request rejected before encoding; the caller must fix the input."""


class EncodingError(PixError):
    """Serializer produced a field the TLV format cannot represent."""


class RenderError(PixError):
    """QR image could not be produced for the given content."""


def err_validation(message: str) -> ValidationError:
    return ValidationError(code="ERR_VALIDATION", message=message, status_code=422)


def err_field_too_long(tag: int, length: int) -> EncodingError:
    return EncodingError(
        code="ERR_ENCODING",
        message=f"field {tag:02d} is {length} bytes long, TLV lengths are limited to 99",
        status_code=500,
    )


def err_amount_not_finite(value: object) -> EncodingError:
    return EncodingError(code="ERR_ENCODING", message=f"amount must be a finite number, got {value}", status_code=500)


def err_qr_capacity(message: str | None = None) -> RenderError:
    return RenderError(code="ERR_QR_CAPACITY", message=message or "Content exceeds QR code capacity", status_code=413)


def err_qr_size(size: int) -> RenderError:
    return RenderError(code="ERR_QR_SIZE", message=f"QR code size must not be negative, got {size}", status_code=422)
