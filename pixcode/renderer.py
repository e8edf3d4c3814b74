"""QR image renderer for BR Code payloads."""
from __future__ import annotations

import base64
import io
import logging
from typing import Any

import qrcode
from PIL import Image
from qrcode.exceptions import DataOverflowError

from .config import settings
from .errors import err_qr_capacity, err_qr_size

logger = logging.getLogger("pixcode.renderer")


def generate_qr_image(content: str, size: int | None = 0) -> Image.Image:
    """Encode ``content`` with medium error correction into a ``size`` x ``size`` image.

    A size of 0 (or ``None``) uses ``settings.qr.default_size``.
    """

    if size is not None and size < 0:
        raise err_qr_size(size)
    side = size or settings.qr.default_size

    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=settings.qr.box_size,
        border=settings.qr.border,
    )
    qr.add_data(content)
    try:
        qr.make(fit=True)
    except DataOverflowError as exc:
        raise err_qr_capacity(f"Content of {len(content)} characters exceeds QR code capacity") from exc

    image = qr.make_image(fill_color="black", back_color="white").convert("RGB")
    logger.debug("qr code rendered", extra={"qr_version": qr.version, "size": side})
    return image.resize((side, side), Image.Resampling.NEAREST)


def qr_image_to_png_bytes(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def render_qr_code(content: str, size: int | None = 0) -> bytes:
    """Return PNG bytes for ``content``; the string is encoded unchanged."""

    return qr_image_to_png_bytes(generate_qr_image(content, size))


def render_qr_payload(payload: str, size: int | None = 0) -> dict[str, Any]:
    """Render payload into PNG bytes and base64 string."""

    png_bytes = render_qr_code(payload, size)
    return {
        "png_bytes": png_bytes,
        "png_base64": base64.b64encode(png_bytes).decode("ascii"),
    }
