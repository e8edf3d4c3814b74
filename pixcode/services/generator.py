"""Pix code generation service used by embedding applications and the HTTP API."""
from __future__ import annotations

from dataclasses import dataclass

from ..models import EncodingRequest
from ..monitoring import track_encode, track_render
from ..pix_encoder import EncodedPayload, encode
from ..renderer import render_qr_code, render_qr_payload


@dataclass(slots=True)
class GenerateResult:
    encoded: EncodedPayload
    qr_png_base64: str


class PixCodeService:
    def encode(self, request: EncodingRequest) -> EncodedPayload:
        with track_encode():
            return encode(request)

    def generate(self, request: EncodingRequest, *, qr_size: int | None = 0) -> GenerateResult:
        """Encode the request and render its payload as a base64 PNG."""

        encoded = self.encode(request)
        with track_render():
            render = render_qr_payload(encoded.payload, size=qr_size)
        return GenerateResult(encoded=encoded, qr_png_base64=render["png_base64"])

    def render(self, content: str, *, size: int | None = 0) -> bytes:
        with track_render():
            return render_qr_code(content, size)
