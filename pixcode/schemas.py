"""Pydantic schemas for API contracts."""
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from .models import DEFAULT_TRANSACTION_ID, EncodingRequest


class PixRequest(BaseModel):
    # Presence and length rules are enforced by pixcode.validation so the
    # API reports the same messages as library callers.
    key: str = Field(default="", description="Pix key (CPF/CNPJ, email, phone or random key)")
    name: str = Field(default="", description="Receiver name, up to 25 characters")
    city: str = Field(default="", description="Receiver city, up to 15 characters")
    amount: Decimal | None = Field(default=None, description="Transaction amount in BRL")
    description: str = Field(default="")
    transaction_id: str = Field(default=DEFAULT_TRANSACTION_ID)

    def to_encoding_request(self) -> EncodingRequest:
        return EncodingRequest(
            key=self.key,
            name=self.name,
            city=self.city,
            amount=self.amount,
            description=self.description,
            transaction_id=self.transaction_id,
        )


class PixQRRequest(PixRequest):
    size: int = Field(default=0, ge=0, description="Image side in pixels, 0 for the default")


class PixResponse(BaseModel):
    payload: str
    crc: str


class PixQRResponse(PixResponse):
    qr_png_base64: str


class QRCodeRequest(BaseModel):
    content: str = Field(min_length=1)
    size: int = Field(default=0, ge=0)


class ErrorResponse(BaseModel):
    code: str
    message: str
