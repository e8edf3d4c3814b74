"""Shared pytest fixtures for pixcode tests."""

from __future__ import annotations

import io
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from pixcode.api import app
from pixcode.config import settings

Field = tuple[str, int, str]


def _walk_fields(payload: str) -> list[Field]:
    """Split one TLV level into (tag, declared length, value), counting lengths in UTF-8 bytes."""

    raw = payload.encode("utf-8")
    fields: list[Field] = []
    idx = 0
    while idx < len(raw):
        tag = raw[idx : idx + 2].decode("ascii")
        length = int(raw[idx + 2 : idx + 4].decode("ascii"))
        start = idx + 4
        end = start + length
        assert end <= len(raw), f"field {tag} overruns the payload"
        fields.append((tag, length, raw[start:end].decode("utf-8")))
        idx = end
    return fields


@pytest.fixture
def walk_fields() -> Callable[[str], list[Field]]:
    return _walk_fields


@pytest.fixture
def decode_qr() -> Callable[[bytes], list[str]]:
    """Decode every QR symbol in a PNG back to text."""

    from pyzbar.pyzbar import decode

    def _decode(png_bytes: bytes) -> list[str]:
        return [symbol.data.decode("utf-8") for symbol in decode(Image.open(io.BytesIO(png_bytes)))]

    return _decode


@pytest.fixture
def api_headers() -> dict[str, str]:
    return {"X-API-Key": settings.api_key}


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
