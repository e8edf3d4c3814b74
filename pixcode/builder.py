"""Maps an encoding request onto the fixed BR Code TLV schema."""
from __future__ import annotations

from .models import DEFAULT_TRANSACTION_ID, EncodingRequest
from .tlv import Amount, Branch, Node, Text

PAYLOAD_FORMAT_INDICATOR = "01"
PIX_GUI = "BR.GOV.BCB.PIX"
MERCHANT_CATEGORY_CODE = "0000"
CURRENCY_BRL = "986"  # ISO 4217
COUNTRY_CODE = "BR"  # ISO 3166-1 alpha-2
BRCODE_GUI = "BR.GOV.BCB.BRCODE"
BRCODE_VERSION = "1.0.0"

TAG_PAYLOAD_FORMAT = 0
TAG_MERCHANT_ACCOUNT = 26
TAG_MERCHANT_CATEGORY = 52
TAG_CURRENCY = 53
TAG_AMOUNT = 54
TAG_COUNTRY = 58
TAG_MERCHANT_NAME = 59
TAG_MERCHANT_CITY = 60
TAG_ADDITIONAL_DATA = 62


def _merchant_account(request: EncodingRequest) -> Branch:
    children: dict[int, Node] = {0: Text(PIX_GUI), 1: Text(request.key)}
    if request.description:
        children[2] = Text(request.description)
    return Branch(children)


def _additional_data(request: EncodingRequest) -> Branch:
    return Branch(
        {
            5: Text(request.transaction_id or DEFAULT_TRANSACTION_ID),
            50: Branch({0: Text(BRCODE_GUI), 1: Text(BRCODE_VERSION)}),
        }
    )


def build_tree(request: EncodingRequest) -> Branch:
    """Build the root template. Does not validate; empty name/city are left out."""

    fields: dict[int, Node] = {
        TAG_PAYLOAD_FORMAT: Text(PAYLOAD_FORMAT_INDICATOR),
        TAG_MERCHANT_ACCOUNT: _merchant_account(request),
        TAG_MERCHANT_CATEGORY: Text(MERCHANT_CATEGORY_CODE),
        TAG_CURRENCY: Text(CURRENCY_BRL),
        TAG_AMOUNT: Amount(request.amount),
        TAG_COUNTRY: Text(COUNTRY_CODE),
        TAG_ADDITIONAL_DATA: _additional_data(request),
    }
    if request.name:
        fields[TAG_MERCHANT_NAME] = Text(request.name)
    if request.city:
        fields[TAG_MERCHANT_CITY] = Text(request.city)
    return Branch(fields)
