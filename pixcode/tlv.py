"""TLV node types and the recursive EMV serializer."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from types import MappingProxyType
from typing import Iterable, Mapping, Union

from .errors import err_amount_not_finite, err_field_too_long

MAX_TAG = 99
MAX_VALUE_LENGTH = 99

_CENTS = Decimal("0.01")


@dataclass(frozen=True, slots=True)
class Text:
    value: str


@dataclass(frozen=True, slots=True)
class Amount:
    value: Decimal


@dataclass(frozen=True)
class Branch:
    """Nested template; children are keyed by their two-digit tag."""

    children: Mapping[int, "Node"]

    def __post_init__(self) -> None:
        for tag in self.children:
            if isinstance(tag, bool) or not isinstance(tag, int) or not 0 <= tag <= MAX_TAG:
                raise ValueError(f"TLV tag must be an integer between 0 and {MAX_TAG}, got {tag!r}")
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))


Node = Union[Text, Amount, Branch]


@dataclass(frozen=True, slots=True)
class TLVField:
    tag: int
    value: str

    def serialize(self) -> str:
        length = len(self.value.encode("utf-8"))
        if length > MAX_VALUE_LENGTH:
            raise err_field_too_long(self.tag, length)
        return f"{self.tag:02d}{length:02d}{self.value}"


def format_amount(value: Decimal) -> str:
    """Render an amount as fixed-point with two fraction digits, e.g. ``0`` -> ``"0.00"``.

    Precision grows with the integer part so large amounts quantize instead of
    overflowing the default 28-digit context.
    """

    if not value.is_finite():
        raise err_amount_not_finite(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return f"{value.quantize(_CENTS, rounding=ROUND_HALF_UP):f}"


def build_tlv(fields: Iterable[TLVField]) -> str:
    return "".join(field.serialize() for field in fields)


def render_node(node: Node) -> str:
    match node:
        case Text(value):
            return value
        case Amount(value):
            return format_amount(value)
        case Branch():
            return serialize(node)
    raise TypeError(f"unsupported TLV node: {node!r}")


def serialize(node: Branch) -> str:
    """Serialize a branch with its children in ascending tag order."""

    return build_tlv(TLVField(tag=tag, value=render_node(node.children[tag])) for tag in sorted(node.children))
