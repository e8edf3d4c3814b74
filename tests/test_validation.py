from decimal import Decimal

import pytest

from pixcode.errors import ValidationError
from pixcode.models import EncodingRequest
from pixcode.validation import validate

KEY = "jonnasfonini@gmail.com"


class TestValidate:
    def test_valid_request_passes(self):
        assert validate(EncodingRequest(key=KEY, name="Jonnas Fonini", city="Marau")) is None

    @pytest.mark.parametrize(
        ("request_", "message"),
        [
            (EncodingRequest(key=""), "key must not be empty"),
            (EncodingRequest(key="", name="Jonnas", city="Marau"), "key must not be empty"),
            (EncodingRequest(key=KEY, city="Marau"), "name must not be empty"),
            (EncodingRequest(key=KEY, name="Jonnas"), "city must not be empty"),
            (
                EncodingRequest(key=KEY, name="Receiver long name to cause error", city="Marau"),
                "name must be at least 25 characters long",
            ),
            (
                EncodingRequest(key=KEY, name="Jonnas", city="Receiver city long name"),
                "city must be at least 15 characters long",
            ),
        ],
    )
    def test_first_failing_check_wins(self, request_, message):
        with pytest.raises(ValidationError) as exc_info:
            validate(request_)
        assert str(exc_info.value) == message
        assert exc_info.value.code == "ERR_VALIDATION"

    def test_name_checked_before_city_length(self):
        request = EncodingRequest(key=KEY, name="n" * 26, city="c" * 16)
        with pytest.raises(ValidationError, match="^name must be at least 25 characters long$"):
            validate(request)

    def test_limits_count_code_points_not_bytes(self):
        # 25 and 15 code points, but twice as many UTF-8 bytes
        validate(EncodingRequest(key=KEY, name="ã" * 25, city="é" * 15))

    def test_one_over_the_limit(self):
        with pytest.raises(ValidationError):
            validate(EncodingRequest(key=KEY, name="ã" * 26, city="Marau"))
        with pytest.raises(ValidationError):
            validate(EncodingRequest(key=KEY, name="Jonnas", city="é" * 16))

    @pytest.mark.parametrize("amount", [float("nan"), float("inf"), float("-inf"), Decimal("NaN")])
    def test_non_finite_amount_rejected(self, amount):
        with pytest.raises(ValidationError, match="^amount must be a finite number$"):
            validate(EncodingRequest(key=KEY, name="Jonnas", city="Marau", amount=amount))

    def test_amount_checked_after_text_fields(self):
        with pytest.raises(ValidationError, match="^name must not be empty$"):
            validate(EncodingRequest(key=KEY, amount=float("nan")))

    def test_key_format_is_not_checked(self):
        validate(EncodingRequest(key="not-a-cpf-or-email", name="Jonnas", city="Marau"))

    def test_pure(self):
        request = EncodingRequest(key=KEY, name="Jonnas", city="c" * 16)
        messages = []
        for _ in range(2):
            with pytest.raises(ValidationError) as exc_info:
                validate(request)
            messages.append(str(exc_info.value))
        assert messages[0] == messages[1]
