"""Reusable field constraints with human-readable messages.

Each factory returns pydantic validator metadata for use inside
``Annotated[...]``.  Checks inside one validator run in order and stop
at the first failure, so a field reports at most one message; pydantic
itself keeps going across fields, so a candidate reports every failing
field in one pass.

Optional URL/email fields treat an empty or blank string as "not
provided" rather than as a format violation.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import AfterValidator, AnyUrl, BeforeValidator, TypeAdapter, ValidationError
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

NOT_A_NUMBER = "not_a_number"
OUT_OF_RANGE = "out_of_range"

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


def text_rule(
    required: str,
    *,
    min_length: int = 1,
    max_length: int | None = None,
    too_short: str | None = None,
    too_long: str | None = None,
) -> AfterValidator:
    """Require a non-empty string, optionally bounded in length.

    *required* is reported for the empty string (the form default),
    *too_short* / *too_long* for the length bounds.
    """

    def _check(value: str) -> str:
        if not value:
            raise PydanticCustomError("required", required)
        if len(value) < min_length:
            raise PydanticCustomError("too_short", too_short or required)
        if max_length is not None and len(value) > max_length:
            raise PydanticCustomError("too_long", too_long or required)
        return value

    return AfterValidator(_check)


def _blank_as_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


BLANK_AS_NONE = BeforeValidator(_blank_as_none)

OptionalText = Annotated[str | None, BLANK_AS_NONE]


def _check_url(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url", "Invalid website URL") from None
    return value


def _check_email(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        validate_email(value)
    except PydanticCustomError:
        raise PydanticCustomError("email", "Invalid email address") from None
    return value


OptionalUrl = Annotated[str | None, BLANK_AS_NONE, AfterValidator(_check_url)]
OptionalEmail = Annotated[str | None, BLANK_AS_NONE, AfterValidator(_check_email)]


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def _coerce_number(value: Any) -> Any:
    """Coerce form input the way a numeric input's ``valueAsNumber`` does.

    Strings are parsed as floats; anything non-numeric (including NaN and
    the empty string) is a ``not_a_number`` error, distinct from range errors.
    """
    if isinstance(value, bool):
        raise PydanticCustomError(NOT_A_NUMBER, "Expected a number")
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise PydanticCustomError(NOT_A_NUMBER, "Expected a number") from None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise PydanticCustomError(NOT_A_NUMBER, "Expected a number")
        return int(value) if value.is_integer() else value
    raise PydanticCustomError(NOT_A_NUMBER, "Expected a number")


def _coerce_optional_number(value: Any) -> Any:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return _coerce_number(value)


NUMERIC = BeforeValidator(_coerce_number)
OPTIONAL_NUMERIC = BeforeValidator(_coerce_optional_number)


def in_range(low: float, high: float, message: str) -> AfterValidator:
    """Inclusive ``[low, high]`` bound; ``None`` passes through."""

    def _check(value: float | None) -> float | None:
        if value is not None and not low <= value <= high:
            raise PydanticCustomError(OUT_OF_RANGE, message)
        return value

    return AfterValidator(_check)


def positive(message: str) -> AfterValidator:
    """Strictly greater than zero; ``None`` passes through."""

    def _check(value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise PydanticCustomError(OUT_OF_RANGE, message)
        return value

    return AfterValidator(_check)


def non_negative(message: str) -> AfterValidator:
    def _check(value: float | None) -> float | None:
        if value is not None and value < 0:
            raise PydanticCustomError(OUT_OF_RANGE, message)
        return value

    return AfterValidator(_check)


# ---------------------------------------------------------------------------
# Collections and nested objects
# ---------------------------------------------------------------------------


def min_items(message: str, count: int = 1) -> AfterValidator:
    def _check(value: list[Any]) -> list[Any]:
        if len(value) < count:
            raise PydanticCustomError("too_few_items", message)
        return value

    return AfterValidator(_check)


def _blank_mapping_as_none(value: Any) -> Any:
    # An untouched optional address block (every field blank) is "not provided".
    # ``country`` is ignored because the form pre-fills it.
    if isinstance(value, Mapping):
        filled = [
            v for k, v in value.items() if k != "country" and v not in (None, "") and v != {}
        ]
        if not filled:
            return None
    return value


BLANK_MAPPING_AS_NONE = BeforeValidator(_blank_mapping_as_none)
