from datetime import datetime, timedelta, timezone

import pytest

from wrua_forum_api.app.core.errors import format_validation_errors
from wrua_forum_api.app.core.utils import SLUG_PATTERN, like_pattern, slugify, to_utc_iso


@pytest.mark.parametrize(
    "title, expected",
    [
        ("Mara River Riparian Restoration", "mara-river-riparian-restoration"),
        ("  Youth -- Training!! 2024 ", "youth-training-2024"),
        ("Café Wetlands", "cafe-wetlands"),
        ("***", ""),
    ],
)
def test_slugify(title: str, expected: str) -> None:
    slug = slugify(title)
    assert slug == expected
    if slug:
        assert SLUG_PATTERN.match(slug)


def test_to_utc_iso_normalizes_offsets() -> None:
    nairobi = timezone(timedelta(hours=3))
    assert to_utc_iso(datetime(2024, 5, 1, 12, 0, tzinfo=nairobi)) == "2024-05-01T09:00:00+00:00"
    assert to_utc_iso(datetime(2024, 5, 1, 12, 0)) == "2024-05-01T12:00:00+00:00"


def test_format_validation_errors_drops_location_prefix() -> None:
    message = format_validation_errors(
        [
            {"loc": ("body", "email"), "msg": "Field required"},
            {"loc": ("query", "sdg"), "msg": "Input should be less than or equal to 17"},
        ]
    )
    assert message == (
        'Validation error: Field required at "email"; '
        'Input should be less than or equal to 17 at "sdg"'
    )


def test_like_pattern_escapes_wildcards() -> None:
    assert like_pattern("mara") == "%mara%"
    assert like_pattern("100%") == "%100\\%%"
    assert like_pattern("a_b\\c") == "%a\\_b\\\\c%"
