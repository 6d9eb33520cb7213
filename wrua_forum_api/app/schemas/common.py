"""Validators shared by several schema modules."""

import re
from typing import List, Optional

from ..core.utils import SLUG_PATTERN

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def check_slug(value: Optional[str]) -> Optional[str]:
    """Accept ``None`` or a slug in canonical lowercase-hyphen form."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    if not SLUG_PATTERN.match(value):
        raise ValueError("Slug may only contain lowercase letters, digits and single hyphens")
    return value


def check_email(value: Optional[str], required: bool = False) -> Optional[str]:
    """Validate an email address; blank optional values become ``None``."""
    value = (value or "").strip()
    if not value and not required:
        return None
    if not _EMAIL_PATTERN.match(value):
        raise ValueError("Invalid email address")
    return value


def clean_string_list(values: Optional[List[str]]) -> Optional[List[str]]:
    """Strip entries and drop empty ones, keeping the original order."""
    if values is None:
        return None
    return [v.strip() for v in values if v and v.strip()]
