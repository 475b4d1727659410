"""Country name validation and sanitization."""

import re
from dataclasses import dataclass
from enum import Enum

MAX_COUNTRY_NAME_LENGTH = 100

_MARKUP = re.compile(r"<[^>]*>")
# Letters (ASCII and Latin-1 accented), whitespace, hyphens, apostrophes
_DISALLOWED = re.compile(r"[^\s'A-Za-zÀ-ÿ-]")


class ValidationReason(str, Enum):
    """Why a country name was rejected."""

    REQUIRED = "required"
    TOO_LONG = "too long"
    INVALID_CHARACTERS = "invalid characters"


MESSAGES = {
    ValidationReason.REQUIRED: "Country name is required",
    ValidationReason.TOO_LONG: "Country name is too long",
    ValidationReason.INVALID_CHARACTERS: "Country name contains invalid characters",
}


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    sanitized: str = ""
    reason: ValidationReason | None = None

    @property
    def message(self) -> str:
        return MESSAGES[self.reason] if self.reason else ""


def sanitize(name: str) -> str:
    """Drop markup tags, then every character outside the allowed set."""
    return _DISALLOWED.sub("", _MARKUP.sub("", name))


def validate_country_name(raw: str) -> ValidationResult:
    """Validate a user-supplied country name.

    Checks run in order: empty after trim, length over
    MAX_COUNTRY_NAME_LENGTH, then sanitization. If sanitization removed
    more than half of the trimmed input the name is rejected as garbled or
    hostile; otherwise only the sanitized string is used downstream.
    """
    trimmed = raw.strip()

    if not trimmed:
        return ValidationResult(ok=False, reason=ValidationReason.REQUIRED)

    if len(trimmed) > MAX_COUNTRY_NAME_LENGTH:
        return ValidationResult(ok=False, reason=ValidationReason.TOO_LONG)

    sanitized = sanitize(trimmed)
    if len(sanitized) < len(trimmed) * 0.5:
        return ValidationResult(ok=False, reason=ValidationReason.INVALID_CHARACTERS)

    return ValidationResult(ok=True, sanitized=sanitized)


def country_cache_key(sanitized: str) -> str:
    return f"country:{sanitized.lower()}"
