"""Phone number formatting, decomposition and validation.

Thin layer over ``phonenumbers`` (libphonenumber).  Numbers without an
international prefix are assumed to be North American and get ``+1``
prepended before parsing; parsing itself never uses a default region.

North American numbers are shown as ``+1 (720) 352-0676`` rather than the
library's ``+1 720-352-0676``.  Every other calling code keeps the
library's international rendering.

None of these functions raise on bad input: formatting falls back to the
input string and validation returns ``False``.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
import re

import phonenumbers

logger = logging.getLogger(__name__)

_DEFAULT_PREFIX = "+1"
_DEFAULT_CALLING_CODE = 1

# phonenumbers' INTERNATIONAL rendering of a NANP number, maybe with an extension
_NANP_INTERNATIONAL_RE = re.compile(r"^\+1 \d{3}-\d{3}-\d{4}")


def _with_default_prefix(raw: str) -> str:
    return raw if raw.startswith("+") else f"{_DEFAULT_PREFIX}{raw}"


def format_phone(raw: str | None) -> str | None:
    """Return *raw* in international display form.

    ``"7203520676"``, ``"720.352.0676"`` and ``"+17203520676"`` all give
    ``"+1 (720) 352-0676"``.  ``None`` and ``""`` are returned unchanged, as
    is any input ``phonenumbers`` cannot parse.
    """
    if not raw:
        return raw

    try:
        parsed = phonenumbers.parse(_with_default_prefix(raw), None)
    except phonenumbers.NumberParseException:
        # SAFETY: do not log raw value
        logger.debug("format_phone: could not parse input (length=%d)", len(raw))
        return raw

    formatted = phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.INTERNATIONAL)
    if not _NANP_INTERNATIONAL_RE.match(formatted):
        return formatted
    return f"+1 ({formatted[3:6]}) {formatted[7:]}"


def phone_components(raw: str | None) -> tuple[int, str] | None:
    """Split *raw* into ``(calling_code, local_number)``.

    ``"+17203520676"`` gives ``(1, "(720) 352-0676")``.  When the formatted
    number has no calling-code prefix the whole string is returned as the
    local part with calling code 1.
    """
    formatted = format_phone(raw)
    if formatted is None:
        return None

    prefix, sep, rest = formatted.partition(" ")
    if not sep:
        return _DEFAULT_CALLING_CODE, formatted
    try:
        calling_code = int(prefix[1:])
    except ValueError:
        return _DEFAULT_CALLING_CODE, formatted
    return calling_code, rest.strip()


def trim_phone(raw: str) -> str:
    """Strip everything a person types around a phone number.

    Keeps a single leading ``+`` and the digits, in order:
    ``"+1 (720) 352-0676"`` gives ``"+17203520676"``.  The result is usually,
    but not necessarily, an E.164 number.
    """
    stripped = raw.strip()
    digits = "".join(c for c in stripped if c.isdecimal())
    return f"+{digits}" if stripped.startswith("+") else digits


def is_valid_phone(raw: str | None) -> bool:
    """Return ``True`` if *raw* is a valid phone number in any common format."""
    if not isinstance(raw, str):
        return False

    try:
        parsed = phonenumbers.parse(trim_phone(_with_default_prefix(raw)), None)
    except phonenumbers.NumberParseException:
        logger.debug("is_valid_phone: could not parse input (length=%d)", len(raw))
        return False

    return phonenumbers.is_valid_number(parsed)
