"""Binding model for a phone number input: country picker plus number box.

The field never edits its own value.  Each user change builds a new
:class:`PhoneNumberValue` and hands it to ``on_change``; the owner decides
whether to store it (two-way binding).  Without an ``on_change`` callback
the field ignores changes.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from phonecore.catalog.country_catalog import CountryEntry
from phonecore.phone.value import PhoneNumberValue

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PhoneNumberField:
    value: PhoneNumberValue = field(default_factory=PhoneNumberValue)
    on_change: Callable[[PhoneNumberValue], None] | None = None
    read_only: bool = False

    def select_country(self, entry: CountryEntry) -> None:
        """Handle a pick in the country selector."""
        if self.on_change is None:
            return
        if entry.calling_code is None:
            # Placeholder row; PhoneNumberValue falls back to +1
            logger.debug("phone_field: %s has no calling code", entry.iso_code)
        self.on_change(PhoneNumberValue(entry.calling_code, self.value.national_number))

    def enter_number(self, number: str | None) -> None:
        """Handle an edit in the national number box."""
        if self.on_change is None:
            return
        self.on_change(PhoneNumberValue(self.value.calling_code, number))
