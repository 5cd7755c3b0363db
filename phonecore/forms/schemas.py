"""Payload models handed to form views.

Selection controls bind to :class:`CountryOption` rows; phone inputs bind
to :class:`PhoneNumberBody`.  Both are plain pydantic models so a view
layer can serialize them without knowing about the catalog or the value
object.
"""
from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from phonecore.catalog.country_catalog import CountryEntry
from phonecore.phone.value import PhoneNumberValue


class CountryOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    iso_code: str
    english_name: str
    calling_code: int | None = None
    text_calling_code: str = ""

    @classmethod
    def from_entry(cls, entry: CountryEntry) -> CountryOption:
        return cls(
            iso_code=entry.iso_code,
            english_name=entry.english_name,
            calling_code=entry.calling_code,
            text_calling_code=entry.text_calling_code,
        )


def country_options(entries: Iterable[CountryEntry]) -> list[CountryOption]:
    """Map a catalog view to option rows, preserving order."""
    return [CountryOption.from_entry(entry) for entry in entries]


class PhoneNumberBody(BaseModel):
    calling_code: int | None = None
    national_number: str | None = None

    # Read-only, filled by from_value() and ignored by to_value()
    e164: str | None = None
    formatted: str | None = None
    is_empty: bool | None = None

    @classmethod
    def from_value(cls, value: PhoneNumberValue) -> PhoneNumberBody:
        return cls(
            calling_code=value.calling_code,
            national_number=value.national_number,
            e164=value.e164,
            formatted=value.formatted,
            is_empty=value.is_empty,
        )

    def to_value(self) -> PhoneNumberValue:
        return PhoneNumberValue(self.calling_code, self.national_number)
