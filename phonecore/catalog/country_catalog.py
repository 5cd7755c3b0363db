"""Country catalog: regions annotated with ISO code, name and calling code.

The catalog is built once from a locale table and is read-only afterwards.
It exposes four pre-sorted views for populating selection controls:

by_name            every region, sorted by English name
by_iso             every region, sorted by ISO code
by_calling_code    regions with a calling code, sorted by code, one row per
                   code (US owns +1, RU owns +7)
by_name_us_first   ``by_name`` with a synthetic United States row and a
                   placeholder row in front of it

Usage
-----
    from phonecore.catalog.country_catalog import get_catalog

    catalog = get_catalog()
    catalog.name_to_iso("United States")   # "US"

``get_catalog()`` returns the shared instance.  Callers that need a
different locale table (tests, tools) build their own with
``CountryCatalog.build(locales)`` and pass it along.
"""
from __future__ import annotations

import logging
import threading
from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import phonenumbers

from phonecore.catalog.locales import SPECIFIC_LOCALES
from phonecore.catalog.regions import enumerate_regions
from phonecore.core.settings import get_settings

logger = logging.getLogger(__name__)

UNITED_STATES = "United States"
US_ISO_CODE = "US"

# Calling code -> the only ISO code kept for it in by_calling_code
CALLING_CODE_OWNERS: dict[int, str] = {
    1: "US",
    7: "RU",
}

# Exclusive bounds for the number of regions in the default locale table
EXPECTED_REGION_COUNT: tuple[int, int] = (135, 140)


class CatalogConsistencyError(RuntimeError):
    """Raised when regions share a calling code that has no designated owner."""


@dataclass(frozen=True, slots=True)
class CountryEntry:
    english_name: str
    iso_code: str
    calling_code: int | None = None

    @property
    def text_calling_code(self) -> str:
        """``"+1"`` style calling code, or ``""`` when there is none."""
        return "" if self.calling_code is None else f"+{self.calling_code}"


PLACEHOLDER = CountryEntry("-----", "--")
US_SYNTHETIC = CountryEntry(UNITED_STATES, US_ISO_CODE, 1)


def with_us_first(entries: Sequence[CountryEntry]) -> tuple[CountryEntry, ...]:
    """Return *entries* preceded by the United States row and the placeholder row.

    Presentation helper for country pickers: the U.S. is offered first, then
    a blank choice, then the full list.  The real U.S. entry in *entries* is
    left where it is.
    """
    return (US_SYNTHETIC, PLACEHOLDER, *entries)


def _calling_code_for(iso_code: str) -> int | None:
    try:
        code = phonenumbers.country_code_for_region(iso_code)
    except Exception:  # noqa: BLE001
        # phonenumbers raises a plain Exception when region metadata is missing
        logger.debug("catalog: calling code lookup failed for %s", iso_code)
        return None
    return code if code > 0 else None


def _resolve_calling_codes(
    entries: Iterable[CountryEntry],
    *,
    strict: bool,
) -> tuple[CountryEntry, ...]:
    """Sort coded entries by calling code and keep one row per code."""
    coded = sorted(
        (e for e in entries if e.calling_code is not None),
        key=lambda e: e.calling_code,
    )
    resolved = [
        e for e in coded
        if CALLING_CODE_OWNERS.get(e.calling_code, e.iso_code) == e.iso_code
    ]

    shared: dict[int, list[str]] = defaultdict(list)
    for entry in resolved:
        shared[entry.calling_code].append(entry.iso_code)
    conflicts = {code: isos for code, isos in shared.items() if len(isos) > 1}
    if conflicts:
        detail = "; ".join(
            f"+{code}: {', '.join(isos)}" for code, isos in sorted(conflicts.items())
        )
        if strict:
            raise CatalogConsistencyError(
                f"Calling codes shared by several regions without an owner: {detail}"
            )
        logger.warning("catalog: calling codes shared without an owner: %s", detail)

    return tuple(resolved)


class CountryCatalog:
    """Immutable, queryable set of countries.

    Construct with :meth:`build`; the constructor only wires pre-built views.
    """

    def __init__(
        self,
        *,
        by_name: tuple[CountryEntry, ...],
        by_iso: tuple[CountryEntry, ...],
        by_calling_code: tuple[CountryEntry, ...],
        by_name_us_first: tuple[CountryEntry, ...],
    ) -> None:
        self._by_name = by_name
        self._by_iso = by_iso
        self._by_calling_code = by_calling_code
        self._by_name_us_first = by_name_us_first

    # -- construction -------------------------------------------------------

    @classmethod
    def build(
        cls,
        locales: Iterable[str] = SPECIFIC_LOCALES,
        *,
        strict: bool | None = None,
        language: str | None = None,
    ) -> CountryCatalog:
        """Build a catalog from a table of specific locale identifiers.

        Parameters
        ----------
        locales:
            Locale identifiers such as ``"en_US"``.  Defaults to
            :data:`phonecore.catalog.locales.SPECIFIC_LOCALES`.
        strict:
            Raise :class:`CatalogConsistencyError` when a calling code other
            than +1 / +7 is shared.  Defaults to
            ``settings.strict_calling_codes``.
        language:
            Language of the display names.  Defaults to
            ``settings.region_name_language``.
        """
        settings = get_settings()
        if strict is None:
            strict = settings.strict_calling_codes
        if language is None:
            language = settings.region_name_language

        entries = [
            CountryEntry(name, iso_code, _calling_code_for(iso_code))
            for iso_code, name in enumerate_regions(locales, language=language)
        ]

        by_name = tuple(sorted(entries, key=lambda e: e.english_name))
        by_iso = tuple(sorted(entries, key=lambda e: e.iso_code))
        by_calling_code = _resolve_calling_codes(entries, strict=strict)

        low, high = EXPECTED_REGION_COUNT
        if not low < len(by_name) < high:
            logger.warning(
                "catalog: %d regions, expected between %d and %d",
                len(by_name), low, high,
            )
        logger.info(
            "catalog: built %d regions, %d calling codes",
            len(by_name), len(by_calling_code),
        )

        return cls(
            by_name=by_name,
            by_iso=by_iso,
            by_calling_code=by_calling_code,
            by_name_us_first=with_us_first(by_name),
        )

    # -- views --------------------------------------------------------------

    @property
    def by_name_us_first(self) -> tuple[CountryEntry, ...]:
        return self._by_name_us_first

    @property
    def by_name(self) -> tuple[CountryEntry, ...]:
        return self._by_name

    @property
    def by_iso(self) -> tuple[CountryEntry, ...]:
        return self._by_iso

    @property
    def by_calling_code(self) -> tuple[CountryEntry, ...]:
        return self._by_calling_code

    def __len__(self) -> int:
        return len(self._by_name)

    # -- lookups ------------------------------------------------------------

    def name_to_iso(self, english_name: str | None) -> str | None:
        """Return the ISO code of the country named *english_name*, or ``None``."""
        if english_name is None:
            return None
        entry = next((e for e in self._by_name if e.english_name == english_name), None)
        return entry.iso_code if entry is not None else None

    def iso_to_name(self, iso_code: str | None) -> str | None:
        """Return the English name of the country with *iso_code*, or ``None``."""
        entry = self.find_by_iso(iso_code)
        return entry.english_name if entry is not None else None

    def find_by_iso(self, iso_code: str | None) -> CountryEntry | None:
        if iso_code is None:
            return None
        return next((e for e in self._by_iso if e.iso_code == iso_code), None)

    def find_by_calling_code(self, calling_code: int | None) -> CountryEntry | None:
        """Return the owner of *calling_code* (US for +1, RU for +7), or ``None``."""
        if calling_code is None:
            return None
        return next(
            (e for e in self._by_calling_code if e.calling_code == calling_code), None
        )


_catalog: CountryCatalog | None = None
_catalog_lock = threading.Lock()


def get_catalog() -> CountryCatalog:
    """Return the process-wide catalog, building it on first use."""
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                _catalog = CountryCatalog.build()
    return _catalog
