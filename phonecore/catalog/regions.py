"""Region enumeration for the country catalog.

Walks a table of specific locale identifiers and yields one
``(iso_code, display_name)`` pair per territory, in table order.  The first
locale that names a territory wins; later locales for the same territory are
ignored.

Display names come from the locale data bundled with ``phonenumbers``
(``phonenumbers.geocoder.LOCALE_DATA``), which maps an ISO 3166-1 code to
its name in each language.  A value of ``"*xx"`` in that table means "use
the name held under language ``xx``".

Locales without a territory, or whose territory has no display name, are
skipped.  They are not errors.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from phonenumbers.geocoder import LOCALE_DATA

logger = logging.getLogger(__name__)

# language[_Script]_TERRITORY, optionally followed by .codeset or @modifier
_LOCALE_RE = re.compile(
    r"^(?P<language>[A-Za-z]{2,3})"
    r"(?:[_-](?P<script>[A-Za-z]{4}))?"
    r"(?:[_-](?P<territory>[A-Za-z]{2}))?"
    r"(?:[.@].*)?$"
)


def territory_for_locale(identifier: str) -> str | None:
    """Return the upper-case territory code of *identifier*, or ``None``."""
    match = _LOCALE_RE.match(identifier.strip())
    if match is None or match.group("territory") is None:
        return None
    return match.group("territory").upper()


def region_display_name(iso_code: str, language: str = "en") -> str | None:
    """Return the display name of *iso_code* in *language*, or ``None``."""
    names = LOCALE_DATA.get(iso_code)
    if not names:
        return None
    name = names.get(language, "")
    if name.startswith("*"):
        name = names.get(name[1:], "")
    return name or None


def enumerate_regions(
    locales: Iterable[str],
    *,
    language: str = "en",
) -> list[tuple[str, str]]:
    """Return unique ``(iso_code, display_name)`` pairs for *locales*.

    Order follows the first appearance of each territory in *locales*.
    """
    regions: dict[str, str] = {}
    skipped = 0
    for identifier in locales:
        iso_code = territory_for_locale(identifier)
        if iso_code is None:
            logger.debug("regions: locale %r has no territory", identifier)
            skipped += 1
            continue
        if iso_code in regions:
            continue
        name = region_display_name(iso_code, language)
        if name is None:
            logger.debug("regions: no display name for territory %s", iso_code)
            skipped += 1
            continue
        regions[iso_code] = name

    if skipped:
        logger.debug("regions: skipped %d locale(s) without a usable region", skipped)
    return list(regions.items())
