"""Tests for phonecore/catalog/country_catalog.py."""
from __future__ import annotations

import logging

import pytest

from phonecore.catalog.country_catalog import (
    PLACEHOLDER,
    US_SYNTHETIC,
    CatalogConsistencyError,
    CountryCatalog,
    CountryEntry,
    get_catalog,
    with_us_first,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

_SMALL_TABLE = ["en_US", "es_US", "fr_CA", "ru_RU", "kk_KZ", "en_GB", "en"]


@pytest.fixture(scope="module")
def catalog() -> CountryCatalog:
    return CountryCatalog.build()


@pytest.fixture()
def small_catalog() -> CountryCatalog:
    return CountryCatalog.build(_SMALL_TABLE)


# ===========================================================================
# Default catalog
# ===========================================================================

class TestDefaultCatalog:
    def test_size_in_expected_band(self, catalog) -> None:
        assert 135 < len(catalog.by_name) < 140, f"count={len(catalog.by_name)}"

    def test_single_us_entry(self, catalog) -> None:
        us = [e for e in catalog.by_name if e.iso_code == "US"]
        assert len(us) == 1
        assert us[0].english_name == "United States"
        assert us[0].calling_code == 1

    def test_iso_codes_unique(self, catalog) -> None:
        isos = [e.iso_code for e in catalog.by_iso]
        assert len(isos) == len(set(isos))

    def test_by_name_sorted(self, catalog) -> None:
        names = [e.english_name for e in catalog.by_name]
        assert names == sorted(names)

    def test_by_iso_sorted(self, catalog) -> None:
        isos = [e.iso_code for e in catalog.by_iso]
        assert isos == sorted(isos)

    def test_by_name_and_by_iso_same_entries(self, catalog) -> None:
        assert set(catalog.by_name) == set(catalog.by_iso)

    def test_every_region_has_a_calling_code(self, catalog) -> None:
        assert all(e.calling_code for e in catalog.by_name)

    def test_len(self, catalog) -> None:
        assert len(catalog) == len(catalog.by_name)

    def test_get_catalog_is_shared(self) -> None:
        assert get_catalog() is get_catalog()


class TestByCallingCode:
    def test_sorted_by_code(self, catalog) -> None:
        codes = [e.calling_code for e in catalog.by_calling_code]
        assert codes == sorted(codes)

    def test_plus_one_kept_for_us_only(self, catalog) -> None:
        ones = [e for e in catalog.by_calling_code if e.calling_code == 1]
        assert [e.iso_code for e in ones] == ["US"]

    def test_plus_seven_kept_for_russia_only(self, catalog) -> None:
        sevens = [e for e in catalog.by_calling_code if e.calling_code == 7]
        assert [e.iso_code for e in sevens] == ["RU"]

    def test_codes_unique(self, catalog) -> None:
        codes = [e.calling_code for e in catalog.by_calling_code]
        assert len(codes) == len(set(codes))

    def test_dropped_regions_remain_in_name_view(self, catalog) -> None:
        canada = catalog.find_by_iso("CA")
        kazakhstan = catalog.find_by_iso("KZ")
        assert canada is not None and canada.calling_code == 1
        assert kazakhstan is not None and kazakhstan.calling_code == 7
        assert canada not in catalog.by_calling_code
        assert kazakhstan not in catalog.by_calling_code


class TestByNameUsFirst:
    def test_first_two_rows(self, catalog) -> None:
        assert catalog.by_name_us_first[0] == CountryEntry("United States", "US", 1)
        assert catalog.by_name_us_first[1] == CountryEntry("-----", "--")
        assert catalog.by_name_us_first[1].calling_code is None

    def test_original_us_still_in_alphabetical_list(self, catalog) -> None:
        rest = catalog.by_name_us_first[2:]
        assert rest == catalog.by_name
        assert any(e.iso_code == "US" for e in rest)

    def test_with_us_first_adapter(self) -> None:
        entries = (CountryEntry("Canada", "CA", 1),)
        assert with_us_first(entries) == (US_SYNTHETIC, PLACEHOLDER, entries[0])


# ===========================================================================
# Lookups
# ===========================================================================

class TestLookups:
    def test_name_to_iso(self, catalog) -> None:
        assert catalog.name_to_iso("United States") == "US"

    def test_name_to_iso_exact_match_only(self, catalog) -> None:
        assert catalog.name_to_iso("united states") is None

    def test_name_to_iso_none(self, catalog) -> None:
        assert catalog.name_to_iso(None) is None

    def test_iso_to_name(self, catalog) -> None:
        assert catalog.iso_to_name("RU") == "Russia"

    def test_iso_to_name_unknown(self, catalog) -> None:
        assert catalog.iso_to_name("ZZ") is None

    def test_iso_to_name_none(self, catalog) -> None:
        assert catalog.iso_to_name(None) is None

    def test_find_by_calling_code_returns_owner(self, catalog) -> None:
        assert catalog.find_by_calling_code(1).iso_code == "US"
        assert catalog.find_by_calling_code(44).iso_code == "GB"

    def test_find_by_calling_code_unknown(self, catalog) -> None:
        assert catalog.find_by_calling_code(999) is None
        assert catalog.find_by_calling_code(None) is None


# ===========================================================================
# Injected locale tables
# ===========================================================================

class TestInjectedTable:
    def test_one_row_per_territory(self, small_catalog) -> None:
        assert [e.iso_code for e in small_catalog.by_iso] == ["CA", "GB", "KZ", "RU", "US"]

    def test_names_sorted(self, small_catalog) -> None:
        assert [e.english_name for e in small_catalog.by_name] == [
            "Canada",
            "Kazakhstan",
            "Russia",
            "United Kingdom",
            "United States",
        ]

    def test_tie_break(self, small_catalog) -> None:
        assert [(e.calling_code, e.iso_code) for e in small_catalog.by_calling_code] == [
            (1, "US"),
            (7, "RU"),
            (44, "GB"),
        ]

    def test_region_without_calling_code_kept(self) -> None:
        catalog = CountryCatalog.build(["en_US", "en_AQ"])
        antarctica = catalog.find_by_iso("AQ")
        assert antarctica is not None
        assert antarctica.calling_code is None
        assert antarctica.text_calling_code == ""
        assert antarctica not in catalog.by_calling_code

    def test_unknown_territory_skipped(self) -> None:
        catalog = CountryCatalog.build(["en_US", "xx_ZZ"])
        assert [e.iso_code for e in catalog.by_iso] == ["US"]

    def test_count_outside_band_only_warns(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="phonecore.catalog.country_catalog"):
            catalog = CountryCatalog.build(_SMALL_TABLE)
        assert len(catalog) == 5
        assert "expected between" in caplog.text


class TestSharedCallingCodes:
    def test_unexpected_duplicate_raises_in_strict_mode(self) -> None:
        with pytest.raises(CatalogConsistencyError, match=r"\+44: GB, GG"):
            CountryCatalog.build(["en_GB", "en_GG"], strict=True)

    def test_unexpected_duplicate_warns_when_not_strict(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="phonecore.catalog.country_catalog"):
            catalog = CountryCatalog.build(["en_GB", "en_GG"], strict=False)
        assert [e.iso_code for e in catalog.by_calling_code] == ["GB", "GG"]
        assert "+44: GB, GG" in caplog.text

    def test_strict_default_from_settings(self, monkeypatch) -> None:
        from phonecore.core.settings import get_settings

        monkeypatch.setenv("STRICT_CALLING_CODES", "false")
        get_settings.cache_clear()
        catalog = CountryCatalog.build(["en_GB", "en_GG"])
        assert len(catalog.by_calling_code) == 2


def test_entry_text_calling_code() -> None:
    assert CountryEntry("United States", "US", 1).text_calling_code == "+1"


def test_entry_is_immutable() -> None:
    entry = CountryEntry("Canada", "CA", 1)
    with pytest.raises(AttributeError):
        entry.calling_code = 2  # type: ignore[misc]


def test_display_language_can_be_chosen() -> None:
    catalog = CountryCatalog.build(["de_DE"], language="de")
    assert catalog.iso_to_name("DE") == "Deutschland"
    assert catalog.name_to_iso("Deutschland") == "DE"
