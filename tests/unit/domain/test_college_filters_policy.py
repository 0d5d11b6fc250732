"""Tests for catalog filtering."""

import pytest

from college_finder.domain.errors import InvalidArgumentError
from college_finder.domain.policies.college_filters import SearchFilters, filter_colleges


def _ids(colleges):
    return [c.id for c in colleges]


class TestNoFilters:
    def test_empty_filters_return_everything(self, catalog):
        assert _ids(filter_colleges(catalog, SearchFilters())) == _ids(catalog)

    @pytest.mark.parametrize("value", ["all", "ANY", "  ", ""])
    def test_wildcards_mean_no_filter(self, catalog, value):
        filters = SearchFilters(
            location=value, stream=value, degree_level=value,
            entrance_exam=value, hostel=value, year_range=value,
        )
        assert len(filter_colleges(catalog, filters)) == len(catalog)

    def test_input_list_not_mutated(self, catalog):
        before = _ids(catalog)
        filter_colleges(catalog, SearchFilters(location="Delhi"))
        assert _ids(catalog) == before


class TestLocation:
    def test_matches_state_case_insensitively(self, catalog):
        result = filter_colleges(catalog, SearchFilters(location="delhi"))
        assert _ids(result) == ["iit-delhi", "du", "jamia", "aiims-delhi"]

    def test_matches_district(self, catalog):
        result = filter_colleges(catalog, SearchFilters(location="Rangareddy"))
        assert _ids(result) == ["uohyd"]

    def test_matches_city_substring(self, catalog):
        result = filter_colleges(catalog, SearchFilters(location="mum"))
        assert _ids(result) == ["iit-bombay"]

    def test_surrounding_whitespace_ignored(self, catalog):
        result = filter_colleges(catalog, SearchFilters(location="  Maharashtra "))
        assert _ids(result) == ["iit-bombay", "coep-pune"]

    def test_no_match(self, catalog):
        assert filter_colleges(catalog, SearchFilters(location="Goa")) == []


class TestStreamAndExam:
    def test_stream(self, catalog):
        result = filter_colleges(catalog, SearchFilters(stream="Engineering"))
        assert _ids(result) == ["iit-delhi", "jamia", "iit-bombay", "coep-pune", "anna-university"]

    def test_stream_is_exact(self, catalog):
        assert filter_colleges(catalog, SearchFilters(stream="engineering")) == []

    def test_entrance_exam(self, catalog):
        result = filter_colleges(catalog, SearchFilters(entrance_exam="CUET"))
        assert _ids(result) == ["du", "jamia", "uohyd"]


class TestDegreeLevel:
    def test_diploma(self, catalog):
        result = filter_colleges(catalog, SearchFilters(degree_level="Diploma"))
        assert _ids(result) == ["du", "jamia"]

    def test_undergraduate(self, catalog):
        result = filter_colleges(catalog, SearchFilters(degree_level="Undergraduate"))
        assert len(result) == 8
        assert "uohyd" not in _ids(result)

    def test_unknown_level_does_not_filter(self, catalog):
        result = filter_colleges(catalog, SearchFilters(degree_level="Certificate"))
        assert len(result) == len(catalog)


class TestHostel:
    @pytest.mark.parametrize(
        "value,missing",
        [
            ("Boys", {"gdc-kargil"}),
            ("Girls", {"coep-pune"}),
            ("Both", {"gdc-kargil", "coep-pune"}),
        ],
    )
    def test_hostel(self, catalog, value, missing):
        result = filter_colleges(catalog, SearchFilters(hostel=value))
        assert set(_ids(catalog)) - set(_ids(result)) == missing

    def test_unknown_hostel_rejected(self, catalog):
        with pytest.raises(InvalidArgumentError, match="Unknown hostel filter"):
            filter_colleges(catalog, SearchFilters(hostel="Staff"))


class TestYearRange:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("before-1960", ["du", "jamia", "aiims-delhi", "iit-bombay", "coep-pune"]),
            ("1960-1980", ["iit-delhi", "anna-university", "uohyd"]),
            ("1980-2000", ["gdc-kargil"]),
            ("after-2000", []),
        ],
    )
    def test_year_range(self, catalog, value, expected):
        assert _ids(filter_colleges(catalog, SearchFilters(year_range=value))) == expected

    def test_unknown_year_range_rejected(self, catalog):
        with pytest.raises(InvalidArgumentError, match="Unknown year range"):
            filter_colleges(catalog, SearchFilters(year_range="1900-1950"))

    def test_college_without_year_excluded(self, catalog):
        catalog[0].year_established = None
        result = filter_colleges(catalog, SearchFilters(year_range="1960-1980"))
        assert _ids(result) == ["anna-university", "uohyd"]


def test_filters_combine(catalog):
    filters = SearchFilters(location="Delhi", stream="Engineering", entrance_exam="CUET")
    assert _ids(filter_colleges(catalog, filters)) == ["jamia"]


def test_normalized_strips_and_drops_wildcards():
    f = SearchFilters(location=" Pune ", stream="all", hostel="").normalized()
    assert f == SearchFilters(location="Pune")
