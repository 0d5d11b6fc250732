"""Domain enums: pure Python, no external dependencies."""

from enum import Enum


class DegreeLevel(str, Enum):
    UNDERGRADUATE = "Undergraduate"
    POSTGRADUATE = "Postgraduate"
    DIPLOMA = "Diploma"
    PHD = "PhD"


class HostelFacility(str, Enum):
    BOYS = "Boys"
    GIRLS = "Girls"
    BOTH = "Both"


class YearRange(str, Enum):
    BEFORE_1960 = "before-1960"
    FROM_1960_TO_1980 = "1960-1980"
    FROM_1980_TO_2000 = "1980-2000"
    AFTER_2000 = "after-2000"

    def contains(self, year: int) -> bool:
        if self is YearRange.BEFORE_1960:
            return year < 1960
        if self is YearRange.FROM_1960_TO_1980:
            return 1960 <= year < 1980
        if self is YearRange.FROM_1980_TO_2000:
            return 1980 <= year < 2000
        return year >= 2000


# Sentinel filter values sent by the web client to mean "no filter"
WILDCARD_FILTER_VALUES = frozenset({"all", "any"})
