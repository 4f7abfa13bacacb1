from __future__ import annotations

from enum import Enum


class RoastLevel(str, Enum):
    light = "light"
    light_to_medium = "light-to-medium"
    medium = "medium"
    medium_to_dark = "medium-to-dark"
    dark = "dark"


class ComparisonWithPrevious(str, Enum):
    worst = "worst"
    same = "same"
    better = "better"
    unknown = "unknown"
