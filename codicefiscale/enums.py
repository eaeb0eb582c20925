"""Domain enums shared by the codec and its schemas.

All enums use the str mixin so they compare equal to their plain values.
"""

from __future__ import annotations

from enum import Enum


class Sex(str, Enum):
    """Sex as encoded in the day field (female → day + 40)."""

    MALE = "M"
    FEMALE = "F"


class PersonField(str, Enum):
    """Canonical person fields consumed by calculate/validate."""

    NAME = "name"
    FAMILY_NAME = "family_name"
    DATE_OF_BIRTH = "date_of_birth"
    SEX = "sex"
    CITY_CODE = "city_code"


class DateInputKind(str, Enum):
    """Shapes accepted wherever a date is expected."""

    TEMPORAL = "temporal"              # date / datetime
    TIMESTAMP = "timestamp"            # int or "-?digits" string
    CALENDAR_STRING = "calendar_string"  # anything dateutil can parse
