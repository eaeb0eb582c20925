"""Pydantic schemas for codec inputs and outputs.

Pure data classes — no behaviour beyond validation.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from codicefiscale.enums import Sex


# ---------------------------------------------------------------------------
# Raw date of birth
# ---------------------------------------------------------------------------


class RawDateOfBirth(BaseModel):
    """Date fields as stored in the code, before any century is applied."""

    model_config = ConfigDict(frozen=True)

    year: str = Field(pattern=r"^\d{2}$")    # "80"
    month: str = Field(pattern=r"^\d{2}$")   # "01".."12"
    day: str = Field(pattern=r"^\d{2}$")     # female offset already removed


# ---------------------------------------------------------------------------
# Person data
# ---------------------------------------------------------------------------


class PersonInput(BaseModel):
    """Person data used to calculate or validate a codice fiscale."""

    name: str
    family_name: str
    date_of_birth: date | datetime | int | str
    sex: str
    city_code: str


# ---------------------------------------------------------------------------
# Decoder output
# ---------------------------------------------------------------------------


class CfResult(BaseModel):
    """Result of decoding an Italian codice fiscale without raising."""

    valid: bool
    codice_fiscale: str
    base_variation: str | None = None
    is_homocode: bool | None = None
    birthdate: date | None = None
    age: int | None = None
    gender: Sex | None = None
    birthplace_code: str | None = None   # Belfiore code, e.g. "F205"
    error_code: str | None = None
    error: str | None = None
    context: dict[str, Any] = Field(default_factory=dict)
