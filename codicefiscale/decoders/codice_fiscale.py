"""Non-raising codice fiscale decoder.

Wraps ``FiscalCode.parse`` for callers that process many codes and need a
per-item outcome instead of an exception: birthdate, age, gender, birthplace
code and homocode information on success, a stable error code on failure.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from codicefiscale.config import settings
from codicefiscale.date_input import parse_date_input
from codicefiscale.exceptions import CodiceFiscaleError
from codicefiscale.fiscal_code import FiscalCode, normalize_code
from codicefiscale.schemas import CfResult


def decode_cf(
    cf: str,
    century: int | str | None = None,
    min_age: int | None = None,
    reference: Any = None,
) -> CfResult:
    """Decode an Italian codice fiscale into personal data.

    Args:
        cf: The 16-character codice fiscale string.
        century: Century of birth, if known; otherwise the birthdate is the
            most probable one at ``reference``.
        min_age: Minimum age of the holder; defaults to ``settings.default_min_age``.
        reference: Reference instant for the probable birthdate and the age;
            defaults to now.

    Returns:
        CfResult with birthdate, age, gender, birthplace and validity.
    """
    cf_clean = normalize_code(cf)

    try:
        code = FiscalCode.parse(cf_clean, century)
        reference_dt = parse_date_input(reference if reference is not None else datetime.now())
        if century is not None:
            birthdate = code.date_of_birth(century)
        else:
            birthdate = code.probable_date_of_birth(
                min_age if min_age is not None else settings.default_min_age,
                reference_dt,
            )
    except CodiceFiscaleError as exc:
        return CfResult(
            valid=False,
            codice_fiscale=cf_clean,
            error_code=exc.code,
            error=str(exc),
            context=dict(exc.context),
        )

    # Age at the reference date
    today = reference_dt.date()
    age = today.year - birthdate.year
    if (today.month, today.day) < (birthdate.month, birthdate.day):
        age -= 1

    return CfResult(
        valid=True,
        codice_fiscale=code.value,
        base_variation=code.base_variation,
        is_homocode=code.is_homocode,
        birthdate=birthdate,
        age=age,
        gender=code.sex,
        birthplace_code=code.city_code,
    )
