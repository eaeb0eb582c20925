"""Name and date-of-birth blocks of the codice fiscale."""

from codicefiscale.encoders.dates import (
    decode_date_of_birth,
    encode_date_of_birth,
    is_plausible,
    reconstruct_date,
)
from codicefiscale.encoders.names import encode_family_name, encode_given_name

__all__ = [
    "decode_date_of_birth",
    "encode_date_of_birth",
    "encode_family_name",
    "encode_given_name",
    "is_plausible",
    "reconstruct_date",
]
