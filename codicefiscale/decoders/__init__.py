"""Non-raising decoders for bulk processing."""

from codicefiscale.decoders.codice_fiscale import decode_cf

__all__ = ["decode_cf"]
