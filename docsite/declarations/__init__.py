"""Declaration extraction and signature formatting."""

from .extractor import extract, functions, types
from .signatures import INDENT, MAX_COLUMNS, SignatureSettings, format_signature, signature_for

__all__ = [
    "INDENT",
    "MAX_COLUMNS",
    "SignatureSettings",
    "extract",
    "format_signature",
    "functions",
    "signature_for",
    "types",
]
