"""
Sequence alphabets and symbol encoding.

This module provides:
- IUPAC-aware alphabet symbol sets and validation
- Integer symbol codes for compact NumPy storage
"""

from genoio.sequence.alphabet import (
    ALPHABET_SYMBOLS,
    IUPAC_DNA,
    IUPAC_RNA,
    PROTEIN_SYMBOLS,
    first_invalid,
    is_valid,
    symbols_for,
)

from genoio.sequence.encoding import (
    encode_symbols,
    decode_symbols,
    symbol_counts,
    OTHER,
)

__all__ = [
    "ALPHABET_SYMBOLS",
    "IUPAC_DNA",
    "IUPAC_RNA",
    "PROTEIN_SYMBOLS",
    "first_invalid",
    "is_valid",
    "symbols_for",
    "encode_symbols",
    "decode_symbols",
    "symbol_counts",
    "OTHER",
]
