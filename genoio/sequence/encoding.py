"""
Integer symbol codes for nucleotide sequences.

Each base maps to a small integer so sequences can be stored compactly in
NumPy arrays. Gaps, misreads and ambiguity codes collapse to OTHER.
"""

import numpy as np

ADENINE = 0
THYMINE = 1
CYTOSINE = 2
GUANINE = 3
OTHER = 4

SYMBOL_CODES = {
    "A": ADENINE, "T": THYMINE, "U": THYMINE,
    "C": CYTOSINE, "G": GUANINE,
}

CODE_SYMBOLS = {
    ADENINE: "A", THYMINE: "T", CYTOSINE: "C", GUANINE: "G", OTHER: "N",
}

_LOOKUP = np.full(256, OTHER, dtype=np.uint8)
for _symbol, _code in SYMBOL_CODES.items():
    _LOOKUP[ord(_symbol)] = _code
    _LOOKUP[ord(_symbol.lower())] = _code


def encode_symbols(sequence: str) -> np.ndarray:
    """
    Encode a nucleotide sequence as integer symbol codes.

    Args:
        sequence: DNA/RNA sequence string (case-insensitive)

    Returns:
        numpy uint8 array of shape (len(sequence),)

    Example:
        >>> encode_symbols("ACGTN")
        array([0, 2, 3, 1, 4], dtype=uint8)
    """
    raw = np.frombuffer(sequence.encode("ascii", errors="replace"), dtype=np.uint8)
    return _LOOKUP[raw]


def decode_symbols(codes: np.ndarray, rna: bool = False) -> str:
    """
    Decode integer symbol codes back to a sequence string.

    Args:
        codes: Array of symbol codes
        rna: If True, emit U instead of T

    Returns:
        Upper case sequence string; OTHER decodes to N
    """
    codes = np.asarray(codes)
    if codes.size and (codes.min() < 0 or codes.max() > OTHER):
        raise ValueError(f"Symbol codes must be in [0, {OTHER}]")
    thymine = "U" if rna else "T"
    table = [CODE_SYMBOLS[c] for c in range(OTHER + 1)]
    table[THYMINE] = thymine
    return "".join(table[int(c)] for c in codes)


def symbol_counts(sequence: str) -> np.ndarray:
    """Count occurrences of each symbol code, shape (5,)."""
    return np.bincount(encode_symbols(sequence), minlength=OTHER + 1)
