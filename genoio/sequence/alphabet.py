"""
Symbol sets for sequence validation.

Nucleotide alphabets cover the IUPAC ambiguity codes; all alphabets are
case-insensitive.
"""

from typing import Dict, FrozenSet, Optional

from genoio.config import Alphabet

# Extended IUPAC codes for ambiguous bases
IUPAC_DNA = {
    "A": "A", "C": "C", "G": "G", "T": "T",
    "R": "AG", "Y": "CT", "S": "GC", "W": "AT",
    "K": "GT", "M": "AC", "B": "CGT", "D": "AGT",
    "H": "ACT", "V": "ACG", "N": "ACGT",
}

IUPAC_RNA = {
    ("U" if code == "T" else code): bases.replace("T", "U")
    for code, bases in IUPAC_DNA.items()
}

# 20 standard residues, B/Z/J/X ambiguity, U (Sec), O (Pyl), * (stop)
PROTEIN_SYMBOLS = "ACDEFGHIKLMNPQRSTVWY" + "BZJX" + "UO" + "*"


def _case_insensitive(symbols) -> FrozenSet[str]:
    symbols = "".join(symbols)
    return frozenset(symbols.upper() + symbols.lower())


ALPHABET_SYMBOLS: Dict[Alphabet, FrozenSet[str]] = {
    Alphabet.DNA: _case_insensitive(IUPAC_DNA),
    Alphabet.RNA: _case_insensitive(IUPAC_RNA),
    Alphabet.PROTEIN: _case_insensitive(PROTEIN_SYMBOLS),
}


def symbols_for(alphabet: Alphabet) -> FrozenSet[str]:
    return ALPHABET_SYMBOLS[Alphabet.parse(alphabet)]


def first_invalid(sequence: str, alphabet: Alphabet) -> Optional[int]:
    """
    Find the first character not in the alphabet.

    Args:
        sequence: Sequence text to check
        alphabet: Alphabet to check against

    Returns:
        Index of the first invalid character, or None if all are valid

    Example:
        >>> first_invalid("ACGX", Alphabet.DNA)
        3
    """
    allowed = symbols_for(alphabet)
    for i, char in enumerate(sequence):
        if char not in allowed:
            return i
    return None


def is_valid(sequence: str, alphabet: Alphabet) -> bool:
    return first_invalid(sequence, alphabet) is None
