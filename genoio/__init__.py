"""
GenoIO: Streaming FASTA and GFF3 codecs

This package provides:
- Pull-based FASTA and GFF3 readers with line-numbered errors
- Writers that round-trip what the readers produce
- Immutable record types (SequenceRecord, Feature, MetadataEvent)
- Alphabet validation and NumPy symbol encoding for sequences

Opening files, compression and command-line handling are left to the caller:
every reader and writer works on a stream it is handed.
"""

import logging

__version__ = "0.1.0"
__author__ = "GenoIO Contributors"

from genoio.config import (
    Alphabet,
    CodecOptions,
)

from genoio.errors import (
    IoError,
    CodecError,
    FormatError,
    ValidationError,
)

from genoio.results import (
    Ok,
    EndOfInput,
    END_OF_INPUT,
    Error,
)

from genoio.io import (
    SequenceRecord,
    Feature,
    MetadataEvent,
    Strand,
    open_fasta,
    write_fasta,
    open_gff,
    write_gff,
    parse_fasta_string,
    parse_gff_string,
    fasta_to_dict,
)

from genoio.sequence import (
    encode_symbols,
    decode_symbols,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Configuration
    "Alphabet",
    "CodecOptions",
    # Errors and pull results
    "IoError",
    "CodecError",
    "FormatError",
    "ValidationError",
    "Ok",
    "EndOfInput",
    "END_OF_INPUT",
    "Error",
    # Records
    "SequenceRecord",
    "Feature",
    "MetadataEvent",
    "Strand",
    # I/O
    "open_fasta",
    "write_fasta",
    "open_gff",
    "write_gff",
    "parse_fasta_string",
    "parse_gff_string",
    "fasta_to_dict",
    # Encoding
    "encode_symbols",
    "decode_symbols",
]
