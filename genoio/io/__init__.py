"""
Genomic file I/O.

This module provides streaming readers and writers for:
- FASTA: Sequence storage format
- GFF3: Genomic feature annotations
"""

from genoio.io.records import (
    SequenceRecord,
    Feature,
    MetadataEvent,
    Strand,
)

from genoio.io.lines import LineReader

from genoio.io.fasta import (
    FastaReader,
    FastaWriter,
    open_fasta,
    write_fasta,
    parse_fasta_string,
    fasta_to_dict,
)

from genoio.io.gff import (
    GffReader,
    GffWriter,
    open_gff,
    write_gff,
    parse_gff_string,
    parse_attributes,
    format_attributes,
    percent_encode,
    percent_decode,
)

__all__ = [
    "SequenceRecord",
    "Feature",
    "MetadataEvent",
    "Strand",
    "LineReader",
    "FastaReader",
    "FastaWriter",
    "open_fasta",
    "write_fasta",
    "parse_fasta_string",
    "fasta_to_dict",
    "GffReader",
    "GffWriter",
    "open_gff",
    "write_gff",
    "parse_gff_string",
    "parse_attributes",
    "format_attributes",
    "percent_encode",
    "percent_decode",
]
