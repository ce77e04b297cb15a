#!/usr/bin/env python3
"""
Example: Summarise a GFF3 file with embedded sequences

Reads the annotation section of a GFF3 file, counts features per type,
then reads the sequences that follow a ##FASTA directive and reports
the base composition of each one.

Usage:
    python annotation_summary.py annotations.gff3
"""

import sys
from collections import Counter

from genoio import Feature, FormatError, ValidationError, open_fasta, open_gff
from genoio.sequence import symbol_counts


def summarise(path):
    with open(path) as handle:
        reader = open_gff(handle)
        types = Counter()
        for item in reader:
            if isinstance(item, Feature):
                types[item.type] += 1
            else:
                print(f"directive: {item.name} {item.value}")

        print("\nFeatures per type:")
        for ftype, count in types.most_common():
            print(f"  {ftype:20s} {count}")

        # Stream is left at the first line after ##FASTA, if there was one
        for record in open_fasta(handle, {"strict": False}):
            a, t, c, g, other = symbol_counts(record.sequence)
            print(f"\n{record.id}: {len(record)} bp  A={a} T={t} C={c} G={g} other={other}")


def main():
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)
    try:
        summarise(sys.argv[1])
    except (FormatError, ValidationError) as exc:
        print(f"{sys.argv[1]}: {exc}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
