"""Shared fixtures for codec tests."""

import io

import pytest


class FailingStream:
    """Stream whose reads and writes fail after a number of lines."""

    def __init__(self, lines=(), fail_after=0):
        self._lines = list(lines)
        self._fail_after = fail_after
        self._calls = 0

    def readline(self):
        if self._calls >= self._fail_after:
            raise OSError("device not ready")
        self._calls += 1
        return self._lines.pop(0) if self._lines else ""

    def write(self, text):
        raise OSError("disk full")


@pytest.fixture
def failing_stream():
    return FailingStream


@pytest.fixture
def gff_text():
    return (
        "##gff-version 3\n"
        "##sequence-region chr1 1 1000\n"
        "# a comment\n"
        "chr1\tRefSeq\tgene\t1\t300\t.\t+\t.\tID=gene1;Name=Test%20Gene\n"
        "\n"
        "chr1\tRefSeq\tmRNA\t1\t300\t.\t+\t.\tID=mrna1;Parent=gene1\n"
        "chr1\tRefSeq\tCDS\t10\t120\t0.5\t+\t0\tID=cds1;Parent=mrna1\n"
    )


@pytest.fixture
def fasta_stream():
    return io.StringIO(">seq1 first sequence\nACGT\nACGT\n\n>seq2\nTTGCAN\n")
