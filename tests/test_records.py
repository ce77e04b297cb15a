"""Tests for the record model."""

import dataclasses

import numpy as np
import pytest

from genoio.io.records import Feature, MetadataEvent, SequenceRecord, Strand


class TestSequenceRecord:
    """SequenceRecord invariants and helpers."""

    def test_length_and_header(self):
        record = SequenceRecord("seq1", "demo", "ACGT")
        assert len(record) == 4
        assert record.header == "seq1 demo"
        assert SequenceRecord("seq2").header == "seq2"

    def test_description_trimmed(self):
        assert SequenceRecord("s", "  padded  ").description == "padded"

    @pytest.mark.parametrize("seq_id", ["", "two words", "tab\tid"])
    def test_invalid_id(self, seq_id):
        with pytest.raises(ValueError, match="Sequence id"):
            SequenceRecord(seq_id)

    def test_sequence_without_whitespace(self):
        with pytest.raises(ValueError, match="contains whitespace"):
            SequenceRecord("s", "", "AC\nGT")

    def test_sequence_without_header_marker(self):
        with pytest.raises(ValueError, match="contains '>'"):
            SequenceRecord("s", "", "AC>GT")

    def test_description_without_line_breaks(self):
        with pytest.raises(ValueError, match="line breaks"):
            SequenceRecord("s", "a\nb")

    def test_immutable(self):
        record = SequenceRecord("s", "", "AC")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.sequence = "GT"

    def test_to_fasta(self):
        record = SequenceRecord("s", "d", "ACGTACG")
        assert record.to_fasta(line_width=3) == ">s d\nACG\nTAC\nG"

    def test_symbols(self):
        record = SequenceRecord("s", "", "ACGTN")
        np.testing.assert_array_equal(record.symbols(), [0, 2, 3, 1, 4])


class TestFeature:
    """Feature invariants and helpers."""

    def test_defaults(self):
        feature = Feature("chr1", ".", "gene", 1, 10)
        assert feature.score is None
        assert feature.strand is Strand.UNKNOWN
        assert feature.phase is None
        assert len(feature.attributes) == 0
        assert len(feature) == 10

    def test_coerces_strand_and_attributes(self):
        feature = Feature("chr1", ".", "gene", 1, 10, strand="-",
                          attributes={"ID": "g1", "Alias": ["a", "b"]})
        assert feature.strand is Strand.MINUS
        assert feature.attributes["ID"] == ("g1",)
        assert feature.attributes["Alias"] == ("a", "b")
        assert feature.get("Alias") == "a"
        assert feature.get("Missing", "none") == "none"
        assert feature.id == "g1"

    def test_attributes_read_only(self):
        source = {"ID": ["g1"]}
        feature = Feature("chr1", ".", "gene", 1, 10, attributes=source)
        source["ID"].append("g2")
        assert feature.attributes["ID"] == ("g1",)
        with pytest.raises(TypeError):
            feature.attributes["ID"] = ("x",)

    def test_attribute_order(self):
        feature = Feature("c", "s", "t", 1, 2, attributes={"z": "1", "a": "2", "m": "3"})
        assert list(feature.attributes) == ["z", "a", "m"]

    def test_equality_and_hash(self):
        first = Feature("c", "s", "t", 1, 2, attributes={"ID": "x"})
        second = Feature("c", "s", "t", 1, 2, attributes={"ID": ("x",)})
        assert first == second
        assert hash(first) == hash(second)
        assert first != Feature("c", "s", "t", 1, 2, attributes={"ID": "y"})

    @pytest.mark.parametrize("start, end", [(0, 5), (10, 9)])
    def test_invalid_coordinates(self, start, end):
        with pytest.raises(ValueError):
            Feature("c", "s", "t", start, end)

    def test_invalid_phase(self):
        with pytest.raises(ValueError, match="phase"):
            Feature("c", "s", "CDS", 1, 3, phase=3)

    def test_invalid_strand(self):
        with pytest.raises(ValueError):
            Feature("c", "s", "t", 1, 3, strand="x")

    def test_empty_attribute_values(self):
        with pytest.raises(ValueError, match="has no values"):
            Feature("c", "s", "t", 1, 3, attributes={"ID": []})

    def test_empty_type(self):
        with pytest.raises(ValueError, match="type"):
            Feature("c", "s", "", 1, 3)


class TestMetadataEvent:

    def test_name_and_value(self):
        event = MetadataEvent("sequence-region  chr1 1 500")
        assert event.name == "sequence-region"
        assert event.value == "chr1 1 500"
        assert str(event) == "##sequence-region  chr1 1 500"

    def test_bare_directive(self):
        event = MetadataEvent("#")
        assert event.name == "#"
        assert event.value == ""

    @pytest.mark.parametrize("text", ["gff-version 3\n##x", "a\rb"])
    def test_rejects_line_breaks(self, text):
        with pytest.raises(ValueError, match="line breaks"):
            MetadataEvent(text)

    def test_line_not_compared(self):
        assert MetadataEvent("gff-version 3", line=1) == MetadataEvent("gff-version 3")
