"""Tests for CodecOptions."""

import pytest

from genoio.config import Alphabet, CodecOptions, resolve_options


class TestCodecOptions:
    """CodecOptions unit tests."""

    def test_defaults(self):
        options = CodecOptions()
        assert options.alphabet is Alphabet.DNA
        assert options.strict is True
        assert options.line_width == 70
        assert options.uppercase is False

    def test_alphabet_from_string(self):
        assert CodecOptions(alphabet="rna").alphabet is Alphabet.RNA
        assert CodecOptions(alphabet="Protein").alphabet is Alphabet.PROTEIN

    def test_unknown_alphabet(self):
        with pytest.raises(ValueError, match="Unknown alphabet"):
            CodecOptions(alphabet="morse")

    @pytest.mark.parametrize("width", [0, -5])
    def test_non_positive_line_width(self, width):
        with pytest.raises(ValueError, match="line_width must be positive"):
            CodecOptions(line_width=width)

    def test_from_mapping(self):
        options = CodecOptions.from_mapping({"alphabet": "Protein", "strict": False})
        assert options.alphabet is Alphabet.PROTEIN
        assert options.strict is False

    def test_from_mapping_rejects_unknown_keys(self):
        with pytest.raises(ValueError, match="Unknown codec options: colour"):
            CodecOptions.from_mapping({"colour": "blue"})

    def test_as_dict_round_trip(self):
        options = CodecOptions(alphabet=Alphabet.RNA, line_width=60)
        assert CodecOptions.from_mapping(options.as_dict()) == options

    def test_resolve_options(self):
        options = CodecOptions(line_width=10)
        assert resolve_options(None) == CodecOptions()
        assert resolve_options(options) is options
        assert resolve_options({"line_width": 10}) == options
