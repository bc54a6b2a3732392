# backend/modules/sentiment/tests/test_lexicon.py

import pytest

from modules.sentiment.services.lexicon import (
    Lexicon,
    LexiconError,
)
from modules.sentiment.services.stemmer import Stemmer


def write_lexicon(tmp_path, text):
    path = tmp_path / "lexicon.tsv"
    path.write_text(text, encoding="utf-8")
    return path


class TestLexiconEntries:
    """Test cases for building a lexicon from word/weight pairs"""

    def test_keys_are_stemmed(self, stemmer: Stemmer):
        lexicon = Lexicon.from_entries([("loved", 3)], stemmer)

        assert "love" in lexicon
        assert lexicon.lookup("love") == 3
        assert lexicon.lookup("loved") is None

    def test_keys_are_lowercased(self, stemmer: Stemmer):
        lexicon = Lexicon.from_entries([("GREAT", 3)], stemmer)
        assert lexicon.lookup("great") == 3

    def test_strongest_weight_wins_on_collision(self, stemmer: Stemmer):
        lexicon = Lexicon.from_entries([("love", 2), ("loved", -3)], stemmer)
        assert lexicon.lookup("love") == -3

    def test_first_entry_wins_on_tie(self, stemmer: Stemmer):
        lexicon = Lexicon.from_entries([("love", 3), ("loved", -3)], stemmer)
        assert lexicon.lookup("love") == 3

    def test_phrases_and_zero_weights_are_dropped(self, stemmer: Stemmer):
        lexicon = Lexicon.from_entries(
            [("does not work", -3), ("frankly", 0), ("nice", 3)], stemmer
        )
        assert len(lexicon) == 1
        assert list(lexicon) == ["nice"]

    def test_exact_words_are_kept_beside_stems(self, stemmer: Stemmer):
        lexicon = Lexicon.from_entries([("affection", 3), ("affected", -1)], stemmer)

        assert lexicon.lookup("affect") == 3
        assert lexicon.lookup_word("affected") == -1
        assert lexicon.lookup_word("affection") == 3
        assert lexicon.lookup_word("affecting") is None

    def test_out_of_range_weights_are_dropped(self, stemmer: Stemmer):
        lexicon = Lexicon.from_entries(
            [("huge", 9), ("tiny", -6), ("edge", 5), ("floor", -5)], stemmer
        )

        assert sorted(lexicon.words) == ["edge", "floor"]
        assert "huge" not in lexicon
        assert lexicon.lookup_word("tiny") is None

    def test_weights_are_read_only(self, stemmer: Stemmer):
        lexicon = Lexicon.from_entries([("nice", 3)], stemmer)

        with pytest.raises(TypeError):
            lexicon.weights["nice"] = 5


class TestLexiconFile:
    """Test cases for loading AFINN-style files"""

    def test_load_file(self, tmp_path, stemmer: Stemmer):
        path = write_lexicon(
            tmp_path,
            "# comment line\n"
            "\n"
            "excellent\t3\n"
            "terrible\t-3\n",
        )

        lexicon = Lexicon.from_file(path, stemmer)

        assert len(lexicon) == 2
        assert lexicon.lookup(stemmer.stem("excellent")) == 3
        assert lexicon.lookup(stemmer.stem("terrible")) == -3

    def test_bad_lines_are_skipped(self, tmp_path, stemmer: Stemmer):
        """Malformed, non-numeric and out-of-range lines are ignored"""
        path = write_lexicon(
            tmp_path,
            "no tab here\n"
            "nice\tvery\n"
            "huge\t9\n"
            "tiny\t-6\n"
            "good\t3\n",
        )

        lexicon = Lexicon.from_file(path, stemmer)

        assert list(lexicon) == ["good"]

    def test_missing_file(self, tmp_path, stemmer: Stemmer):
        with pytest.raises(LexiconError):
            Lexicon.from_file(tmp_path / "missing.tsv", stemmer)

    def test_default_lexicon_is_afinn(self, stemmer: Stemmer):
        lexicon = Lexicon.load_default(stemmer)

        assert len(lexicon.words) > 2500
        assert lexicon.lookup_word("great") == 3
        assert lexicon.lookup_word("terrible") == -3
        assert lexicon.lookup_word("outstanding") == 5
        assert lexicon.lookup_word("affected") == -1
        assert all(-5 <= w <= 5 and w != 0 for w in lexicon.weights.values())

    def test_default_lexicon_has_no_phrases(self, stemmer: Stemmer):
        lexicon = Lexicon.load_default(stemmer)

        assert not any(" " in word for word in lexicon.words)
