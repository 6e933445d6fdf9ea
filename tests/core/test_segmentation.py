"""
Tests for greedy longest-match segmentation in wordpieces.vocab.core.

Covers:
- Empty forms and empty vocabularies
- Longest-match selection
- The three segmentation shapes
- Truncation at the first failure
- Laziness and idempotence
"""

import pytest

from wordpieces.vocab import (
    MISSING,
    Missing,
    Piece,
    SegmentationShape,
    Vocabulary,
    segmentation_shape,
    split_word,
)


def pieces(vocab, form):
    return list(vocab.split(form))


class TestSplitWord:
    """Test split_word and Vocabulary.split."""

    def test_empty_form_yields_nothing(self):
        assert pieces(Vocabulary.build(["a"]), "") == []
        assert pieces(Vocabulary.build([]), "") == []

    def test_empty_vocabulary_is_fully_unknown(self):
        assert pieces(Vocabulary.build([]), "word") == [MISSING]

    def test_longest_match_wins(self):
        vocab = Vocabulary.build(["a", "ab"])
        assert pieces(vocab, "ab") == [Piece("ab")]

    def test_longest_match_independent_of_vocabulary_order(self):
        assert pieces(Vocabulary.build(["ab", "a", "b"]), "abab") == [Piece("ab"), Piece("ab")]
        assert pieces(Vocabulary.build(["b", "a", "ab"]), "abab") == [Piece("ab"), Piece("ab")]

    def test_greedy_is_not_globally_optimal(self):
        # "ab" + "cd" would cover the form, but the longer "abc" is taken first
        vocab = Vocabulary.build(["ab", "abc", "cd"])
        assert pieces(vocab, "abcd") == [Piece("abc"), MISSING]

    def test_fully_known(self):
        vocab = Vocabulary.build(["un", "work", "able"])
        assert pieces(vocab, "unworkable") == [Piece("un"), Piece("work"), Piece("able")]

    def test_fully_unknown(self):
        vocab = Vocabulary.build(["cat"])
        assert pieces(vocab, "dog") == [MISSING]

    def test_suffix_unknown(self):
        # Pieces are stored without continuation markers
        vocab = Vocabulary.build(["un", "##able"])
        assert pieces(vocab, "unworkable") == [Piece("un"), MISSING]

    def test_no_recovery_after_failure(self):
        vocab = Vocabulary.build(["a", "c"])
        assert pieces(vocab, "abc") == [Piece("a"), MISSING]

    def test_single_characters_never_fail(self):
        form = "mississippi"
        vocab = Vocabulary.build(set(form) | {"ss", "issi"})
        result = pieces(vocab, form)

        assert MISSING not in result
        assert "".join(p.text for p in result) == form
        assert result[:3] == [Piece("m"), Piece("issi"), Piece("ss")]

    def test_missing_only_at_end(self):
        vocab = Vocabulary.build(["a", "ab", "bc"])
        for form in ["", "a", "ab", "abc", "abx", "xab", "abcab", "ababx"]:
            result = pieces(vocab, form)
            assert all(not p.is_missing for p in result[:-1]), form
            assert result.count(MISSING) <= 1, form

    def test_case_sensitive(self):
        vocab = Vocabulary.build(["cat"])
        assert pieces(vocab, "Cat") == [MISSING]

    def test_codepoint_granularity(self):
        vocab = Vocabulary.build(["ü", "ber", "中", "文"])
        assert pieces(vocab, "über") == [Piece("ü"), Piece("ber")]
        assert pieces(vocab, "中文") == [Piece("中"), Piece("文")]

    def test_whitespace_is_literal(self):
        vocab = Vocabulary.build(["a b"])
        assert pieces(vocab, "a b") == [Piece("a b")]
        assert pieces(vocab, "ab") == [MISSING]

    def test_split_word_function_matches_method(self):
        vocab = Vocabulary.build(["hel", "lo", "h"])
        assert list(split_word(vocab, "hello")) == pieces(vocab, "hello")

    def test_lazy_generator(self):
        vocab = Vocabulary.build(["a"])
        gen = vocab.split("aaa")

        assert next(gen) == Piece("a")
        assert next(gen) == Piece("a")
        assert next(gen) == Piece("a")
        with pytest.raises(StopIteration):
            next(gen)

    def test_idempotent(self):
        vocab = Vocabulary.build(["wo", "rd", "w", "word"])
        assert pieces(vocab, "wordwox") == pieces(vocab, "wordwox")
        assert pieces(vocab, "wordwox") == [Piece("word"), Piece("wo"), MISSING]


class TestPieceResults:
    """Test the Piece / Missing tagged values."""

    def test_piece_accessors(self):
        p = Piece("ab")
        assert p.piece == "ab"
        assert p.is_missing is False
        assert str(p) == "ab"

    def test_missing_accessors(self):
        assert MISSING.piece is None
        assert MISSING.is_missing is True
        assert Missing() == MISSING

    def test_missing_is_distinct_from_empty_piece(self):
        assert MISSING != Piece("")
        assert MISSING != None  # noqa: E711

    def test_results_are_hashable(self):
        assert len({Piece("a"), Piece("a"), MISSING, Missing()}) == 2


class TestSegmentationShape:
    """Test classification of segmentation results."""

    @pytest.mark.parametrize("form,expected", [
        ("", SegmentationShape.EMPTY),
        ("dog", SegmentationShape.UNKNOWN),
        ("cat", SegmentationShape.KNOWN),
        ("cats", SegmentationShape.KNOWN),
        ("catz", SegmentationShape.SUFFIX_UNKNOWN),
    ])
    def test_shapes(self, form, expected):
        vocab = Vocabulary.build(["cat", "s"])
        assert segmentation_shape(pieces(vocab, form)) is expected
