from wordpieces.vocab import (
    MISSING,
    Piece,
    Vocabulary,
    add_continuation_markers,
    render_sentence,
    render_word,
)


class TestContinuationMarkers:
    """Test add_continuation_markers."""

    def test_first_piece_unmarked(self):
        result = list(add_continuation_markers([Piece("un"), Piece("work"), Piece("able")], "##"))
        assert result == ["un", "##work", "##able"]

    def test_missing_becomes_none(self):
        assert list(add_continuation_markers([Piece("un"), MISSING], "##")) == ["un", None]
        assert list(add_continuation_markers([MISSING], "##")) == [None]

    def test_custom_marker(self):
        assert list(add_continuation_markers([Piece("a"), Piece("b")], "@@")) == ["a", "@@b"]

    def test_empty(self):
        assert list(add_continuation_markers([], "##")) == []


class TestRenderWord:
    """Test render_word."""

    def test_known_word(self):
        vocab = Vocabulary.build(["d", "o", "g", "s"])
        assert render_word(vocab.split("dogs")) == ["d", "##o", "##g", "##s"]

    def test_fully_unknown_word(self):
        vocab = Vocabulary.build(["cat"])
        assert render_word(vocab.split("dog")) == ["[UNK]"]

    def test_suffix_unknown_discards_prefix(self):
        vocab = Vocabulary.build(["un", "##able"])
        assert render_word(vocab.split("unworkable")) == ["[UNK]"]

    def test_custom_unknown_token(self):
        assert render_word([MISSING], unknown_token="<unk>") == ["<unk>"]

    def test_empty_word(self):
        assert render_word([]) == []


class TestRenderSentence:
    """Test render_sentence."""

    def test_sentence(self):
        vocab = Vocabulary.build(["the", "cat", "s", "purr"])
        line = render_sentence(vocab, ["the", "cats", "purred"])
        assert line == "the cat ##s [UNK]"

    def test_empty_sentence(self):
        assert render_sentence(Vocabulary.build(["a"]), []) == ""
