"""Tests for the character-level text diff."""

from richdelta import DiffTag, diff_text


def _replay(pristine: str, spans: list[tuple[DiffTag, str]]) -> str:
    out = []
    pos = 0
    for tag, text in spans:
        if tag is DiffTag.EQUAL:
            assert pristine[pos : pos + len(text)] == text
            out.append(text)
            pos += len(text)
        elif tag is DiffTag.DELETE:
            assert pristine[pos : pos + len(text)] == text
            pos += len(text)
        else:
            out.append(text)
    assert pos == len(pristine)
    return "".join(out)


class TestDiffText:
    """Tests for diff_text."""

    def test_identical_strings(self) -> None:
        """Identical strings are one equal span."""
        assert diff_text("Hello", "Hello") == [(DiffTag.EQUAL, "Hello")]

    def test_empty_strings(self) -> None:
        assert diff_text("", "") == []

    def test_append(self) -> None:
        assert diff_text("A", "AB") == [(DiffTag.EQUAL, "A"), (DiffTag.INSERT, "B")]

    def test_removal(self) -> None:
        assert diff_text("AB", "A") == [(DiffTag.EQUAL, "A"), (DiffTag.DELETE, "B")]

    def test_replace_is_delete_then_insert(self) -> None:
        """A replaced region becomes DELETE followed by INSERT."""
        assert diff_text("cat", "cut") == [
            (DiffTag.EQUAL, "c"),
            (DiffTag.DELETE, "a"),
            (DiffTag.INSERT, "u"),
            (DiffTag.EQUAL, "t"),
        ]

    def test_spans_reconstruct_current(self) -> None:
        """Replaying the spans over pristine yields current."""
        pristine = "The quick brown fox jumps over the lazy dog"
        current = "A quick red fox leapt over the dog!"
        assert _replay(pristine, diff_text(pristine, current)) == current
