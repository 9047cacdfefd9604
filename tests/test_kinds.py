"""Tests for change kinds — glyphs, colors, native code mapping."""

import pytest

from gitstage.status.kinds import ChangeKind


class TestGlyphs:
    @pytest.mark.parametrize(
        "kind, glyph",
        [
            (ChangeKind.UNMODIFIED, " "),
            (ChangeKind.ADDED, "A"),
            (ChangeKind.DELETED, "D"),
            (ChangeKind.MODIFIED, "M"),
            (ChangeKind.RENAMED, "R"),
            (ChangeKind.COPIED, "C"),
            (ChangeKind.IGNORED, "!"),
            (ChangeKind.UNTRACKED, "U"),
            (ChangeKind.CONFLICTED, "X"),
        ],
    )
    def test_fixed_glyphs(self, kind, glyph):
        assert kind.glyph == glyph

    def test_fallback_glyphs(self):
        assert ChangeKind.TYPE_CHANGED.glyph == "T"
        assert ChangeKind.UNREADABLE.glyph == "?"

    def test_every_kind_has_one_character_glyph(self):
        for kind in ChangeKind:
            assert len(kind.glyph) == 1

    def test_every_kind_has_a_color(self):
        for kind in ChangeKind:
            assert kind.color


class TestFromNative:
    @pytest.mark.parametrize(
        "code, kind",
        [
            (".", ChangeKind.UNMODIFIED),
            ("A", ChangeKind.ADDED),
            ("D", ChangeKind.DELETED),
            ("M", ChangeKind.MODIFIED),
            ("R", ChangeKind.RENAMED),
            ("C", ChangeKind.COPIED),
            ("T", ChangeKind.TYPE_CHANGED),
            ("?", ChangeKind.UNTRACKED),
            ("!", ChangeKind.IGNORED),
            ("U", ChangeKind.CONFLICTED),
        ],
    )
    def test_known_codes(self, code, kind):
        assert ChangeKind.from_native(code) is kind

    @pytest.mark.parametrize("code", ["Z", "", "MM", "added"])
    def test_unknown_codes_are_unreadable(self, code):
        assert ChangeKind.from_native(code) is ChangeKind.UNREADABLE
