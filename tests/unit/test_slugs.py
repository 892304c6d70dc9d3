"""Tests for slug helpers."""

import re

import pytest

from psynverse.utils import sanitize_slug

CANONICAL_SLUG = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")


class TestSanitizeSlug:
    """Tests for sanitize_slug function."""

    def test_title_becomes_hyphenated_lowercase(self):
        """Test that a plain title turns into a lowercase hyphenated slug."""
        assert sanitize_slug("My First Post") == "my-first-post"

    def test_punctuation_removed(self):
        """Test that characters outside letters, digits, spaces and hyphens are dropped."""
        assert sanitize_slug("Hello, World! (2024)") == "hello-world-2024"
        assert sanitize_slug("What's new?") == "whats-new"

    def test_whitespace_runs_collapse(self):
        """Test that runs of whitespace become a single hyphen."""
        assert sanitize_slug("a   b\t\tc\nd") == "a-b-c-d"

    def test_hyphen_runs_collapse(self):
        """Test that repeated hyphens collapse into one."""
        assert sanitize_slug("a---b - - c") == "a-b-c"

    def test_leading_and_trailing_hyphens_trimmed(self):
        """Test that hyphens at the ends are removed."""
        assert sanitize_slug("--draft--") == "draft"
        assert sanitize_slug("  - spaced -  ") == "spaced"

    def test_non_ascii_letters_dropped(self):
        """Test that letters outside a-z are removed rather than transliterated."""
        assert sanitize_slug("Café Über") == "caf-ber"

    @pytest.mark.parametrize("value", ["", "   ", "!!!", "---", "¿¡", "日本語"])
    def test_unusable_input_gives_empty_slug(self, value):
        """Test that input without usable characters yields an empty slug."""
        assert sanitize_slug(value) == ""

    @pytest.mark.parametrize(
        "value",
        ["My First Post", "  --Hello,  World--  ", "a - b", "ALL CAPS 123", "x\t-\ty", "already-a-slug", "¿Qué?"],
    )
    def test_idempotent(self, value):
        """Test that sanitizing twice changes nothing."""
        once = sanitize_slug(value)
        assert sanitize_slug(once) == once

    @pytest.mark.parametrize("value", ["My First Post", "a---b", " Trim me! ", "2024 recap"])
    def test_non_empty_result_is_canonical(self, value):
        """Test that every non-empty result is lowercase words joined by single hyphens."""
        assert CANONICAL_SLUG.fullmatch(sanitize_slug(value))

