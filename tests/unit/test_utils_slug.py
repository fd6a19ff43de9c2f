"""Unit tests for slug utilities."""

import pytest

from src.utils.slug import find_slug_collisions, generate_slug, slug_matches


class TestGenerateSlug:
    """Test generate_slug function."""

    def test_basic_slug_generation(self) -> None:
        """Test basic slug generation."""
        assert generate_slug("Hello World") == "hello-world"
        assert generate_slug("Wedding Day") == "wedding-day"

    def test_slug_with_special_characters(self) -> None:
        """Test punctuation is dropped rather than replaced."""
        assert generate_slug("Acme & Co.") == "acme-co"
        assert generate_slug("Jane's Studio!!") == "janes-studio"
        assert generate_slug("Test (2024) - Part 1") == "test-2024-part-1"

    def test_slug_collapses_whitespace_and_hyphens(self) -> None:
        """Test runs of whitespace and hyphens collapse to one hyphen."""
        assert generate_slug("  Multiple   Spaces -- here ") == "multiple-spaces-here"
        assert generate_slug("tab\tand\nnewline") == "tab-and-newline"
        assert generate_slug("a - - b") == "a-b"

    def test_slug_trims_edge_hyphens(self) -> None:
        """Test leading and trailing hyphens are removed."""
        assert generate_slug("--Edge--") == "edge"
        assert generate_slug("! Start and end !") == "start-and-end"

    def test_slug_keeps_underscores_and_digits(self) -> None:
        """Test word characters survive."""
        assert generate_slug("Studio_2 Shoot") == "studio_2-shoot"

    def test_slug_with_unicode(self) -> None:
        """Test unicode letters are retained, not transliterated."""
        assert generate_slug("Café Portraits") == "café-portraits"

    @pytest.mark.parametrize("text", ["", None])
    def test_slug_empty_input(self, text: str | None) -> None:
        """Test empty input yields an empty slug."""
        assert generate_slug(text) == ""

    def test_slug_only_special_chars(self) -> None:
        """Test input with nothing usable yields an empty slug."""
        assert generate_slug("!!!???") == ""
        assert generate_slug("   ") == ""
        assert generate_slug("- - -") == ""

    @pytest.mark.parametrize(
        "text",
        ["Acme & Co.", "  Multiple   Spaces -- here ", "Café Portraits", "--Edge--", "a_b c"],
    )
    def test_slug_is_idempotent(self, text: str) -> None:
        """Test slugging a slug changes nothing."""
        slug = generate_slug(text)
        assert generate_slug(slug) == slug

    @pytest.mark.parametrize("text", ["Acme & Co.", "  x  ", "Wedding -- Day", "__init__"])
    def test_slug_shape(self, text: str) -> None:
        """Test output has no whitespace, no doubled or edge hyphens, and no uppercase."""
        slug = generate_slug(text)
        assert slug == slug.lower()
        assert not any(ch.isspace() for ch in slug)
        assert "--" not in slug
        assert not slug.startswith("-")
        assert not slug.endswith("-")


class TestSlugMatches:
    """Test slug_matches function."""

    def test_matches_plain_param(self) -> None:
        """Test a plain slug parameter matches."""
        assert slug_matches("Acme & Co.", "acme-co") is True

    def test_matches_percent_encoded_param(self) -> None:
        """Test an encoded parameter is decoded before comparison."""
        assert slug_matches("Café Portraits", "caf%C3%A9-portraits") is True

    def test_mismatch(self) -> None:
        """Test a different slug does not match."""
        assert slug_matches("Acme & Co.", "acme") is False

    def test_empty_name_never_matches(self) -> None:
        """Test names without a usable slug never match, even an empty param."""
        assert slug_matches(None, "") is False
        assert slug_matches("!!!", "") is False


class TestFindSlugCollisions:
    """Test find_slug_collisions function."""

    def test_reports_colliding_names(self) -> None:
        """Test names normalising to one slug are grouped in input order."""
        collisions = find_slug_collisions(["Acme & Co.", "Other", "Acme Co"])
        assert collisions == {"acme-co": ["Acme & Co.", "Acme Co"]}

    def test_no_collisions(self) -> None:
        """Test distinct names produce no groups."""
        assert find_slug_collisions(["One", "Two", None, ""]) == {}
