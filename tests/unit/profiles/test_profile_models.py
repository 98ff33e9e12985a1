"""Unit tests for SearchProfile and ProfileFile."""

import pytest
from pydantic import ValidationError
from treesift.finder import EntryType
from treesift.profiles import ProfileFile, SearchProfile


class TestSearchProfile:
    """Tests for SearchProfile Pydantic model."""

    def test_default_values(self) -> None:
        """SearchProfile defaults to an unfiltered search."""
        profile = SearchProfile()

        assert profile.roots == []
        assert profile.names == []
        assert profile.entry_type == EntryType.ALL
        assert profile.min_depth is None
        assert profile.max_size is None
        assert profile.ignore_vcs is False
        assert profile.ignore_dots is False

    def test_entry_type_from_string(self) -> None:
        """entry_type accepts its string value."""
        profile = SearchProfile.model_validate({"entry_type": "files"})

        assert profile.entry_type == EntryType.FILES

    def test_rejects_unknown_fields(self) -> None:
        """Unknown keys are an error."""
        with pytest.raises(ValidationError):
            SearchProfile.model_validate({"nmes": ["*.py"]})

    def test_rejects_negative_values(self) -> None:
        """Depth and size bounds cannot be negative."""
        with pytest.raises(ValidationError):
            SearchProfile(min_size=-1)

    def test_rejects_inverted_depth(self) -> None:
        """max_depth below min_depth is rejected."""
        with pytest.raises(ValidationError, match=r"max_depth \(1\) is lower than min_depth \(2\)"):
            SearchProfile(min_depth=2, max_depth=1)

    def test_rejects_inverted_size(self) -> None:
        """max_size below min_size is rejected."""
        with pytest.raises(ValidationError, match="max_size"):
            SearchProfile(min_size=10, max_size=5)

    def test_open_ended_ranges_allowed(self) -> None:
        """Either bound may be omitted."""
        profile = SearchProfile(min_depth=3, max_size=100)

        assert profile.min_depth == 3
        assert profile.max_size == 100


class TestExtend:
    """Tests for SearchProfile.extend."""

    def test_lists_are_concatenated(self) -> None:
        """Pattern lists keep the base entries first."""
        base = SearchProfile(names=["*.py"], not_paths=["build"])
        merged = base.extend(SearchProfile(names=["*.pyi"], not_paths=["dist"]))

        assert merged.names == ["*.py", "*.pyi"]
        assert merged.not_paths == ["build", "dist"]

    def test_roots_are_replaced(self) -> None:
        """Roots from the other profile replace the base roots."""
        base = SearchProfile(roots=["/a"])

        assert base.extend(SearchProfile(roots=["/b"])).roots == ["/b"]
        assert base.extend(SearchProfile()).roots == ["/a"]

    def test_scalars_override_when_set(self) -> None:
        """Non-default scalars win; defaults leave the base untouched."""
        base = SearchProfile(entry_type=EntryType.FILES, ignore_vcs=True, max_depth=2)
        merged = base.extend(SearchProfile(max_depth=5))

        assert merged.entry_type == EntryType.FILES
        assert merged.ignore_vcs is True
        assert merged.max_depth == 5

    def test_explicit_defaults_override(self) -> None:
        """Explicitly set defaults reset the base settings."""
        base = SearchProfile(entry_type=EntryType.FILES, ignore_vcs=True, ignore_dots=True)
        merged = base.extend(SearchProfile(entry_type=EntryType.ALL, ignore_vcs=False))

        assert merged.entry_type == EntryType.ALL
        assert merged.ignore_vcs is False
        assert merged.ignore_dots is True

    def test_does_not_mutate(self) -> None:
        """extend returns a new profile."""
        base = SearchProfile(names=["*.py"])
        base.extend(SearchProfile(names=["*.md"]))

        assert base.names == ["*.py"]

    def test_combined_ranges_are_validated(self) -> None:
        """A combination with an inverted range is rejected."""
        with pytest.raises(ValidationError):
            SearchProfile(min_depth=3).extend(SearchProfile(max_depth=1))


class TestProfileFile:
    """Tests for ProfileFile model."""

    def test_empty(self) -> None:
        """ProfileFile defaults to no profiles."""
        assert ProfileFile().profiles == {}

    def test_nested_validation(self) -> None:
        """Profiles are validated as SearchProfile."""
        data = {"profiles": {"logs": {"names": ["*.log"], "entry_type": "files"}}}
        profiles = ProfileFile.model_validate(data)

        assert profiles.profiles["logs"].names == ["*.log"]
        assert profiles.profiles["logs"].entry_type == EntryType.FILES
