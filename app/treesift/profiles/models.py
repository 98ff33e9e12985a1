"""Pydantic models for saved search profiles.

A profile captures the filters of a search so it can be stored in
profiles.toml and replayed from the command line.
"""

from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from treesift.finder.models import EntryType


class SearchProfile(BaseModel):
    """Filters for one search.

    Attributes:
        roots: Directories to search.
        names: Glob patterns the base name must match (any).
        not_names: Glob patterns the base name must not match.
        name_regexes: Regular expressions the base name must match (any).
        not_name_regexes: Regular expressions the base name must not match.
        paths: Glob patterns for directories to search beneath.
        not_paths: Glob patterns for directories to skip.
        entry_type: Return files, directories or both.
        min_depth: Minimum depth below the root (1 = direct children).
        max_depth: Maximum depth below the root.
        min_size: Minimum size in bytes.
        max_size: Maximum size in bytes.
        ignore_vcs: Skip version control directories.
        ignore_dots: Skip entries whose name starts with a dot.
    """

    model_config = ConfigDict(extra="forbid")

    roots: Annotated[list[str], Field(default_factory=list, description="Search roots")]
    names: Annotated[list[str], Field(default_factory=list, description="Name globs")]
    not_names: Annotated[list[str], Field(default_factory=list, description="Excluded name globs")]
    name_regexes: Annotated[list[str], Field(default_factory=list, description="Name regexes")]
    not_name_regexes: Annotated[
        list[str],
        Field(default_factory=list, description="Excluded name regexes"),
    ]
    paths: Annotated[list[str], Field(default_factory=list, description="Path globs")]
    not_paths: Annotated[list[str], Field(default_factory=list, description="Excluded path globs")]
    entry_type: Annotated[EntryType, Field(description="Entry kinds to return")] = EntryType.ALL
    min_depth: Annotated[int | None, Field(ge=0, description="Minimum depth")] = None
    max_depth: Annotated[int | None, Field(ge=0, description="Maximum depth")] = None
    min_size: Annotated[int | None, Field(ge=0, description="Minimum size in bytes")] = None
    max_size: Annotated[int | None, Field(ge=0, description="Maximum size in bytes")] = None
    ignore_vcs: Annotated[bool, Field(description="Skip VCS directories")] = False
    ignore_dots: Annotated[bool, Field(description="Skip dot entries")] = False

    @model_validator(mode="after")
    def validate_ranges(self) -> Self:
        """Validate that range maximums are not below their minimums."""
        if self.min_depth is not None and self.max_depth is not None:
            if self.max_depth < self.min_depth:
                msg = f"max_depth ({self.max_depth}) is lower than min_depth ({self.min_depth})"
                raise ValueError(msg)
        if self.min_size is not None and self.max_size is not None:
            if self.max_size < self.min_size:
                msg = f"max_size ({self.max_size}) is lower than min_size ({self.min_size})"
                raise ValueError(msg)
        return self

    def extend(self, other: "SearchProfile") -> "SearchProfile":
        """Combine with another profile.

        Only fields explicitly set on ``other`` take part. Pattern lists are
        concatenated (self first), roots replace ours, and scalar settings
        win even when they equal the defaults.

        Returns:
            New validated SearchProfile.
        """
        data = self.model_dump()
        for key, value in other.model_dump(exclude_unset=True).items():
            if key == "roots":
                data[key] = list(value)
            elif isinstance(value, list):
                data[key] = [*data[key], *value]
            else:
                data[key] = value
        return SearchProfile.model_validate(data)


class ProfileFile(BaseModel):
    """Contents of profiles.toml.

    Attributes:
        profiles: Saved profiles keyed by name.
    """

    model_config = ConfigDict(extra="forbid")

    profiles: Annotated[
        dict[str, SearchProfile],
        Field(default_factory=dict, description="Saved profiles by name"),
    ]
