"""Turn a SearchProfile into a configured Finder."""

from collections.abc import Sequence

from treesift.finder import Finder
from treesift.profiles.models import SearchProfile


def build_finder(profile: SearchProfile, roots: Sequence[str] | None = None) -> Finder:
    """Configure a Finder from a profile.

    Args:
        profile: Filters to apply.
        roots: Directories to search. Defaults to the profile's roots,
            or the current directory if the profile has none.

    Returns:
        Finder ready to run. Malformed patterns are reported through
        ``Finder.setup_errors``, not raised.
    """
    search_roots = list(roots) if roots else (profile.roots or ["."])
    finder = Finder().in_(*search_roots).types(profile.entry_type)

    for pattern in profile.paths:
        finder.path(pattern)
    for pattern in profile.not_paths:
        finder.not_path(pattern)
    for pattern in profile.names:
        finder.name(pattern)
    for pattern in profile.not_names:
        finder.not_name(pattern)
    for pattern in profile.name_regexes:
        finder.name_regex(pattern)
    for pattern in profile.not_name_regexes:
        finder.not_name_regex(pattern)

    if profile.ignore_vcs:
        finder.ignore_vcs()
    if profile.ignore_dots:
        finder.ignore_dots()

    if profile.min_depth is not None or profile.max_depth is not None:
        # -1 is below any minimum, leaving the range unbounded above
        finder.depth(profile.min_depth or 0, -1 if profile.max_depth is None else profile.max_depth)
    if profile.min_size is not None or profile.max_size is not None:
        finder.size(profile.min_size or 0, -1 if profile.max_size is None else profile.max_size)

    return finder
