"""Error types collected by the finder.

Errors are never raised across the public finder API. Setup errors are
recorded while a Finder is being assembled, traversal errors while it
walks; both are handed back to the caller as plain values.
"""

from collections.abc import Sequence


class FinderError(Exception):
    """Base class for errors reported by a Finder."""


class SetupError(FinderError):
    """A pattern could not be compiled while assembling a Finder.

    Attributes:
        pattern: The pattern text as given by the caller.
        kind: Pattern flavour ("glob" or "regex").
        reason: Message from the pattern compiler.
    """

    def __init__(self, pattern: str, kind: str, reason: str) -> None:
        self.pattern = pattern
        self.kind = kind
        self.reason = reason
        super().__init__(f"error parsing {kind} {_quote(pattern)}: {reason}")


class TraversalError(FinderError):
    """The walk reported an I/O failure for a path.

    Attributes:
        path: Path that could not be read.
        cause: The underlying OSError.
    """

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"error walking {path}: {reason}")


def format_errors(errors: Sequence[FinderError]) -> str:
    """Render errors as a numbered list, one per line.

    Returns an empty string for an empty sequence.
    """
    return "".join(f"{i}. {err}\n" for i, err in enumerate(errors, start=1))


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
