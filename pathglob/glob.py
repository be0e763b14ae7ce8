"""Unix/Ruby-style glob patterns compiled for matching store paths.

Glob notation:
- `?` matches a single char in a single path component
- `*` matches zero or more chars in a single path component
- `**` matches zero or more chars in zero or more components
- `|` separates alternate paths
- any other sequence matches itself
"""

import re
from dataclasses import dataclass, field
from typing import Any

import re2

SEPARATOR = "/"
ALTERNATION = "|"

ONE_CHAR = f"[^{SEPARATOR}]"
ANY_IN_COMPONENT = f"[^{SEPARATOR}]*"
ANY_ACROSS_COMPONENTS = ".*"

# A segment is a separator followed by literals and wildcards; only the
# separator and the alternation bar are excluded.
_SEGMENT = f"{re.escape(SEPARATOR)}[^{re.escape(SEPARATOR + ALTERNATION)}]+"
_PATH = f"(?:{_SEGMENT})+"
GLOB_RE = re.compile(f"{re.escape(SEPARATOR)}|{_PATH}(?:{re.escape(ALTERNATION)}{_PATH})*")


class GlobError(ValueError):
    """Raised when a string is not a valid glob pattern."""

    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f"invalid glob pattern: {pattern}")


def translate_glob(pattern: str) -> str:
    """Translate a glob pattern into an anchored regular expression.

    Raises:
        GlobError: If the pattern is not of the form `/seg[/seg...][|/seg...]`
    """
    if not GLOB_RE.fullmatch(pattern):
        raise GlobError(pattern)

    tokens: list[str] = []
    group = False
    double = False
    for c in pattern:
        if c == "*":
            if double:
                # Second star of `**`: widen the token emitted for the first
                tokens[-1] = ANY_ACROSS_COMPONENTS
            else:
                tokens.append(ANY_IN_COMPONENT)
            double = not double
            continue

        double = False
        if c == ALTERNATION:
            group = True
            tokens.append(ALTERNATION)
        elif c == "?":
            tokens.append(ONE_CHAR)
        elif c == SEPARATOR:
            tokens.append(SEPARATOR)
        else:
            tokens.append(re.escape(c))

    expression = "".join(tokens)
    if group:
        # Without the group, `^` and `$` would bind to the first and last
        # alternatives only
        expression = f"({expression})"

    return f"^{expression}$"


@dataclass(frozen=True)
class Glob:
    """A glob pattern in compiled form for efficient matching against paths."""

    pattern: str
    expression: str = field(compare=False, repr=False)
    regex: Any = field(compare=False, repr=False)

    def match(self, path: str) -> bool:
        """Check if the whole of path matches the pattern."""
        return self.regex.fullmatch(path) is not None

    def __str__(self) -> str:
        return self.pattern


def compile_glob(pattern: str) -> Glob:
    """Translate pattern into a form convenient for matching against paths.

    Raises:
        GlobError: If the pattern is invalid
    """
    expression = translate_glob(pattern)
    try:
        # RE2 matches in linear time; (?s) lets `**` cross newlines too
        regex = re2.compile(f"(?s){expression}")
    except re2.error as e:
        raise GlobError(pattern) from e

    return Glob(pattern, expression, regex)


def must_compile_glob(pattern: str) -> Glob:
    """Like compile_glob, but an invalid pattern is a programming error.

    Meant for module-level constants only; never pass it runtime input.

    Raises:
        RuntimeError: If the pattern is invalid
    """
    try:
        return compile_glob(pattern)
    except GlobError as e:
        raise RuntimeError(str(e)) from e
