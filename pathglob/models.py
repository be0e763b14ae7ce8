"""Named sets of compiled glob patterns."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .config import Config
from .glob import Glob, GlobError, compile_glob


@dataclass
class ValidationError:
    """A pattern set validation error."""

    message: str
    fatal: bool = True


def matches_any_glob(path: str, globs: Iterable[Glob]) -> bool:
    """Check if path matches any of the given globs."""
    return any(g.match(path) for g in globs)


def validate_patterns(patterns: Iterable[str]) -> list[str]:
    """Validate patterns and return any errors.

    Rules:
    - No empty patterns
    - Every pattern must compile
    """
    errors: list[str] = []

    for pattern in patterns:
        if not pattern:
            errors.append("Empty pattern not allowed")
            continue

        try:
            compile_glob(pattern)
        except GlobError as e:
            errors.append(str(e))

    return errors


@dataclass
class PatternSet:
    """Compiled globs keyed by name, kept in configuration order."""

    globs: dict[str, Glob] = field(default_factory=dict)
    errors: list[ValidationError] = field(default_factory=list)

    @classmethod
    def from_dict(cls, patterns: dict[str, str], strict: bool = False) -> "PatternSet":
        """Compile each named pattern.

        Invalid patterns are skipped and recorded in `errors`; they are fatal
        in strict mode and warnings otherwise.
        """
        globs: dict[str, Glob] = {}
        errors: list[ValidationError] = []

        for name, pattern in patterns.items():
            if not pattern:
                errors.append(
                    ValidationError(f"Pattern '{name}': Empty pattern not allowed", fatal=strict)
                )
                continue

            try:
                globs[name] = compile_glob(pattern)
            except GlobError as e:
                errors.append(ValidationError(f"Pattern '{name}': {e}", fatal=strict))

        return cls(globs=globs, errors=errors)

    @classmethod
    def from_config(cls, config: Config) -> "PatternSet":
        """Create a PatternSet from a loaded Config."""
        return cls.from_dict(config.patterns, strict=config.strict)

    @property
    def names(self) -> list[str]:
        return list(self.globs)

    @property
    def fatal_errors(self) -> list[ValidationError]:
        return [e for e in self.errors if e.fatal]

    def get(self, name: str) -> Glob | None:
        """Get a glob by name."""
        return self.globs.get(name)

    def matching(self, path: str) -> list[str]:
        """Names of all globs matching path, in configuration order."""
        return [name for name, g in self.globs.items() if g.match(path)]

    def matches_any(self, path: str) -> bool:
        return matches_any_glob(path, self.globs.values())

    def classify(self, paths: Iterable[str]) -> list[tuple[str, list[str]]]:
        """Pair each path, duplicates included, with the names of the globs it matches."""
        return [(path, self.matching(path)) for path in paths]

    def __len__(self) -> int:
        return len(self.globs)

    def __iter__(self) -> Iterator[tuple[str, Glob]]:
        return iter(self.globs.items())
