"""Channel for recoverable problems found while generating declarations."""

import logging
from collections import Counter
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DUPLICATE_CLASS = "duplicate-class"
DUPLICATE_MEMBER = "duplicate-member"
UNKNOWN_CLASS = "unknown-class"
UNRESOLVED_EXTENDS = "unresolved-extends"
UNRESOLVED_MIXIN = "unresolved-mixin"
CYCLIC_MIXIN = "cyclic-mixin"
DEPRECATED_MEMBER = "deprecated-member"
PRIVATE_OVERRIDE = "private-override"
UNPARSEABLE_TYPE = "unparseable-type"


@dataclass(frozen=True)
class Diagnostic:
    """A single reported, non-fatal condition."""

    code: str
    message: str
    subject: str = ""


@dataclass
class Diagnostics:
    """Collects diagnostics for one run and mirrors them to the log."""

    entries: list[Diagnostic] = field(default_factory=list)

    def warn(self, code: str, message: str, subject: str = "") -> Diagnostic:
        """Record a diagnostic and log it at WARNING level."""
        diagnostic = Diagnostic(code=code, message=message, subject=subject)
        self.entries.append(diagnostic)
        logger.warning("[%s] %s", code, message)
        return diagnostic

    def by_code(self, code: str) -> list[Diagnostic]:
        """Return the diagnostics recorded under a code, in report order."""
        return [d for d in self.entries if d.code == code]

    def counts(self) -> dict[str, int]:
        """Count diagnostics per code."""
        return dict(Counter(d.code for d in self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)
