"""
Meal CMS Result Types.

Structured results for schema consistency checks.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SchemaIssue:
    """A single consistency problem found in the registered schemas."""

    code: str
    uid: str
    attribute: str | None
    message: str

    @property
    def path(self) -> str:
        if self.attribute:
            return f"{self.uid}.{self.attribute}"
        return self.uid


@dataclass
class CheckResult:
    """
    Result of SchemaRegistry.check().

    If success=True: every relation and component reference resolves and
    every enumeration is well formed.
    If success=False: issues lists what is wrong.
    """

    issues: list[SchemaIssue] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.issues

    def for_code(self, code: str) -> list[SchemaIssue]:
        return [issue for issue in self.issues if issue.code == code]
