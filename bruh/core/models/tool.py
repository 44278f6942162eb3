"""
Tool descriptor and scan options — the declarative side of scanning.

A ToolDescriptor says how to find, invoke and judge one external
analysis tool. Descriptors are frozen: the catalog is built once at
startup and never mutated. ScanOptions is the flat set of switches
a single ``bruh scan`` invocation runs with.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Category = Literal["secrets", "security", "static", "vulns"]
Outcome = Literal["clean", "issues", "error"]

CATEGORIES: tuple[Category, ...] = ("secrets", "security", "static", "vulns")

ECOSYSTEMS: tuple[str, ...] = ("go", "javascript", "typescript", "python", "java", "rust")

# Short names accepted by ``--language``
ECOSYSTEM_ALIASES: dict[str, str] = {
    "golang": "go",
    "js": "javascript",
    "node": "javascript",
    "ts": "typescript",
    "py": "python",
    "rs": "rust",
}


class ExitPolicy(BaseModel):
    """How a tool's exit code maps to Clean / IssuesFound / ExecutionError."""

    model_config = ConfigDict(frozen=True)

    issue_codes: frozenset[int] = frozenset({1})
    issue_range: tuple[int, int] | None = None   # inclusive
    any_nonzero_is_issue: bool = False
    output_is_issue: bool = False                # exit 0 + output = issues

    def classify(self, exit_code: int, output: str = "") -> Outcome:
        """Classify a finished run."""
        if exit_code == 0:
            if self.output_is_issue and output.strip():
                return "issues"
            return "clean"

        if self.any_nonzero_is_issue or exit_code in self.issue_codes:
            return "issues"

        if self.issue_range is not None:
            low, high = self.issue_range
            if low <= exit_code <= high:
                return "issues"

        return "error"


class ToolDescriptor(BaseModel):
    """Static metadata for one external analysis tool."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    category: Category
    ecosystems: tuple[str, ...] = ()      # empty = ecosystem-independent
    executable: str
    check_executable: str | None = None   # defaults to ``executable``
    args: tuple[str, ...] = ()
    verbose_args: tuple[str, ...] = ()
    quiet_args: tuple[str, ...] = ()
    prepend_verbose: bool = False
    policy: ExitPolicy = Field(default_factory=ExitPolicy)
    install_hint: tuple[str, ...] = ()

    @property
    def availability_executable(self) -> str:
        """Program whose presence on PATH makes the tool available."""
        return self.check_executable or self.executable

    @property
    def ecosystem_independent(self) -> bool:
        return not self.ecosystems

    def command(self, verbose: bool = False) -> list[str]:
        """Full argument vector for one run."""
        if verbose and self.prepend_verbose:
            return [self.executable, *self.verbose_args, *self.args]
        extra = self.verbose_args if verbose else self.quiet_args
        return [self.executable, *self.args, *extra]

    def serves(self, ecosystem: str) -> bool:
        return ecosystem in self.ecosystems


class ScanOptions(BaseModel):
    """Run configuration for one scan — read once from flags."""

    model_config = ConfigDict(frozen=True)

    secrets: bool = True
    security: bool = True
    static: bool = True
    vulns: bool = True
    verbose: bool = False
    language: str | None = None

    @property
    def categories(self) -> tuple[Category, ...]:
        """Enabled categories in canonical order."""
        return tuple(c for c in CATEGORIES if getattr(self, c))

    @property
    def any_selected(self) -> bool:
        return bool(self.categories)

    @classmethod
    def from_flags(
        cls,
        *,
        secrets: bool | None = None,
        security: bool | None = None,
        static: bool | None = None,
        vulns: bool | None = None,
        all_scans: bool = False,
        verbose: bool = False,
        language: str | None = None,
    ) -> ScanOptions:
        """Resolve tri-state category flags into a concrete selection.

        ``None`` means "not given on the command line".

        - ``all_scans`` turns every category on.
        - If any category was explicitly switched on, only the explicitly
          enabled ones run (``bruh scan --static`` = static only).
        - Otherwise everything runs except what was switched off.
        """
        flags = {"secrets": secrets, "security": security, "static": static, "vulns": vulns}

        if all_scans:
            selected = {name: True for name in flags}
        elif any(value is True for value in flags.values()):
            selected = {name: value is True for name, value in flags.items()}
        else:
            selected = {name: value is not False for name, value in flags.items()}

        return cls(verbose=verbose, language=language or None, **selected)
