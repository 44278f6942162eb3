"""
Scan tool catalog — every external analysis tool bruh knows about.

One entry per tool; the generic runner does the rest.  Entry order
is run order within an ecosystem.  Exit-code policies follow each
tool's documented convention:

    gitleaks 1 · gosec 1 · staticcheck 1 · govulncheck 3 · eslint 1
    npm audit 1 · bandit 1 · pylint 1-32 (bit flags) · safety 64
    spotbugs 1 · pmd 4 · cargo clippy 101 · cargo audit 1
"""

from __future__ import annotations

from functools import cache

from bruh.core.models.tool import ToolDescriptor

_JS = ["javascript", "typescript"]


_SCAN_TOOLS: dict[str, dict] = {
    # Ecosystem-independent
    "gitleaks": {
        "label": "gitleaks",
        "category": "secrets",
        "ecosystems": [],
        "executable": "gitleaks",
        "args": ["detect"],
        "verbose_args": ["--verbose"],
        "install_hint": [
            "brew install gitleaks",
            "or visit: https://github.com/gitleaks/gitleaks",
        ],
    },
    # Go
    "go-vet": {
        "label": "go vet",
        "category": "static",
        "ecosystems": ["go"],
        "executable": "go",
        "args": ["vet", "./..."],
        "policy": {"any_nonzero_is_issue": True},
        "install_hint": ["https://go.dev/doc/install"],
    },
    "staticcheck": {
        "label": "staticcheck",
        "category": "static",
        "ecosystems": ["go"],
        "executable": "staticcheck",
        "args": ["./..."],
        "policy": {"issue_codes": [1], "output_is_issue": True},
        "install_hint": ["go install honnef.co/go/tools/cmd/staticcheck@latest"],
    },
    "gosec": {
        "label": "gosec",
        "category": "security",
        "ecosystems": ["go"],
        "executable": "gosec",
        "args": ["./..."],
        "verbose_args": ["-verbose"],
        "prepend_verbose": True,
        "install_hint": ["go install github.com/securecodewarrior/gosec/v2/cmd/gosec@latest"],
    },
    "govulncheck": {
        "label": "govulncheck",
        "category": "vulns",
        "ecosystems": ["go"],
        "executable": "govulncheck",
        "args": ["./..."],
        "policy": {"issue_codes": [3]},
        "install_hint": ["go install golang.org/x/vuln/cmd/govulncheck@latest"],
    },
    # JavaScript / TypeScript
    "eslint": {
        "label": "ESLint",
        "category": "static",
        "ecosystems": _JS,
        "executable": "eslint",
        "args": [".", "--ext", ".js,.jsx,.ts,.tsx"],
        "quiet_args": ["--quiet"],
        "install_hint": ["npm install -g eslint"],
    },
    "npm-audit": {
        "label": "NPM audit",
        "category": "vulns",
        "ecosystems": _JS,
        "executable": "npm",
        "args": ["audit"],
        "quiet_args": ["--audit-level", "moderate"],
        "install_hint": ["https://nodejs.org/"],
    },
    # Python
    "bandit": {
        "label": "Bandit",
        "category": "security",
        "ecosystems": ["python"],
        "executable": "bandit",
        "args": ["-r", "."],
        "quiet_args": ["-q"],
        "install_hint": ["pip install bandit"],
    },
    "pylint": {
        "label": "Pylint",
        "category": "static",
        "ecosystems": ["python"],
        "executable": "pylint",
        "args": ["--recursive=y", "."],
        "quiet_args": ["--errors-only"],
        "policy": {"issue_codes": [], "issue_range": [1, 32]},
        "install_hint": ["pip install pylint"],
    },
    "safety": {
        "label": "Safety",
        "category": "vulns",
        "ecosystems": ["python"],
        "executable": "safety",
        "args": ["check"],
        "quiet_args": ["--short-report"],
        "policy": {"issue_codes": [64]},
        "install_hint": ["pip install safety"],
    },
    # Java
    "spotbugs": {
        "label": "SpotBugs",
        "category": "static",
        "ecosystems": ["java"],
        "executable": "spotbugs",
        "args": ["-textui", "."],
        "install_hint": ["https://spotbugs.github.io/"],
    },
    "pmd": {
        "label": "PMD",
        "category": "static",
        "ecosystems": ["java"],
        "executable": "pmd",
        "args": ["check", "-d", ".", "-R", "rulesets/java/quickstart.xml", "-f", "text"],
        "policy": {"issue_codes": [4]},
        "install_hint": ["https://pmd.github.io/"],
    },
    # Rust
    "cargo-clippy": {
        "label": "Cargo clippy",
        "category": "static",
        "ecosystems": ["rust"],
        "executable": "cargo",
        "args": ["clippy", "--", "-D", "warnings"],
        "policy": {"issue_codes": [101]},
        "install_hint": ["https://rustup.rs/"],
    },
    "cargo-audit": {
        "label": "Cargo audit",
        "category": "vulns",
        "ecosystems": ["rust"],
        "executable": "cargo",
        "check_executable": "cargo-audit",
        "args": ["audit"],
        "install_hint": ["cargo install cargo-audit"],
    },
}


@cache
def scan_tool_catalog() -> tuple[ToolDescriptor, ...]:
    """Validated descriptors, in catalog order."""
    return tuple(
        ToolDescriptor.model_validate({"id": tool_id, **spec})
        for tool_id, spec in _SCAN_TOOLS.items()
    )
