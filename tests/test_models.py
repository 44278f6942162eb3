"""
Tests for domain models — exit policies, tool descriptors, scan options, receipts.
"""

import pytest

from bruh.core.models import (
    BruhConfig,
    ExitPolicy,
    ScanOptions,
    ScanReport,
    ToolDescriptor,
    ToolReceipt,
)
from bruh.core.services.scan_tools import scan_tool_catalog


def _tool(**overrides) -> ToolDescriptor:
    data = {
        "id": "demo",
        "label": "Demo",
        "category": "static",
        "ecosystems": ["python"],
        "executable": "demo",
        "args": ["check", "."],
    }
    data.update(overrides)
    return ToolDescriptor.model_validate(data)


# ── ExitPolicy ───────────────────────────────────────────────────────


class TestExitPolicy:
    def test_zero_is_clean(self):
        assert ExitPolicy().classify(0) == "clean"

    def test_default_issue_code(self):
        assert ExitPolicy().classify(1) == "issues"

    def test_other_nonzero_is_error(self):
        assert ExitPolicy().classify(2) == "error"
        assert ExitPolicy().classify(127) == "error"

    def test_custom_issue_code(self):
        policy = ExitPolicy(issue_codes=frozenset({3}))
        assert policy.classify(3) == "issues"
        assert policy.classify(1) == "error"

    def test_issue_range(self):
        policy = ExitPolicy(issue_codes=frozenset(), issue_range=(1, 32))
        assert policy.classify(1) == "issues"
        assert policy.classify(20) == "issues"
        assert policy.classify(32) == "issues"
        assert policy.classify(33) == "error"

    def test_any_nonzero(self):
        policy = ExitPolicy(any_nonzero_is_issue=True)
        assert policy.classify(2) == "issues"
        assert policy.classify(0) == "clean"

    def test_output_on_success_is_issue(self):
        policy = ExitPolicy(output_is_issue=True)
        assert policy.classify(0, "main.go:3: unused") == "issues"
        assert policy.classify(0, "  \n") == "clean"


# ── ToolDescriptor ───────────────────────────────────────────────────


class TestToolDescriptor:
    def test_quiet_args_appended(self):
        tool = _tool(quiet_args=["-q"], verbose_args=["-v"])
        assert tool.command(verbose=False) == ["demo", "check", ".", "-q"]

    def test_verbose_args_appended(self):
        tool = _tool(quiet_args=["-q"], verbose_args=["-v"])
        assert tool.command(verbose=True) == ["demo", "check", ".", "-v"]

    def test_verbose_args_prepended(self):
        tool = _tool(verbose_args=["-verbose"], prepend_verbose=True)
        assert tool.command(verbose=True) == ["demo", "-verbose", "check", "."]

    def test_availability_executable(self):
        assert _tool().availability_executable == "demo"
        assert _tool(check_executable="demo-plugin").availability_executable == "demo-plugin"

    def test_ecosystem_independent(self):
        assert _tool(ecosystems=[]).ecosystem_independent
        assert not _tool().ecosystem_independent

    def test_frozen(self):
        tool = _tool()
        with pytest.raises(Exception):
            tool.label = "other"


# ── Catalog ──────────────────────────────────────────────────────────


class TestCatalog:
    def _by_id(self):
        return {t.id: t for t in scan_tool_catalog()}

    def test_catalog_order_starts_with_secrets(self):
        catalog = scan_tool_catalog()
        assert catalog[0].id == "gitleaks"
        assert catalog[0].category == "secrets"

    def test_ids_unique(self):
        ids = [t.id for t in scan_tool_catalog()]
        assert len(ids) == len(set(ids))

    def test_documented_issue_codes(self):
        tools = self._by_id()
        assert tools["govulncheck"].policy.classify(3) == "issues"
        assert tools["govulncheck"].policy.classify(1) == "error"
        assert tools["safety"].policy.classify(64) == "issues"
        assert tools["pmd"].policy.classify(4) == "issues"
        assert tools["cargo-clippy"].policy.classify(101) == "issues"
        assert tools["pylint"].policy.classify(16) == "issues"
        assert tools["go-vet"].policy.classify(2) == "issues"

    def test_cargo_audit_checks_plugin(self):
        tool = self._by_id()["cargo-audit"]
        assert tool.availability_executable == "cargo-audit"
        assert tool.command() == ["cargo", "audit"]

    def test_gosec_verbose_prepended(self):
        assert self._by_id()["gosec"].command(verbose=True) == ["gosec", "-verbose", "./..."]

    def test_every_ecosystem_has_tools(self):
        served = {eco for t in scan_tool_catalog() for eco in t.ecosystems}
        assert {"go", "javascript", "typescript", "python", "java", "rust"} <= served


# ── ScanOptions ──────────────────────────────────────────────────────


class TestScanOptions:
    def test_no_flags_runs_everything(self):
        opts = ScanOptions.from_flags()
        assert opts.categories == ("secrets", "security", "static", "vulns")

    def test_explicit_on_selects_only(self):
        opts = ScanOptions.from_flags(static=True)
        assert opts.categories == ("static",)

    def test_explicit_off_removes(self):
        opts = ScanOptions.from_flags(vulns=False)
        assert opts.categories == ("secrets", "security", "static")

    def test_on_wins_over_off(self):
        opts = ScanOptions.from_flags(static=True, secrets=True, vulns=False)
        assert opts.categories == ("secrets", "static")

    def test_all_overrides(self):
        opts = ScanOptions.from_flags(static=False, secrets=False, all_scans=True)
        assert opts.categories == ("secrets", "security", "static", "vulns")

    def test_everything_off(self):
        opts = ScanOptions.from_flags(secrets=False, security=False, static=False, vulns=False)
        assert not opts.any_selected

    def test_empty_language_is_none(self):
        assert ScanOptions.from_flags(language="").language is None


# ── Receipts ─────────────────────────────────────────────────────────


class TestReceipts:
    def test_unavailable_is_ok(self):
        receipt = ToolReceipt.unavailable(_tool(install_hint=["pip install demo"]))
        assert receipt.ok
        assert not receipt.failed
        assert receipt.install_hint == ["pip install demo"]

    def test_issues_is_failed(self):
        receipt = ToolReceipt.issues(_tool(), "python", "bad code")
        assert receipt.failed
        assert receipt.error == "Demo found issues"

    def test_report_summary(self):
        report = ScanReport(ecosystems=["python"])
        report.add(ToolReceipt.clean(_tool()))
        report.add(ToolReceipt.unavailable(_tool(id="other")))
        assert report.ok
        report.add(ToolReceipt.failure(_tool(id="third"), error="boom"))
        assert not report.ok
        data = report.to_dict()
        assert data["summary"] == {"total": 3, "failed": 1, "unavailable": 1}
        assert len(data["receipts"]) == 3


# ── BruhConfig ───────────────────────────────────────────────────────


class TestBruhConfig:
    def test_defaults(self):
        config = BruhConfig()
        assert config.branch.using_tmux is True
        assert config.branch.editor == "nvim"
        assert config.ai.command == "claude"
        assert config.cleanup_pre_commit == []
        assert config.pr_prompt("default")

    def test_cleanup_alias(self):
        config = BruhConfig.model_validate({"cleanup-pre-commit": ["dotfiles"]})
        assert config.wants_cleanup("dotfiles")
        assert not config.wants_cleanup("other")

    def test_default_prompt_always_present(self):
        config = BruhConfig.model_validate({"pr": {"prompts": {"short": "Keep it brief."}}})
        assert config.pr_prompt("short") == "Keep it brief."
        assert config.pr_prompt("default")
        assert config.pr_prompt("missing") is None

    def test_unknown_keys_ignored(self):
        config = BruhConfig.model_validate({"theme": "dark"})
        assert config.branch.editor == "nvim"
