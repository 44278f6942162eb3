"""
User configuration model — the contents of ``config.yaml``.

Every field has a default, so a missing config file is a valid,
fully-populated configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PR_PROMPT = (
    "Based on the following git changes, create a PR. "
    "Execute the gh pr create command directly."
)

DEFAULT_CHEAT_DIRECTORY = "~/Thoth/04-Resources/navi-cheatsheets"


class BranchConfig(BaseModel):
    """Defaults for ``bruh branch``."""

    using_tmux: bool = True
    editor: str = "nvim"


class PRConfig(BaseModel):
    """Named prompt headers for ``bruh pr create``."""

    prompts: dict[str, str] = Field(default_factory=lambda: {"default": DEFAULT_PR_PROMPT})

    @field_validator("prompts")
    @classmethod
    def _keep_default_prompt(cls, value: dict[str, str]) -> dict[str, str]:
        return {"default": DEFAULT_PR_PROMPT, **value}


class AddCheatConfig(BaseModel):
    """Defaults for ``bruh addcheat``."""

    cheat_directory: str = DEFAULT_CHEAT_DIRECTORY
    history_file: str | None = None


class AIConfig(BaseModel):
    """The external AI command-line tool."""

    command: str = "claude"


class BruhConfig(BaseModel):
    """Root configuration, loaded once per process and passed to commands."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    branch: BranchConfig = Field(default_factory=BranchConfig)
    pr: PRConfig = Field(default_factory=PRConfig)
    cleanup_pre_commit: list[str] = Field(default_factory=list, alias="cleanup-pre-commit")
    addcheat: AddCheatConfig = Field(default_factory=AddCheatConfig)
    ai: AIConfig = Field(default_factory=AIConfig)

    def wants_cleanup(self, repo_name: str) -> bool:
        """Whether a repository defaults to pre-commit cleanup."""
        return repo_name in self.cleanup_pre_commit

    def pr_prompt(self, name: str = "default") -> str | None:
        return self.pr.prompts.get(name)
