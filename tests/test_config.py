"""
Tests for the configuration loader — search path, YAML parsing, env overrides.
"""

import textwrap
from pathlib import Path

import pytest

from bruh.core.config.loader import (
    ConfigError,
    config_dir,
    config_search_path,
    find_config_file,
    load_config,
)


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content))
    return path


class TestConfigDir:
    def test_xdg(self, tmp_path: Path):
        assert config_dir({"XDG_CONFIG_HOME": str(tmp_path)}) == tmp_path / "bruh"

    def test_home_fallback(self):
        assert config_dir({}) == Path.home() / ".config" / "bruh"

    def test_search_path_order(self, tmp_path: Path):
        env = {"XDG_CONFIG_HOME": str(tmp_path / "xdg")}
        paths = config_search_path(tmp_path, env)
        assert paths == [tmp_path / "xdg" / "bruh", tmp_path.resolve()]


class TestFindConfigFile:
    def test_none_found(self, tmp_path: Path):
        env = {"XDG_CONFIG_HOME": str(tmp_path / "xdg")}
        assert find_config_file(tmp_path, env) is None

    def test_user_dir_wins_over_cwd(self, tmp_path: Path):
        env = {"XDG_CONFIG_HOME": str(tmp_path / "xdg")}
        user = _write(tmp_path / "xdg" / "bruh" / "config.yaml", "{}\n")
        _write(tmp_path / "config.yaml", "{}\n")
        assert find_config_file(tmp_path, env) == user

    def test_yml_extension(self, tmp_path: Path):
        env = {"XDG_CONFIG_HOME": str(tmp_path / "xdg")}
        found = _write(tmp_path / "config.yml", "{}\n")
        assert find_config_file(tmp_path, env) == found


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        config = load_config(env={"XDG_CONFIG_HOME": str(tmp_path / "xdg")})
        assert config.branch.editor == "nvim"
        assert config.branch.using_tmux is True

    def test_full_file(self, tmp_path: Path):
        path = _write(tmp_path / "config.yaml", """\
            branch:
              using_tmux: false
              editor: code
            pr:
              prompts:
                terse: "Short PR please."
            cleanup-pre-commit:
              - dotfiles
              - bruh
            addcheat:
              cheat_directory: ~/cheats
            ai:
              command: my-claude
        """)
        config = load_config(path, env={})
        assert config.branch.using_tmux is False
        assert config.branch.editor == "code"
        assert config.pr_prompt("terse") == "Short PR please."
        assert config.wants_cleanup("bruh")
        assert config.addcheat.cheat_directory == "~/cheats"
        assert config.ai.command == "my-claude"

    def test_empty_file(self, tmp_path: Path):
        path = _write(tmp_path / "config.yaml", "")
        assert load_config(path, env={}).ai.command == "claude"

    def test_empty_keys_keep_defaults(self, tmp_path: Path):
        path = _write(tmp_path / "config.yaml", """\
            cleanup-pre-commit:
            branch:
            ai:
              command:
        """)
        config = load_config(path, env={})
        assert config.cleanup_pre_commit == []
        assert config.branch.editor == "nvim"
        assert config.ai.command == "claude"

    def test_empty_key_next_to_set_section(self, tmp_path: Path):
        path = _write(tmp_path / "config.yaml", """\
            cleanup-pre-commit:
            branch:
              editor: vim
        """)
        config = load_config(path, env={})
        assert config.branch.editor == "vim"
        assert not config.wants_cleanup("app")

    def test_env_overrides_file(self, tmp_path: Path):
        path = _write(tmp_path / "config.yaml", """\
            branch:
              editor: code
        """)
        env = {"BRUH_BRANCH_EDITOR": "hx", "BRUH_BRANCH_USING_TMUX": "false"}
        config = load_config(path, env=env)
        assert config.branch.editor == "hx"
        assert config.branch.using_tmux is False

    def test_env_override_without_file_section(self, tmp_path: Path):
        path = _write(tmp_path / "config.yaml", "cleanup-pre-commit: []\n")
        config = load_config(path, env={"BRUH_ADDCHEAT_CHEAT_DIRECTORY": "/tmp/cheats"})
        assert config.addcheat.cheat_directory == "/tmp/cheats"

    def test_explicit_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yaml", env={})

    def test_invalid_yaml(self, tmp_path: Path):
        path = _write(tmp_path / "config.yaml", "branch: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path, env={})

    def test_not_a_mapping(self, tmp_path: Path):
        path = _write(tmp_path / "config.yaml", "- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path, env={})

    def test_invalid_value(self, tmp_path: Path):
        path = _write(tmp_path / "config.yaml", """\
            branch:
              using_tmux: sometimes
        """)
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path, env={})
