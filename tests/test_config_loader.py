# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for layered configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from credolint.config import ConfigError, ConfigLoader, CredoLintConfig, CredoSettings, load_config


def test_load_config_defaults(tmp_path: Path) -> None:
    project_root = tmp_path / "project"
    project_root.mkdir()

    cfg = load_config(project_root)

    assert cfg == CredoLintConfig()
    assert cfg.credo.configuration_file == ".credo.exs"
    assert cfg.credo.diff_mode.effective_merge_base == "main"
    assert not cfg.output.silent


def test_config_loader_merges_user_pyproject_and_project(tmp_path: Path) -> None:
    project_root = tmp_path / "workspace"
    project_root.mkdir()

    user_config = tmp_path / "user.toml"
    user_config.write_text(
        """
[credo]
strict_mode = true
execute_path = "/home/dev/.asdf/shims"

[output]
emoji = false
""".strip(),
        encoding="utf-8",
    )

    (project_root / "pyproject.toml").write_text(
        """
[project]
name = "elixir-tooling"

[tool.credolint.credo]
checks_with_tag = ["security"]

[tool.credolint.credo.diff_mode]
enabled = true
""".strip(),
        encoding="utf-8",
    )

    project_config = project_root / ".credolint.toml"
    project_config.write_text(
        """
[credo]
strict_mode = false
credo_configuration = "ci"

[credo.diff_mode]
merge_base = "develop"
""".strip(),
        encoding="utf-8",
    )

    loader = ConfigLoader.for_root(
        project_root,
        user_config=user_config,
        project_config=project_config,
    )

    result = loader.load_with_trace()
    credo = result.config.credo

    assert credo.strict_mode is False
    assert credo.execute_path == "/home/dev/.asdf/shims"
    assert credo.credo_configuration == "ci"
    assert credo.checks_with_tag == ("security",)
    assert credo.diff_mode.enabled is True
    assert credo.diff_mode.merge_base == "develop"
    assert result.config.output.emoji is False
    pyproject = project_root.resolve() / "pyproject.toml"
    assert result.sources == ["defaults", str(user_config), str(pyproject), str(project_config)]


def test_pyproject_without_section_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "other"\n', encoding="utf-8")

    loader = ConfigLoader.for_root(tmp_path)

    assert loader.load() == CredoLintConfig()


def test_path_settings_expand_environment_variables(tmp_path: Path) -> None:
    (tmp_path / ".credolint.toml").write_text(
        '[credo]\nexecute_path = "${ELIXIR_HOME}/bin"\nconfiguration_file = "$CREDO_DIR/.credo.exs"\n',
        encoding="utf-8",
    )

    loader = ConfigLoader.for_root(tmp_path, env={"ELIXIR_HOME": "/opt/elixir", "CREDO_DIR": "/etc/credo"})
    credo = loader.load().credo

    assert credo.execute_path == "/opt/elixir/bin"
    assert credo.configuration_file == "/etc/credo/.credo.exs"


def test_unknown_variables_and_other_settings_stay_literal(tmp_path: Path) -> None:
    (tmp_path / ".credolint.toml").write_text(
        '[credo]\nexecute_path = "${MISSING}/bin"\ncredo_configuration = "$PROFILE"\n',
        encoding="utf-8",
    )

    credo = ConfigLoader.for_root(tmp_path, env={"PROFILE": "ci"}).load().credo

    assert credo.execute_path == "${MISSING}/bin"
    assert credo.credo_configuration == "$PROFILE"


def test_pyproject_contributes_only_when_present(tmp_path: Path) -> None:
    (tmp_path / ".credolint.toml").write_text("[credo]\nstrict_mode = true\n", encoding="utf-8")

    result = ConfigLoader.for_root(tmp_path, user_config=tmp_path / "absent.toml").load_with_trace()

    assert result.sources == ["defaults", str(tmp_path.resolve() / ".credolint.toml")]


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    (tmp_path / ".credolint.toml").write_text("[credo]\nstrictmode = true\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid configuration"):
        ConfigLoader.for_root(tmp_path).load()


def test_invalid_toml_is_reported(tmp_path: Path) -> None:
    (tmp_path / ".credolint.toml").write_text("[credo\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        ConfigLoader.for_root(tmp_path).load()


def test_loader_requires_sources(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        ConfigLoader(project_root=tmp_path, sources=[])


def test_tag_settings_are_normalised() -> None:
    settings = CredoSettings(checks_with_tag="security", checks_without_tag=["", " style ", "  "])

    assert settings.checks_with_tag == ("security",)
    assert settings.checks_without_tag == ("style",)


def test_blank_strings_become_none() -> None:
    settings = CredoSettings(credo_configuration="  ", execute_path="")

    assert settings.credo_configuration is None
    assert settings.execute_path is None
