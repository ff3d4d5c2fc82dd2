from __future__ import annotations

from pathlib import Path

import pytest

import foldline.core.config as config_mod


@pytest.fixture
def isolated_config(monkeypatch, tmp_path: Path):
    # Redirect config paths to an isolated temp directory
    config_root = tmp_path / "config"
    monkeypatch.setattr(config_mod, "CONFIG_DIR", config_root)
    monkeypatch.setattr(config_mod, "USER_SETTINGS_PATH", config_root / "settings.yaml")
    return config_root


def test_defaults_are_loaded(isolated_config: Path) -> None:
    manager = config_mod.ConfigManager()

    assert manager.zoom_bounds() == (10.0, 32.0)
    assert manager.initial_font_scale() == 14.0
    assert manager.folding_enabled() is True
    assert manager.comment_prefixes() == ("//", "/*", "*", "#")
    assert manager.section("viewer")["show_line_numbers"] is True


def test_config_manager_uses_user_settings(isolated_config: Path) -> None:
    manager = config_mod.ConfigManager()
    manager.set("example", 42)
    manager.save()

    reloaded = config_mod.ConfigManager()
    assert reloaded.get("example") == 42
    assert config_mod.USER_SETTINGS_PATH.exists()


def test_user_settings_are_deep_merged(isolated_config: Path) -> None:
    isolated_config.mkdir(parents=True)
    (isolated_config / "settings.yaml").write_text("zoom:\n  maximum: 48\n", encoding="utf-8")

    manager = config_mod.ConfigManager()

    assert manager.zoom_bounds() == (10.0, 48.0)
    assert manager.section("folding")["enabled"] is True


def test_invalid_zoom_bounds_fall_back(isolated_config: Path) -> None:
    manager = config_mod.ConfigManager()

    manager.set("zoom", {"minimum": 40, "maximum": 12})
    assert manager.zoom_bounds() == config_mod.DEFAULT_ZOOM_BOUNDS

    manager.set("zoom", {"minimum": "small"})
    assert manager.zoom_bounds() == config_mod.DEFAULT_ZOOM_BOUNDS


def test_malformed_sections_are_ignored(isolated_config: Path) -> None:
    manager = config_mod.ConfigManager()
    manager.set("folding", "yes")

    assert manager.section("folding") == {}
    assert manager.folding_enabled() is True
    assert manager.comment_prefixes() is None


def test_folding_enabled_reads_yaml_strings(isolated_config: Path) -> None:
    manager = config_mod.ConfigManager()

    manager.set("folding", {"enabled": "false"})
    assert manager.folding_enabled() is False
    manager.set("folding", {"enabled": "Off"})
    assert manager.folding_enabled() is False
    manager.set("folding", {"enabled": "yes"})
    assert manager.folding_enabled() is True
    manager.set("folding", {"enabled": False})
    assert manager.folding_enabled() is False


def test_empty_comment_prefix_list_is_kept(isolated_config: Path) -> None:
    manager = config_mod.ConfigManager()
    manager.set("folding", {"comment_prefixes": []})

    assert manager.comment_prefixes() == ()
