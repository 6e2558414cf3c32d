"""Tests for layered configuration loading."""
from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from lingssg.core.config import ConfigManager, SiteConfig
from lingssg.core.exceptions import ConfigError


def write_config(root: Path, name: str, data: object) -> None:
    cfg_dir = root / ".lingssg" / "config"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    (cfg_dir / name).write_text(yaml.safe_dump(data), encoding="utf-8")


class TestLayers:
    def test_bundled_defaults(self, tmp_path: Path) -> None:
        mgr = ConfigManager(tmp_path)
        assert mgr.get("site.template_dir") == "templates"
        assert mgr.get("site.page_dir") == "pages"
        assert mgr.get("site.asset_dir") == "assets"
        assert mgr.get("site.output_dir") == "public"
        assert mgr.get("packs.active") == ["linguistics"]

    def test_project_overrides_defaults(self, tmp_path: Path) -> None:
        write_config(tmp_path, "site.yaml", {"site": {"output_dir": "dist"}})
        mgr = ConfigManager(tmp_path)
        assert mgr.get("site.output_dir") == "dist"
        assert mgr.get("site.page_dir") == "pages"

    def test_project_files_merge_alphabetically(self, tmp_path: Path) -> None:
        write_config(tmp_path, "b.yaml", {"site": {"output_dir": "second"}})
        write_config(tmp_path, "a.yaml", {"site": {"output_dir": "first"}})
        assert ConfigManager(tmp_path).get("site.output_dir") == "second"

    def test_list_append_marker(self, tmp_path: Path) -> None:
        write_config(tmp_path, "packs.yaml", {"packs": {"active": ["+", "extra"]}})
        assert ConfigManager(tmp_path).get("packs.active") == ["linguistics", "extra"]

    def test_list_replacement(self, tmp_path: Path) -> None:
        write_config(tmp_path, "packs.yaml", {"packs": {"active": []}})
        assert ConfigManager(tmp_path).get("packs.active") == []

    def test_env_overrides_project(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        write_config(tmp_path, "site.yaml", {"site": {"output_dir": "dist"}})
        monkeypatch.setenv("LINGSSG_SITE__OUTPUT_DIR", "build")
        assert ConfigManager(tmp_path).get("site.output_dir") == "build"

    def test_env_json_list(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LINGSSG_PACKS__ACTIVE", '["linguistics", "other"]')
        assert ConfigManager(tmp_path).get("packs.active") == ["linguistics", "other"]

    def test_missing_key_returns_default(self, tmp_path: Path) -> None:
        mgr = ConfigManager(tmp_path)
        assert mgr.get("site.nothing") is None
        assert mgr.get("site.output_dir.deeper", "x") == "x"


class TestCoercion:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("true", True),
            ("False", False),
            ("42", 42),
            ("-3", -3),
            ("1.5", 1.5),
            ('{"a": 1}', {"a": 1}),
            ("[1, 2]", [1, 2]),
            ("[not json", "[not json"),
            ("public", "public"),
        ],
    )
    def test_coerce(self, tmp_path: Path, raw: str, expected: object) -> None:
        assert ConfigManager(tmp_path)._coerce_type(raw) == expected


class TestValidation:
    def test_schema_violation(self, tmp_path: Path) -> None:
        write_config(tmp_path, "site.yaml", {"site": {"output_dir": 3}})
        with pytest.raises(ConfigError) as excinfo:
            ConfigManager(tmp_path).load_config()
        assert "site.output_dir" in str(excinfo.value)

    def test_env_value_is_validated(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LINGSSG_PACKS__ACTIVE", "linguistics")
        with pytest.raises(ConfigError):
            ConfigManager(tmp_path).load_config()

    def test_validation_can_be_skipped(self, tmp_path: Path) -> None:
        write_config(tmp_path, "site.yaml", {"site": {"output_dir": 3}})
        cfg = ConfigManager(tmp_path).load_config(validate=False)
        assert cfg["site"]["output_dir"] == 3

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        cfg_dir = tmp_path / ".lingssg" / "config"
        cfg_dir.mkdir(parents=True)
        (cfg_dir / "bad.yaml").write_text("site: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            ConfigManager(tmp_path).load_config()

    def test_non_mapping_file(self, tmp_path: Path) -> None:
        write_config(tmp_path, "list.yaml", ["a", "b"])
        with pytest.raises(ConfigError):
            ConfigManager(tmp_path).load_config()

    def test_empty_file_is_ignored(self, tmp_path: Path) -> None:
        cfg_dir = tmp_path / ".lingssg" / "config"
        cfg_dir.mkdir(parents=True)
        (cfg_dir / "empty.yaml").write_text("", encoding="utf-8")
        assert ConfigManager(tmp_path).get("site.output_dir") == "public"

    def test_malformed_env_key(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LINGSSG_SITE____OUTPUT_DIR", "x")
        with pytest.raises(ConfigError):
            ConfigManager(tmp_path).load_config()

    def test_config_error_is_value_error(self) -> None:
        assert issubclass(ConfigError, ValueError)


class TestSiteConfig:
    def test_paths_resolve_against_root(self, tmp_path: Path) -> None:
        site = SiteConfig.from_config(ConfigManager(tmp_path))
        root = tmp_path.resolve()
        assert site.template_dir == root / "templates"
        assert site.page_dir == root / "pages"
        assert site.asset_dir == root / "assets"
        assert site.output_dir == root / "public"
        assert site.packs == ["linguistics"]

    def test_absolute_paths_are_kept(self, tmp_path: Path) -> None:
        out = tmp_path / "elsewhere"
        write_config(tmp_path, "site.yaml", {"site": {"output_dir": str(out)}})
        assert SiteConfig.from_config(ConfigManager(tmp_path)).output_dir == out
