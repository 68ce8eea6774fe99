"""Tests for build configuration."""

from __future__ import annotations

import json
from pathlib import Path

from olexamples.config import BuildConfig


class TestBuildConfig:
    """Test BuildConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        config = BuildConfig()

        assert config.src_dir == Path("examples")
        assert config.dest_dir == Path("build/examples")
        assert config.api_root == "../apidoc"
        assert config.loader_script == "loader.js"
        assert config.index_filename == "index.js"
        assert config.index_page == "index.html"
        assert config.clean is True

    def test_default_templates_are_packaged(self) -> None:
        """Should fall back to the templates shipped with the package."""
        config = BuildConfig()
        assert (Path(config.templates_dir) / "example.html").is_file()

    def test_local_templates_preferred(self, tmp_path: Path, monkeypatch) -> None:
        """Should use config/examples of the working tree when present."""
        (tmp_path / "config" / "examples").mkdir(parents=True)
        monkeypatch.chdir(tmp_path)
        assert BuildConfig().templates_dir == Path("config/examples")

    def test_resolve_relative(self) -> None:
        """Should anchor relative paths at base_dir."""
        config = BuildConfig(templates_dir=Path("tpl")).resolve(Path("/base"))

        assert config.src_dir == Path("/base/examples")
        assert config.dest_dir == Path("/base/build/examples")
        assert config.templates_dir == Path("/base/tpl")
        assert config.package_json == Path("/base/package.json")

    def test_resolve_absolute(self) -> None:
        """Should keep absolute paths as-is."""
        config = BuildConfig(src_dir=Path("/abs/src")).resolve(Path("/base"))
        assert config.src_dir == Path("/abs/src")

    def test_resolve_no_base(self) -> None:
        """Should return an equal copy without a base."""
        config = BuildConfig()
        resolved = config.resolve()
        assert resolved == config
        assert resolved is not config

    def test_site_metadata_version(self, tmp_path: Path) -> None:
        """Should read the library version from package.json."""
        package_json = tmp_path / "package.json"
        package_json.write_text(json.dumps({"name": "ol", "version": "3.1.0"}))
        assert BuildConfig(package_json=package_json).site_metadata() == {"olVersion": "3.1.0"}

    def test_site_metadata_missing(self, tmp_path: Path) -> None:
        """Should tolerate a missing or broken package.json."""
        assert BuildConfig(package_json=tmp_path / "none.json").site_metadata() == {"olVersion": None}
        broken = tmp_path / "package.json"
        broken.write_text("{not json")
        assert BuildConfig(package_json=broken).site_metadata() == {"olVersion": None}
