"""Tests for directory resolution."""

import os
from pathlib import Path

import pytest

from std_dirs.resolver import OVERRIDE_VARS, DirKind, ResolvedPaths, resolve, resolve_kind

PLATFORMS = ["windows", "macos", "linux", "freebsd", "any"]


def windows_env():
    return {"APPDATA": "/appdata"}.get


def unix_env():
    return {"HOME": "/home/user"}.get


@pytest.mark.parametrize("platform", PLATFORMS)
@pytest.mark.parametrize("kind", list(DirKind))
def test_override_wins_on_every_platform(platform, kind):
    """Test that an override wins regardless of platform and fallback variables."""
    env = {OVERRIDE_VARS[kind]: f"/tmp/{kind}", "HOME": "/home/user", "APPDATA": "/appdata"}
    assert resolve_kind(kind, "app-name", platform, env.get) == Path(f"/tmp/{kind}/app-name")


@pytest.mark.parametrize("kind", list(DirKind))
def test_override_without_fallback_vars(kind):
    """Test that an override needs no HOME or APPDATA."""
    env = {OVERRIDE_VARS[kind]: "/override"}
    assert resolve("app-name", "windows", env.get).of(kind) == Path("/override/app-name")


class TestPlatformDefaults:
    """Tests for the fallback path tables when no override is set."""

    def test_windows(self):
        """Test the APPDATA-based Windows layout."""
        paths = resolve("app-name", "windows", windows_env())
        assert paths.cache == Path("/appdata/app-name/Cache")
        assert paths.config == Path("/appdata/app-name/Config")
        assert paths.data == Path("/appdata/app-name/Data")

    def test_macos(self):
        """Test the HOME/Library-based macOS layout."""
        paths = resolve("app-name", "macos", unix_env())
        assert paths.cache == Path("/home/user/Library/Caches/app-name")
        assert paths.config == Path("/home/user/Library/Preferences/app-name")
        assert paths.data == Path("/home/user/Library/app-name")

    @pytest.mark.parametrize("platform", ["linux", "freebsd", "openbsd", ""])
    def test_unix_like(self, platform):
        """Test the XDG default layout for any other platform tag."""
        paths = resolve("app-name", platform, unix_env())
        assert paths.cache == Path("/home/user/.cache/app-name")
        assert paths.config == Path("/home/user/.config/app-name")
        assert paths.data == Path("/home/user/.local/share/app-name")

    def test_windows_ignores_home(self):
        """Test that Windows reads APPDATA only, never HOME."""
        paths = resolve("app-name", "windows", {"HOME": "/home/user"}.get)
        assert paths.cache == Path("./app-name/Cache")

    def test_macos_ignores_appdata(self):
        """Test that macOS reads HOME only, never APPDATA."""
        paths = resolve("app-name", "macos", {"APPDATA": "/appdata"}.get)
        assert paths.config == Path("./Library/Preferences/app-name")


class TestMissingBase:
    """Resolution never fails; a missing base becomes '.'."""

    def test_windows_without_appdata(self):
        """Test that a missing APPDATA resolves relative to '.'."""
        paths = resolve("app-name", "windows", {}.get)
        assert paths == ResolvedPaths(Path("app-name/Cache"), Path("app-name/Config"), Path("app-name/Data"))

    def test_macos_without_home(self):
        """Test that a missing HOME on macOS resolves relative to '.'."""
        paths = resolve("app-name", "macos", {}.get)
        assert paths.cache == Path(".") / "Library" / "Caches" / "app-name"
        assert paths.data == Path("Library/app-name")

    def test_linux_without_home(self):
        """Test that a missing HOME on Linux resolves relative to '.'."""
        paths = resolve("app-name", "linux", {}.get)
        assert paths.cache == Path(".cache/app-name")
        assert paths.config == Path(".config/app-name")
        assert paths.data == Path(".local/share/app-name")


class TestIndependence:
    """An override only affects its own directory."""

    def test_cache_override_leaves_others_default(self):
        """Test that XDG_CACHE_HOME leaves config and data at their defaults."""
        env = {"XDG_CACHE_HOME": "/tmp/cache", "HOME": "/home/user"}
        paths = resolve("app-name", "linux", env.get)
        assert paths.cache == Path("/tmp/cache/app-name")
        assert paths.config == Path("/home/user/.config/app-name")
        assert paths.data == Path("/home/user/.local/share/app-name")

    def test_data_override_on_windows(self):
        """Test that XDG_DATA_HOME leaves the Windows cache and config alone."""
        env = {"XDG_DATA_HOME": "/tmp/data", "APPDATA": "/appdata"}
        paths = resolve("app-name", "windows", env.get)
        assert paths.cache == Path("/appdata/app-name/Cache")
        assert paths.config == Path("/appdata/app-name/Config")
        assert paths.data == Path("/tmp/data/app-name")

    def test_empty_override_counts_as_set(self):
        """Test that an empty override is still an override; only absence falls through."""
        env = {"XDG_CONFIG_HOME": "", "HOME": "/home/user"}
        assert resolve("app-name", "linux", env.get).config == Path("app-name")


class TestPurity:
    """Resolution depends only on its arguments."""

    def test_same_inputs_same_result(self):
        """Test that equal inputs give equal paths."""
        env = unix_env()
        assert resolve("app-name", "macos", env) == resolve("app-name", "macos", env)

    def test_recomputed_on_every_call(self):
        """Test that nothing is cached between calls."""
        env = {"HOME": "/home/one"}
        first = resolve("app-name", "linux", env.get)
        env["HOME"] = "/home/two"
        second = resolve("app-name", "linux", env.get)
        assert first.cache == Path("/home/one/.cache/app-name")
        assert second.cache == Path("/home/two/.cache/app-name")

    def test_default_env_is_process_environment(self, monkeypatch):
        """Test that the default lookup reads os.environ."""
        monkeypatch.setenv("XDG_CACHE_HOME", "/from/process")
        assert os.environ["XDG_CACHE_HOME"] == "/from/process"
        assert resolve("app-name", "linux").cache == Path("/from/process/app-name")


def test_resolved_paths_order_matches_kinds():
    """Test that ResolvedPaths fields follow DirKind order."""
    paths = resolve("app-name", "linux", unix_env())
    assert list(paths) == [paths.of(kind) for kind in DirKind]
    assert paths._fields == tuple(kind.value for kind in DirKind)
