"""Tests for perch.pages.loader — override precedence and load failures."""

from pathlib import Path

import pytest

from perch.errors import ConfigurationError, PageLoadError
from perch.pages.loader import load_static_pages, read_override, resolve_static_pages
from perch.pages.types import DEFAULT_ROBOTS_TXT, Found, NotFound, PageName


class TestLoadWithCustomContent:
    def test_loads_custom_robots_txt(self, custom_dir: Path, custom_robots: bytes) -> None:
        pages = load_static_pages(custom_dir)
        assert len(pages) == 1
        assert pages[PageName.ROBOTS_TXT] == custom_robots

    def test_accepts_string_path(self, custom_dir: Path, custom_robots: bytes) -> None:
        pages = load_static_pages(str(custom_dir))
        assert pages[PageName.ROBOTS_TXT] == custom_robots

    def test_missing_override_uses_default(self, custom_dir: Path) -> None:
        (custom_dir / "robots.txt").unlink()

        pages = load_static_pages(custom_dir)
        assert len(pages) == 1
        assert pages[PageName.ROBOTS_TXT] == DEFAULT_ROBOTS_TXT

    def test_missing_directory_uses_default(self, tmp_path: Path) -> None:
        pages = load_static_pages(tmp_path / "does-not-exist")
        assert pages[PageName.ROBOTS_TXT] == DEFAULT_ROBOTS_TXT

    def test_empty_override_file_is_used(self, custom_dir: Path) -> None:
        (custom_dir / "robots.txt").write_bytes(b"")

        pages = load_static_pages(custom_dir)
        assert pages[PageName.ROBOTS_TXT] == b""

    def test_binary_content_is_exact(self, custom_dir: Path) -> None:
        payload = b"User-agent: *\r\nDisallow: /\x00\xff"
        (custom_dir / "robots.txt").write_bytes(payload)

        pages = load_static_pages(custom_dir)
        assert pages[PageName.ROBOTS_TXT] == payload


class TestLoadWithoutCustomContent:
    @pytest.mark.parametrize("custom_dir", [None, ""])
    def test_loads_default_content(self, custom_dir: str | None) -> None:
        pages = load_static_pages(custom_dir)
        assert len(pages) == 1
        assert pages[PageName.ROBOTS_TXT] == DEFAULT_ROBOTS_TXT

    def test_does_not_touch_filesystem(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fail(*args: object, **kwargs: object) -> bytes:
            raise AssertionError("filesystem accessed")

        monkeypatch.setattr(Path, "read_bytes", fail)
        pages = load_static_pages("")
        assert pages[PageName.ROBOTS_TXT] == DEFAULT_ROBOTS_TXT

    def test_every_page_name_is_covered(self) -> None:
        pages = load_static_pages(None)
        assert set(pages) == set(PageName)


class TestRegistryIsReadOnly:
    def test_cannot_assign(self, custom_dir: Path) -> None:
        pages = load_static_pages(custom_dir)
        with pytest.raises(TypeError):
            pages[PageName.ROBOTS_TXT] = b"changed"  # type: ignore[index]


class TestLoadErrors:
    def test_directory_in_place_of_file(self, tmp_path: Path) -> None:
        (tmp_path / "robots.txt").mkdir()

        with pytest.raises(PageLoadError) as exc_info:
            load_static_pages(tmp_path)
        assert exc_info.value.path == tmp_path / "robots.txt"
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_permission_denied(self, custom_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        def deny(self: Path) -> bytes:
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "read_bytes", deny)

        with pytest.raises(PageLoadError, match="Permission denied"):
            load_static_pages(custom_dir)

    def test_load_error_is_configuration_error(self) -> None:
        assert issubclass(PageLoadError, ConfigurationError)


class TestReadOverride:
    def test_found(self, custom_dir: Path, custom_robots: bytes) -> None:
        result = read_override(custom_dir / "robots.txt")
        assert result == Found(custom_robots, custom_dir / "robots.txt")

    def test_not_found(self, tmp_path: Path) -> None:
        result = read_override(tmp_path / "robots.txt")
        assert result == NotFound(tmp_path / "robots.txt")


class TestResolveStaticPages:
    def test_reports_override_origin(self, custom_dir: Path) -> None:
        (page,) = resolve_static_pages(custom_dir)
        assert page.name is PageName.ROBOTS_TXT
        assert page.is_override
        assert page.origin == custom_dir / "robots.txt"

    def test_reports_default_origin(self) -> None:
        (page,) = resolve_static_pages(None)
        assert not page.is_override
        assert page.origin is None
        assert page.content == DEFAULT_ROBOTS_TXT
