"""Filesystem adapter: directory scanning and file tree writing."""

from pathlib import Path

import pytest

from site_forge.domain.exceptions import AuditTargetError, OutputDirectoryError
from site_forge.infrastructure.config import Settings
from site_forge.infrastructure.filesystem import scan_directory, write_file_tree

EXTENSIONS = (".tsx", ".ts", ".html")
SKIP = frozenset({"node_modules", "dist"})


def _touch(root: Path, relative: str, content: str = "x") -> None:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_scan_filters_extensions_and_skip_dirs(tmp_path):
    _touch(tmp_path, "index.html")
    _touch(tmp_path, "src/pages/Home.tsx")
    _touch(tmp_path, "src/util.ts")
    _touch(tmp_path, "README.md")
    _touch(tmp_path, "node_modules/pkg/index.ts")
    _touch(tmp_path, "dist/bundle.html")
    _touch(tmp_path, "site_forge.egg-info/top.ts")

    files = scan_directory(tmp_path, EXTENSIONS, SKIP)
    relative = [Path(f.path).relative_to(tmp_path).as_posix() for f in files]
    assert relative == ["index.html", "src/pages/Home.tsx", "src/util.ts"]


def test_scan_reads_content(tmp_path):
    _touch(tmp_path, "a.ts", "const a = 'lorem ipsum';")
    (source,) = scan_directory(tmp_path, EXTENSIONS, SKIP)
    assert source.content == "const a = 'lorem ipsum';"


def test_scan_skips_oversized_and_binary_files(tmp_path):
    _touch(tmp_path, "big.ts", "a" * 2048)
    (tmp_path / "binary.ts").write_bytes(b"\xff\xfe\x00garbage")
    _touch(tmp_path, "ok.ts")
    files = scan_directory(tmp_path, EXTENSIONS, SKIP, max_file_size_kb=1)
    assert [Path(f.path).name for f in files] == ["ok.ts"]


def test_scan_missing_directory(tmp_path):
    with pytest.raises(AuditTargetError):
        scan_directory(tmp_path / "missing", EXTENSIONS, SKIP)


def test_scan_file_instead_of_directory(tmp_path):
    _touch(tmp_path, "a.ts")
    with pytest.raises(AuditTargetError):
        scan_directory(tmp_path / "a.ts", EXTENSIONS, SKIP)


def test_write_file_tree_creates_directories(tmp_path):
    written = write_file_tree(
        tmp_path / "out", {"index.html": "<html/>", "src/pages/Home.tsx": "export {}"}
    )
    assert len(written) == 2
    assert (tmp_path / "out" / "index.html").read_text(encoding="utf-8") == "<html/>"
    assert (tmp_path / "out" / "src" / "pages" / "Home.tsx").exists()


def test_write_file_tree_refuses_escaping_paths(tmp_path):
    with pytest.raises(OutputDirectoryError):
        write_file_tree(tmp_path / "out", {"../evil.txt": "x"})
    assert not (tmp_path / "evil.txt").exists()


def test_write_file_tree_wraps_os_errors(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(OutputDirectoryError):
        write_file_tree(blocker, {"index.html": "x"})


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("SITE_FORGE_PORT", "9001")
    monkeypatch.setenv("SITE_FORGE_LOG_LEVEL", "DEBUG")
    settings = Settings()
    assert settings.port == 9001
    assert settings.log_level == "DEBUG"
    assert ".tsx" in settings.audit_extensions
    assert "node_modules" in settings.audit_skip_dirs


def test_scan_skips_files_the_os_refuses_to_read(tmp_path, monkeypatch):
    _touch(tmp_path, "locked.ts")
    _touch(tmp_path, "ok.ts")
    read_text = Path.read_text

    def guarded(self, *args, **kwargs):
        if self.name == "locked.ts":
            raise PermissionError(13, "Permission denied", str(self))
        return read_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", guarded)
    files = scan_directory(tmp_path, EXTENSIONS, SKIP)
    assert [Path(f.path).name for f in files] == ["ok.ts"]
