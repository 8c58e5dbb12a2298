"""Filesystem adapter — the only place that touches the disk.

The core pipeline works on in-memory ``{path: content}`` data; this module
collects audit input from a directory tree and persists generated files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Collection, Mapping

from site_forge.domain.entities import SourceFile
from site_forge.domain.exceptions import AuditTargetError, OutputDirectoryError

logger = logging.getLogger(__name__)


def _skipped(path: Path, root: Path, skip_dirs: Collection[str]) -> bool:
    """Return *True* if any directory between *root* and *path* is skipped."""
    parts = path.relative_to(root).parts[:-1]
    return any(part in skip_dirs or part.endswith(".egg-info") for part in parts)


def scan_directory(
    root: str | Path,
    extensions: Collection[str],
    skip_dirs: Collection[str],
    max_file_size_kb: int = 500,
) -> list[SourceFile]:
    """Read every matching text file below *root*, sorted by path.

    Files in *skip_dirs*, files larger than *max_file_size_kb*, files that
    are not valid UTF-8 and files the OS refuses to read are left out.
    """
    base = Path(root)
    if not base.is_dir():
        raise AuditTargetError(f"Not a directory: '{root}'")

    files: list[SourceFile] = []
    for path in sorted(base.rglob("*")):
        if not path.is_file() or _skipped(path, base, skip_dirs):
            continue
        if not path.name.endswith(tuple(extensions)):
            continue
        try:
            if path.stat().st_size > max_file_size_kb * 1024:
                logger.debug("Skipping oversized file %s", path)
                continue
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            logger.warning("Skipping non-UTF-8 file %s", path)
            continue
        except OSError as exc:
            logger.warning("Skipping unreadable file %s: %s", path, exc)
            continue
        files.append(SourceFile(path=str(path), content=content))

    logger.info("Collected %d file(s) from %s", len(files), base)
    return files


def write_file_tree(root: str | Path, files: Mapping[str, str]) -> list[Path]:
    """Write ``{relative path: content}`` below *root*, creating directories as needed."""
    base = Path(root)
    written: list[Path] = []
    try:
        for relative, content in files.items():
            target = base / relative
            if not target.resolve().is_relative_to(base.resolve()):
                raise OutputDirectoryError(f"Refusing to write outside {base}: '{relative}'")
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
            written.append(target)
    except OSError as exc:
        raise OutputDirectoryError(f"Could not write generated files to {base}: {exc}") from exc

    logger.info("Wrote %d file(s) to %s", len(written), base)
    return written
