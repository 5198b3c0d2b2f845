"""Turn the chosen input (text, file(s), directory or pipe) into Source records."""

from collections.abc import Iterable
import logging
from pathlib import Path
from typing import TextIO

from seek.data_models.source import (
    PIPE_SOURCE_NAME,
    TEXT_SOURCE_NAME,
    Source,
    SourceKind,
)

logger = logging.getLogger(__name__)


def from_text(text: str) -> list[Source]:
    return [Source(name=TEXT_SOURCE_NAME, text=text, kind=SourceKind.text)]


def from_pipe(stream: TextIO) -> list[Source]:
    return [Source(name=PIPE_SOURCE_NAME, text=stream.read(), kind=SourceKind.pipe)]


def read_file(path: Path) -> str:
    """Read path as UTF-8, keeping line endings as they are on disk."""
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError as exc:
        raise FileNotFoundError(
            f"Failed to read file: '{path}'. {exc.strerror}"
        ) from exc
    except UnicodeDecodeError as exc:
        raise ValueError(f"Failed to read file: '{path}'. {exc.reason}") from exc
    except OSError as exc:
        raise OSError(f"Failed to read file: '{path}'. {exc.strerror}") from exc


def from_file(path: str | Path) -> list[Source]:
    p = Path(path)
    return [Source(name=str(p), text=read_file(p), kind=SourceKind.file)]


def from_files(paths: Iterable[str | Path]) -> list[Source]:
    """Read each path once, in first-seen order."""
    sources: list[Source] = []
    seen: set[str] = set()
    for path in paths:
        key = str(Path(path))
        if key in seen:
            continue
        seen.add(key)
        sources.extend(from_file(path))
    return sources


def _walk(dir_path: Path, depth: int, max_depth: int | None) -> list[Path]:
    files: list[Path] = []
    for entry in sorted(dir_path.iterdir()):
        if entry.is_file():
            files.append(entry)
        elif entry.is_dir() and (max_depth is None or depth < max_depth):
            files.extend(_walk(entry, depth + 1, max_depth))
    return files


def from_dir(path: str | Path, max_depth: int | None = None) -> list[Source]:
    """Read every UTF-8 file under path, recursing at most max_depth levels.

    max_depth=0 reads only the files directly inside path; None means unlimited.
    Files that are not valid UTF-8 are skipped with a warning.
    """
    dir_path = Path(path)
    if not dir_path.is_dir():
        reason = "No such file or directory" if not dir_path.exists() else "Not a directory"
        raise NotADirectoryError(f"Failed to read directory: '{dir_path}'. {reason}")

    sources: list[Source] = []
    for file_path in _walk(dir_path, 0, max_depth):
        try:
            text = read_file(file_path)
        except ValueError as exc:
            logger.warning("Skipping %s: %s", file_path, exc)
            continue
        sources.append(Source(name=str(file_path), text=text, kind=SourceKind.file))
    logger.debug("Read %d files from %s", len(sources), dir_path)
    return sources


def collect_sources(
    *,
    text: str | None = None,
    file: str | None = None,
    files: list[str] | None = None,
    dir: str | None = None,
    max_depth: int | None = None,
    pipe: TextIO | None = None,
) -> list[Source]:
    """Pick exactly one input, preferring piped stdin, then dir, file, files, text."""
    if pipe is not None:
        return from_pipe(pipe)
    if dir is not None:
        return from_dir(dir, max_depth)
    if file is not None:
        return from_file(file)
    if files is not None:
        return from_files(files)
    if text is not None:
        return from_text(text)
    raise ValueError(
        "Either a searchable argument (text, file, files or dir) "
        "or piped input must be provided."
    )
