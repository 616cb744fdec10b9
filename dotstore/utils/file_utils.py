from __future__ import annotations

import os
import pathlib


def make_dirs(path: pathlib.Path, mode: int) -> None:
    """
    Create `path` and all its missing parents. Unlike `Path.mkdir(parents=True)`, every created
    directory (not only the last one) receives `mode` (subject to the process umask).
    """
    missing = []
    current = path
    while not current.is_dir():
        missing.append(current)
        if current.parent == current:
            break
        current = current.parent

    for directory in reversed(missing):
        directory.mkdir(mode=mode, exist_ok=True)


def write_text_file(
    path: pathlib.Path, content: str, *, mode: int, encoding: str, errors: str
) -> None:
    """
    Write `content` as the entire content of `path`. A newly created file receives `mode`
    (subject to the process umask), an existing file is truncated and keeps its permissions.
    """
    data = content.encode(encoding, errors)
    flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)
    fd = os.open(path, flags, mode)
    with os.fdopen(fd, "wb") as f:
        f.write(data)


def read_text_file(path: pathlib.Path, *, encoding: str, errors: str) -> str:
    return path.read_bytes().decode(encoding, errors)
