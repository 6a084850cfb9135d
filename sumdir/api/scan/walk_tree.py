"""Depth-first traversal of a directory tree."""

import os
from collections.abc import Iterator
from pathlib import Path

from .Entry import Entry
from .file_extension import file_extension
from .Outcome import Outcome


def walk_tree(root: Path) -> Iterator[Outcome]:
    """Yield an Outcome for every node strictly beneath ``root``.

    Successful outcomes carry an ``Entry``; failed ones carry the error and
    the best-available path. Directories are yielded before their contents
    and children are visited in name order. Symbolic links are classified by
    their target but never descended into. A directory that cannot be listed
    is still yielded as an entry, followed by a failure for its contents.
    """
    root = Path(root)
    if not root.is_dir():
        return

    listing = _list_dir(root)
    if not listing.ok:
        yield listing
        return

    stack: list[Iterator[os.DirEntry]] = [iter(listing.value)]
    while stack:
        dirent = next(stack[-1], None)
        if dirent is None:
            stack.pop()
            continue

        outcome = _to_entry(dirent)
        yield outcome
        if not outcome.ok:
            continue

        entry: Entry = outcome.value
        if entry.is_dir and not entry.is_symlink:
            listing = _list_dir(entry.path)
            if listing.ok:
                stack.append(iter(listing.value))
            else:
                yield listing


def _list_dir(path: Path) -> Outcome:
    try:
        with os.scandir(path) as it:
            children = sorted(it, key=lambda d: d.name)
    except OSError as exc:
        return Outcome.failure(path, str(exc))
    return Outcome.success(children, path)


def _to_entry(dirent: os.DirEntry) -> Outcome:
    path = Path(dirent.path)
    try:
        is_dir = dirent.is_dir()
        is_symlink = dirent.is_symlink()
    except OSError as exc:
        return Outcome.failure(path, str(exc))
    extension = "" if is_dir else file_extension(path)
    return Outcome.success(Entry(path=path, is_dir=is_dir, extension=extension, is_symlink=is_symlink), path)
