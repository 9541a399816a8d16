"""Pasting data, managing bookmarks and reading part of a file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from hexblock.block_ops import EditError, EditorState


@dataclass
class Bookmark:
    """A named position in the data."""

    offset: int
    name: str = ""


@dataclass(frozen=True)
class PartialFile:
    """A slice of a file loaded for editing."""

    data: bytes
    offset: int
    length: int
    file_length: int


def paste(
    state: EditorState,
    payload: bytes,
    times: int = 1,
    skip: int = 0,
    insert: bool = True,
) -> tuple[int, int]:
    """Paste ``payload`` ``times`` times, leaving ``skip`` bytes between copies.

    With a selection the selected bytes are replaced by the pasted ones.
    Otherwise the copies are inserted at the caret, or overwrite the bytes
    there when ``insert`` is false. Returns the offset and length of the
    region recorded for undo.
    """
    payload = bytes(payload)
    if times <= 0:
        raise EditError("data must be pasted at least once")
    if skip < 0:
        raise EditError("skip must not be negative")
    if not payload:
        raise EditError("nothing to paste")
    length = len(payload)
    covered = (times - 1) * (skip + length) + length

    if state.selected or insert:
        data = state.data
        if state.selected:
            start = min(state.start_of_selection, state.end_of_selection)
            end = max(state.start_of_selection, state.end_of_selection)
            if end >= len(data):
                raise EditError("selection lies outside the data")
            cur = start
            old = bytes(data[cur:end + 1 + (times - 1) * skip])
            remaining = len(data) - (end - cur + 1)
        else:
            cur = state.cur_byte
            if cur < 0 or cur > len(data):
                raise EditError("caret lies outside the data")
            old = bytes(data[cur:cur + (times - 1) * skip])
            remaining = len(data)
        # Each copy must start within the data as it stands at that moment.
        if cur + (times - 1) * skip > remaining:
            raise EditError("not enough data to skip between copies")
        if state.selected:
            del data[cur:end + 1]
            state.selected = False
            state.cur_byte = cur
        position = cur
        for _ in range(times):
            data[position:position] = payload
            position += length + skip
    else:
        cur = state.cur_byte
        if cur < 0 or len(state.data) - cur < (skip + length) * times:
            raise EditError("not enough space to overwrite")
        old = bytes(state.data[cur:cur + covered])
        for copy in range(times):
            at = cur + copy * (skip + length)
            state.data[at:at + length] = payload

    state.changed = True
    state.undo.append((cur, covered, old))
    return cur, covered


def bookmark_labels(bookmarks: list[Bookmark]) -> list[str]:
    """Labels for a list of bookmarks, numbered from one."""
    return [
        f"{number} {mark.name} (0x{mark.offset:x})" if mark.name
        else f"{number} 0x{mark.offset:x}"
        for number, mark in enumerate(bookmarks, start=1)
    ]


def remove_bookmark(bookmarks: list[Bookmark], index: int) -> Bookmark:
    """Remove and return the bookmark at ``index``; later ones move up."""
    if not 0 <= index < len(bookmarks):
        raise IndexError("no bookmark at that index")
    return bookmarks.pop(index)


def open_partially(
    path: str | os.PathLike,
    count: int,
    offset: int = 0,
    from_end: bool = False,
) -> PartialFile:
    """Read ``count`` bytes of a file from ``offset``, or its last ``count`` bytes."""
    if count < 0:
        raise EditError("number of bytes must not be negative")
    path = Path(path)
    file_length = path.stat().st_size
    if from_end:
        start = file_length - count
        if start < 0:
            raise EditError("more bytes requested than the file holds")
    else:
        if offset < 0:
            raise EditError("invalid start offset")
        start = offset
    if start + count > file_length:
        raise EditError("the range runs past the end of the file")
    with path.open("rb") as handle:
        handle.seek(start)
        data = handle.read(count)
    if len(data) != count:
        raise OSError(f"could not read {count} bytes from {path}")
    return PartialFile(data=data, offset=start, length=count, file_length=file_length)