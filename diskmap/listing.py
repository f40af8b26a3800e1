"""Listing a folder's contents ordered by share of the folder's size."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from diskmap.tree import Folder


class FileType(Enum):
    FILE = "file"
    FOLDER = "folder"


@dataclass
class FileMetadata:
    """One entry of a folder; ``percentage`` of 1.0 means 100%."""

    name: str
    size: int
    descendants: int | None
    percentage: float
    file_type: FileType


def _percentage(size: int, total_size: int, total_files_in_parent: int) -> float:
    if size == 0 and total_size == 0:
        # all files are empty: show them all as the same size
        return 1.0 / total_files_in_parent
    if total_size == 0:
        return math.inf
    return size / total_size


def files_in_folder(folder: Folder, offset: int) -> list[FileMetadata]:
    """Entries of ``folder`` largest first, skipping the ``offset`` largest ones."""
    count = len(folder.contents)
    files = []
    for name, item in folder.contents.items():
        if isinstance(item, Folder):
            descendants, file_type = item.num_descendants, FileType.FOLDER
        else:
            descendants, file_type = None, FileType.FILE
        files.append(
            FileMetadata(
                name=name,
                size=item.size,
                descendants=descendants,
                percentage=_percentage(item.size, folder.size, count),
                file_type=file_type,
            )
        )
    files.sort(key=lambda f: (-f.percentage, f.name))
    if offset > len(files):
        raise ValueError(f"offset {offset} exceeds number of entries {len(files)}")
    if offset > 0:
        removed, files = files[:offset], files[offset:]
        remaining_count = count - len(removed)
        remaining_size = folder.size - sum(f.size for f in removed)
        for entry in files:
            entry.percentage = _percentage(entry.size, remaining_size, remaining_count)
    return files