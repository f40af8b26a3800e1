"""In-memory tree of scanned files and folders with aggregated sizes."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Sequence, Union

PathArg = Union[str, "os.PathLike[str]"]


def _parts(path: PathArg) -> tuple[str, ...]:
    return PurePath(path).parts


def _size_on_disk(entry_stat: os.stat_result) -> int:
    blocks = getattr(entry_stat, "st_blocks", None)
    if blocks is None:
        return entry_stat.st_size
    return blocks * 512


def _descendants(item: File | Folder) -> int:
    return item.num_descendants if isinstance(item, Folder) else 1


@dataclass
class File:
    """A regular file and the number of bytes it accounts for."""

    name: str
    size: int


@dataclass
class Folder:
    """A folder holding files and folders, with totals for everything below it."""

    name: str
    contents: dict[str, File | Folder] = field(default_factory=dict)
    size: int = 0
    num_descendants: int = 0

    @classmethod
    def from_path(cls, path: PathArg) -> Folder:
        """Create an empty folder named after the last component of ``path``."""
        parts = _parts(path)
        if not parts:
            raise ValueError("could not get path base name")
        return cls(parts[-1])

    def add_entry(
        self,
        entry_stat: os.stat_result,
        relative_path: PathArg,
        show_apparent_size: bool,
    ) -> None:
        """Record a scanned entry; apparent size means file length rather than disk usage."""
        if stat.S_ISDIR(entry_stat.st_mode):
            self.add_folder(relative_path)
            return
        if show_apparent_size:
            size = entry_stat.st_size
        else:
            size = _size_on_disk(entry_stat)
        self.add_file(relative_path, size)

    def _child_folder(self, name: str) -> Folder:
        child = self.contents.setdefault(name, Folder(name))
        if not isinstance(child, Folder):
            raise ValueError("got a file in the middle of a path")
        return child

    def add_folder(self, path: PathArg) -> None:
        """Add an (empty) folder at ``path`` relative to this folder."""
        self._add_folder_parts(_parts(path))

    def _add_folder_parts(self, parts: tuple[str, ...]) -> None:
        if not parts:
            return
        name, rest = parts[0], parts[1:]
        if rest:
            child = self._child_folder(name)
            self.num_descendants += 1
            child._add_folder_parts(rest)
        else:
            self.num_descendants += 1
            self.contents[name] = Folder(name)

    def add_file(self, path: PathArg, size: int) -> None:
        """Add a file of ``size`` bytes at ``path`` relative to this folder."""
        self._add_file_parts(_parts(path), size)

    def _add_file_parts(self, parts: tuple[str, ...], size: int) -> None:
        if not parts:
            return
        name, rest = parts[0], parts[1:]
        if rest:
            child = self._child_folder(name)
            self.size += size
            self.num_descendants += 1
            child._add_file_parts(rest, size)
        else:
            self.size += size
            self.num_descendants += 1
            self.contents[name] = File(name, size)

    def path(self, folder_names: Sequence[str]) -> File | Folder | None:
        """Look up an item by its chain of names; a file met midway is returned as is."""
        if not folder_names:
            raise ValueError("path must contain at least one name")
        name, *rest = folder_names
        item = self.contents.get(name)
        if item is None:
            return None
        if rest and isinstance(item, Folder):
            return item.path(rest)
        return item

    def delete_path(self, folder_names: Sequence[str]) -> None:
        """Remove the item at the given chain of names and update all totals on the way."""
        if not folder_names:
            raise ValueError("path must contain at least one name")
        if len(folder_names) == 1:
            name = folder_names[0]
            try:
                item = self.contents.pop(name)
            except KeyError:
                raise KeyError(f"could not find {name!r}") from None
            self.size -= item.size
            self.num_descendants -= _descendants(item)
            return
        item = self.path(folder_names)
        if item is None:
            raise KeyError(f"could not find item to delete: {list(folder_names)!r}")
        next_item = self.contents[folder_names[0]]
        if not isinstance(next_item, Folder):
            raise ValueError("got a file in the middle of a path")
        self.size -= item.size
        self.num_descendants -= _descendants(item)
        next_item.delete_path(folder_names[1:])