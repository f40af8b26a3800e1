"""Navigation over a scanned folder tree and records of items to delete."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Union

from diskmap.listing import FileType
from diskmap.tree import File, Folder

PathArg = Union[str, "os.PathLike[str]"]


@dataclass
class FileToDelete:
    """An item chosen for deletion, located relative to the scanned root."""

    path_in_filesystem: Path
    path_to_file: list[str]
    file_type: FileType
    num_descendants: int | None
    size: int

    def full_path(self) -> Path:
        """Absolute location of the item on disk."""
        return Path(self.path_in_filesystem).joinpath(*self.path_to_file)


@dataclass
class FileTree:
    """A scanned folder together with the user's position inside it."""

    base_folder: Folder
    path_in_filesystem: Path
    show_apparent_size: bool
    current_folder_names: list[str] = field(default_factory=list)
    space_freed: int = 0
    failed_to_read: int = 0

    @property
    def total_size(self) -> int:
        return self.base_folder.size

    @property
    def total_descendants(self) -> int:
        return self.base_folder.num_descendants

    @property
    def current_folder(self) -> Folder:
        if not self.current_folder_names:
            return self.base_folder
        item = self.base_folder.path(self.current_folder_names)
        if not isinstance(item, Folder):
            raise RuntimeError("current path does not lead to a folder")
        return item

    @property
    def current_folder_size(self) -> int:
        return self.current_folder.size

    @property
    def current_path(self) -> Path:
        return Path(self.path_in_filesystem).joinpath(*self.current_folder_names)

    def item_in_current_folder(self, item_name: str) -> File | Folder | None:
        """The named entry of the current folder, or None."""
        return self.current_folder.path([item_name])

    def enter_folder(self, folder_name: str) -> None:
        self.current_folder_names.append(folder_name)

    def leave_folder(self) -> bool:
        """Go up one level; False when already at the base folder."""
        if not self.current_folder_names:
            return False
        self.current_folder_names.pop()
        return True

    def delete_file(self, file_to_delete: FileToDelete) -> None:
        """Remove the item from the tree (not from disk)."""
        self.base_folder.delete_path(file_to_delete.path_to_file)

    def add_entry(self, entry_stat: os.stat_result, entry_full_path: PathArg) -> None:
        """Record a scanned entry given by its full path on disk."""
        base_length = len(PurePath(self.path_in_filesystem).parts)
        relative = PurePath(*PurePath(entry_full_path).parts[base_length:])
        self.base_folder.add_entry(entry_stat, relative, self.show_apparent_size)