"""The board of tiles shown for the current folder, with selection and zoom."""

from __future__ import annotations

from collections.abc import Callable

from diskmap.geometry import Rect
from diskmap.listing import FileMetadata, FileType, files_in_folder
from diskmap.tile import Tile
from diskmap.tree import Folder
from diskmap.treemap import TreeMap


class Board:
    """Tiles of one folder laid out on a screen area.

    ``selected_index`` is None when nothing is selected. ``zoom_level`` is the
    number of largest entries hidden so the smaller ones get more room.
    """

    def __init__(self, folder: Folder) -> None:
        self.tiles: list[Tile] = []
        self.unrenderable_tile_coordinates: tuple[int, int] | None = None
        self.selected_index: int | None = None
        self.previous_indices_and_zoom_level: list[tuple[int | None, int]] = []
        self.zoom_level = 0
        self._area = Rect(0, 0, 0, 0)
        self._files: list[FileMetadata] = files_in_folder(folder, 0)

    def change_files(self, folder: Folder) -> None:
        """Show the entries of ``folder`` at the current zoom level."""
        self._files = files_in_folder(folder, self.zoom_level)
        self._fill()

    def change_area(self, area: Rect) -> None:
        """Lay the tiles out again if the screen area changed."""
        if self._area != area:
            self._area = area
            self._fill()

    def _fill(self) -> None:
        tree_map = TreeMap(self._area)
        tree_map.populate_tiles(self._files)
        self.tiles = tree_map.tiles
        self.unrenderable_tile_coordinates = tree_map.unrenderable_tile_coordinates

    def currently_selected(self) -> Tile | None:
        """The selected tile, or None."""
        if self.selected_index is None or not 0 <= self.selected_index < len(self.tiles):
            return None
        return self.tiles[self.selected_index]

    def pop_previous_index_and_zoom_level(self) -> tuple[int | None, int] | None:
        """Take the most recently recorded selection and zoom level, if any."""
        if not self.previous_indices_and_zoom_level:
            return None
        return self.previous_indices_and_zoom_level.pop()

    def move_to_largest_folder(self) -> None:
        """Select the first (largest) folder tile, if there is one."""
        for index, tile in enumerate(self.tiles):
            if tile.file_type == FileType.FOLDER:
                self.selected_index = index
                return

    def _move(
        self,
        is_adjacent: Callable[[Tile, Tile], bool],
        overlaps: Callable[[Tile, Tile], bool],
        overlap_amount: Callable[[Tile, Tile], int],
    ) -> None:
        current = self.currently_selected()
        if current is None:
            self.selected_index = 0
            return
        best_index: int | None = None
        best_overlap = 0
        for index, candidate in enumerate(self.tiles):
            if not (is_adjacent(candidate, current) and overlaps(candidate, current)):
                continue
            amount = overlap_amount(candidate, current)
            # on ties the later tile wins
            if best_index is None or amount >= best_overlap:
                best_index, best_overlap = index, amount
        # moving off the edge of the screen clears the selection
        self.selected_index = best_index

    def move_selected_right(self) -> None:
        self._move(
            Tile.is_directly_right_of,
            Tile.horizontally_overlaps_with,
            Tile.horizontal_overlap_with,
        )

    def move_selected_left(self) -> None:
        self._move(
            Tile.is_directly_left_of,
            Tile.horizontally_overlaps_with,
            Tile.horizontal_overlap_with,
        )

    def move_selected_down(self) -> None:
        self._move(
            Tile.is_directly_below,
            Tile.vertically_overlaps_with,
            Tile.vertical_overlap_with,
        )

    def move_selected_up(self) -> None:
        self._move(
            Tile.is_directly_above,
            Tile.vertically_overlaps_with,
            Tile.vertical_overlap_with,
        )

    def zoom_in(self, folder: Folder) -> None:
        """Hide one more of the largest entries, while any are shown."""
        if self.zoom_level < len(self._files):
            self.zoom_level += 1
            self._files = files_in_folder(folder, self.zoom_level)
            self._fill()

    def zoom_out(self, folder: Folder) -> None:
        """Bring back the last hidden entry."""
        if self.zoom_level > 0:
            self.zoom_level -= 1
            self._files = files_in_folder(folder, self.zoom_level)
            self._fill()

    def reset_zoom(self, folder: Folder) -> None:
        self.zoom_level = 0
        self._files = files_in_folder(folder, self.zoom_level)
        self._fill()

    def record_current_index_and_zoom_level(self) -> None:
        self.previous_indices_and_zoom_level.append((self.selected_index, self.zoom_level))