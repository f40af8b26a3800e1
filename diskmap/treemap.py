"""Squarified treemap layout of a folder's entries onto a screen area."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from diskmap.geometry import Rect, RectFloat
from diskmap.listing import FileMetadata
from diskmap.tile import Tile

HEIGHT_WIDTH_RATIO = 2.5
MINIMUM_HEIGHT = 3
MINIMUM_WIDTH = 8


def _div(a: float, b: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


class TreeMap:
    """Lays out entries as tiles; entries too small to draw are gathered in one corner."""

    def __init__(self, empty_space: Rect) -> None:
        self.tiles: list[Tile] = []
        self.unrenderable_tile_coordinates: tuple[int, int] | None = None
        self._empty_space = RectFloat.from_rect(empty_space)
        self._total_size = self._empty_space.height * self._empty_space.width

    def populate_tiles(self, children: Iterable[FileMetadata]) -> None:
        """Lay out ``children`` (largest first) into tiles."""
        self._squarify(list(children))
        if self.unrenderable_tile_coordinates is not None:
            # the unrenderable area must stay a rectangle, so drop any tile
            # that slipped into it through rounding
            x, y = self.unrenderable_tile_coordinates
            self.tiles = [tile for tile in self.tiles if tile.x < x or tile.y < y]

    def _area(self, file_metadata: FileMetadata) -> float:
        return file_metadata.percentage * self._total_size

    def _layout_row(self, row: Sequence[FileMetadata]) -> None:
        space = self._empty_space
        row_total = sum(self._area(f) for f in row)
        horizontal = space.width <= space.height * HEIGHT_WIDTH_RATIO
        progress = space.x if horizontal else space.y
        row_depth = 0.0
        for file_metadata in row:
            size = self._area(file_metadata)
            side = space.width if horizontal else space.height
            first_side = _div(size, row_total) * side
            # keep the row a constant depth, even if that fudges the tile a little
            candidate = _div(size, first_side)
            second_side = row_depth if row_depth > candidate else candidate
            if horizontal:
                rect = RectFloat(progress, space.y, first_side, second_side)
            else:
                rect = RectFloat(space.x, progress, second_side, first_side)
            progress += first_side

            tile = Tile.from_metadata(rect, file_metadata)
            if tile.height < MINIMUM_HEIGHT or tile.width < MINIMUM_WIDTH:
                self._add_unrenderable_tile(tile)
            else:
                self.tiles.append(tile)

            if second_side > row_depth:
                row_depth = second_side

        if horizontal:
            space.height -= row_depth
            space.y += row_depth
        else:
            space.width -= row_depth
            space.x += row_depth

    def _add_unrenderable_tile(self, tile: Tile) -> None:
        if tile.width == 0 or tile.height == 0:
            # a rounding artefact, not a real tile
            return
        if self.unrenderable_tile_coordinates is None:
            self.unrenderable_tile_coordinates = (tile.x, tile.y)
        else:
            x, y = self.unrenderable_tile_coordinates
            self.unrenderable_tile_coordinates = (min(tile.x, x), min(tile.y, y))

    def _worst_in_renderable_row(
        self,
        row: Sequence[FileMetadata],
        length_of_row: float,
        min_first_side: float,
        min_second_side: float,
    ) -> float | None:
        """Worst aspect ratio of the row, or None if any of its items cannot be drawn."""
        total = sum(self._area(f) for f in row)
        worst: float | None = None
        for file_metadata in row:
            size = self._area(file_metadata)
            first_side = _div(size, total) * length_of_row
            second_side = _div(size, first_side)
            if not (first_side >= min_first_side and second_side >= min_second_side):
                return None
            if first_side < second_side:
                ratio = first_side / second_side
            else:
                ratio = second_side / first_side
            if worst is None or ratio < worst:
                worst = ratio
        return worst

    def _has_renderable_items(
        self,
        row: Sequence[FileMetadata],
        min_first_side: float,
        min_second_side: float,
    ) -> bool:
        return any(min_first_side * min_second_side <= self._area(f) for f in row)

    def _squarify(self, children: list[FileMetadata]) -> None:
        row: list[FileMetadata] = []
        while True:
            space = self._empty_space
            if space.height * HEIGHT_WIDTH_RATIO < space.width:
                length_of_row = space.height * HEIGHT_WIDTH_RATIO
                min_first_side = MINIMUM_HEIGHT * HEIGHT_WIDTH_RATIO
                min_second_side = MINIMUM_WIDTH / HEIGHT_WIDTH_RATIO
            else:
                length_of_row = space.width / HEIGHT_WIDTH_RATIO
                min_first_side = MINIMUM_WIDTH / HEIGHT_WIDTH_RATIO
                min_second_side = MINIMUM_HEIGHT * HEIGHT_WIDTH_RATIO

            if not children:
                self._layout_row(row)
                return
            if not self._has_renderable_items(children, min_first_side, min_second_side):
                self._layout_row(row)
                self._layout_row(children)
                return

            current_ratio = self._worst_in_renderable_row(
                row, length_of_row, min_first_side, min_second_side
            )
            next_ratio = self._worst_in_renderable_row(
                [*row, children[0]], length_of_row, min_first_side, min_second_side
            )
            if current_ratio is None or (
                next_ratio is not None and current_ratio < next_ratio
            ):
                # either the row is not drawable yet, or the next child improves it
                row.append(children.pop(0))
            else:
                self._layout_row(row)
                row = []