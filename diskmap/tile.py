"""A rectangle on the board standing for one file or folder."""

from __future__ import annotations

from dataclasses import dataclass

from diskmap.geometry import RectFloat
from diskmap.listing import FileMetadata, FileType


@dataclass
class Tile:
    x: int
    y: int
    width: int
    height: int
    name: str
    size: int
    descendants: int | None
    percentage: float
    file_type: FileType

    @classmethod
    def from_metadata(cls, rect: RectFloat, file_metadata: FileMetadata) -> Tile:
        rounded = rect.round()
        return cls(
            x=rounded.x,
            y=rounded.y,
            width=rounded.width,
            height=rounded.height,
            name=file_metadata.name,
            size=file_metadata.size,
            descendants=file_metadata.descendants,
            percentage=file_metadata.percentage,
            file_type=file_metadata.file_type,
        )

    def is_directly_right_of(self, other: Tile) -> bool:
        return self.x == other.x + other.width

    def is_directly_left_of(self, other: Tile) -> bool:
        return self.x + self.width == other.x

    def is_directly_below(self, other: Tile) -> bool:
        return self.y == other.y + other.height

    def is_directly_above(self, other: Tile) -> bool:
        return self.y + self.height == other.y

    def horizontally_overlaps_with(self, other: Tile) -> bool:
        self_bottom = self.y + self.height
        other_bottom = other.y + other.height
        return (
            (other.y <= self.y <= other_bottom)
            or (other.y < self_bottom <= other_bottom)
            or (self.y <= other.y and self_bottom >= other_bottom)
            or (other.y <= self.y and other_bottom >= self_bottom)
        )

    def vertically_overlaps_with(self, other: Tile) -> bool:
        self_right = self.x + self.width
        other_right = other.x + other.width
        return (
            (other.x <= self.x <= other_right)
            or (other.x < self_right <= other_right)
            or (self.x <= other.x and self_right >= other_right)
            or (other.x <= self.x and other_right >= self_right)
        )

    def vertical_overlap_with(self, other: Tile) -> int:
        """Number of columns the two tiles have in common."""
        return min(self.x + self.width, other.x + other.width) - max(self.x, other.x)

    def horizontal_overlap_with(self, other: Tile) -> int:
        """Number of rows the two tiles have in common."""
        return min(self.y + self.height, other.y + other.height) - max(self.y, other.y)