# diskmap

An in-memory model of a directory tree's disk usage. It also has a
squarified treemap layout that turns a folder's contents into rectangular
tiles, with keyboard-style selection moving between neighbouring tiles.

## Install

```
pip install .
```

## Building a tree

```python
import os
from pathlib import Path

from diskmap.tree import Folder
from diskmap.file_tree import FileTree

root = Path("/some/dir")
tree = FileTree(Folder.from_path(root), root, show_apparent_size=True)
for dirpath, dirnames, filenames in os.walk(root):
    for name in dirnames + filenames:
        full = Path(dirpath) / name
        tree.add_entry(full.lstat(), full)

print(tree.total_size, tree.total_descendants)
```

With `show_apparent_size=True` a file counts as its length (`st_size`).
Otherwise it counts as the space it takes on disk (`st_blocks * 512`,
or `st_size` where the platform reports no block count).

`tree.enter_folder(name)` moves into a folder and `tree.leave_folder()`
moves back up. `leave_folder()` returns `False` when you are already at
the base folder. The properties `tree.current_folder`,
`tree.current_folder_size` and `tree.current_path` describe where you are,
and `tree.item_in_current_folder(name)` looks up one entry there.

`Folder` and `File` in `diskmap.tree` make up the tree itself. A folder
keeps `size` and `num_descendants` up to date for everything below it.
`Folder.path(names)` looks up an item. `Folder.delete_path(names)` removes
it and adjusts the totals of every folder on the way.

To take an item out of the tree, describe it with
`diskmap.file_tree.FileToDelete` and pass that to `tree.delete_file(...)`.
`FileToDelete.full_path()` gives its location on disk.

## Listing a folder

`diskmap.listing.files_in_folder(folder, offset)` returns the entries of a
folder as `FileMetadata`, largest first, with ties ordered by name. Each
entry carries its `percentage`, its share of the folder as a fraction
where 1.0 means all of it. When every entry is empty, they get equal
shares. A non-zero `offset` drops that many of the largest entries and
works the shares out again over what is left.

## Laying out tiles

```python
from diskmap.board import Board
from diskmap.geometry import Rect

folder = tree.current_folder
board = Board(folder)
board.change_area(Rect(x=0, y=0, width=190, height=50))
for tile in board.tiles:
    print(tile.name, tile.x, tile.y, tile.width, tile.height)

board.move_selected_right()
print(board.currently_selected())
```

Tiles narrower than 8 cells or shorter than 3 are not drawn. They are
gathered into a single rectangular area whose top-left corner is
`board.unrenderable_tile_coordinates`, which is `None` if every entry fits.

On a board with no selection, the first move selects tile 0. A move that
goes off the edge of the screen clears the selection.
`board.move_to_largest_folder()` selects the first folder tile.

`board.zoom_in(folder)` and `board.zoom_out(folder)` hide or bring back
the largest entries so the smaller ones get more room, and
`board.reset_zoom(folder)` shows them all again.
`board.record_current_index_and_zoom_level()` and
`board.pop_previous_index_and_zoom_level()` keep a stack of earlier
selections and zoom levels.

The lower-level pieces can be used on their own:
- `diskmap.treemap.TreeMap(area).populate_tiles(entries)`
- `diskmap.tile.Tile`
- `diskmap.geometry.RectFloat.round()`

`diskmap.ui_effects.UiEffects` holds flags for transient display state.

## What it does not do

This is a library only.
- There is no command to run.
- It has no terminal screen and does no drawing.
- It does not walk directories itself; you feed it entries as shown above.
- It never deletes anything from disk. `delete_file` only updates the in-memory tree.

## Tests

```
pip install .[test]
pytest
```