"""Texture atlas bookkeeping: picture lists, tile sizes and irregular sprites."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterator, Union

PathType = Union[str, "PathLike[str]"]

_INT_RE = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str | None) -> int:
    if text is None:
        return 0
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _base_name(path: str) -> str | None:
    """Last non-empty '/'-separated part of a path, or None if there is none."""
    parts = [part for part in path.split("/") if part]
    return parts[-1] if parts else None


@dataclass
class Sprite:
    """An irregular sprite inside an atlas image, in pixels from the top left."""

    name: str = ""
    start_x: int = 0
    start_y: int = 0
    width: int = 0
    height: int = 0


@dataclass
class PicData:
    """An atlas image: its file name, tile size, pixel size and sprites."""

    name: str = ""
    twidth: int = 0
    theight: int = 0
    filter: int = 0
    width: int = 0
    height: int = 0
    sprites: list[Sprite] = field(default_factory=list)

    @property
    def htilew(self) -> float:
        """Half the tile width."""
        return self.twidth / 2.0

    @property
    def htileh(self) -> float:
        """Half the tile height."""
        return self.theight / 2.0

    @property
    def vframes(self) -> int:
        """Number of tile rows in the image."""
        return self.height // self.theight if self.theight else 0

    @property
    def hframes(self) -> int:
        """Number of tile columns in the image."""
        return self.width // self.twidth if self.twidth else 0


def _parse_sprite(node: ET.Element) -> Sprite:
    sprite = Sprite()
    for key, value in node.attrib.items():
        if key == "name":
            sprite.name = value
        elif key == "x":
            sprite.start_x = _atoi(value)
        elif key == "y":
            sprite.start_y = _atoi(value)
        elif key == "width":
            sprite.width = _atoi(value)
        elif key == "height":
            sprite.height = _atoi(value)
    return sprite


def _parse_image(node: ET.Element) -> PicData:
    data = PicData()
    for key, value in node.attrib.items():
        if key == "src":
            data.name = value
        elif key == "width":
            data.twidth = _atoi(value)
        elif key == "height":
            data.theight = _atoi(value)
        elif key == "filter":
            data.filter = _atoi(value)

    path_node = node.find("Path")
    if path_node is not None:
        data.name = (path_node.text or "").strip()

    sprites_node = node.find("Sprites")
    if sprites_node is not None:
        data.sprites = [_parse_sprite(child) for child in sprites_node]
    return data


def parse_picture_list(path: PathType) -> list[PicData]:
    """Read the ``<Images>`` list of ``<Img>`` entries from an XML file.

    Raises OSError if the file cannot be read and ET.ParseError if it is not XML.
    """
    root = ET.parse(path).getroot()
    images = root if root.tag == "Images" else root.find("Images")
    if images is None:
        return []
    return [_parse_image(node) for node in images if node.tag == "Img"]


@dataclass
class TextureAtlas:
    """An indexed collection of atlas images."""

    entries: list[PicData] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PicData]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> PicData:
        return self.entries[index]

    def load_list(self, path: PathType) -> list[PicData]:
        """Append every image listed in an XML picture list; return the added ones."""
        added = parse_picture_list(path)
        self.entries.extend(added)
        return added

    def set_entry(
        self, index: int, twidth: int, theight: int, filter: int, name: str
    ) -> PicData:
        """Set the tile size, filter and name of an entry, growing the atlas if needed.

        New entries created to fill the gap get the same tile size and filter.
        Only the last part of ``name`` after a '/' is kept.
        """
        if index < 0:
            raise IndexError("atlas index must not be negative")
        while len(self.entries) < index + 1:
            self.entries.append(PicData(twidth=twidth, theight=theight, filter=filter))

        entry = self.entries[index]
        entry.twidth = twidth
        entry.theight = theight
        entry.filter = filter
        base = _base_name(name)
        if base is not None:
            entry.name = base
        return entry

    def set_image_size(self, index: int, width: int, height: int) -> PicData:
        """Record the pixel size of a loaded image. Raises IndexError if out of range."""
        entry = self.info(index)
        if entry is None:
            raise IndexError(f"no atlas entry {index}")
        entry.width = width
        entry.height = height
        return entry

    def find_by_name(self, name: str) -> int | None:
        """Index of the first entry with the given name, or None."""
        return next(
            (index for index, entry in enumerate(self.entries) if entry.name == name),
            None,
        )

    def remove(self, index: int) -> None:
        """Remove an entry; indices out of range are ignored."""
        if 0 <= index < len(self.entries):
            del self.entries[index]

    def info(self, index: int) -> PicData | None:
        """The entry at ``index``, or None when out of range."""
        if 0 <= index < len(self.entries):
            return self.entries[index]
        return None