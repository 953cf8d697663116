"""System settings stored in an XML file."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from os import PathLike
from typing import Union

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

PathType = Union[str, "PathLike[str]"]


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


@dataclass
class SystemConfig:
    """Screen, renderer and audio settings."""

    music_volume: float = 0.2
    post_shader: str = ""
    render_idx: int = 0
    screen_width: int = 640
    screen_height: int = 480
    use_windowed: bool = True
    screen_scale_x: int = 1
    screen_scale_y: int = 1

    def load(self, path: PathType) -> None:
        """Read settings from an XML file; settings missing from it keep their values.

        Raises OSError if the file cannot be read and ET.ParseError if it is not XML.
        """
        root = ET.parse(path).getroot()
        settings = root if root.tag == "Settings" else root.find("Settings")
        if settings is None:
            return

        def text_of(tag: str) -> str | None:
            node = settings.find(tag)
            if node is None:
                return None
            return node.text or ""

        if (value := text_of("MusicVolume")) is not None:
            self.music_volume = _atof(value)
        if (value := text_of("PostShaderName")) is not None:
            self.post_shader = value.strip()
        if (value := text_of("Renderer")) is not None:
            self.render_idx = _atoi(value)
        if (value := text_of("ScreenWidth")) is not None:
            self.screen_width = _atoi(value)
        if (value := text_of("ScreenHeight")) is not None:
            self.screen_height = _atoi(value)
        if (value := text_of("isWindowed")) is not None:
            self.use_windowed = bool(_atoi(value))
        if (value := text_of("screenScaleX")) is not None:
            self.screen_scale_x = _atoi(value)
        if (value := text_of("screenScaleY")) is not None:
            self.screen_scale_y = _atoi(value)

    def write(self, path: PathType) -> None:
        """Write the settings to an XML file. Raises OSError on failure."""
        settings = ET.Element("Settings")
        entries = (
            ("MusicVolume", f"{self.music_volume:f}"),
            ("Renderer", str(self.render_idx)),
            ("ScreenWidth", str(self.screen_width)),
            ("ScreenHeight", str(self.screen_height)),
            ("isWindowed", str(int(self.use_windowed))),
            ("screenScaleX", str(self.screen_scale_x)),
            ("screenScaleY", str(self.screen_scale_y)),
            ("PostShaderName", self.post_shader),
        )
        for tag, text in entries:
            ET.SubElement(settings, tag).text = text

        tree = ET.ElementTree(settings)
        ET.indent(tree)
        tree.write(path, encoding="utf-8", xml_declaration=True)