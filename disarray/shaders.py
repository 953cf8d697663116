"""Shader lists, vertex layouts, blend states and push-constant packing."""

from __future__ import annotations

import re
import struct
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import IntEnum
from os import PathLike
from pathlib import Path
from typing import Iterable, Iterator, Union

PathType = Union[str, "PathLike[str]"]

FORMAT_R32G32_SFLOAT = 103
FORMAT_R32G32B32A32_SFLOAT = 109

COLOR_WRITE_RGBA = 0x1 | 0x2 | 0x4 | 0x8

MAX_PUSH_CONSTANT_BYTES = 255
MAX_UNIFORM_DATA_BYTES = 255

_INT_RE = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


class BlendFactor(IntEnum):
    ZERO = 0
    ONE = 1
    SRC_ALPHA = 6
    ONE_MINUS_SRC_ALPHA = 7


class BlendOp(IntEnum):
    ADD = 0


@dataclass(frozen=True)
class ShaderSpec:
    """A shader program to build: its base name and pipeline options."""

    name: str
    use_uvs: bool = False
    use_alpha_blend: bool = False


@dataclass(frozen=True)
class Uniform:
    """A named block of raw uniform or push-constant data."""

    name: str
    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) > MAX_UNIFORM_DATA_BYTES:
            raise ValueError(
                f"uniform data is {len(self.data)} bytes, "
                f"at most {MAX_UNIFORM_DATA_BYTES} allowed"
            )

    @classmethod
    def from_floats(cls, name: str, values: Iterable[float]) -> Uniform:
        """Build a uniform from 32-bit native-order floats."""
        values = list(values)
        return cls(name, struct.pack(f"={len(values)}f", *values))


@dataclass(frozen=True)
class VertexBinding:
    binding: int
    stride: int
    per_instance: bool = False


@dataclass(frozen=True)
class VertexAttribute:
    location: int
    binding: int
    format: int
    offset: int = 0


@dataclass(frozen=True)
class BlendState:
    """Colour blend settings for the single colour attachment."""

    enabled: bool = False
    src_color: BlendFactor = BlendFactor.ZERO
    dst_color: BlendFactor = BlendFactor.ZERO
    color_op: BlendOp = BlendOp.ADD
    src_alpha: BlendFactor = BlendFactor.ZERO
    dst_alpha: BlendFactor = BlendFactor.ZERO
    alpha_op: BlendOp = BlendOp.ADD
    color_write_mask: int = COLOR_WRITE_RGBA


def parse_shader_list(path: PathType) -> list[ShaderSpec]:
    """Read the ``<Shaders>`` list of ``<Shader>`` entries from an XML file.

    Entries without attributes or without a name are skipped. Attributes
    missing from an entry keep the value given by an earlier entry.
    Raises OSError if the file cannot be read and ET.ParseError if it is not XML.
    """
    root = ET.parse(path).getroot()
    shaders_node = root if root.tag == "Shaders" else root.find("Shaders")
    if shaders_node is None:
        return []

    specs = []
    name = ""
    use_uvs = 0
    use_alpha_blend = 0
    for node in shaders_node:
        if node.tag != "Shader" or not node.attrib:
            continue
        for key, value in node.attrib.items():
            if key == "name":
                name = value
            elif key == "useUvs":
                use_uvs = _atoi(value)
            elif key == "useAlphaBlend":
                use_alpha_blend = _atoi(value)
        if name:
            specs.append(ShaderSpec(name, bool(use_uvs), bool(use_alpha_blend)))
    return specs


def shader_paths(name: str, use_vulkan: bool) -> tuple[str, str]:
    """Vertex and fragment shader file paths for a shader name."""
    if use_vulkan:
        return f"shaders/{name}_vert.spv", f"shaders/{name}_frag.spv"
    return f"shaders/{name}.vert", f"shaders/{name}.frag"


def vertex_layout(
    need_uvs: bool,
) -> tuple[list[VertexBinding], list[VertexAttribute]]:
    """Vertex bindings and attributes: position, optional uvs, then colour.

    Each attribute has its own binding; positions and uvs are two floats,
    colours four.
    """
    color_binding = 2 if need_uvs else 1
    bindings = [
        VertexBinding(index, 16 if index == color_binding else 8)
        for index in range(color_binding + 1)
    ]
    attributes = [VertexAttribute(0, 0, FORMAT_R32G32_SFLOAT)]
    if need_uvs:
        attributes.append(VertexAttribute(1, 1, FORMAT_R32G32_SFLOAT))
    attributes.append(
        VertexAttribute(color_binding, color_binding, FORMAT_R32G32B32A32_SFLOAT)
    )
    return bindings, attributes


def blend_state(need_alpha_blend: bool) -> BlendState:
    """Standard source-alpha blending when asked for, otherwise no blending."""
    if not need_alpha_blend:
        return BlendState()
    return BlendState(
        enabled=True,
        src_color=BlendFactor.SRC_ALPHA,
        dst_color=BlendFactor.ONE_MINUS_SRC_ALPHA,
        color_op=BlendOp.ADD,
        src_alpha=BlendFactor.ONE,
        dst_alpha=BlendFactor.ZERO,
        alpha_op=BlendOp.ADD,
    )


def pack_push_constants(constants: Iterable[Uniform]) -> bytes:
    """Concatenate the data of the constants in order.

    Raises ValueError if the result exceeds the push-constant buffer.
    """
    packed = b"".join(constant.data for constant in constants)
    if len(packed) > MAX_PUSH_CONSTANT_BYTES:
        raise ValueError(
            f"push constants take {len(packed)} bytes, "
            f"at most {MAX_PUSH_CONSTANT_BYTES} allowed"
        )
    return packed


@dataclass
class ShaderLoader:
    """Collects the shader programs an application uses."""

    use_vulkan: bool = False
    shaders: list[ShaderSpec] = field(default_factory=list)

    def __iter__(self) -> Iterator[ShaderSpec]:
        return iter(self.shaders)

    def __len__(self) -> int:
        return len(self.shaders)

    def load(self, basedir: PathType, list_file: PathType) -> list[ShaderSpec]:
        """Add every shader listed in ``basedir/list_file``; return the added ones."""
        specs = parse_shader_list(Path(basedir) / list_file)
        self.shaders.extend(specs)
        return specs

    def add_shader(
        self, name: str, use_uvs: bool, need_alpha_blend: bool
    ) -> ShaderSpec:
        """Add a single shader by name."""
        spec = ShaderSpec(name, bool(use_uvs), bool(need_alpha_blend))
        self.shaders.append(spec)
        return spec

    def clear(self) -> None:
        """Forget all shaders."""
        self.shaders.clear()