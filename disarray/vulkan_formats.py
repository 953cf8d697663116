"""Selection rules for swapchain formats, present modes, memory types and depth formats."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Iterable, Mapping, Sequence

FORMAT_B8G8R8A8_SRGB = 50
COLOR_SPACE_SRGB_NONLINEAR = 0

FORMAT_D16_UNORM = 124
FORMAT_D32_SFLOAT = 126
FORMAT_D16_UNORM_S8_UINT = 128
FORMAT_D24_UNORM_S8_UINT = 129
FORMAT_D32_SFLOAT_S8_UINT = 130

FORMAT_FEATURE_DEPTH_STENCIL_ATTACHMENT = 0x200

DEPTH_FORMATS = (
    FORMAT_D32_SFLOAT_S8_UINT,
    FORMAT_D32_SFLOAT,
    FORMAT_D24_UNORM_S8_UINT,
    FORMAT_D16_UNORM_S8_UINT,
    FORMAT_D16_UNORM,
)


class PresentMode(IntEnum):
    IMMEDIATE = 0
    MAILBOX = 1
    FIFO = 2
    FIFO_RELAXED = 3


class CompositeAlpha(IntFlag):
    OPAQUE = 0x1
    PRE_MULTIPLIED = 0x2
    POST_MULTIPLIED = 0x4
    INHERIT = 0x8


@dataclass(frozen=True)
class SurfaceFormat:
    format: int
    color_space: int = COLOR_SPACE_SRGB_NONLINEAR


def choose_surface_format(formats: Sequence[SurfaceFormat]) -> SurfaceFormat:
    """Prefer 8-bit BGRA sRGB with a non-linear sRGB colour space, else the first format."""
    if not formats:
        raise ValueError("no surface formats available")
    for candidate in formats:
        if (
            candidate.format == FORMAT_B8G8R8A8_SRGB
            and candidate.color_space == COLOR_SPACE_SRGB_NONLINEAR
        ):
            return candidate
    return formats[0]


def choose_present_mode(modes: Iterable[PresentMode]) -> PresentMode:
    """Mailbox when available, otherwise FIFO."""
    return PresentMode.MAILBOX if PresentMode.MAILBOX in set(modes) else PresentMode.FIFO


def choose_composite_alpha(supported: int) -> CompositeAlpha:
    """First supported mode in the order opaque, pre-, post-multiplied, inherit."""
    for flag in (
        CompositeAlpha.OPAQUE,
        CompositeAlpha.PRE_MULTIPLIED,
        CompositeAlpha.POST_MULTIPLIED,
        CompositeAlpha.INHERIT,
    ):
        if supported & flag:
            return flag
    return CompositeAlpha.OPAQUE


def find_memory_type(
    memory_type_flags: Sequence[int], type_filter: int, properties: int
) -> int:
    """Index of the first memory type allowed by the filter that has all the properties.

    ``memory_type_flags`` holds the property flags of each memory type in order.
    Raises LookupError when none fits.
    """
    for index, flags in enumerate(memory_type_flags):
        if type_filter & (1 << index) and (flags & properties) == properties:
            return index
    raise LookupError("failed to find suitable memory type!")


def supported_depth_format(format_features: Mapping[int, int]) -> int | None:
    """First depth format whose optimal-tiling features allow depth/stencil attachments.

    ``format_features`` maps a format to its optimal-tiling feature flags;
    formats not in it have none. Returns None if no depth format is usable.
    """
    for depth_format in DEPTH_FORMATS:
        if format_features.get(depth_format, 0) & FORMAT_FEATURE_DEPTH_STENCIL_ATTACHMENT:
            return depth_format
    return None