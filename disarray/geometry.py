"""Quad geometry for sprites: texture ranges, corner colours and vertex positions."""

from __future__ import annotations

import math
from typing import Sequence

from disarray.atlas import PicData, Sprite
from disarray.vectors import Vector3D

DEGREES_TO_RADIANS = 0.0174532925
ROTATION_OFFSET = 3.14

Color = Sequence[float]


def calc_uvs(pic: PicData, frame: int) -> Vector3D:
    """Texture range of a tile in an atlas of equally sized tiles.

    The result holds (left u, right u, top v, bottom v) in x, y, z, w, with v
    measured from the bottom of the image. Tiles are numbered row by row.
    Raises ValueError if the image holds no whole tile in a row.
    """
    if pic.hframes <= 0 or pic.width <= 0 or pic.height <= 0:
        raise ValueError("picture has no tiles")
    row, column = divmod(frame, pic.hframes)
    start_x = column * pic.twidth
    start_y = row * pic.theight
    width = float(pic.width)
    height = float(pic.height)
    return Vector3D(
        start_x / width,
        (start_x + pic.twidth) / width,
        (height - start_y) / height,
        (height - start_y - pic.theight) / height,
    )


def sprite_uvs(pic: PicData, sprite: Sprite) -> Vector3D:
    """Texture range of an irregular sprite, in the same layout as calc_uvs."""
    if pic.width <= 0 or pic.height <= 0:
        raise ValueError("picture has no size")
    width = float(pic.width)
    height = float(pic.height)
    start_x = sprite.start_x / width
    end_x = (sprite.start_x + sprite.width) / width
    start_y = (height - sprite.start_y - sprite.height) / height
    end_y = (height - sprite.start_y) / height
    return Vector3D(start_x, end_x, end_y, start_y)


def quad_uvs(uv: Vector3D) -> list[float]:
    """Texture coordinates of the two triangles of a quad, as twelve floats."""
    left, right, top, bottom = uv.x, uv.y, uv.z, uv.w
    corners = (
        (left, top),
        (right, top),
        (right, bottom),
        (left, top),
        (right, bottom),
        (left, bottom),
    )
    return [value for corner in corners for value in corner]


def _check_pair(colors: Sequence[Color], label: str) -> None:
    if len(colors) != 2:
        raise ValueError(f"{label} must hold two colours")
    for color in colors:
        if len(color) != 4:
            raise ValueError("a colour must have four components")


def quad_colors(
    up_colors: Sequence[Color], down_colors: Sequence[Color]
) -> list[float]:
    """Vertex colours of the two triangles of a quad, as twenty-four floats.

    ``up_colors`` and ``down_colors`` each hold the left and right corner
    colours of the upper and lower edge, four components apiece.
    """
    _check_pair(up_colors, "up_colors")
    _check_pair(down_colors, "down_colors")
    corners = (
        up_colors[0],
        up_colors[1],
        down_colors[1],
        up_colors[0],
        down_colors[1],
        down_colors[0],
    )
    return [float(value) for color in corners for value in color]


def quad_vertices(
    x: float,
    y: float,
    half_width: float,
    half_height: float,
    width: float,
    height: float,
    scale_x: float,
    scale_y: float,
    rotation_angle: float,
    use_center: bool,
) -> list[float]:
    """Positions of the two triangles of a sprite quad, as twelve floats.

    With ``use_center`` the quad is centred on (x, y) and sized from the half
    extents; otherwise (x, y) is a corner and the full extents are used. A
    non-zero ``rotation_angle`` is in degrees.
    """
    if rotation_angle == 0.0:
        if use_center:
            hw = half_width * scale_x
            hh = half_height * scale_y
            corners = (
                (x - hw, y - hh),
                (x + hw, y - hh),
                (x + hw, y + hh),
                (x - hw, y - hh),
                (x + hw, y + hh),
                (x - hw, y + hh),
            )
        else:
            right = x + width * scale_x
            bottom = y + height * scale_y
            corners = (
                (x, y),
                (right, y),
                (right, bottom),
                (x, y),
                (right, bottom),
                (x, bottom),
            )
        return [value for corner in corners for value in corner]

    angle = rotation_angle * DEGREES_TO_RADIANS + ROTATION_OFFSET
    co = math.cos(angle)
    si = math.sin(angle)
    if use_center:
        w = half_width * scale_x
        h = half_height * scale_y
    else:
        w = width * scale_x
        h = height * scale_y
    cos_w, cos_h = co * w, co * h
    sin_w, sin_h = si * w, si * h

    a = (x - cos_w - sin_h, y - sin_w + cos_h)
    b = (x - cos_w + sin_h, y - sin_w - cos_h)
    c = (x + cos_w + sin_h, y + sin_w - cos_h)
    if use_center:
        first = (x + cos_w - sin_h, y + sin_w + cos_h)
    else:
        first = (x, y)
    corners = (first, a, b, first, b, c)
    return [value for corner in corners for value in corner]