"""Sprite batching: queue sprite draws and turn them into per-texture draw calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from disarray.atlas import PicData, TextureAtlas
from disarray.geometry import (
    calc_uvs,
    quad_colors,
    quad_uvs,
    quad_vertices,
    sprite_uvs,
)
from disarray.vectors import Vector3D

Color = tuple[float, float, float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)


def _as_color(value: Sequence[float]) -> Color:
    color = tuple(float(component) for component in value)
    if len(color) != 4:
        raise ValueError("a colour must have four components")
    return color  # type: ignore[return-value]


@dataclass(frozen=True)
class SpriteBatchItem:
    """One queued sprite draw.

    ``up_colors`` and ``down_colors`` hold the left and right corner colours
    of the upper and lower edge.
    """

    texture_index: int
    x: float
    y: float
    frame: int = 0
    use_center: bool = True
    scale_x: float = 1.0
    scale_y: float = 1.0
    rotation_angle: float = 0.0
    up_colors: tuple[Color, Color] = (WHITE, WHITE)
    down_colors: tuple[Color, Color] = (WHITE, WHITE)


@dataclass
class DrawCall:
    """Triangles sharing one texture, ready to hand to a renderer.

    ``texture_index`` is None for untextured geometry, which carries no uvs.
    """

    texture_index: int | None
    vertices: list[float] = field(default_factory=list)
    uvs: list[float] = field(default_factory=list)
    colors: list[float] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // 2

    @property
    def textured(self) -> bool:
        return self.texture_index is not None


@dataclass
class SpriteBatcher:
    """Collects sprite draws and groups consecutive draws of one texture."""

    atlas: TextureAtlas = field(default_factory=TextureAtlas)
    batch: list[SpriteBatchItem] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.batch)

    def __iter__(self) -> Iterator[SpriteBatchItem]:
        return iter(self.batch)

    def draw(
        self,
        texture_index: int,
        x: float,
        y: float,
        frame: int = 0,
        use_center: bool = True,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
        rotation_angle: float = 0.0,
        up_color: Sequence[float] = WHITE,
        down_color: Sequence[float] = WHITE,
        flip_colors: bool = False,
    ) -> SpriteBatchItem:
        """Queue a sprite.

        Normally ``up_color`` tints the upper edge and ``down_color`` the lower
        one; with ``flip_colors`` they tint the left and right edges instead.
        """
        up = _as_color(up_color)
        down = _as_color(down_color)
        if flip_colors:
            up_colors, down_colors = (up, down), (up, down)
        else:
            up_colors, down_colors = (up, up), (down, down)

        item = SpriteBatchItem(
            texture_index=texture_index,
            x=x,
            y=y,
            frame=frame,
            use_center=use_center,
            scale_x=scale_x,
            scale_y=scale_y,
            rotation_angle=rotation_angle,
            up_colors=up_colors,
            down_colors=down_colors,
        )
        self.batch.append(item)
        return item

    def _picture(self, index: int) -> PicData | None:
        return self.atlas.info(index)

    def _item_geometry(
        self, item: SpriteBatchItem, uv: Vector3D
    ) -> tuple[Vector3D, float, float, float, float]:
        pic = self._picture(item.texture_index)
        if pic is None:
            return uv, 0.5, 0.5, 1.0, 1.0
        if pic.sprites:
            sprite = pic.sprites[item.frame]
            return (
                sprite_uvs(pic, sprite),
                sprite.width / 2.0,
                sprite.height / 2.0,
                float(sprite.width),
                float(sprite.height),
            )
        return (
            calc_uvs(pic, item.frame),
            pic.htilew,
            pic.htileh,
            float(pic.twidth),
            float(pic.theight),
        )

    def _finish(self, call: DrawCall) -> DrawCall:
        if call.texture_index is None or self._picture(call.texture_index) is None:
            call.texture_index = None
            call.uvs = []
        return call

    def draw_batch(self) -> list[DrawCall]:
        """Turn the queued sprites into draw calls and empty the queue.

        Consecutive sprites with the same texture index share a call. Sprites
        whose index is outside the atlas are drawn untextured.
        """
        calls: list[DrawCall] = []
        current: DrawCall | None = None
        current_index: int | None = None
        uv = Vector3D(0.0, 0.0, 0.0, 0.0)

        try:
            for item in self.batch:
                uv, half_w, half_h, width, height = self._item_geometry(item, uv)

                if current is None or current_index != item.texture_index:
                    if current is not None:
                        calls.append(self._finish(current))
                    current = DrawCall(item.texture_index)
                    current_index = item.texture_index

                current.uvs.extend(quad_uvs(uv))
                current.colors.extend(quad_colors(item.up_colors, item.down_colors))
                current.vertices.extend(
                    quad_vertices(
                        item.x,
                        item.y,
                        half_w,
                        half_h,
                        width,
                        height,
                        item.scale_x,
                        item.scale_y,
                        item.rotation_angle,
                        item.use_center,
                    )
                )

            if current is not None:
                calls.append(self._finish(current))
        finally:
            self.batch.clear()
        return calls

    def clear(self) -> None:
        """Drop every queued sprite."""
        self.batch.clear()