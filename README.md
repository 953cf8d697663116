# disarray

Building blocks for a small 2D game renderer. The package uses only the
standard library.

## Modules

- `disarray.vectors`: `Vector3D`, a frozen four-component vector (`x`, `y`,
  `z`, `w`) with `transform` (by a 4x4 matrix, given as four rows or as sixteen
  numbers), `length`, `normalized`, `cross`, `dot`, `+` and `-`.
- `disarray.useful`: `circles_collide` returns True when two circles overlap.
  Circles that only touch do not count. `line` lists the grid cells that a line
  between two pixel positions passes through, leaving out the far end point.
- `disarray.sysconfig`: `SystemConfig`, a dataclass of music volume, renderer
  index, screen size, windowed mode, screen scale and post-processing shader
  name. `load` reads an XML `Settings` file, and any setting the file does not
  contain keeps its current value. `write` writes the settings back out.
- `disarray.shaders`:
  - `parse_shader_list` reads a `<Shaders>` XML list into `ShaderSpec`s.
  - `shader_paths` gives the vertex and fragment file paths for a shader name.
  - `vertex_layout` returns the `VertexBinding`s and `VertexAttribute`s for
    position, optional uvs and colour.
  - `blend_state` returns a `BlendState`.
  - `pack_push_constants` concatenates `Uniform` data, up to 255 bytes.
  - `ShaderLoader` collects `ShaderSpec`s through `load`, `add_shader` and
    `clear`.
- `disarray.vulkan_formats`: the choices made when a swap chain is set up.
  - `choose_surface_format` picks a `SurfaceFormat`.
  - `choose_present_mode` picks a `PresentMode`: mailbox if offered, else FIFO.
  - `choose_composite_alpha` picks a `CompositeAlpha` mode.
  - `find_memory_type` finds a memory type, and raises `LookupError` when none
    fits.
  - `supported_depth_format` finds a depth format, and returns None when none
    is usable.
- `disarray.vulkan_setup`: the choices made when a device is set up.
  - `pick_physical_device` takes the first discrete GPU, or failing that the
    first integrated one.
  - `find_queue_families` returns a `QueueSelection`.
  - `swap_image_count` works out how many swap chain images to use.
  - `render_pass_attachments` builds the colour attachment, plus a depth
    attachment if one is asked for.
  - `viewport_and_scissor` builds the viewport and the matching scissor.
- `disarray.atlas`:
  - `parse_picture_list` reads an `<Images>` XML list of `<Img>` entries into
    `PicData`, with optional `<Path>` and `<Sprites>` children.
  - `TextureAtlas` holds the entries and offers `load_list`, `set_entry`,
    `set_image_size`, `find_by_name`, `remove` and `info`.
- `disarray.geometry`: `calc_uvs` and `sprite_uvs` give texture ranges.
  `quad_uvs`, `quad_colors` and `quad_vertices` give the flat float lists for
  the two triangles of one quad.
- `disarray.batcher`: `SpriteBatcher` queues `SpriteBatchItem`s with `draw`.
  `draw_batch` turns the queue into a list of `DrawCall`s and empties it.
  - Consecutive sprites with the same texture index share one call.
  - Sprites whose index is outside the atlas are drawn untextured, as a call
    whose `texture_index` is None and which has no uvs.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Examples

```python
from disarray.vectors import Vector3D
from disarray.useful import circles_collide, line

a = Vector3D(1.0, 0.0, 0.0)
b = Vector3D(0.0, 1.0, 0.0)
print(a.cross(b), a.dot(b))

print(circles_collide(0, 0, 1, 1.5, 0, 1))   # True
print(line(0, 0, 64, 32, 32))                # [(0, 0), (1, 1)]
```

```python
from disarray.sysconfig import SystemConfig

config = SystemConfig(screen_width=800, screen_height=600)
config.write("config.xml")

loaded = SystemConfig()
loaded.load("config.xml")
print(loaded.screen_width, loaded.screen_height)   # 800 600
```

```python
from disarray.atlas import TextureAtlas
from disarray.batcher import SpriteBatcher

atlas = TextureAtlas()
atlas.set_entry(0, 32, 32, 0, "pics/tiles.tga")
atlas.set_image_size(0, 128, 128)

batcher = SpriteBatcher(atlas=atlas)
batcher.draw(0, 100.0, 100.0, frame=5)
batcher.draw(0, 140.0, 100.0, frame=6)
batcher.draw(-1, 10.0, 10.0)             # untextured

for call in batcher.draw_batch():
    print(call.texture_index, call.vertex_count)   # 0 12, then None 6
```

## What it does not do

This package does no drawing itself. It does not open windows, create graphics
devices, compile or link shaders, read image files, or upload textures.
`SpriteBatcher.draw_batch`, `ShaderLoader` and the `vulkan_*` helpers work out
what a renderer should do: the geometry, the shader list, and the device,
format and attachment choices. Carrying those out with a graphics API is left
to the caller.

## Tests

```
pytest
```