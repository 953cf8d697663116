import pytest

from disarray.vulkan_formats import (
    COLOR_SPACE_SRGB_NONLINEAR,
    DEPTH_FORMATS,
    FORMAT_B8G8R8A8_SRGB,
    FORMAT_D24_UNORM_S8_UINT,
    FORMAT_D32_SFLOAT,
    FORMAT_D32_SFLOAT_S8_UINT,
    FORMAT_FEATURE_DEPTH_STENCIL_ATTACHMENT,
    CompositeAlpha,
    PresentMode,
    SurfaceFormat,
    choose_composite_alpha,
    choose_present_mode,
    choose_surface_format,
    find_memory_type,
    supported_depth_format,
)


def test_prefers_srgb_surface_format():
    preferred = SurfaceFormat(FORMAT_B8G8R8A8_SRGB, COLOR_SPACE_SRGB_NONLINEAR)
    formats = [SurfaceFormat(44, 0), SurfaceFormat(FORMAT_B8G8R8A8_SRGB, 7), preferred]
    assert choose_surface_format(formats) is preferred


def test_falls_back_to_first_surface_format():
    formats = [SurfaceFormat(44, 0), SurfaceFormat(37, 0)]
    assert choose_surface_format(formats) is formats[0]


def test_no_surface_formats_raises():
    with pytest.raises(ValueError):
        choose_surface_format([])


def test_mailbox_chosen_when_available():
    modes = [PresentMode.FIFO, PresentMode.MAILBOX, PresentMode.IMMEDIATE]
    assert choose_present_mode(modes) is PresentMode.MAILBOX


def test_fifo_when_no_mailbox():
    assert choose_present_mode([PresentMode.IMMEDIATE]) is PresentMode.FIFO
    assert choose_present_mode([]) is PresentMode.FIFO


def test_composite_alpha_order():
    both = CompositeAlpha.OPAQUE | CompositeAlpha.INHERIT
    assert choose_composite_alpha(both) is CompositeAlpha.OPAQUE
    later = CompositeAlpha.POST_MULTIPLIED | CompositeAlpha.INHERIT
    assert choose_composite_alpha(later) is CompositeAlpha.POST_MULTIPLIED


def test_composite_alpha_default_is_opaque():
    assert choose_composite_alpha(0) is CompositeAlpha.OPAQUE


def test_find_memory_type_respects_filter_and_properties():
    flags = [0b001, 0b110, 0b111]
    assert find_memory_type(flags, 0b111, 0b110) == 1
    assert find_memory_type(flags, 0b101, 0b110) == 2


def test_find_memory_type_none_fits():
    with pytest.raises(LookupError):
        find_memory_type([0b001, 0b010], 0b11, 0b100)


def test_depth_format_priority():
    features = {
        FORMAT_D32_SFLOAT: FORMAT_FEATURE_DEPTH_STENCIL_ATTACHMENT,
        FORMAT_D24_UNORM_S8_UINT: FORMAT_FEATURE_DEPTH_STENCIL_ATTACHMENT,
    }
    assert supported_depth_format(features) == FORMAT_D32_SFLOAT


def test_depth_format_first_in_list_wins():
    features = {fmt: FORMAT_FEATURE_DEPTH_STENCIL_ATTACHMENT for fmt in DEPTH_FORMATS}
    assert supported_depth_format(features) == FORMAT_D32_SFLOAT_S8_UINT


def test_no_depth_format():
    assert supported_depth_format({FORMAT_D32_SFLOAT: 0x1}) is None