"""Selection rules for physical devices, queue families, swapchain size and render passes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Callable, Sequence, Union


class DeviceType(IntEnum):
    OTHER = 0
    INTEGRATED_GPU = 1
    DISCRETE_GPU = 2
    VIRTUAL_GPU = 3
    CPU = 4


class QueueFlags(IntFlag):
    GRAPHICS = 0x1
    COMPUTE = 0x2
    TRANSFER = 0x4
    SPARSE_BINDING = 0x8


class AttachmentLoadOp(IntEnum):
    LOAD = 0
    CLEAR = 1
    DONT_CARE = 2


class AttachmentStoreOp(IntEnum):
    STORE = 0
    DONT_CARE = 1


class ImageLayout(IntEnum):
    UNDEFINED = 0
    GENERAL = 1
    COLOR_ATTACHMENT_OPTIMAL = 2
    DEPTH_STENCIL_ATTACHMENT_OPTIMAL = 3
    PRESENT_SRC = 1000001002


@dataclass(frozen=True)
class PhysicalDeviceInfo:
    """A physical device as reported by the driver."""

    name: str
    device_type: DeviceType


@dataclass(frozen=True)
class QueueFamily:
    """A queue family: how many queues it has and what they can do."""

    queue_count: int
    queue_flags: QueueFlags = QueueFlags(0)

    @property
    def supports_graphics(self) -> bool:
        return self.queue_count > 0 and bool(self.queue_flags & QueueFlags.GRAPHICS)


@dataclass(frozen=True)
class QueueSelection:
    """Indices of the chosen graphics and present queue families."""

    graphics: int | None
    present: int | None

    @property
    def complete(self) -> bool:
        return self.graphics is not None and self.present is not None

    @property
    def shared(self) -> bool:
        """True when one family serves both, so images need no concurrent sharing."""
        return self.graphics == self.present


@dataclass(frozen=True)
class AttachmentDescription:
    format: int
    load_op: AttachmentLoadOp
    store_op: AttachmentStoreOp
    stencil_load_op: AttachmentLoadOp
    stencil_store_op: AttachmentStoreOp
    initial_layout: ImageLayout
    final_layout: ImageLayout
    samples: int = 1


@dataclass(frozen=True)
class Viewport:
    x: float
    y: float
    width: float
    height: float
    min_depth: float = 0.0
    max_depth: float = 1.0


PresentSupport = Union[Sequence[bool], Callable[[int], bool]]


def pick_physical_device(
    devices: Sequence[PhysicalDeviceInfo],
) -> PhysicalDeviceInfo | None:
    """First discrete GPU, else first integrated GPU, else None."""
    for wanted in (DeviceType.DISCRETE_GPU, DeviceType.INTEGRATED_GPU):
        for device in devices:
            if device.device_type == wanted:
                return device
    return None


def find_queue_families(
    families: Sequence[QueueFamily], present_support: PresentSupport
) -> QueueSelection:
    """First graphics-capable family and first family that can present.

    ``present_support`` is either a sequence of flags, one per family, or a
    function taking a family index. It is only consulted until a present
    family has been found.
    """
    if callable(present_support):
        can_present = present_support
    else:
        can_present = present_support.__getitem__

    graphics: int | None = None
    present: int | None = None
    for index, family in enumerate(families):
        if graphics is None and family.supports_graphics:
            graphics = index
        if present is None and can_present(index):
            present = index
    return QueueSelection(graphics, present)


def swap_image_count(min_count: int, max_count: int) -> int:
    """One image more than the minimum, capped by the maximum unless that is 0 (no limit)."""
    if min_count < 0 or max_count < 0:
        raise ValueError("image counts must not be negative")
    count = min_count + 1
    if max_count > 0 and count > max_count:
        count = max_count
    return count


def render_pass_attachments(
    color_format: int, depth_format: int | None = None
) -> list[AttachmentDescription]:
    """Colour attachment presented at the end of the pass, plus an optional depth one."""
    attachments = [
        AttachmentDescription(
            format=color_format,
            load_op=AttachmentLoadOp.CLEAR,
            store_op=AttachmentStoreOp.STORE,
            stencil_load_op=AttachmentLoadOp.DONT_CARE,
            stencil_store_op=AttachmentStoreOp.DONT_CARE,
            initial_layout=ImageLayout.UNDEFINED,
            final_layout=ImageLayout.PRESENT_SRC,
        )
    ]
    if depth_format is not None:
        attachments.append(
            AttachmentDescription(
                format=depth_format,
                load_op=AttachmentLoadOp.CLEAR,
                store_op=AttachmentStoreOp.STORE,
                stencil_load_op=AttachmentLoadOp.CLEAR,
                stencil_store_op=AttachmentStoreOp.DONT_CARE,
                initial_layout=ImageLayout.UNDEFINED,
                final_layout=ImageLayout.DEPTH_STENCIL_ATTACHMENT_OPTIMAL,
            )
        )
    return attachments


def viewport_and_scissor(
    x: int, y: int, width: int, height: int
) -> tuple[Viewport, tuple[tuple[int, int], tuple[int, int]]]:
    """A full-depth viewport and the matching scissor rectangle ((x, y), (width, height))."""
    if min(x, y, width, height) < 0:
        raise ValueError("viewport values must not be negative")
    viewport = Viewport(float(x), float(y), float(width), float(height))
    return viewport, ((int(x), int(y)), (width, height))