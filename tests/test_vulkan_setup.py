import pytest

from disarray.vulkan_setup import (
    AttachmentLoadOp,
    AttachmentStoreOp,
    DeviceType,
    ImageLayout,
    PhysicalDeviceInfo,
    QueueFamily,
    QueueFlags,
    QueueSelection,
    Viewport,
    find_queue_families,
    pick_physical_device,
    render_pass_attachments,
    swap_image_count,
    viewport_and_scissor,
)


def test_discrete_preferred_over_integrated():
    integrated = PhysicalDeviceInfo("igpu", DeviceType.INTEGRATED_GPU)
    discrete = PhysicalDeviceInfo("dgpu", DeviceType.DISCRETE_GPU)
    assert pick_physical_device([integrated, discrete]) is discrete


def test_first_discrete_is_chosen():
    first = PhysicalDeviceInfo("a", DeviceType.DISCRETE_GPU)
    second = PhysicalDeviceInfo("b", DeviceType.DISCRETE_GPU)
    assert pick_physical_device([first, second]) is first


def test_integrated_used_when_no_discrete():
    cpu = PhysicalDeviceInfo("cpu", DeviceType.CPU)
    integrated = PhysicalDeviceInfo("igpu", DeviceType.INTEGRATED_GPU)
    assert pick_physical_device([cpu, integrated]) is integrated


def test_no_usable_device():
    devices = [
        PhysicalDeviceInfo("cpu", DeviceType.CPU),
        PhysicalDeviceInfo("virt", DeviceType.VIRTUAL_GPU),
    ]
    assert pick_physical_device(devices) is None
    assert pick_physical_device([]) is None


def test_queue_families_from_sequence():
    families = [
        QueueFamily(4, QueueFlags.TRANSFER),
        QueueFamily(0, QueueFlags.GRAPHICS),
        QueueFamily(2, QueueFlags.GRAPHICS | QueueFlags.COMPUTE),
        QueueFamily(1, QueueFlags.GRAPHICS),
    ]
    selection = find_queue_families(families, [False, True, True, False])
    assert selection == QueueSelection(graphics=2, present=1)
    assert selection.complete
    assert not selection.shared


def test_queue_families_shared():
    families = [QueueFamily(1, QueueFlags.GRAPHICS)]
    selection = find_queue_families(families, [True])
    assert selection.graphics == selection.present == 0
    assert selection.shared


def test_present_callback_stops_after_found():
    calls = []

    def support(index):
        calls.append(index)
        return index == 1

    families = [QueueFamily(1, QueueFlags.GRAPHICS) for _ in range(4)]
    selection = find_queue_families(families, support)
    assert selection.present == 1
    assert calls == [0, 1]


def test_queue_families_missing():
    families = [QueueFamily(1, QueueFlags.TRANSFER)]
    selection = find_queue_families(families, [False])
    assert selection.graphics is None
    assert selection.present is None
    assert not selection.complete


def test_swap_image_count_unbounded():
    assert swap_image_count(2, 0) == 3


def test_swap_image_count_capped():
    assert swap_image_count(3, 3) == 3


def test_swap_image_count_never_exceeds_max():
    for minimum in range(1, 6):
        for maximum in range(minimum, 8):
            count = swap_image_count(minimum, maximum)
            assert minimum <= count <= maximum


def test_swap_image_count_negative():
    with pytest.raises(ValueError):
        swap_image_count(-1, 0)


def test_render_pass_colour_only():
    (color,) = render_pass_attachments(44)
    assert color.format == 44
    assert color.load_op is AttachmentLoadOp.CLEAR
    assert color.store_op is AttachmentStoreOp.STORE
    assert color.stencil_load_op is AttachmentLoadOp.DONT_CARE
    assert color.initial_layout is ImageLayout.UNDEFINED
    assert color.final_layout is ImageLayout.PRESENT_SRC
    assert color.samples == 1


def test_render_pass_with_depth():
    attachments = render_pass_attachments(44, 126)
    assert len(attachments) == 2
    depth = attachments[1]
    assert depth.format == 126
    assert depth.stencil_load_op is AttachmentLoadOp.CLEAR
    assert depth.stencil_store_op is AttachmentStoreOp.DONT_CARE
    assert depth.final_layout is ImageLayout.DEPTH_STENCIL_ATTACHMENT_OPTIMAL
    assert attachments[0].final_layout is ImageLayout.PRESENT_SRC


def test_viewport_and_scissor():
    viewport, scissor = viewport_and_scissor(10, 20, 640, 480)
    assert viewport == Viewport(10.0, 20.0, 640.0, 480.0)
    assert viewport.min_depth == 0.0
    assert viewport.max_depth == 1.0
    assert scissor == ((10, 20), (640, 480))


def test_viewport_negative_rejected():
    with pytest.raises(ValueError):
        viewport_and_scissor(0, 0, -1, 10)