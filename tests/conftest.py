# rgbsync test configuration and shared fixtures
from __future__ import annotations

from pathlib import Path

import pytest

from rgbsync.hardware import Hardware
from rgbsync.locator import DeviceInfo, DeviceLocator

# ─────────────────────────────────────────────────────────────────────────────
# Fake udev objects
# ─────────────────────────────────────────────────────────────────────────────


class FakeUdevDevice:
    """Just enough of pyudev.Device for the locator."""

    def __init__(self, sys_path, device_node=None, properties=None, parent=None):
        self.sys_path = str(sys_path)
        self.device_node = device_node
        self.properties = dict(properties or {})
        self._parent = parent

    def find_parent(self, subsystem):
        if subsystem == "hid":
            return self._parent
        return None


class FakeUdevContext:
    """Answers list_devices() from fixed device lists."""

    def __init__(self, hidraw=(), hid=()):
        self.hidraw = list(hidraw)
        self.hid = list(hid)
        self.queries = []

    def list_devices(self, subsystem=None, DRIVER=None):
        self.queries.append((subsystem, DRIVER))
        if subsystem == "hidraw":
            return list(self.hidraw)
        return [dev for dev in self.hid if dev.properties.get("DRIVER") == DRIVER]


def hidraw_device(node, hid_id, hid_phys="", sys_path=None):
    """A hidraw node below a HID device with the given identity."""
    parent = FakeUdevDevice(
        f"/sys/devices/fake/{Path(node).name}/hid",
        properties={"HID_ID": hid_id, "HID_PHYS": hid_phys},
    )
    return FakeUdevDevice(
        sys_path or f"/sys/class/hidraw/{Path(node).name}", device_node=str(node), parent=parent
    )


def driver_device(sys_path, hid_id, driver):
    """A HID device bound to an OpenRazer driver."""
    return FakeUdevDevice(sys_path, properties={"HID_ID": hid_id, "DRIVER": driver})


# ─────────────────────────────────────────────────────────────────────────────
# Hardware fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def legion_hw() -> Hardware:
    return Hardware.get_device("legion")


@pytest.fixture
def razer_kbd_hw() -> Hardware:
    return Hardware.get_device("razer-keyboard")


@pytest.fixture
def razer_mouse_hw() -> Hardware:
    return Hardware.get_device("razer-mouse")


# ─────────────────────────────────────────────────────────────────────────────
# Simulated device nodes
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def no_settle(monkeypatch):
    """Skip the controller settle delay."""
    sleeps = []
    monkeypatch.setattr("rgbsync.protocol.time.sleep", sleeps.append)
    return sleeps


@pytest.fixture
def hidraw_node(tmp_path) -> Path:
    """Regular file standing in for /dev/hidrawN."""
    node = tmp_path / "hidraw0"
    node.write_bytes(b"")
    return node


def make_sysfs(root: Path, attrs) -> Path:
    """Create a sysfs-like directory holding empty attribute files."""
    root.mkdir(parents=True, exist_ok=True)
    for attr in attrs:
        (root / attr).write_bytes(b"")
    return root


@pytest.fixture
def razer_kbd_sysfs(tmp_path, razer_kbd_hw) -> Path:
    return make_sysfs(tmp_path / "0003:1532:0228.0001", razer_kbd_hw.controls)


@pytest.fixture
def razer_mouse_sysfs(tmp_path, razer_mouse_hw) -> Path:
    return make_sysfs(tmp_path / "0003:1532:0098.0002", razer_mouse_hw.controls)


def device_info(hardware, path, capabilities=None, node=None) -> DeviceInfo:
    if capabilities is None:
        capabilities = tuple(hardware.controls or ())
    return DeviceInfo(
        hardware=hardware,
        node=str(node or path),
        sys_path=str(path),
        product_id=hardware.product_ids[0],
        capabilities=tuple(capabilities),
    )


@pytest.fixture
def legion_info(legion_hw, hidraw_node) -> DeviceInfo:
    return device_info(legion_hw, "/sys/class/hidraw/hidraw0", (), node=hidraw_node)


@pytest.fixture
def razer_kbd_info(razer_kbd_hw, razer_kbd_sysfs) -> DeviceInfo:
    return device_info(razer_kbd_hw, razer_kbd_sysfs)


@pytest.fixture
def razer_mouse_info(razer_mouse_hw, razer_mouse_sysfs) -> DeviceInfo:
    return device_info(razer_mouse_hw, razer_mouse_sysfs)


@pytest.fixture
def full_system(tmp_path, hidraw_node, razer_kbd_sysfs, razer_mouse_sysfs) -> DeviceLocator:
    """Locator over one device of each family."""
    context = FakeUdevContext(
        hidraw=[hidraw_device(hidraw_node, "0003:0000048D:0000C965", "usb-0000:00:14.0-3/input0")],
        hid=[
            driver_device(razer_kbd_sysfs, "0003:00001532:00000228", "razerkbd"),
            driver_device(razer_mouse_sysfs, "0003:00001532:00000098", "razermouse"),
        ],
    )
    return DeviceLocator(context=context)
