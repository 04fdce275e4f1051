# rgbsync - Unit tests for device discovery
"""
Tests for rgbsync.locator.

Tests cover:
- HID_ID parsing and normalization
- Candidate filtering and deterministic ranking
- Driver-bound sysfs devices and marker attributes
- Write permission checks
"""

from __future__ import annotations

import pytest
from conftest import FakeUdevContext, device_info, driver_device, hidraw_device, make_sysfs

from rgbsync.errors import DeviceNotFound, PermissionDenied, UnsupportedCapability
from rgbsync.locator import DeviceLocator, NodeDescriptor, parse_hid_id

PREFERRED = NodeDescriptor("/dev/hidraw3", "/sys/a", "0003:0000048D:0000C965", "usb-1/input0")
FALLBACK = NodeDescriptor("/dev/hidraw1", "/sys/b", "0003:0000048D:0000C101", "usb-1/input0")
WRONG_IF = NodeDescriptor("/dev/hidraw2", "/sys/c", "0003:0000048D:0000C965", "usb-1/input1")
OTHER = NodeDescriptor("/dev/hidraw0", "/sys/d", "0003:0000046D:0000C52B", "usb-2/input0")

# ─────────────────────────────────────────────────────────────────────────────
# HID_ID parsing
# ─────────────────────────────────────────────────────────────────────────────


class TestParseHidId:
    @pytest.mark.parametrize(
        "hid_id,expected",
        [
            ("0003:0000048D:0000C965", (0x048D, 0xC965)),
            ("0003:0000048d:0000c965", (0x048D, 0xC965)),
            ("0003:48D:C965", (0x048D, 0xC965)),
            ("0003:00001532:00000228\n", (0x1532, 0x0228)),
        ],
    )
    def test_parses(self, hid_id, expected):
        assert parse_hid_id(hid_id) == expected

    @pytest.mark.parametrize("hid_id", [None, "", "garbage", "0003:zz:0000", "1:2"])
    def test_malformed(self, hid_id):
        assert parse_hid_id(hid_id) is None


# ─────────────────────────────────────────────────────────────────────────────
# Ranking
# ─────────────────────────────────────────────────────────────────────────────


class TestCandidates:
    """Ranking of Legion hidraw candidates."""

    def test_filters_by_identity(self, legion_hw):
        ranked = DeviceLocator(context=FakeUdevContext()).candidates(legion_hw, [OTHER, FALLBACK])
        assert [d for d, _ in ranked] == [FALLBACK]

    @pytest.mark.parametrize(
        "order",
        [
            [FALLBACK, PREFERRED],
            [PREFERRED, FALLBACK],
            [WRONG_IF, FALLBACK, PREFERRED],
            [PREFERRED, WRONG_IF, FALLBACK],
        ],
    )
    def test_preferred_wins_regardless_of_order(self, legion_hw, order):
        info = DeviceLocator(context=FakeUdevContext()).find(legion_hw, order)
        assert info.node == PREFERRED.node
        assert info.product_id == 0xC965

    @pytest.mark.parametrize(
        "order,expected",
        [
            ([FALLBACK, WRONG_IF], FALLBACK),
            ([WRONG_IF, FALLBACK], WRONG_IF),
        ],
    )
    def test_first_fallback_in_enumeration_order(self, legion_hw, order, expected):
        info = DeviceLocator(context=FakeUdevContext()).find(legion_hw, order)
        assert info.node == expected.node

    def test_not_found(self, legion_hw):
        with pytest.raises(DeviceNotFound) as exc:
            DeviceLocator(context=FakeUdevContext()).find(legion_hw, [OTHER])

        assert "048d" in str(exc.value)
        assert "c965" in str(exc.value)


# ─────────────────────────────────────────────────────────────────────────────
# Enumeration through udev
# ─────────────────────────────────────────────────────────────────────────────


class TestEnumeration:
    def test_hidraw_sorted_by_node(self, legion_hw, tmp_path):
        context = FakeUdevContext(
            hidraw=[
                hidraw_device(tmp_path / "hidraw5", "0003:0000048D:0000C101"),
                hidraw_device(tmp_path / "hidraw2", "0003:0000048D:0000C101"),
            ]
        )
        info = DeviceLocator(context=context).find(legion_hw)

        assert info.node == str(tmp_path / "hidraw2")
        assert info.capabilities == ()

    def test_hidraw_requires_hid_parent(self, legion_hw, tmp_path):
        device = hidraw_device(tmp_path / "hidraw0", "0003:0000048D:0000C965")
        device._parent = None
        with pytest.raises(DeviceNotFound):
            DeviceLocator(context=FakeUdevContext(hidraw=[device])).find(legion_hw)

    def test_driver_device(self, razer_kbd_hw, razer_kbd_sysfs):
        context = FakeUdevContext(
            hid=[driver_device(razer_kbd_sysfs, "0003:00001532:00000228", "razerkbd")]
        )
        info = DeviceLocator(context=context).find(razer_kbd_hw)

        assert info.sys_path == str(razer_kbd_sysfs)
        assert info.capabilities == tuple(razer_kbd_hw.controls)
        assert context.queries == [("hid", "razerkbd")]

    def test_driver_device_needs_marker(self, razer_kbd_hw, tmp_path):
        bare = make_sysfs(tmp_path / "bare", ["matrix_brightness"])
        context = FakeUdevContext(hid=[driver_device(bare, "0003:00001532:00000228", "razerkbd")])
        with pytest.raises(DeviceNotFound):
            DeviceLocator(context=context).find(razer_kbd_hw)

    def test_mouse_drivers_in_order(self, razer_mouse_hw, tmp_path):
        kbd_bound = make_sysfs(tmp_path / "kbd", ["logo_led_state"])
        mouse_bound = make_sysfs(tmp_path / "mouse", ["logo_matrix_effect_static"])
        context = FakeUdevContext(
            hid=[
                driver_device(kbd_bound, "0003:00001532:00000098", "razerkbd"),
                driver_device(mouse_bound, "0003:00001532:00000098", "razermouse"),
            ]
        )
        info = DeviceLocator(context=context).find(razer_mouse_hw)

        assert info.sys_path == str(mouse_bound)
        assert info.capabilities == ("logo_matrix_effect_static",)

    def test_mouse_on_keyboard_driver(self, razer_mouse_hw, tmp_path):
        kbd_bound = make_sysfs(tmp_path / "kbd", ["logo_led_state", "logo_led_brightness"])
        context = FakeUdevContext(
            hid=[driver_device(kbd_bound, "0003:00001532:00000098", "razerkbd")]
        )
        info = DeviceLocator(context=context).find(razer_mouse_hw)

        assert info.capabilities == ("logo_led_brightness", "logo_led_state")


# ─────────────────────────────────────────────────────────────────────────────
# Permissions
# ─────────────────────────────────────────────────────────────────────────────


class TestPermissions:
    def test_writable(self, full_system, legion_hw):
        info = full_system.locate(legion_hw)
        assert info.hardware is legion_hw

    def test_hidraw_not_writable(self, full_system, legion_hw, monkeypatch):
        checked = []
        monkeypatch.setattr(
            "rgbsync.locator.os.access", lambda path, mode: checked.append(path) or False
        )
        with pytest.raises(PermissionDenied) as exc:
            full_system.locate(legion_hw)

        assert checked == [exc.value.path]
        assert exc.value.path.endswith("hidraw0")
        assert "99-legion-rgb.rules" in exc.value.hint
        assert "udevadm" in exc.value.hint

    def test_sysfs_checks_attribute(self, full_system, razer_mouse_hw, monkeypatch):
        checked = []
        monkeypatch.setattr(
            "rgbsync.locator.os.access", lambda path, mode: checked.append(path) or False
        )
        with pytest.raises(PermissionDenied):
            full_system.locate(razer_mouse_hw)

        assert checked[0].endswith("logo_matrix_effect_static")

    def test_no_permission_attribute(self, razer_mouse_hw, tmp_path):
        bare = make_sysfs(tmp_path / "bare", ["logo_led_brightness"])
        with pytest.raises(UnsupportedCapability):
            DeviceLocator(context=FakeUdevContext()).check_permissions(
                device_info(razer_mouse_hw, bare)
            )
