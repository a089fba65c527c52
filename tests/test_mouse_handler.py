"""Tests for MouseHandler with stand-in widget and event objects."""

from types import SimpleNamespace

import numpy as np
import pytest

try:
    import open3d.visualization.gui as gui
except (ImportError, OSError):
    pytest.skip("open3d GUI is not available", allow_module_level=True)

from pickballs import config
from pickballs.core.picking import BallPicker
from pickballs.handlers.mouse_handler import MouseHandler
from pickballs.models.ball import Ball
from pickballs.utils.transforms import perspective_matrix

from conftest import FakeRendererCamera

# Widget placed away from the window origin; its center is (410, 320).
FRAME = SimpleNamespace(x=10, y=20, width=800, height=600)


def press(x, y):
    return SimpleNamespace(type=gui.MouseEvent.Type.BUTTON_DOWN, x=x, y=y)


def release(x=0, y=0):
    return SimpleNamespace(type=gui.MouseEvent.Type.BUTTON_UP, x=x, y=y)


class Recorder:
    def __init__(self):
        self.selections = []
        self.statuses = []
        self.clicks = []

    def on_selection(self, ids):
        self.selections.append(set(ids))

    def on_status(self, message, color):
        self.statuses.append((message, color))

    def on_click(self, x, y):
        self.clicks.append((x, y))


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def handler(scene, recorder):
    scene.balls = [
        Ball(id=0, center=[0, 0, 0], radius=1.5),
        Ball(id=1, center=[6, 0, -6], radius=1.0),
    ]
    widget = SimpleNamespace(
        frame=FRAME,
        scene=SimpleNamespace(camera=FakeRendererCamera()),
    )
    return MouseHandler(widget, BallPicker(scene), recorder.on_selection,
                        recorder.on_status, recorder.on_click)


class TestMouseHandler:
    def test_press_picks_relative_to_frame(self, handler, recorder):
        result = handler.handle_mouse_event(press(410, 320))

        assert result == gui.Widget.EventCallbackResult.HANDLED
        assert handler.picker.selected_ids() == {0}
        assert recorder.clicks == [(400, 300)]
        assert recorder.selections == [{0}]
        assert "#0" in recorder.statuses[-1][0]
        assert recorder.statuses[-1][1] == config.STATUS_OK_COLOR

    def test_press_snapshots_renderer_camera(self, handler):
        handler.handle_mouse_event(press(410, 320))

        camera = handler.picker.scene.camera
        assert camera.far == pytest.approx(100.0)
        assert camera.near == pytest.approx(0.1)
        np.testing.assert_allclose(
            camera.projection_matrix,
            perspective_matrix(45.0, 800 / 600, 0.1, 100.0)
        )
        assert handler.picker.scene.viewport.width == 800
        assert handler.picker.scene.viewport.height == 600

    def test_press_on_empty_space(self, handler, recorder):
        # Window (10, 20) is the widget's top-left corner.
        handler.handle_mouse_event(press(10, 20))

        assert handler.picker.selected_ids() == set()
        assert recorder.selections == [set()]
        assert recorder.statuses[-1][1] == config.STATUS_INFO_COLOR

    def test_press_outside_view_is_reported(self, handler, recorder):
        result = handler.handle_mouse_event(press(5, 320))

        assert result == gui.Widget.EventCallbackResult.HANDLED
        assert handler.picker.selected_ids() == set()
        assert recorder.selections == []
        assert recorder.clicks == []
        message, color = recorder.statuses[-1]
        assert "(-5, 300)" in message
        assert color == config.STATUS_WARN_COLOR

    def test_release_clears_selection(self, handler, recorder):
        handler.handle_mouse_event(press(410, 320))
        result = handler.handle_mouse_event(release())

        assert result == gui.Widget.EventCallbackResult.HANDLED
        assert handler.picker.selected_ids() == set()
        assert not any(b.selected for b in handler.picker.scene.balls)
        assert recorder.selections == [{0}, set()]

    def test_release_without_selection_is_quiet(self, handler, recorder):
        handler.handle_mouse_event(release())
        assert recorder.selections == []

    def test_other_events_are_ignored(self, handler, recorder):
        event = SimpleNamespace(type=gui.MouseEvent.Type.MOVE, x=410, y=320)
        result = handler.handle_mouse_event(event)

        assert result == gui.Widget.EventCallbackResult.IGNORED
        assert recorder.selections == []
        assert recorder.statuses == []
