"""Mouse event handling for ball picking."""
from typing import Callable, Optional, Set

import open3d.visualization.gui as gui

from pickballs import config
from pickballs.core.picking import BallPicker
from pickballs.models.camera import Camera, Viewport


class MouseHandler:
    """Translates scene widget mouse events into picker calls."""

    def __init__(self, scene_widget, picker: BallPicker,
                 selection_callback: Callable[[Set[int]], None],
                 status_callback: Callable[[str, list], None],
                 click_callback: Optional[Callable[[float, float], None]] = None):
        self.scene_widget = scene_widget
        self.picker = picker
        self.selection_callback = selection_callback
        self.status_callback = status_callback
        self.click_callback = click_callback

    def handle_mouse_event(self, event):
        """Pick on button down, clear on button up.

        The widget still handles the event afterwards, so dragging keeps
        rotating the camera.
        """
        if event.type == gui.MouseEvent.Type.BUTTON_DOWN:
            self._handle_press(event.x, event.y)
            return gui.Widget.EventCallbackResult.HANDLED

        if event.type == gui.MouseEvent.Type.BUTTON_UP:
            self._handle_release()
            return gui.Widget.EventCallbackResult.HANDLED

        return gui.Widget.EventCallbackResult.IGNORED

    def _handle_press(self, x: int, y: int):
        """Pick balls under the cursor."""
        frame = self.scene_widget.frame
        x_vp = x - frame.x
        y_vp = y - frame.y
        viewport = Viewport(frame.width, frame.height)
        if not viewport.contains(x_vp, y_vp):
            self.status_callback(
                f"⚠️ Click outside the view: ({x_vp}, {y_vp})",
                config.STATUS_WARN_COLOR
            )
            return

        if self.click_callback:
            self.click_callback(x_vp, y_vp)

        scene = self.picker.scene
        scene.viewport = viewport
        scene.camera = Camera.from_renderer(
            self.scene_widget.scene.camera, viewport
        )

        hits = self.picker.on_pointer_down(x_vp, y_vp)
        if hits:
            names = ", ".join(f"#{i}" for i in sorted(hits))
            self.status_callback(f"🎯 Picked {names}", config.STATUS_OK_COLOR)
        else:
            self.status_callback(
                f"✨ No ball at ({x_vp}, {y_vp})", config.STATUS_INFO_COLOR
            )
        self.selection_callback(self.picker.selected_ids())

    def _handle_release(self):
        """Clear every selection."""
        had_selection = bool(self.picker.selected_ids())
        self.picker.on_pointer_up()
        if had_selection:
            self.selection_callback(set())
