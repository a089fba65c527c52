"""Main application window and UI orchestration."""
from typing import Set

import open3d.visualization.gui as gui
import open3d.visualization.rendering as rendering

from pickballs import config
from pickballs.core.picking import BallPicker
from pickballs.core.scene_manager import SceneManager
from pickballs.handlers.mouse_handler import MouseHandler
from pickballs.ui.panels.selection_panel import SelectionPanel
from pickballs.utils.geometry_utils import GeometryUtils


class MainWindow:
    """Main application window controller."""

    def __init__(self):
        self.window = None
        self.scene_widget = None
        self.scene_manager = SceneManager()
        self.picker = None
        self.mouse_handler = None
        self.highlighted: Set[int] = set()
        self._camera_placed = False

        # UI Panels
        self.selection_panel = None
        self.status_label = None
        self.stats_label = None

    def initialize(self):
        """Initialize the application window."""
        app = gui.Application.instance
        app.initialize()

        # Build scene
        scene = self.scene_manager.build()
        self.picker = BallPicker(scene)

        # Create window
        self.window = app.create_window(
            config.WINDOW_TITLE,
            config.WINDOW_WIDTH,
            config.WINDOW_HEIGHT
        )
        em = self.window.theme.font_size

        # Create UI
        main_panel = self._create_main_panel(em)
        self.scene_widget = self._create_scene_widget()

        # Layout
        self._setup_layout(main_panel)

        # Add balls to scene
        self._render_balls()

        print("✅ Application ready. Click a ball to highlight it.")

    def _create_main_panel(self, em: float) -> gui.Vert:
        """Create the main control panel."""
        panel = gui.Vert(0, gui.Margins(em, em, em, em))

        # Header
        header = gui.Label("🎱 Pick Balls")
        header.text_color = gui.Color(0.2, 0.4, 0.8)
        panel.add_child(header)
        panel.add_fixed(em * 0.5)

        # Status
        self.status_label = gui.Label("✨ Ready. Click a ball to pick it.")
        self.status_label.text_color = gui.Color(*config.STATUS_INFO_COLOR)
        panel.add_child(self.status_label)
        panel.add_fixed(em * 0.75)

        self.selection_panel = SelectionPanel(em)
        panel.add_child(self.selection_panel.get_widget())
        panel.add_fixed(em)

        # Stats
        self.stats_label = gui.Label(
            f"📊 Balls: {len(self.scene_manager.get_scene().balls)}"
        )
        self.stats_label.text_color = gui.Color(0.4, 0.4, 0.4)
        panel.add_child(self.stats_label)

        # Help
        panel.add_fixed(em * 0.5)
        help_section = gui.CollapsableVert(
            "💡 Help",
            em * 0.5,
            gui.Margins(em * 0.5, 0, 0, 0)
        )
        help_text = (
            "• Press: Highlight balls under the cursor\n"
            "• Release: Clear highlight\n"
            "• Drag: Rotate camera"
        )
        help_label = gui.Label(help_text)
        help_label.text_color = gui.Color(0.5, 0.5, 0.5)
        help_section.add_child(help_label)
        panel.add_child(help_section)

        panel.add_stretch()

        return panel

    def _create_scene_widget(self):
        """Create and configure the 3D scene widget."""
        widget = gui.SceneWidget()
        widget.scene = rendering.Open3DScene(self.window.renderer)
        widget.scene.set_background(config.BACKGROUND_COLOR)
        widget.set_view_controls(gui.SceneWidget.Controls.ROTATE_CAMERA)

        # Setup mouse handler
        self.mouse_handler = MouseHandler(
            widget,
            self.picker,
            self._on_selection_changed,
            self._update_status,
            self.selection_panel.set_last_click
        )
        widget.set_on_mouse(self.mouse_handler.handle_mouse_event)

        # Lighting: a point light at the eye plus ambient fill
        widget.scene.scene.add_point_light(
            "camera_light",
            config.LIGHT_COLOR,
            config.CAMERA_POSITION,
            config.LIGHT_INTENSITY,
            config.LIGHT_FALLOFF,
            False
        )
        widget.scene.scene.set_sun_light(
            [0.577, -0.577, -0.577], config.AMBIENT_COLOR, config.AMBIENT_INTENSITY
        )
        widget.scene.scene.enable_sun_light(True)

        return widget

    def _setup_camera(self, width: float, height: float):
        """Place the renderer's camera to match the configured view."""
        camera = self.scene_widget.scene.camera
        camera.set_projection(
            config.CAMERA_FOV,
            width / height,
            config.CAMERA_NEAR,
            config.CAMERA_FAR,
            rendering.Camera.FovType.Vertical
        )
        camera.look_at(
            config.CAMERA_TARGET,
            config.CAMERA_POSITION,
            config.CAMERA_UP
        )
        self.scene_widget.center_of_rotation = config.CAMERA_TARGET

    def _setup_layout(self, main_panel):
        """Configure window layout."""
        def on_layout(layout_context):
            content_rect = self.window.content_rect
            main_panel.frame = gui.Rect(
                content_rect.width - config.PANEL_WIDTH, 0,
                config.PANEL_WIDTH, content_rect.height
            )
            self.scene_widget.frame = gui.Rect(
                0, 0,
                content_rect.width - config.PANEL_WIDTH,
                content_rect.height
            )
            width = self.scene_widget.frame.width
            height = self.scene_widget.frame.height
            if width <= 0 or height <= 0:
                return
            self.scene_manager.resize(width, height)
            if not self._camera_placed:
                self._setup_camera(width, height)
                self._camera_placed = True
            else:
                # Keep the trackball pose, only refit the aspect ratio
                camera = self.scene_widget.scene.camera
                camera.set_projection(
                    camera.get_field_of_view(),
                    width / height,
                    camera.get_near(),
                    camera.get_far(),
                    rendering.Camera.FovType.Vertical
                )

        self.window.set_on_layout(on_layout)
        self.window.add_child(self.scene_widget)
        self.window.add_child(main_panel)

    def _update_status(self, message: str, color: list):
        """Update status label."""
        self.status_label.text = message
        self.status_label.text_color = gui.Color(*color)

    def _render_balls(self):
        """Add every ball of the scene to the renderer."""
        for ball in self.scene_manager.get_scene().balls:
            self.scene_widget.scene.add_geometry(
                ball.geometry_name,
                GeometryUtils.create_ball_mesh(ball),
                GeometryUtils.create_ball_material(ball)
            )

    def _on_selection_changed(self, selected_ids: Set[int]):
        """Refresh materials of balls whose selection flag changed."""
        scene = self.scene_manager.get_scene()
        for ball_id in self.highlighted ^ selected_ids:
            ball = scene.get_ball_by_id(ball_id)
            self.scene_widget.scene.modify_geometry_material(
                ball.geometry_name,
                GeometryUtils.create_ball_material(ball)
            )
        self.highlighted = set(selected_ids)

        self.selection_panel.set_selection(
            [scene.get_ball_by_id(i) for i in sorted(selected_ids)]
        )
        self.scene_widget.force_redraw()

    def run(self):
        """Run the application."""
        gui.Application.instance.run()
