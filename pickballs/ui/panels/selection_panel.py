"""Selection display panel."""
from typing import List

import open3d.visualization.gui as gui

from pickballs.models.ball import Ball


class SelectionPanel:
    """Panel showing the last click and the currently selected balls."""

    def __init__(self, em: float):
        self.em = em
        self.click_label = None
        self.selection_label = None
        self.section = self._create_panel()

    def _create_panel(self) -> gui.CollapsableVert:
        """Create the selection panel UI."""
        section = gui.CollapsableVert(
            "🎯 Selection",
            self.em * 0.5,
            gui.Margins(self.em * 0.5, 0, 0, 0)
        )

        section.add_child(gui.Label("Last click:"))
        self.click_label = gui.Label("-")
        section.add_child(self.click_label)

        section.add_fixed(self.em * 0.3)
        section.add_child(gui.Label("Selected balls:"))
        self.selection_label = gui.Label("")
        section.add_child(self.selection_label)
        self.clear()

        return section

    def get_widget(self) -> gui.CollapsableVert:
        """Get the panel widget."""
        return self.section

    def set_last_click(self, x: float, y: float):
        """Show the viewport pixel of the latest press."""
        self.click_label.text = f"({x:.0f}, {y:.0f})"

    def set_selection(self, balls: List[Ball]):
        """Show the given balls, one per line."""
        if not balls:
            self.clear()
            return
        self.selection_label.text = "\n".join(
            f"#{b.id}  r={b.radius:.2f}  "
            f"({b.center[0]:.2f}, {b.center[1]:.2f}, {b.center[2]:.2f})"
            for b in balls
        )

    def clear(self):
        """Show an empty selection."""
        self.selection_label.text = "(none)"
