from __future__ import annotations

import time

import numpy as np
import pyvista as pv
from pyvistaqt import QtInteractor
from PySide6 import QtCore, QtGui, QtWidgets

from element_catalogue.chem.atomic_model import (
    NUCLEUS_RADIUS,
    build_atom_model,
    electron_positions,
    orbit_phase,
)
from element_catalogue.chem.elements import ElementRecord

FRAME_INTERVAL_MS = 33
RING_RESOLUTION = 96
ELECTRON_COLOR = "#60a5fa"


class AtomicModelView(QtWidgets.QFrame):
    """3D shell model: nucleus, one tilted ring per shell and animated electrons."""

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.setFrameStyle(QtWidgets.QFrame.Shape.StyledPanel | QtWidgets.QFrame.Shadow.Sunken)
        self.setMinimumSize(320, 280)
        self._plotter_closed = False
        self._record: ElementRecord | None = None
        self._electron_meshes: list[tuple[pv.PolyData, int, float]] = []
        self._started = time.monotonic()
        self._background = "#111827"
        self._ring_color = "#64748b"

        self.plotter = QtInteractor(self)
        self.plotter.set_background(self._background)
        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.plotter, 1)

        self._timer = QtCore.QTimer(self)
        self._timer.setInterval(FRAME_INTERVAL_MS)
        self._timer.timeout.connect(self._advance)

    def apply_theme(self, tokens: dict) -> None:
        colors = tokens.get("colors", {})
        self._background = colors.get("surface", self._background)
        self._ring_color = colors.get("border", self._ring_color)
        if not self._plotter_closed:
            self.plotter.set_background(self._background)
            self._render_model()

    def set_element(self, record: ElementRecord | None) -> None:
        self._record = record
        self._started = time.monotonic()
        self._render_model()

    def _render_model(self) -> None:
        if self._plotter_closed:
            return
        self.plotter.clear()
        self._electron_meshes = []
        if self._record is None:
            self._timer.stop()
            return
        model = build_atom_model(self._record)
        self.plotter.add_mesh(
            pv.Sphere(radius=NUCLEUS_RADIUS, center=(0.0, 0.0, 0.0)),
            color=model.nucleus_color,
            smooth_shading=True,
            specular=0.4,
        )
        for shell in model.shells:
            ring = electron_positions(RING_RESOLUTION, shell.radius)
            self.plotter.add_mesh(
                pv.lines_from_points(np.vstack([ring, ring[:1]])),
                color=self._ring_color,
                line_width=1.5,
                opacity=0.6,
            )
            if shell.electron_count <= 0:
                continue
            electrons = pv.PolyData(shell.positions.copy())
            self.plotter.add_mesh(
                electrons,
                color=ELECTRON_COLOR,
                point_size=10,
                render_points_as_spheres=True,
            )
            self._electron_meshes.append((electrons, shell.electron_count, shell.radius))
        self.plotter.add_text(model.symbol, position="upper_left", font_size=12, color="white")
        self.plotter.reset_camera()
        if self.isVisible():
            self._timer.start()

    def _advance(self) -> None:
        if self._plotter_closed or not self._electron_meshes:
            self._timer.stop()
            return
        elapsed = time.monotonic() - self._started
        for mesh, count, radius in self._electron_meshes:
            mesh.points = electron_positions(count, radius, orbit_phase(elapsed, radius))
        self.plotter.render()

    def showEvent(self, event: QtGui.QShowEvent) -> None:
        super().showEvent(event)
        if self._electron_meshes and not self._plotter_closed:
            self._timer.start()

    def hideEvent(self, event: QtGui.QHideEvent) -> None:
        self._timer.stop()
        super().hideEvent(event)

    def cleanup(self) -> None:
        """Stop the animation and close the VTK render window before Qt tears down."""
        self._timer.stop()
        if self._plotter_closed:
            return
        self.plotter.close()
        self._plotter_closed = True

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self.cleanup()
        super().closeEvent(event)
