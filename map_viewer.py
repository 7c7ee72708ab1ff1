#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations
import sys
import logging
from typing import Optional
from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QToolBar, QStatusBar, QLabel, QWidget, QComboBox,
    QStackedWidget, QVBoxLayout, QProgressBar, QSizePolicy
)
from floormap.scene import MapScene, MapView
from floormap import (MapConfig, ViewState, LoadStatus, FLOOR_NAMES,
                      BuildingLoaded, LoadFailed, FloorSelected, RoomTapped,
                      ParseError, load_building, reduce, layout_floor, configure_logging)

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Building Map"
FAILED_TEXT = "Failed to load map data"


class MainWindow(QMainWindow):
    def __init__(self, config: Optional[MapConfig] = None, autoload: bool = True):
        super().__init__()
        self.config = config or MapConfig()
        self.state = ViewState()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(900, 760)

        # 1) Pages: loading / failed / map
        self.pages = QStackedWidget(self)
        self.loading_page = self._build_loading_page()
        self.failed_label = QLabel(FAILED_TEXT)
        self.failed_label.setAlignment(Qt.AlignCenter)
        self.failed_label.setWordWrap(True)

        self.scene = MapScene(self.config.asset_root)
        self.view = MapView(self.scene)
        # deferred: the tapped item is destroyed by the re-render
        self.scene.room_tapped.connect(self._on_room_tapped, Qt.QueuedConnection)
        self.view.widthChanged.connect(lambda _w: self._render())
        self.view.scaleChanged.connect(lambda s: self._status(f"Zoom: {int(s * 100)}%"))

        self.pages.addWidget(self.loading_page)
        self.pages.addWidget(self.failed_label)
        self.pages.addWidget(self.view)
        self.setCentralWidget(self.pages)

        # 2) Toolbar / status
        self._build_toolbar()
        self.setStatusBar(QStatusBar(self))

        self._render()
        if autoload:
            # let the busy page paint before the blocking read
            QTimer.singleShot(0, self.load)

    def _build_loading_page(self) -> QWidget:
        page = QWidget(self)
        lay = QVBoxLayout(page)
        lay.addStretch(1)
        bar = QProgressBar(page)
        bar.setRange(0, 0)
        bar.setTextVisible(False)
        bar.setFixedWidth(160)
        lay.addWidget(bar, 0, Qt.AlignCenter)
        lay.addStretch(1)
        return page

    def _build_toolbar(self):
        tb = QToolBar("Floors", self)
        tb.setMovable(False)
        self.addToolBar(Qt.TopToolBarArea, tb)

        title = QLabel(f"  {WINDOW_TITLE}  ")
        title.setStyleSheet("font-weight:600;")
        tb.addWidget(title)

        spacer = QWidget(self)
        spacer.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        tb.addWidget(spacer)

        self.floor_combo = QComboBox(self)
        self.floor_combo.addItems(list(FLOOR_NAMES))
        self.floor_combo.setCurrentText(self.state.floor)
        self.floor_combo.setEnabled(False)
        # activated fires on re-selecting the same floor too
        self.floor_combo.activated.connect(
            lambda idx: self.dispatch(FloorSelected(self.floor_combo.itemText(idx))))
        tb.addWidget(self.floor_combo)

    # ---- state ----
    def load(self):
        try:
            building = load_building(self.config.data_path)
        except ParseError as e:
            logger.error("Map data load failed: %s", e)
            self.dispatch(LoadFailed(e.reason))
            return
        self.dispatch(BuildingLoaded(building))

    def dispatch(self, event):
        new_state = reduce(self.state, event)
        if new_state is self.state:
            logger.debug("Ignored %s in %s state", type(event).__name__, self.state.status)
            return
        self.state = new_state
        self._render()

    def _on_room_tapped(self, room_id: str):
        logger.debug("Room tapped: %s", room_id)
        self.dispatch(RoomTapped(room_id))

    # ---- rendering ----
    def _render(self):
        st = self.state
        self.floor_combo.setEnabled(st.status == LoadStatus.READY)
        if st.status == LoadStatus.LOADING:
            self.pages.setCurrentWidget(self.loading_page)
            return
        if st.status == LoadStatus.FAILED:
            self.failed_label.setText(f"{FAILED_TEXT}\n\n{st.error}" if st.error else FAILED_TEXT)
            self.pages.setCurrentWidget(self.failed_label)
            self._status(FAILED_TEXT)
            return

        if self.floor_combo.currentText() != st.floor:
            self.floor_combo.setCurrentText(st.floor)
        self.pages.setCurrentWidget(self.view)
        width = float(self.view.viewport().width())
        layout = layout_floor(st, width, self.config.reference_width)
        self.scene.render_layout(layout)
        self.view.set_description(layout.description)
        self._update_status(len(layout.rooms))

    def _status(self, text: str):
        self.statusBar().showMessage(text, 3000)

    def _update_status(self, room_count: int):
        self.statusBar().showMessage(
            f"Floor: {self.state.floor} | Rooms: {room_count} | "
            f"Selected: {self.state.selected_room_id or '-'}"
        )


def main():
    config = MapConfig.from_env()
    configure_logging(config.log_level)
    app = QApplication(sys.argv)
    try:
        with open(config.theme_path, "r", encoding="utf-8") as f:
            app.setStyleSheet(f.read())
    except OSError as e:
        logger.debug("No theme applied: %s", e)
    win = MainWindow(config)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
