from __future__ import annotations

import logging
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtCore import QPointF, Qt  # noqa: E402
from PySide6.QtTest import QTest  # noqa: E402

from floormap.layout import DEFAULT_BACKGROUND, layout_floor  # noqa: E402
from floormap.scene import MapScene, MapView  # noqa: E402
from floormap.state import FloorSelected, RoomTapped, reduce  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


def test_scene_draws_one_item_per_room(qapp, ready_state, tmp_path) -> None:
    scene = MapScene(tmp_path)
    scene.render_layout(layout_floor(reduce(ready_state, RoomTapped("r2")), 1584))
    items = scene.room_items()
    assert [i.room_id for i in items] == ["r1", "r2"]
    assert [i.selected for i in items] == [False, True]
    r1 = items[0]
    assert (r1.pos().x(), r1.pos().y()) == (20.0, 40.0)
    assert (r1.rect().width(), r1.rect().height()) == (60.0, 80.0)


def test_missing_image_gets_placeholder(qapp, ready_state, tmp_path, caplog) -> None:
    scene = MapScene(tmp_path)
    scene.render_layout(layout_floor(reduce(ready_state, FloorSelected("9F")), 792))
    assert scene.room_items() == []
    assert scene.current_layout.background == DEFAULT_BACKGROUND
    bg = scene.background_item()
    assert isinstance(bg, QtWidgets.QGraphicsRectItem)
    assert bg.rect().width() == 792
    assert "Map image not found" in caplog.text


def _shown_view(qapp, scene: MapScene) -> MapView:
    view = MapView(scene)
    view.resize(820, 700)
    view.show()
    qapp.processEvents()
    return view


def _click(view: MapView, scene_point) -> None:
    QTest.mouseClick(view.viewport(), Qt.LeftButton, Qt.NoModifier, view.mapFromScene(scene_point))


def test_clicking_a_room_emits_its_id(qapp, ready_state, tmp_path) -> None:
    scene = MapScene(tmp_path)
    scene.render_layout(layout_floor(ready_state, 792))
    view = _shown_view(qapp, scene)
    got = []
    scene.room_tapped.connect(got.append)
    r2 = scene.room_items()[1]
    _click(view, r2.mapToScene(r2.rect().center()))
    assert got == ["r2"]
    view.close()


def test_only_empty_space_taps_are_logged(qapp, ready_state, tmp_path, caplog) -> None:
    scene = MapScene(tmp_path)
    scene.render_layout(layout_floor(ready_state, 792))
    view = _shown_view(qapp, scene)
    r1 = scene.room_items()[0]
    with caplog.at_level(logging.DEBUG, logger="floormap.scene"):
        _click(view, r1.mapToScene(r1.rect().center()))
        assert "Tapped at" not in caplog.text
        _click(view, QPointF(400, 300))
        assert "Tapped at" in caplog.text
    view.close()


def test_description_panel_hides_when_empty(qapp, tmp_path) -> None:
    view = MapView(MapScene(tmp_path))
    view.resize(800, 600)
    view.set_description("Room 101")
    assert not view.panel.isHidden()
    assert view.panel.text() == "Room 101"
    view.set_description("")
    assert view.panel.isHidden()


def test_zoom_is_clamped(qapp, tmp_path) -> None:
    view = MapView(MapScene(tmp_path))
    for _ in range(30):
        view.zoom_by(1.15)
    assert view.zoom() == pytest.approx(4.0)
    for _ in range(60):
        view.zoom_by(1 / 1.15)
    assert view.zoom() == pytest.approx(0.5)
