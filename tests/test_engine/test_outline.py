"""Tests for the interactive outline controller."""

from __future__ import annotations

import pytest

from shapedraw.engine.config import OutlineConfig
from shapedraw.engine.outline import (
    GRAB_CURSOR,
    OutlineSession,
    get_cursor,
    new_shape_path,
    path_from_points,
)
from shapedraw.engine.session import GestureSession
from shapedraw.engine.spatial_constants import I000, I090, I180, I270
from shapedraw.models.shapes import DrawMode
from tests.conftest import PENTAGON_PATH, RECT_CHART_PIXEL_PATH

PIXEL_RECT = "M50,50L50,150L150,150L150,50Z"


@pytest.fixture
def fresh_session(chart, paper_space) -> GestureSession:
    return GestureSession(chart, paper_space)


class TestCursor:
    @pytest.mark.parametrize(
        "x, y, expected",
        [
            (0, 0, "sw-resize"),
            (0.5, 0, "s-resize"),
            (1, 0, "se-resize"),
            (0.5, 0.5, "move"),
            (0, 1, "nw-resize"),
            (1, 1, "ne-resize"),
            (-0.2, 1.4, "nw-resize"),
        ],
    )
    def test_grid(self, x, y, expected):
        assert get_cursor(x, y) == expected


class TestNewShapePath:
    def test_rect(self):
        assert new_shape_path(DrawMode.RECT, 50, 50, 150, 150) == PIXEL_RECT

    def test_line(self):
        assert new_shape_path(DrawMode.LINE, 1, 2, 3, 4) == "M1,2L3,4"

    def test_circle(self):
        path = new_shape_path(DrawMode.CIRCLE, 0, 0, 10, 10)
        assert path.startswith("M")
        assert path.endswith("Z")
        assert path.count("L") == 31

    def test_free_form_modes_rejected(self):
        with pytest.raises(ValueError):
            new_shape_path(DrawMode.OPEN_PATH, 0, 0, 1, 1)

    def test_path_from_points(self):
        assert path_from_points([(0, 0), (5, 5), (10, 0)]) == "M0,0L5,5L10,0"
        assert path_from_points([(0, 0), (5, 5), (10, 0)], closed=True) == "M0,0L5,5L10,0Z"
        assert path_from_points([]) == "M0,0Z"


class TestHandles:
    def test_rectangle_corners(self, fresh_session):
        outline = OutlineSession.from_path(PIXEL_RECT, fresh_session)
        handles = outline.handles()

        assert [h.vertex_index for h in handles] == [0, 1, 2, 3]
        assert [h.cursor for h in handles] == ["nw-resize", "sw-resize", "se-resize", "ne-resize"]
        assert {h.indicator for h in handles} == {"rect"}
        assert handles[2].radius == 18
        assert handles[2].icon_radius == 3

    def test_ellipse_cardinals_only(self, fresh_session):
        path = new_shape_path(DrawMode.CIRCLE, 200, 200, 240, 240)
        outline = OutlineSession.from_path(path, fresh_session)
        handles = outline.handles()

        assert [h.vertex_index for h in handles] == [I000, I090, I180, I270]
        assert {h.indicator for h in handles} == {"circle"}

    def test_path_vertices(self, fresh_session):
        outline = OutlineSession.from_path(PENTAGON_PATH, fresh_session)
        handles = outline.handles()

        assert len(handles) == 5
        assert {h.cursor for h in handles} == {GRAB_CURSOR}

    def test_every_sub_path_gets_handles(self, fresh_session):
        outline = OutlineSession.from_path("M0,0L10,0L5,8ZM20,20L30,20L25,28Z", fresh_session)
        handles = outline.handles()

        assert len(outline.polygons) == 2
        assert [h.cell_index for h in handles] == [0, 0, 0, 1, 1, 1]
        assert (handles[3].x, handles[3].y) == (20, 20)

    def test_config_sizes(self, fresh_session):
        config = OutlineConfig(vertex_radius=10, icon_radius=2)
        outline = OutlineSession.from_path(PENTAGON_PATH, fresh_session, config=config)
        assert all(h.radius == 10 and h.icon_radius == 2 for h in outline.handles())


class TestVertexDrag:
    def test_rect_corner_carries_neighbours(self, fresh_session):
        outline = OutlineSession.from_path(PIXEL_RECT, fresh_session)
        outline.start_vertex_drag(0, 2)
        outline.move_vertex(5, 5)
        outline.move_vertex(10, 20)

        assert outline.path == "M50,50L50,170L160,170L160,50Z"

    def test_rect_collapse_rejected(self, fresh_session):
        outline = OutlineSession.from_path(PIXEL_RECT, fresh_session)
        outline.start_vertex_drag(0, 2)
        outline.move_vertex(-100, 0)

        assert outline.path == PIXEL_RECT

    def test_path_vertex_moves_alone(self, fresh_session):
        outline = OutlineSession.from_path(PENTAGON_PATH, fresh_session)
        outline.start_vertex_drag(0, 2)
        outline.move_vertex(1, -1)

        assert outline.path == "M0,0L10,0L16,7L5,12L0,0"

    def test_double_click_deletes(self, fresh_session):
        outline = OutlineSession.from_path(PENTAGON_PATH, fresh_session)
        outline.start_vertex_drag(0, 2)
        outline.click_vertex(2)

        assert "15,8" not in outline.path
        assert len(outline.polygons[0]) == 4

    def test_delete_refused_at_minimum(self, fresh_session):
        outline = OutlineSession.from_path(PENTAGON_PATH, fresh_session)
        outline.start_vertex_drag(0, 2)
        outline.click_vertex(2)
        outline.start_vertex_drag(0, 1)
        outline.click_vertex(2)

        assert outline.path == "M0,0L10,0L5,12L0,0"

    def test_single_click_ignored(self, fresh_session):
        outline = OutlineSession.from_path(PENTAGON_PATH, fresh_session)
        outline.start_vertex_drag(0, 2)
        outline.click_vertex(1)

        assert len(outline.polygons[0]) == 5

    def test_deleting_first_vertex_promotes_next(self, fresh_session):
        outline = OutlineSession.from_path(PENTAGON_PATH, fresh_session)
        outline.start_vertex_drag(0, 0)
        outline.click_vertex(2)

        assert outline.path == "M10,0L15,8L5,12L0,0"


class TestShapeDrag:
    def test_translates_control_points(self, fresh_session):
        outline = OutlineSession.from_path("M0,0C1,2,3,4,5,6", fresh_session)
        outline.start_shape_drag()
        outline.move_shape(2, 2)
        outline.move_shape(10, 0)

        assert outline.path == "M10,0C11,2,13,4,15,6"

    def test_end_drag_rebases(self, fresh_session):
        outline = OutlineSession.from_path("M0,0L1,1", fresh_session)
        outline.start_shape_drag()
        outline.move_shape(1, 0)
        outline.end_drag()
        outline.move_shape(1, 0)

        assert outline.path == "M2,0L3,1"


class TestCallbacks:
    def test_fresh_draw_renders_without_commit(self, fresh_session):
        rendered: list[str] = []
        relayouts: list[list[dict]] = []
        outline = OutlineSession.from_path(
            PIXEL_RECT, fresh_session, on_redraw=rendered.append, on_relayout=relayouts.append
        )
        outline.start_shape_drag()
        outline.move_shape(1, 1)

        assert rendered == ["M51,51L51,151L151,151L151,51Z"]
        assert relayouts == []
        assert outline.last_update is None

    def test_edit_commits_on_every_move(self, rect_chart, axis_space):
        relayouts: list[list[dict]] = []
        session = GestureSession(rect_chart, axis_space, active_shape_index=0)
        outline = OutlineSession.from_path(RECT_CHART_PIXEL_PATH, session, on_relayout=relayouts.append)
        outline.start_shape_drag()
        outline.move_shape(40, 0)

        assert len(relayouts) == 1
        assert relayouts[0][0]["x0"] == 2.25
        assert relayouts[0][0]["x1"] == 4.75
        assert outline.last_update.updated_active_shape

    def test_explicit_commit_of_fresh_draw(self, fresh_session):
        outline = OutlineSession.from_path(new_shape_path(DrawMode.LINE, 0, 0, 200, 100), fresh_session)
        fresh_session.mode = DrawMode.LINE
        update = outline.commit()

        assert update.shapes == [update.new_shapes[0].to_input()]
        assert update.shapes[0]["type"] == "line"
