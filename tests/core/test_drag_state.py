"""Tests for the drag state machine, driven through SketchSession."""

import math

import pytest

from fading_sketch.core.drag_state import EVENT_ACTIONS, PointerEventType, StrokeAction
from fading_sketch.core.session import SketchSession
from fading_sketch.core.session_state import DragState
from fading_sketch.core.stroke_path import Point


class TestEventMapping:
    def test_up_and_leave_share_the_end_action(self):
        assert EVENT_ACTIONS[PointerEventType.UP] is StrokeAction.END
        assert EVENT_ACTIONS[PointerEventType.LEAVE] is StrokeAction.END

    def test_move_and_enter_share_the_extend_action(self):
        assert EVENT_ACTIONS[PointerEventType.MOVE] is StrokeAction.EXTEND
        assert EVENT_ACTIONS[PointerEventType.ENTER] is StrokeAction.EXTEND


class TestTransitions:
    def test_initial_state_is_idle(self, session):
        assert session.drag_state is DragState.IDLE
        assert session.live_path is None

    def test_down_without_surface_is_noop(self, scheduler):
        sketch = SketchSession(scheduler=scheduler)
        assert sketch.pointer_down(1, 1) is False
        assert sketch.drag_state is DragState.IDLE
        assert sketch.live_path is None

    def test_down_starts_stroke_with_first_point(self, session):
        started = []
        session.stroke_started.connect(started.append)

        assert session.pointer_down(10, 10) is True

        assert session.drag_state is DragState.DRAGGING
        assert session.live_path.points == (Point(10, 10),)
        assert started == [session.live_path.id]

    def test_move_and_enter_extend_live_path(self, session):
        session.pointer_down(0, 0)
        session.pointer_move(1, 0)
        session.pointer_enter(2, 0)
        assert session.live_path.points == (Point(0, 0), Point(1, 0), Point(2, 0))
        assert session.drag_state is DragState.DRAGGING

    def test_second_down_keeps_live_path(self, session):
        session.pointer_down(0, 0)
        live = session.live_path
        assert session.pointer_down(5, 5) is False
        assert session.live_path is live
        assert live.points == (Point(0, 0),)

    @pytest.mark.parametrize("hook", ["pointer_move", "pointer_enter", "pointer_up", "pointer_leave"])
    def test_events_while_idle_are_noops(self, session, surface, hook):
        assert getattr(session, hook)(3, 3) is False
        assert session.drag_state is DragState.IDLE
        assert len(session.history) == 0
        assert surface.calls == []

    def test_idle_move_after_commit_does_not_mutate_or_clear(self, session, surface, draw_stroke):
        path = draw_stroke(session, [(0, 0), (1, 1), (1, 1)])
        surface.reset()

        session.pointer_move(50, 50)
        session.pointer_enter(60, 60)

        assert path.points == (Point(0, 0), Point(1, 1))
        assert surface.clear_count() == 0
        assert surface.calls == []

    def test_non_finite_coordinates_are_dropped(self, session):
        session.pointer_down(0, 0)
        assert session.pointer_move(math.nan, 1) is False
        assert session.live_path.points == (Point(0, 0),)

    def test_live_path_exists_iff_dragging(self, session):
        events = [
            ("pointer_move", 1, 1),
            ("pointer_down", 0, 0),
            ("pointer_move", 1, 1),
            ("pointer_up", 2, 2),
            ("pointer_enter", 3, 3),
            ("pointer_down", 4, 4),
            ("pointer_leave", 5, 5),
        ]
        for hook, x, y in events:
            getattr(session, hook)(x, y)
            dragging = session.drag_state is DragState.DRAGGING
            assert dragging == (session.live_path is not None)


class TestStrokeCapture:
    def test_reference_scenario(self, session, draw_stroke):
        path = draw_stroke(session, [(10, 10), (20, 10), (20, 20), (20, 20)])

        assert len(session.history) == 1
        assert path.points == (Point(10, 10), Point(20, 10), Point(20, 20))
        assert session.live_path is None
        assert session.drag_state is DragState.IDLE

    @pytest.mark.parametrize("moves", [0, 1, 5, 20])
    def test_down_moves_up_gives_n_plus_one_points(self, session, draw_stroke, moves):
        coords = [(0, 0)] + [(i + 1, 2 * (i + 1)) for i in range(moves)]
        # Release happens where the last event was
        path = draw_stroke(session, coords + [coords[-1]])

        assert len(path.points) == moves + 1
        assert path.points == tuple(Point(x, y) for x, y in coords)

    def test_release_at_new_position_is_recorded(self, session, draw_stroke):
        path = draw_stroke(session, [(0, 0), (5, 5), (9, 9)])
        assert path.points[-1] == Point(9, 9)
        assert len(path.points) == 3

    def test_leave_ends_stroke_like_up(self, session, scheduler, draw_stroke):
        path = draw_stroke(session, [(0, 0), (4, 4), (8, 8)], end="leave")

        assert session.drag_state is DragState.IDLE
        assert session.live_path is None
        assert session.history.snapshot() == (path,)
        assert path.points == (Point(0, 0), Point(4, 4), Point(8, 8))
        assert scheduler.pending_keys() == (path.id,)

    def test_reenter_after_leave_does_not_resume(self, session, draw_stroke):
        draw_stroke(session, [(0, 0), (4, 4)], end="leave")
        assert session.pointer_enter(4, 4) is False
        assert session.live_path is None
