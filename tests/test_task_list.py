"""Tests for TaskList and AppState (no terminal needed)."""

import itertools
import random

import pytest

from todo_panels.core.state import AppState, Focus
from todo_panels.core.task_list import TaskList


def make(n: int, cursor: int = 0) -> TaskList:
    return TaskList([f"item {i}" for i in range(n)], cursor)


class TestCursorMoves:
    """Tests for move_up / move_down."""

    def test_move_down_and_up(self) -> None:
        tasks = make(3)
        tasks.move_down()
        tasks.move_down()
        assert tasks.cursor == 2
        tasks.move_up()
        assert tasks.cursor == 1

    def test_stops_at_ends(self) -> None:
        tasks = make(2)
        tasks.move_up()
        assert tasks.cursor == 0
        tasks.move_down()
        tasks.move_down()
        assert tasks.cursor == 1

    def test_empty_list_is_noop(self) -> None:
        tasks = TaskList()
        tasks.move_up()
        tasks.move_down()
        assert tasks.cursor == 0
        assert tasks.current is None

    @pytest.mark.parametrize("length", [1, 2, 5])
    def test_cursor_stays_in_range(self, length: int) -> None:
        rng = random.Random(length)
        tasks = make(length)
        for _ in range(200):
            rng.choice([tasks.move_up, tasks.move_down])()
            assert 0 <= tasks.cursor < len(tasks)


class TestDrag:
    """Tests for drag_up / drag_down."""

    def test_drag_up_keeps_item_selected(self) -> None:
        tasks = TaskList(["a", "b", "c"], cursor=2)
        tasks.drag_up()
        assert tasks.items == ["a", "c", "b"]
        assert tasks.cursor == 1
        assert tasks.current == "c"

    def test_drag_down_keeps_item_selected(self) -> None:
        tasks = TaskList(["a", "b", "c"], cursor=0)
        tasks.drag_down()
        assert tasks.items == ["b", "a", "c"]
        assert tasks.cursor == 1
        assert tasks.current == "a"

    def test_boundaries_are_noops(self) -> None:
        tasks = TaskList(["a", "b"], cursor=0)
        tasks.drag_up()
        assert tasks.items == ["a", "b"]
        tasks.cursor = 1
        tasks.drag_down()
        assert tasks.items == ["a", "b"]
        assert tasks.cursor == 1

    def test_empty_list_is_noop(self) -> None:
        tasks = TaskList()
        tasks.drag_up()
        tasks.drag_down()
        assert tasks.items == []

    @pytest.mark.parametrize("cursor", [1, 2, 3])
    def test_drag_up_then_down_restores_order(self, cursor: int) -> None:
        tasks = make(4, cursor)
        before = list(tasks.items)
        tasks.drag_up()
        tasks.drag_down()
        assert tasks.items == before
        assert tasks.cursor == cursor


class TestTransfer:
    """Tests for transfer_to."""

    def test_appends_to_destination(self) -> None:
        src = TaskList(["a", "b"], cursor=0)
        dst = TaskList(["x"], cursor=0)
        src.transfer_to(dst)
        assert src.items == ["b"]
        assert dst.items == ["x", "a"]
        assert dst.cursor == 0

    def test_clamps_cursor_after_last_item(self) -> None:
        src = TaskList(["a", "b"], cursor=1)
        dst = TaskList()
        src.transfer_to(dst)
        assert src.items == ["a"]
        assert src.cursor == 0

    def test_last_item_leaves_source_empty(self) -> None:
        src = TaskList(["a"], cursor=0)
        dst = TaskList()
        src.transfer_to(dst)
        assert src.items == []
        assert dst.items == ["a"]
        src.move_down()
        src.move_up()
        assert src.current is None

    def test_empty_source_is_noop(self) -> None:
        src = TaskList()
        dst = TaskList(["x"])
        src.transfer_to(dst)
        assert dst.items == ["x"]

    @pytest.mark.parametrize("n,cursor", [(1, 0), (3, 0), (3, 1), (3, 2)])
    def test_conserves_items(self, n: int, cursor: int) -> None:
        src = make(n, cursor)
        dst = TaskList(["x", "y"])
        moved = src.current
        total = len(src) + len(dst)
        src.transfer_to(dst)
        assert len(src) + len(dst) == total
        assert dst.items[-1] == moved


class TestDelete:
    """Tests for delete_at_cursor and clamp_cursor."""

    def test_removes_selected(self) -> None:
        tasks = TaskList(["a", "b", "c"], cursor=1)
        tasks.delete_at_cursor()
        assert tasks.items == ["a", "c"]
        assert tasks.cursor == 1

    def test_cursor_not_clamped(self) -> None:
        tasks = TaskList(["a", "b"], cursor=1)
        tasks.delete_at_cursor()
        assert tasks.items == ["a"]
        assert tasks.cursor == 1
        assert tasks.current is None
        tasks.clamp_cursor()
        assert tasks.cursor == 0
        assert tasks.current == "a"

    def test_unclamped_cursor_is_safe(self) -> None:
        tasks = TaskList(["a", "b"], cursor=1)
        tasks.delete_at_cursor()
        tasks.drag_up()
        tasks.drag_down()
        tasks.delete_at_cursor()
        tasks.transfer_to(TaskList())
        assert tasks.items == ["a"]

    def test_single_item_then_move(self) -> None:
        tasks = TaskList(["only"], cursor=0)
        tasks.delete_at_cursor()
        assert tasks.items == []
        tasks.move_up()
        tasks.move_down()
        assert tasks.items == []

    def test_empty_list_is_noop(self) -> None:
        tasks = TaskList()
        tasks.delete_at_cursor()
        tasks.clamp_cursor()
        assert tasks.cursor == 0


class TestAppState:
    """Tests for focus handling in AppState."""

    def test_focus_toggle(self) -> None:
        assert Focus.TODO.toggle() is Focus.DONE
        assert Focus.DONE.toggle() is Focus.TODO

    def test_focused_and_unfocused(self) -> None:
        state = AppState.from_titles(["a"], ["b"])
        assert state.focused is state.todo
        assert state.unfocused is state.done
        state.toggle_focus()
        assert state.focused is state.done
        assert state.unfocused is state.todo

    def test_transfer_both_ways(self) -> None:
        state = AppState.from_titles(["a", "b"], ["c"])
        state.todo.cursor = 1
        state.transfer()
        assert state.todo.items == ["a"]
        assert state.done.items == ["c", "b"]

        state.toggle_focus()
        state.transfer()
        assert state.done.items == ["b"]
        assert state.todo.items == ["a", "c"]

    def test_delete_reclamps(self) -> None:
        state = AppState.from_titles(["a", "b"], [])
        state.todo.cursor = 1
        state.delete()
        assert state.todo.items == ["a"]
        assert state.todo.cursor == 0

    def test_from_titles_copies(self) -> None:
        todo = ["a"]
        state = AppState.from_titles(todo, [])
        state.todo.items.append("b")
        assert todo == ["a"]

    def test_random_commands_keep_invariants(self) -> None:
        rng = random.Random(7)
        state = AppState.from_titles([f"t{i}" for i in range(5)], [f"d{i}" for i in range(3)])
        titles = sorted(state.todo.items + state.done.items)
        commands = [
            lambda: state.focused.move_up(),
            lambda: state.focused.move_down(),
            lambda: state.focused.drag_up(),
            lambda: state.focused.drag_down(),
            state.transfer,
            state.toggle_focus,
        ]
        for _ in range(500):
            rng.choice(commands)()
            for tasks in (state.todo, state.done):
                if tasks.items:
                    assert 0 <= tasks.cursor < len(tasks)
        assert sorted(state.todo.items + state.done.items) == titles

    def test_every_permutation_reachable_by_dragging(self) -> None:
        start = ["a", "b", "c"]
        for target in itertools.permutations(start):
            tasks = TaskList(list(start))
            # selection sort by dragging each wanted item up into place
            for pos, title in enumerate(target):
                tasks.cursor = tasks.items.index(title)
                while tasks.cursor > pos:
                    tasks.drag_up()
            assert tasks.items == list(target)
