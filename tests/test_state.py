"""Key routing through the list/detail view state machine.

Covers mode toggling, per-view scroll resets, shift-scroll selection
snapping, and keys that must be ignored.
"""

from __future__ import annotations

import unittest

from movieview.layout import detail_content_height
from movieview.models import Movie
from movieview.scroll import Viewport, max_scroll
from movieview.state import ViewMode, ViewState


def make_results(count: int, overview: str = "A short overview.") -> tuple[Movie, ...]:
    return tuple(Movie(title=f"Movie {idx}", release_date="1999-03-31", overview=overview) for idx in range(count))


LONG_OVERVIEW = " ".join(["word"] * 120)


class ListModeTests(unittest.TestCase):
    def test_starts_in_list_mode_with_first_result_selected(self) -> None:
        state = ViewState.for_results(make_results(3))
        self.assertIs(state.mode, ViewMode.LIST)
        self.assertEqual(state.selection.selected, 0)
        self.assertIs(state.active_scroll, state.list_scroll)

    def test_down_nine_times_scrolls_list_by_two(self) -> None:
        results = make_results(25)
        state = ViewState.for_results(results)
        viewport = Viewport(height=10, width=80)

        for _ in range(9):
            self.assertFalse(state.handle_key("DOWN", results, viewport))

        self.assertEqual(state.selection.selected, 9)
        self.assertEqual(state.list_scroll.offset, 2)

    def test_up_from_first_wraps_to_last_and_reveals_it(self) -> None:
        results = make_results(25)
        state = ViewState.for_results(results)
        state.handle_key("UP", results, Viewport(height=10, width=80))

        self.assertEqual(state.selection.selected, 24)
        self.assertEqual(state.list_scroll.offset, 17)

    def test_shift_down_scrolls_without_moving_selection_until_it_leaves_window(self) -> None:
        results = make_results(25)
        state = ViewState.for_results(results)
        viewport = Viewport(height=10, width=80)
        state.selection.selected = 5

        state.handle_key("SHIFT_DOWN", results, viewport)
        self.assertEqual(state.list_scroll.offset, 1)
        self.assertEqual(state.selection.selected, 5)

        for _ in range(5):
            state.handle_key("SHIFT_DOWN", results, viewport)
        self.assertEqual(state.list_scroll.offset, 6)
        self.assertEqual(state.selection.selected, 6)

    def test_shift_up_snaps_selection_to_bottom_row(self) -> None:
        results = make_results(25)
        state = ViewState.for_results(results)
        viewport = Viewport(height=10, width=80)
        for _ in range(9):
            state.handle_key("DOWN", results, viewport)

        state.handle_key("SHIFT_UP", results, viewport)

        self.assertEqual(state.list_scroll.offset, 1)
        self.assertEqual(state.selection.selected, 8)

    def test_shift_scroll_is_noop_when_list_fits(self) -> None:
        results = make_results(4)
        state = ViewState.for_results(results)
        viewport = Viewport(height=10, width=80)
        state.selection.selected = 3

        state.handle_key("SHIFT_DOWN", results, viewport)

        self.assertEqual(state.list_scroll.offset, 0)
        self.assertEqual(state.selection.selected, 3)

    def test_unknown_keys_are_ignored(self) -> None:
        results = make_results(5)
        state = ViewState.for_results(results)
        for key in ("x", "LEFT", "RIGHT", "TAB", "BACKSPACE", "Q"):
            self.assertFalse(state.handle_key(key, results, Viewport(height=10, width=80)))
        self.assertIs(state.mode, ViewMode.LIST)
        self.assertEqual(state.selection.selected, 0)

    def test_quit_keys_return_true_in_either_mode(self) -> None:
        results = make_results(2)
        viewport = Viewport(height=10, width=80)
        for key in ("q", "CTRL_C"):
            state = ViewState.for_results(results)
            self.assertTrue(state.handle_key(key, results, viewport))
            state.handle_key("ENTER", results, viewport)
            self.assertTrue(state.handle_key(key, results, viewport))


class DetailModeTests(unittest.TestCase):
    def test_enter_freezes_subject_and_resets_detail_scroll(self) -> None:
        results = make_results(5)
        state = ViewState.for_results(results)
        viewport = Viewport(height=10, width=80)
        state.handle_key("DOWN", results, viewport)
        state.handle_key("DOWN", results, viewport)
        state.detail_scroll.offset = 4

        state.handle_key("ENTER", results, viewport)

        self.assertIs(state.mode, ViewMode.DETAIL)
        self.assertEqual(state.detail_index, 2)
        self.assertEqual(state.detail_subject(results).title, "Movie 2")
        self.assertEqual(state.detail_scroll.offset, 0)

    def test_enter_toggles_back_and_resets_only_list_scroll(self) -> None:
        results = make_results(25, overview=LONG_OVERVIEW)
        state = ViewState.for_results(results)
        viewport = Viewport(height=10, width=40)
        state.handle_key("ENTER", results, viewport)
        state.handle_key("DOWN", results, viewport)
        state.list_scroll.offset = 3

        state.handle_key("ENTER", results, viewport)

        self.assertIs(state.mode, ViewMode.LIST)
        self.assertEqual(state.list_scroll.offset, 0)
        self.assertEqual(state.detail_scroll.offset, 1)

    def test_up_down_scroll_detail_and_keep_selection(self) -> None:
        results = make_results(3, overview=LONG_OVERVIEW)
        state = ViewState.for_results(results)
        viewport = Viewport(height=10, width=40)
        state.handle_key("ENTER", results, viewport)

        limit = max_scroll(detail_content_height(results[0], viewport), viewport)
        for _ in range(limit + 10):
            state.handle_key("DOWN", results, viewport)
        self.assertEqual(state.detail_scroll.offset, limit)

        state.handle_key("SHIFT_UP", results, viewport)
        self.assertEqual(state.detail_scroll.offset, limit - 1)
        self.assertEqual(state.selection.selected, 0)

    def test_short_detail_does_not_scroll(self) -> None:
        results = make_results(1)
        state = ViewState.for_results(results)
        viewport = Viewport(height=20, width=80)
        state.handle_key("ENTER", results, viewport)
        state.handle_key("DOWN", results, viewport)
        self.assertEqual(state.detail_scroll.offset, 0)

    def test_escape_returns_to_list_and_is_idempotent(self) -> None:
        results = make_results(25)
        state = ViewState.for_results(results)
        viewport = Viewport(height=10, width=80)
        state.handle_key("ENTER", results, viewport)
        state.list_scroll.offset = 5

        state.handle_key("ESC", results, viewport)
        self.assertIs(state.mode, ViewMode.LIST)
        self.assertEqual(state.list_scroll.offset, 0)

        state.handle_key("ESC", results, viewport)
        self.assertIs(state.mode, ViewMode.LIST)

    def test_unrecognised_keys_keep_detail_view_open(self) -> None:
        results = make_results(3, overview=LONG_OVERVIEW)
        state = ViewState.for_results(results)
        viewport = Viewport(height=10, width=40)
        state.handle_key("ENTER", results, viewport)
        state.handle_key("DOWN", results, viewport)

        for key in ("UNKNOWN", "PAGE_DOWN", "DELETE", "HOME", "~"):
            self.assertFalse(state.handle_key(key, results, viewport))

        self.assertIs(state.mode, ViewMode.DETAIL)
        self.assertEqual(state.detail_scroll.offset, 1)
        self.assertEqual(state.selection.selected, 0)


if __name__ == "__main__":
    unittest.main()
