"""Tests for linepick.renderer -- frames and painting."""

from __future__ import annotations

from linepick.ansi import HIGHLIGHT, PLAIN, RESET, sgr
from linepick.renderer import paint, render
from linepick.screen import Screen
from linepick.text import Text
from linepick.world import World

from .fake_tty import FakeTTY

FRUIT = ["apple", "banana", "grape"]


class TestRender:
    def test_line_count_is_visible_choices_plus_prompt(self) -> None:
        frame = render(World.create(FRUIT, 5))
        assert len(frame.lines) == 6

    def test_prompt_line_contains_query(self) -> None:
        frame = render(World.create(FRUIT, 5, "ap"))
        assert frame.lines[0].plain == "> ap"

    def test_custom_prompt(self) -> None:
        frame = render(World.create(FRUIT, 5, "ap"), prompt="pick: ")
        assert frame.lines[0].plain == "pick: ap"

    def test_choices_in_ranked_order_then_padding(self) -> None:
        frame = render(World.create(FRUIT, 5))
        assert [line.plain for line in frame.lines[1:]] == ["apple", "grape", "banana", "", ""]

    def test_choices_truncated_to_window(self) -> None:
        frame = render(World.create([str(i) for i in range(20)], 3))
        assert [line.plain for line in frame.lines[1:]] == ["0", "1", "2"]

    def test_selected_line_is_highlighted(self) -> None:
        frame = render(World.create(FRUIT, 5).down())
        assert frame.lines[2] == Text.of(HIGHLIGHT, "grape")
        assert HIGHLIGHT not in frame.lines[1].styles()
        assert HIGHLIGHT not in frame.lines[3].styles()

    def test_no_highlight_without_matches(self) -> None:
        frame = render(World.create(FRUIT, 3, "zzz"))
        assert all(HIGHLIGHT not in line.styles() for line in frame.lines)

    def test_cursor_after_query(self) -> None:
        frame = render(World.create(FRUIT, 5, "gra"))
        assert (frame.cursor_row, frame.cursor_column) == (0, 5)

    def test_cursor_counts_expanded_tab(self) -> None:
        frame = render(World.create(FRUIT, 5, "a\tb"))
        assert frame.cursor_column == 7

    def test_cursor_counts_wide_characters(self) -> None:
        frame = render(World.create(FRUIT, 5, "日本"))
        assert frame.cursor_column == 6

    def test_render_is_deterministic(self) -> None:
        world = World.create(FRUIT, 5, "a").down()
        assert render(world) == render(world)


class TestPaint:
    def test_paints_bottom_rows(self) -> None:
        tty = FakeTTY(rows=10, columns=20)
        paint(Screen(tty), render(World.create(FRUIT, 3)))
        # region is rows 6..9 (1-indexed 7..10)
        assert "\x1b[7;1H" in tty.output
        assert "\x1b[10;1H" in tty.output
        assert "\x1b[6;1H" not in tty.output

    def test_cursor_left_after_prompt(self) -> None:
        tty = FakeTTY(rows=10, columns=20)
        paint(Screen(tty), render(World.create(FRUIT, 3, "ap")))
        assert tty.output.endswith("\x1b[7;5H\x1b[?25h")

    def test_cursor_hidden_while_painting(self) -> None:
        tty = FakeTTY(rows=10, columns=20)
        paint(Screen(tty), render(World.create(FRUIT, 3)))
        assert tty.output.startswith("\x1b[?25l")

    def test_repaint_is_byte_identical(self) -> None:
        tty = FakeTTY(rows=10, columns=20)
        screen = Screen(tty)
        world = World.create(FRUIT, 3, "a").down()
        paint(screen, render(world))
        first = tty.output
        tty.clear_buffer()
        paint(screen, render(world))
        assert tty.output == first

    def test_highlight_spans_the_row(self) -> None:
        tty = FakeTTY(rows=10, columns=10)
        paint(Screen(tty), render(World.create(FRUIT, 3)))
        assert sgr(HIGHLIGHT) + "apple" + " " * 5 + RESET in tty.output

    def test_short_terminal_clips_region(self) -> None:
        tty = FakeTTY(rows=2, columns=20)
        paint(Screen(tty), render(World.create(FRUIT, 3)))
        assert "apple" not in tty.output
        assert "grape" in tty.output
        assert "banana" in tty.output
