"""
Tests for TUI components and widgets.
"""

import pytest
import urwid
from unittest.mock import MagicMock, patch
from test_helpers import create_sample_catalog, press_key

from lazykeys.config import MAX_DISPLAYED_RESULTS, POLL_INTERVAL
from lazykeys.controller import CheatSheetController
from lazykeys.keyboard import RenderMode
from lazykeys.keys_tui import LazyKeysApp, run_ui
from lazykeys.sequencer import FrameSequencer
from lazykeys.tui.widgets import HelpDialog, KeyboardDiagram, ShortcutResult, WatermarkEdit


@pytest.fixture
def app():
    controller = CheatSheetController(
        create_sample_catalog(),
        sequencer=FrameSequencer(frame_duration=0.5),
        result_limit=MAX_DISPLAYED_RESULTS
    )
    return LazyKeysApp(controller)


def _rows(app):
    return list(app.results_list)


class TestWatermarkEdit:
    """Test the WatermarkEdit widget."""

    def test_init(self):
        widget = WatermarkEdit(caption="Search: ", edit_text="", watermark_text="Type here")

        assert widget.caption == "Search: "
        assert widget.edit_text == ""
        assert widget.watermark_text == "Type here"

    def test_watermark_rendered_when_empty(self):
        widget = WatermarkEdit(caption="Search: ", watermark_text="Type here")
        text = b"".join(widget.render((40,)).text)
        assert b"Type here" in text

    def test_text_rendered_once_typed(self):
        widget = WatermarkEdit(caption="Search: ", edit_text="git", watermark_text="Type here")
        text = b"".join(widget.render((40,)).text)
        assert b"git" in text
        assert b"Type here" not in text

    @pytest.mark.parametrize("key", ['up', 'down', 'tab', 'shift tab', 'esc', 'ctrl c', 'ctrl l', 'ctrl g'])
    def test_passthrough_keys(self, key):
        widget = WatermarkEdit(watermark_text="Type here")
        assert widget.keypress((40,), key) == key
        assert widget.edit_text == ""

    def test_printable_keys_edit(self):
        widget = WatermarkEdit(watermark_text="Type here")
        assert widget.keypress((40,), 'g') is None
        assert widget.edit_text == "g"


class TestWidgets:

    def test_shortcut_result_selection_arrow(self):
        item = create_sample_catalog()[0]
        row = ShortcutResult(item)

        left, right = row._build_text_content()
        assert left[0] == ('dark gray', "  ")
        assert ('result_category', "[Search]") in right

        row.set_selected(True)
        left, _ = row._build_text_content()
        assert left[0] == ('light cyan', "▶ ")
        assert not row.selectable()

    def test_shortcut_result_renders_columns(self):
        item = create_sample_catalog()[0]
        text = b"".join(ShortcutResult(item, selected=True).render((80,)).text).decode('utf-8')

        assert "<leader>ff" in text
        assert "Find files" in text
        assert "[Search]" in text

    def test_keyboard_diagram_update(self):
        diagram = KeyboardDiagram()
        diagram.update([[('kb_normal', "row one")], [('kb_normal', "row two")]], [('legend_0', "␣")], "Keyboard: x")

        text = b"".join(diagram.render((60,)).text).decode('utf-8')
        assert "row one" in text
        assert "row two" in text
        assert "Keyboard: x" in text

    def test_help_dialog_close_keys(self):
        dialog = HelpDialog()
        assert dialog.keypress((60, 30), 'esc') == 'close_help'
        assert dialog.keypress((60, 30), 'ctrl g') == 'close_help'


class TestLazyKeysApp:
    """Test the application wiring without starting the main loop."""

    def test_initial_results(self, app):
        rows = _rows(app)

        assert len(rows) == len(app.controller.catalog)
        assert rows[0].selected
        assert not any(row.selected for row in rows[1:])
        assert app.footer.status_info.item_count == len(app.controller.catalog)

    def test_typing_filters_results(self, app):
        app.input_box.set_edit_text("lazygit")

        assert app.controller.query == "lazygit"
        rows = _rows(app)
        assert len(rows) == 1
        assert rows[0].item.notation == "<leader>gg"
        assert app.footer.status_info.results_count == 1

    def test_no_matches_message(self, app):
        app.input_box.set_edit_text("zzzz")

        rows = _rows(app)
        assert len(rows) == 1
        assert isinstance(rows[0], urwid.Text)
        assert rows[0].text == "No matching shortcuts"

    def test_navigation_moves_selection(self, app):
        app.unhandled_input('down')

        rows = _rows(app)
        assert app.controller.selected_position == 1
        assert rows[1].selected and not rows[0].selected

        app.unhandled_input('shift tab')
        app.unhandled_input('up')
        assert app.controller.selected_position == len(rows) - 1

    def test_keyboard_title_follows_selection(self, app):
        assert "<leader>ff" in app.keyboard._box.title_widget.text
        app.unhandled_input('tab')
        assert "<leader>gg" in app.keyboard._box.title_widget.text

    def test_toggle_mode(self, app):
        app.unhandled_input('ctrl l')

        assert app.controller.mode is RenderMode.LEGEND
        assert app.footer.status_info.mode == "legend"

    def test_escape_clears_query_first(self, app):
        app.input_box.set_edit_text("git")
        app.unhandled_input('esc')

        assert app.input_box.edit_text == ""
        assert app.controller.query == ""

    def test_escape_quits_on_empty_query(self, app):
        with pytest.raises(urwid.ExitMainLoop):
            app.unhandled_input('esc')

    def test_ctrl_c_quits(self, app):
        app.input_box.set_edit_text("git")
        with pytest.raises(urwid.ExitMainLoop):
            app.unhandled_input('ctrl c')

    def test_help_overlay(self, app):
        app.loop = MagicMock()

        app.unhandled_input('ctrl g')
        assert app.loop.widget is app.help_overlay

        # Keys other than the close keys are swallowed by the dialog
        app.unhandled_input('down')
        assert app.controller.selected_position == 0

        app.unhandled_input('esc')
        assert app.loop.widget is app.main_layout

    def test_tick_advances_animation(self, app):
        loop = MagicMock()
        app._last_tick = 10.0

        with patch('lazykeys.keys_tui.time.monotonic', return_value=10.5):
            app._on_tick(loop)

        assert app.controller.sequencer.frame_index == 1
        loop.set_alarm_in.assert_called_once_with(POLL_INTERVAL, app._on_tick)

    def test_short_tick_keeps_frame(self, app):
        loop = MagicMock()
        app._last_tick = 10.0

        with patch('lazykeys.keys_tui.time.monotonic', return_value=10.1):
            app._on_tick(loop)

        assert app.controller.sequencer.frame_index == 0


class TestKeyRouting:
    """Keys delivered through the widget tree, the way MainLoop sends them."""

    @pytest.mark.parametrize("key", ['down', 'tab'])
    def test_next_keys_reach_the_controller(self, app, key):
        assert press_key(app, key) == key

        assert app.controller.selected_position == 1
        assert _rows(app)[1].selected
        assert app.body_content.focus_position == 0

    def test_up_wraps_and_keeps_focus(self, app):
        assert press_key(app, 'up') == 'up'

        assert app.controller.selected_position == len(app.controller.catalog) - 1
        assert app.body_content.focus_position == 0

    def test_home_and_end(self, app):
        press_key(app, 'end')
        assert app.controller.selected_position == len(app.controller.catalog) - 1

        press_key(app, 'home')
        assert app.controller.selected_position == 0

    def test_typing_after_navigation_edits_query(self, app):
        press_key(app, 'down')
        press_key(app, 'down')

        assert press_key(app, 'g') is None
        assert app.input_box.edit_text == "g"
        assert app.controller.query == "g"

    def test_backspace_edits_query(self, app):
        for char in "git":
            press_key(app, char)
        press_key(app, 'backspace')

        assert app.controller.query == "gi"

    def test_global_keys_pass_through(self, app):
        assert press_key(app, 'ctrl l') == 'ctrl l'
        assert app.controller.mode is RenderMode.LEGEND

        with pytest.raises(urwid.ExitMainLoop):
            press_key(app, 'esc')


def test_run_ui_builds_capped_controller():
    catalog = create_sample_catalog()
    with patch('lazykeys.keys_tui.LazyKeysApp') as mock_app:
        run_ui(catalog, mode=RenderMode.LEGEND)

    controller = mock_app.call_args[0][0]
    assert controller.mode is RenderMode.LEGEND
    assert controller.result_limit == MAX_DISPLAYED_RESULTS
    mock_app.return_value.run.assert_called_once()
