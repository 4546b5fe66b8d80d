import time
import urwid
import logging

from .config import MAX_DISPLAYED_RESULTS, POLL_INTERVAL
from .controller import CheatSheetController
from .keyboard import PALETTE as KEYBOARD_PALETTE
from .keyboard import RenderMode
from .tui.widgets import HelpDialog, KeyboardDiagram, SearchPile, ShortcutResult, StatusFooter, WatermarkEdit
from .tui.key_bindings import *

logger = logging.getLogger('LazyKeys.TUI')


class LazyKeysApp:
    """Interactive cheat sheet: search box, results list and keyboard diagram."""

    def __init__(self, controller: CheatSheetController):
        self.controller = controller
        self.loop = None
        self.help_overlay = None
        self._tick_alarm = None
        self._last_tick = None

        self.input_box = WatermarkEdit(
            caption="Search: ",
            edit_text="",
            watermark_text="Type to filter shortcuts... (^G for help)"
        )
        self.results_count = urwid.Text("", align='right')
        self.results_list = urwid.SimpleFocusListWalker([])
        self.results_box = urwid.ListBox(self.results_list)
        self.keyboard = KeyboardDiagram()
        self.footer = StatusFooter()

        input_area = urwid.Columns([
            ('weight', 1, urwid.AttrMap(self.input_box, 'input')),
            ('pack', urwid.AttrMap(self.results_count, 'search_status'))
        ])

        self.body_content = SearchPile([
            ('pack', input_area),
            ('pack', urwid.AttrMap(urwid.Divider('─'), 'divider')),
            ('weight', 1, urwid.AttrMap(self.results_box, 'results')),
            ('pack', self.keyboard),
        ])
        self.body_content.focus_position = 0

        self.main_layout = urwid.Frame(
            body=urwid.AttrMap(self.body_content, 'body'),
            footer=urwid.AttrMap(self.footer, 'footer')
        )

        urwid.connect_signal(self.input_box, 'change', self.on_input_changed)

        self.footer.update(item_count=len(controller.catalog), mode=controller.mode.value)
        self._display_results()
        self._display_keyboard()

    def on_input_changed(self, widget, new_text):
        logger.debug("Input changed: '%s' -> '%s'", self.controller.query, new_text)
        self.controller.set_query(new_text)
        self.footer.update(query=new_text, results_count=len(self.controller.results))
        self._display_results()
        self._display_keyboard()

    def has_loop(self):
        """Check if UI loop is available."""
        return self.loop is not None

    def redraw(self):
        """Force screen redraw."""
        if self.has_loop():
            self.loop.draw_screen()

    def _display_results(self):
        """Rebuild the results list from the controller's visible rows."""
        self.results_list.clear()
        visible = self.controller.visible_results

        if not visible:
            self.results_list.append(urwid.Text("No matching shortcuts", align='center'))
        else:
            selected = self.controller.selected_position
            self.results_list.extend(
                ShortcutResult(match.item, selected=(position == selected))
                for position, match in enumerate(visible)
            )
            self.results_list.set_focus(selected)

        self.results_count.set_text(f"{len(self.controller.results)}/{len(self.controller.catalog)}")

    def _display_selection(self):
        """Move the selection arrow without rebuilding the list."""
        selected = self.controller.selected_position
        for position, widget in enumerate(self.results_list):
            if isinstance(widget, ShortcutResult):
                widget.set_selected(position == selected)
        if selected < len(self.results_list):
            self.results_list.set_focus(selected)

    def _display_keyboard(self):
        """Redraw the diagram for the current frame and mode."""
        item = self.controller.selected_item
        title = f"Keyboard: {item.notation}" if item else "Keyboard"
        self.keyboard.update(self.controller.keyboard_lines(), self._legend_markup(), title)

    def _legend_markup(self):
        if self.controller.mode is RenderMode.LEGEND:
            return self.controller.legend_bar()

        sequencer = self.controller.sequencer
        if sequencer.is_idle:
            return []
        return [('dark gray', f"step {sequencer.frame_index + 1}/{len(sequencer.frames)}")]

    def _on_tick(self, loop, user_data=None):
        """Alarm callback: advance the animation by the real elapsed time."""
        now = time.monotonic()
        delta = now - self._last_tick if self._last_tick is not None else 0.0
        self._last_tick = now

        if self.controller.tick(delta):
            self._display_keyboard()

        self._tick_alarm = loop.set_alarm_in(POLL_INTERVAL, self._on_tick)

    def unhandled_input(self, key):
        logger.debug("unhandled_input received key: '%s'", key)

        # Help dialog swallows everything except its close keys
        if self.help_overlay is not None and self.loop.widget is self.help_overlay:
            if key in (KEY_QUIT, KEY_HELP, 'close_help'):
                self._close_help_dialog()
            return

        if key == KEY_FORCE_QUIT:
            raise urwid.ExitMainLoop()

        elif key == KEY_QUIT:
            if self.input_box.edit_text:
                # Emits 'change', which clears the controller's query
                self.input_box.set_edit_text("")
                return
            raise urwid.ExitMainLoop()

        elif key == KEY_HELP:
            self._show_help_dialog()
            return

        elif key == KEY_TOGGLE_MODE:
            mode = self.controller.toggle_mode()
            self.footer.update(mode=mode.value)
            self._display_keyboard()
            return

        elif key in NAVIGATION_KEYS:
            if key in NEXT_KEYS:
                self.controller.select_next()
            elif key in PREVIOUS_KEYS:
                self.controller.select_previous()
            elif key == KEY_HOME:
                self.controller.select_first()
            elif key == KEY_END:
                self.controller.select_last()
            self._display_selection()
            self._display_keyboard()
            return

    def _show_help_dialog(self):
        """Show the help dialog as an overlay."""
        help_dialog = HelpDialog()
        overlay = urwid.Overlay(
            help_dialog,
            self.main_layout,
            align='center',
            width=('relative', 80),
            valign='middle',
            height=('relative', 90)
        )
        self.help_overlay = overlay
        self.loop.widget = overlay

    def _close_help_dialog(self):
        """Close the help dialog and return to main view."""
        self.loop.widget = self.main_layout

    def run(self):
        self.palette = [
            # Basic UI elements - use terminal defaults
            ('body', 'default', 'default'),
            ('footer', 'dark gray', 'default'),
            ('divider', 'dark gray', 'default'),

            # Input area - minimal styling
            ('input', 'white', 'default'),
            ('placeholder_text', 'dark gray', 'default'),
            ('search_status', 'dark gray', 'default'),

            # Results area
            ('results', 'default', 'default'),
            ('result_selected', 'default', 'default'),
            ('result_keys', 'light cyan', 'default'),
            ('result_category', 'dark gray', 'default'),

            # Text colors
            ('light cyan', 'light cyan', 'default'),
            ('dark green', 'dark green', 'default'),
            ('dark gray', 'dark gray', 'default'),
            ('dark cyan', 'dark cyan', 'default'),
            ('white', 'white', 'default'),
            ('bold', 'white,bold', 'default'),
            ('yellow', 'yellow', 'default'),
        ] + KEYBOARD_PALETTE

        self.loop = urwid.MainLoop(
            self.main_layout,
            self.palette,
            unhandled_input=self.unhandled_input,
            handle_mouse=False
        )

        # Deliver Ctrl+C as a key instead of SIGINT
        screen = self.loop.screen
        if hasattr(screen, 'tty_signal_keys'):
            screen.tty_signal_keys(intr='undefined')

        self._last_tick = time.monotonic()
        self._tick_alarm = self.loop.set_alarm_in(POLL_INTERVAL, self._on_tick)

        logger.info("Starting TUI with %d shortcuts in %s mode",
                    len(self.controller.catalog), self.controller.mode.value)
        self.loop.run()


def run_ui(catalog, mode=RenderMode.ANIMATION):
    controller = CheatSheetController(catalog, mode=mode, result_limit=MAX_DISPLAYED_RESULTS)
    LazyKeysApp(controller).run()
