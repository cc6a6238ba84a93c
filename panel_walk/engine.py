"""
Rendering Engine
=================
Panel-based terminal surface on top of blessed.

Every drawing call is queued as escape sequences and written out in one
piece on refresh, so a tick produces a single write to the terminal.
"""

from contextlib import ExitStack
from dataclasses import dataclass
from typing import List, Optional
import logging
import sys

try:
    from blessed import Terminal
    from blessed.keyboard import Keystroke
except ImportError:
    raise ImportError("'blessed' library required. Install with: pip install blessed")

from .components import COMPONENT_SIZE, PanelSize


logger = logging.getLogger(__name__)


# Single-line box drawing characters
BOX_HORIZONTAL = '─'
BOX_VERTICAL = '│'
BOX_TOP_LEFT = '┌'
BOX_TOP_RIGHT = '┐'
BOX_BOTTOM_LEFT = '└'
BOX_BOTTOM_RIGHT = '┘'


class RenderError(RuntimeError):
    """A render surface operation failed."""


@dataclass
class Panel:
    """Handle to a bordered panel drawn at an absolute screen origin."""
    row: int
    col: int
    size: PanelSize = COMPONENT_SIZE
    live: bool = True

    @property
    def height(self) -> int:
        return self.size.height

    @property
    def width(self) -> int:
        return self.size.width


class TerminalSurface:
    """
    Render surface adapter around a blessed Terminal.

    Owns terminal setup (fullscreen, cbreak, hidden cursor) between
    init() and shutdown(), and exposes panel primitives to the game.
    """

    def __init__(self, term: Terminal, stream=None):
        self.term = term
        self.stream = stream if stream is not None else sys.stdout
        self._pending: List[str] = []
        self._modes: Optional[ExitStack] = None

    @property
    def width(self) -> int:
        return self.term.width

    @property
    def height(self) -> int:
        return self.term.height

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def init(self):
        """Enter fullscreen cbreak mode and clear the screen."""
        if self._modes is not None:
            return
        modes = ExitStack()
        modes.enter_context(self.term.fullscreen())
        modes.enter_context(self.term.cbreak())
        modes.enter_context(self.term.hidden_cursor())
        self._modes = modes
        logger.info('terminal initialised (%dx%d)', self.width, self.height)

        # Only time the whole screen is cleared
        self._pending.append(self.term.home + self.term.clear)
        self.flush()

    def shutdown(self):
        """Restore the terminal. Safe to call more than once."""
        if self._modes is None:
            return
        modes, self._modes = self._modes, None
        try:
            self._pending.append(self.term.normal)
            self.flush()
        finally:
            modes.close()
            logger.info('terminal restored')

    def __enter__(self):
        self.init()
        return self

    def __exit__(self, *exc_info):
        self.shutdown()
        return False

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def flush(self):
        """Write all queued output to the terminal."""
        if not self._pending:
            return
        output = ''.join(self._pending)
        self._pending.clear()
        try:
            print(output, end='', file=self.stream, flush=True)
        except (OSError, ValueError) as exc:
            raise RenderError(f'terminal write failed: {exc}') from exc

    def put(self, row: int, col: int, char: str):
        """Queue one character at an absolute screen cell. Off-screen cells are dropped."""
        if 0 <= col < self.width and 0 <= row < self.height:
            self._pending.append(self.term.move_yx(row, col) + char)

    def put_string(self, row: int, col: int, text: str):
        """Queue a string starting at an absolute screen cell."""
        for i, char in enumerate(text):
            self.put(row, col + i, char)

    def draw_box(self, row: int, col: int, height: int, width: int, blank: bool = False):
        """Draw (or blank out) a rectangular border."""
        if blank:
            top_left = top_right = bottom_left = bottom_right = ' '
            horizontal = vertical = ' '
        else:
            top_left, top_right = BOX_TOP_LEFT, BOX_TOP_RIGHT
            bottom_left, bottom_right = BOX_BOTTOM_LEFT, BOX_BOTTOM_RIGHT
            horizontal, vertical = BOX_HORIZONTAL, BOX_VERTICAL

        bottom = row + height - 1
        right = col + width - 1
        for x in range(col + 1, right):
            self.put(row, x, horizontal)
            self.put(bottom, x, horizontal)
        for y in range(row + 1, bottom):
            self.put(y, col, vertical)
            self.put(y, right, vertical)
        self.put(row, col, top_left)
        self.put(row, right, top_right)
        self.put(bottom, col, bottom_left)
        self.put(bottom, right, bottom_right)

    # -------------------------------------------------------------------------
    # Panels
    # -------------------------------------------------------------------------

    def create_panel(self, row: int, col: int, size: PanelSize = COMPONENT_SIZE) -> Panel:
        """Create a bordered panel with its top-left corner at (row, col)."""
        panel = Panel(row, col, size)
        self.draw_box(row, col, size.height, size.width)
        self.flush()
        return panel

    def destroy_panel(self, panel: Panel):
        """Erase the panel border and release the handle."""
        self._check_live(panel)
        self.draw_box(panel.row, panel.col, panel.height, panel.width, blank=True)
        self.flush()
        panel.live = False

    def draw_char_at(self, panel: Panel, local_row: int, local_col: int, glyph: str):
        """Queue a single glyph at a panel-relative cell."""
        self._check_live(panel)
        self.put(panel.row + local_row, panel.col + local_col, glyph[:1])

    def draw_text_at(self, panel: Panel, local_row: int, local_col: int, text: str):
        """Queue text at a panel-relative cell, clipped to the panel width."""
        self._check_live(panel)
        text = text[:max(0, panel.width - local_col)]
        self.put_string(panel.row + local_row, panel.col + local_col, text)

    def refresh(self, panel: Optional[Panel] = None):
        """Push queued drawing for a panel (or everything) to the screen."""
        if panel is not None:
            self._check_live(panel)
        self.flush()

    def write_status_line(self, row: int, text: str):
        """Overwrite a whole screen row with text."""
        if not 0 <= row < self.height:
            return
        self._pending.append(
            self.term.move_yx(row, 0) + text[:self.width] + self.term.clear_eol
        )
        self.flush()

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def poll_input(self, timeout: float) -> Optional[Keystroke]:
        """Wait up to `timeout` seconds for one keystroke."""
        key = self.term.inkey(timeout=timeout)
        return key if key else None

    @staticmethod
    def _check_live(panel: Panel):
        if not panel.live:
            raise RenderError(f'panel at ({panel.row}, {panel.col}) was already destroyed')
