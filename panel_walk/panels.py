"""
Panel Registry
===============
Maps entity IDs to their live on-screen panel.

A redraw always destroys the old panel before creating the new one, so
the registry never holds a stale handle.
"""

from typing import Dict, Optional
import logging

from .components import COMPONENT_SIZE, Direction, PanelSize
from .engine import Panel


logger = logging.getLogger(__name__)

FACING_VERTICAL = '|'
FACING_SIDE = 'O'


def facing_cell(facing: Direction, size: PanelSize = COMPONENT_SIZE) -> tuple:
    """Panel-relative (row, col, glyph) of the facing indicator."""
    if facing is Direction.NORTH:
        return 0, size.width // 2, FACING_VERTICAL
    if facing is Direction.SOUTH:
        return size.height - 1, size.width // 2, FACING_VERTICAL
    if facing is Direction.WEST:
        return size.height // 2, 0, FACING_SIDE
    return size.height // 2, size.width - 1, FACING_SIDE


class PanelRegistry:
    """Owns one panel per entity ID on a render surface."""

    def __init__(self, surface, size: PanelSize = COMPONENT_SIZE):
        self.surface = surface
        self.size = size
        self._panels: Dict[int, Panel] = {}

    def __len__(self) -> int:
        return len(self._panels)

    def __contains__(self, entity_id: int) -> bool:
        return entity_id in self._panels

    def get(self, entity_id: int) -> Optional[Panel]:
        return self._panels.get(entity_id)

    def ids(self) -> list:
        return sorted(self._panels)

    def populate(self, entity_id: int, row: int, col: int) -> Panel:
        """Create the first panel for an entity."""
        if entity_id in self._panels:
            return self.redraw(entity_id, row, col)
        panel = self.surface.create_panel(row, col, self.size)
        self._panels[entity_id] = panel
        return panel

    def redraw(self, entity_id: int, row: int, col: int,
               facing: Optional[Direction] = None) -> Panel:
        """
        Replace the entity's panel with a fresh one at (row, col).

        The facing glyph is only drawn when `facing` is given.
        """
        old = self._panels.pop(entity_id, None)
        if old is not None:
            self.surface.destroy_panel(old)

        panel = self.surface.create_panel(row, col, self.size)
        self._panels[entity_id] = panel

        if facing is not None:
            glyph_row, glyph_col, glyph = facing_cell(facing, self.size)
            self.surface.draw_char_at(panel, glyph_row, glyph_col, glyph)

        self.surface.refresh(panel)
        return panel

    def clear(self) -> None:
        """Destroy every panel."""
        for entity_id in self.ids():
            self.surface.destroy_panel(self._panels.pop(entity_id))
        logger.debug('panel registry cleared')
