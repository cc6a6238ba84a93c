from __future__ import annotations

import pytest

from panel_walk.components import COMPONENT_SIZE, Direction, PanelSize
from panel_walk.engine import RenderError
from panel_walk.panels import PanelRegistry, facing_cell

from tests.helpers.fakes import RecordingSurface


def test_populate_registers_one_panel_per_id() -> None:
    surface = RecordingSurface()
    registry = PanelRegistry(surface)
    registry.populate(0, 5, 5)
    registry.populate(1, 10, 12)
    assert len(registry) == 2
    assert 0 in registry and 1 in registry
    assert len(surface.live) == 2


def test_redraw_twice_leaves_exactly_one_live_panel() -> None:
    surface = RecordingSurface()
    registry = PanelRegistry(surface)
    registry.populate(0, 5, 5)

    first = registry.redraw(0, 5, 6)
    second = registry.redraw(0, 5, 7)

    assert len(registry) == 1
    assert registry.get(0) is second
    assert not first.live
    assert surface.live == [second]


def test_redraw_destroys_before_creating() -> None:
    surface = RecordingSurface()
    registry = PanelRegistry(surface)
    registry.populate(3, 2, 2)
    surface.events.clear()

    registry.redraw(3, 4, 4)

    kinds = [event[0] for event in surface.events]
    assert kinds.index("destroy") < kinds.index("create")
    assert surface.events[0] == ("destroy", 2, 2)
    assert surface.events[1] == ("create", 4, 4)


def test_redraw_unknown_id_creates_entry() -> None:
    surface = RecordingSurface()
    registry = PanelRegistry(surface)
    panel = registry.redraw(9, 1, 1)
    assert registry.get(9) is panel
    assert not any(event[0] == "destroy" for event in surface.events)


def test_redraw_same_position_still_recreates() -> None:
    surface = RecordingSurface()
    registry = PanelRegistry(surface)
    old = registry.populate(0, 5, 5)
    new = registry.redraw(0, 5, 5)
    assert new is not old
    assert not old.live


def test_player_panel_gets_facing_glyph_enemy_does_not() -> None:
    surface = RecordingSurface()
    registry = PanelRegistry(surface)
    player_panel = registry.redraw(0, 5, 6, Direction.EAST)
    enemy_panel = registry.redraw(1, 20, 20)

    assert surface.glyphs_for(player_panel) == [(3, 11, "O")]
    assert surface.glyphs_for(enemy_panel) == []


@pytest.mark.parametrize(
    "facing, expected",
    [
        (Direction.NORTH, (0, 6, "|")),
        (Direction.SOUTH, (5, 6, "|")),
        (Direction.WEST, (3, 0, "O")),
        (Direction.EAST, (3, 11, "O")),
    ],
)
def test_facing_cell_positions(facing: Direction, expected: tuple) -> None:
    assert facing_cell(facing, COMPONENT_SIZE) == expected


def test_facing_cell_follows_panel_size() -> None:
    assert facing_cell(Direction.SOUTH, PanelSize(4, 8)) == (3, 4, "|")


def test_clear_destroys_everything() -> None:
    surface = RecordingSurface()
    registry = PanelRegistry(surface)
    for entity_id in range(3):
        registry.populate(entity_id, entity_id + 1, entity_id + 1)
    registry.clear()
    assert len(registry) == 0
    assert surface.live == []


def test_destroy_failure_propagates() -> None:
    surface = RecordingSurface()
    registry = PanelRegistry(surface)
    panel = registry.populate(0, 5, 5)
    panel.live = False  # simulate a handle the backend already released
    with pytest.raises(RenderError):
        registry.redraw(0, 5, 6)
