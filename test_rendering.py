"""Tests for console drawings."""

from core.enums.orientation import Orientation
from core.models.placement import AssemblyLayout, Placement, layer_positions
from core.rendering import draw_base, draw_stick


def test_draw_stick_46():
    assert draw_stick(46) == "‾V‾‾‾V‾\n_Λ_Λ___"


def test_drawing_applies_the_orientation():
    # 46 laid rotated shows the notch layout of 29
    assert draw_stick(46, Orientation.ROTATE_180) == draw_stick(29)
    assert draw_stick(1, Orientation.MIRROR_LEFT_RIGHT) == draw_stick(4)
    assert draw_stick(1, Orientation.MIRROR_TOP_BOTTOM) == "‾‾‾‾‾V‾\n_______"


def test_draw_base():
    assert draw_base(171) == "‾ ‾ V\n‾ V ‾\nV ‾ V"


def test_layout_pretty_print():
    layout = AssemblyLayout(
        layers=1,
        base_pattern=0,
        placements={
            1: Placement(entry_index=0, pattern=7, orientation=Orientation.IDENTITY, position=1),
            2: None,
            3: Placement(entry_index=1, pattern=46, orientation=Orientation.ROTATE_180, position=3),
        },
    )
    text = layout.pretty_print()
    assert "1 layers, 2 sticks placed" in text
    assert "position 2: empty" in text
    assert "stick 46 (entry 1, rotate-180)" in text
    assert draw_stick(29).splitlines()[0] in text
    assert layout.empty_positions == [2]


def test_layer_positions_are_contiguous():
    assert layer_positions(1) == [1, 2, 3]
    assert layer_positions(3) == [7, 8, 9]
    layout = AssemblyLayout(layers=2, base_pattern=0, placements={p: None for p in range(1, 7)})
    assert layout.layer(2) == [None, None, None]
