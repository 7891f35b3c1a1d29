from math import floor
from contextlib import contextmanager

from kivy.graphics.context_instructions import PushMatrix, PopMatrix, Scale, Translate

from widgets.layout_constants import GRID_SIZE


X = 0
Y = 1


def grid_lines(left, top, right, bottom, spacing=GRID_SIZE):
    """The world positions of the vertical (xs) and horizontal (ys) grid lines that cover the given world rectangle.
    The first line is at or before the rectangle's start (lines are at multiples of `spacing`); the last one at or
    before its end.

    >>> grid_lines(-20, 10, 120, 60)
    ([-50, 0, 50, 100], [0, 50])
    """
    def positions(start, end):
        result = []
        position = floor(start / spacing) * spacing
        while position <= end:
            result.append(position)
            position += spacing
        return result

    return positions(left, right), positions(top, bottom)


def grid_line_width(scale):
    """In world units; zoomed in, the lines get thinner in the world, so that they keep their thickness on screen.

    >>> grid_line_width(.5), grid_line_width(4)
    (1.0, 0.25)
    """
    return 1 / max(1, scale)


def screen_to_kivy(widget, point):
    """Screen positions have their origin at the widget's top left, with y growing downwards; Kivy's positions are in
    the parent's coordinates with y growing upwards.

    For a widget at (10, 20) that is 300 high (i.e. its top is at 320):
    >>> from collections import namedtuple
    >>> widget = namedtuple('Widget', ('x', 'top'))(10, 320)
    >>> screen_to_kivy(widget, (0, 0)), screen_to_kivy(widget, (50, 300))
    ((10, 320), (60, 20))
    >>> kivy_to_screen(widget, screen_to_kivy(widget, (123.5, -7)))
    (123.5, -7)
    """
    return widget.x + point[X], widget.top - point[Y]


def kivy_to_screen(widget, point):
    return point[X] - widget.x, widget.top - point[Y]


def overlay_center(widget, viewport, world_x, world_y):
    """Where (in Kivy coordinates) an overlay for the world point (world_x, world_y) is centered."""
    return screen_to_kivy(widget, viewport.world_to_screen(world_x, world_y))


@contextmanager
def apply_transform(canvas, offset, scale):
    """Draws the instructions added in the block with the world's origin at `offset` (Kivy coordinates) and at the
    given scale; y is flipped, so that world coordinates may be used as-is."""
    canvas.add(PushMatrix())
    canvas.add(Translate(offset[X], offset[Y]))
    canvas.add(Scale(scale, -scale, 1))
    yield
    canvas.add(PopMatrix())
