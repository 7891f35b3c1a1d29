"""
All functions in this module are pure; they operate on scalars or on (x, y) pairs. Positions and sizes on the screen
are in pixels, positions in the world are in world units; the scale converts the latter into the former.

## Clamping

For a given scale, the translation is restricted to a range per axis. The lowest allowed translation shows the world's
far edge (plus padding) at the far edge of the viewport; the highest allowed translation shows the world's near edge
(plus padding) at the near edge of the viewport:

    lowest  = viewport_size - world_max * scale - padding
    highest = -world_min * scale + padding

If the scaled world (plus padding) is smaller than the viewport, the range is empty (lowest > highest); in that case the
translation is pinned to `lowest`.
"""

from collections import namedtuple

from utils import bounded


Bounds = namedtuple('Bounds', ('min_x', 'min_y', 'max_x', 'max_y'))

WORLD_BOUNDS = Bounds(min_x=-5000, min_y=-5000, max_x=5000, max_y=5000)

SCREEN_PADDING = 100  # pixels

MIN_SCALE = 0.2
MAX_SCALE = 6

# Scale change per unit of (signed) wheel delta
ZOOM_INTENSITY = 0.0015


def translate_range(viewport_size, scale, world_min, world_max, padding=SCREEN_PADDING):
    """
    >>> translate_range(800, 1, -5000, 5000)
    (-4300, 5100)

    >>> translate_range(800, 2, -5000, 5000)
    (-9300, 10100)
    """
    return (
        viewport_size - world_max * scale - padding,
        -world_min * scale + padding,
    )


def clamp_translation(translate_x, translate_y, scale, width, height, world_bounds=WORLD_BOUNDS):
    """
    Returns the translation, restricted to the range allowed at `scale`, and whether any restriction took place.

    Inside the range nothing happens:
    >>> clamp_translation(50, 30, 1, 800, 600)
    (50, 30, False)

    Past the left (and top) edge of the world:
    >>> clamp_translation(6000, 30, 1, 800, 600)
    (5100, 30, True)

    Past the right (and bottom) edge of the world:
    >>> clamp_translation(50, -9000, 1, 800, 600)
    (50, -4500, True)
    """
    tx_min, tx_max = translate_range(width, scale, world_bounds.min_x, world_bounds.max_x)
    ty_min, ty_max = translate_range(height, scale, world_bounds.min_y, world_bounds.max_y)

    clamped_x = bounded(translate_x, tx_min, tx_max)
    clamped_y = bounded(translate_y, ty_min, ty_max)

    return clamped_x, clamped_y, (clamped_x != translate_x or clamped_y != translate_y)


def zoomed_scale(previous_scale, delta):
    """
    Positive deltas zoom in, negative deltas zoom out; the result is bounded.

    >>> round(zoomed_scale(1, 100), 6)
    1.15
    >>> round(zoomed_scale(1, -100), 6)
    0.85
    >>> zoomed_scale(1, 100000)
    6
    >>> zoomed_scale(1, -100000)
    0.2
    """
    return bounded(previous_scale * (1 + delta * ZOOM_INTENSITY), MIN_SCALE, MAX_SCALE)


def zoomed_translation(screen_position, translation, previous_scale, new_scale):
    """
    The translation that keeps the world point under `screen_position` in place while the scale changes. (One axis.)

    The world point under screen pixel 400 at translation 0 and scale 1 is 400; doubling the scale means that point is
    kept at 400 by translating by -400:
    >>> zoomed_translation(400, 0, 1, 2)
    -400.0
    """
    return screen_position - ((screen_position - translation) / previous_scale) * new_scale
