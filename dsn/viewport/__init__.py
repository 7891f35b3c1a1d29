"""
The dsn 'viewport' models the view on an unbounded 2D world: which part of the world is shown on the screen, and at
what zoom level.

The view is expressed as a scale and a translation: a world point (wx, wy) is shown at screen pixel
(wx * scale + translate_x, wy * scale + translate_y). The screen's origin is its top left corner and y grows downwards,
for the screen and the world alike. (Kivy's own coordinate system has y growing upwards; the flip is the widget's
business, not ours.)

The world itself is unbounded in the sense that blocks may be put anywhere; however, the view is kept in the
neighborhood of WORLD_BOUNDS: the translation is restricted such that the bounds (plus some padding) cannot drift
arbitrarily far off-screen. This restriction is called clamping; it is applied to all user-initiated moves (panning and
zooming), but not to the intermediate steps of animations, which move between two clamped positions.
"""
