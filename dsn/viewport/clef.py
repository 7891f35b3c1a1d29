class ViewportNote(object):
    pass


class ViewportResize(ViewportNote):
    def __init__(self, width, height):
        """The render surface was (re)sized. A surface without a positive width and height counts as not attached."""
        self.width = width
        self.height = height


class ZoomAt(ViewportNote):
    def __init__(self, screen_x, screen_y, delta):
        """Zoom toward the screen point (screen_x, screen_y); positive deltas zoom in. The world point that is under the
        screen point before the zoom stays under it after the zoom (unless clamping prevents this)."""
        self.screen_x = screen_x
        self.screen_y = screen_y
        self.delta = delta


class PanTo(ViewportNote):
    def __init__(self, translate_x, translate_y):
        self.translate_x = translate_x
        self.translate_y = translate_y


class SetTransform(ViewportNote):
    def __init__(self, scale=None, translate_x=None, translate_y=None):
        """Sets any of the given values as-is, i.e. without clamping the translation. Values that are None are left
        alone; this allows for independent animations of each of the three."""
        self.scale = scale
        self.translate_x = translate_x
        self.translate_y = translate_y
