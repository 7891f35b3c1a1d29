from dsn.viewport.utils import MAX_SCALE, MIN_SCALE


class ViewportStructure(object):

    def __init__(self, scale, translate_x, translate_y, size=None):
        """`size` is the (width, height) of the render surface; None means: there is no (sized) surface yet."""
        assert MIN_SCALE <= scale <= MAX_SCALE, "Scale out of bounds: %s" % scale

        self.scale = scale
        self.translate_x = translate_x
        self.translate_y = translate_y
        self.size = size

    def __repr__(self):
        return "Viewport(%s, (%s, %s), %s)" % (self.scale, self.translate_x, self.translate_y, self.size)

    @classmethod
    def initial(cls):
        return cls(1, 0, 0)

    def has_surface(self):
        return self.size is not None

    def screen_to_world(self, screen_x, screen_y):
        return (
            (screen_x - self.translate_x) / self.scale,
            (screen_y - self.translate_y) / self.scale,
        )

    def world_to_screen(self, world_x, world_y):
        return (
            world_x * self.scale + self.translate_x,
            world_y * self.scale + self.translate_y,
        )

    def screen_center(self):
        width, height = self.size
        return width / 2, height / 2

    def visible_world_rect(self):
        """(left, top, right, bottom) of the part of the world that's on screen."""
        width, height = self.size
        return (
            -self.translate_x / self.scale,
            -self.translate_y / self.scale,
            (width - self.translate_x) / self.scale,
            (height - self.translate_y) / self.scale,
        )
