"""
Translates pointer and wheel input into Viewport operations.

Positions passed in are screen positions relative to the render surface (origin top left, y growing downwards); the
widget is responsible for bringing Kivy's touch positions into that form.

Panning is a small state machine:

    IDLE --pointer_down--> PANNING --pointer_up--> IDLE

While PANNING, the world point that was under the pointer when it went down (the "grab point") stays under the
pointer. Only the pointer that started the pan takes part in it; there's no multi-touch composition.
"""

from kivy.logger import Logger

IDLE = 0
PANNING = 1

# The delta for a single "notch" of the mouse wheel. Kivy doesn't report a magnitude for scroll events; browsers
# typically report 100 pixels per notch, and the zoom intensity is tuned to that.
WHEEL_DELTA = 100


class InputController(object):

    def __init__(self, viewport, session):
        self.viewport = viewport
        self.session = session

        self.state = IDLE
        self.pointer_id = None
        self.anchor = None
        self._release = None

    def wheel(self, screen_x, screen_y, delta):
        """Zooms toward (screen_x, screen_y); a positive delta zooms in. Panning (if any) continues undisturbed."""
        self.viewport.zoom_at(screen_x, screen_y, delta)

    def pointer_down(self, pointer_id, x, y, capture=None, release=None):
        """Starts a pan; returns whether it did. `capture` is called to get exclusive use of the pointer; `release` will
        be called when the pan ends."""
        if self.state == PANNING:
            return False

        if capture is not None:
            capture()

        self.state = PANNING
        self.pointer_id = pointer_id
        self.anchor = (x - self.viewport.translate_x, y - self.viewport.translate_y)
        self._release = release
        return True

    def pointer_move(self, pointer_id, x, y):
        if self.state != PANNING or pointer_id != self.pointer_id:
            return False

        self.viewport.pan_to(x - self.anchor[0], y - self.anchor[1])
        return True

    def pointer_up(self, pointer_id):
        """Ends the pan (pointer up or pointer cancelled)."""
        if self.state != PANNING or pointer_id != self.pointer_id:
            return False

        release, self._release = self._release, None
        if release is not None:
            try:
                release()
            except Exception as e:
                # The pointer is ours no longer either way; nothing to recover.
                Logger.debug("Canvas: Releasing pointer %s failed: %s", pointer_id, e)

        self.state = IDLE
        self.pointer_id = None
        self.anchor = None
        return True

    def add_item(self, block_type, parent_id=None):
        """Adds a block at the world point currently in the center of the view. Returns its id (None on failure)."""
        if not self.viewport.has_surface():
            return None

        center_x, center_y = self.viewport.ds.screen_center()
        world_x, world_y = self.viewport.screen_to_world(center_x, center_y)
        return self.session.add_block(block_type, world_x, world_y, parent_id=parent_id)
