"""
The Viewport is the single owner of the view's state: the ViewportStructure which is current. All changes to the view
go through the Viewport's operations, which replace the structure synchronously; anyone who displays the view binds to
`on_transform` and reads the current values from the Viewport when notified. There is no second copy of the state
anywhere, so there is nothing that can get out of sync (or be read stale from within an event handler).

Two things happen "over time" rather than synchronously, both driven by the Kivy Clock:

* the `at_edge` flag: set whenever a pan or zoom is clamped; it clears itself EDGE_FLAG_DURATION after the last such
  clamp (a new clamp restarts the countdown).

* center_view(): an animated transition toward scale 1 with the world's origin at the center of the screen. Scale and
  both translations are animated independently (but simultaneously). Starting a new center_view(), or any explicit pan
  or zoom, cancels a transition that's still running: the latest request wins, rather than having several
  transitions fight over the same values.
"""

from kivy.clock import Clock
from kivy.event import EventDispatcher
from kivy.properties import BooleanProperty

from dsn.viewport.clef import (
    PanTo,
    SetTransform,
    ViewportResize,
    ZoomAt,
)
from dsn.viewport.construct import play_viewport_note
from dsn.viewport.structure import ViewportStructure
from dsn.viewport.utils import clamp_translation

from widgets.animate import Transition

EDGE_FLAG_DURATION = .45  # Seconds


class Viewport(EventDispatcher):

    at_edge = BooleanProperty(False)

    __events__ = ('on_transform',)

    def __init__(self, clock=Clock, **kwargs):
        super(Viewport, self).__init__(**kwargs)
        self.clock = clock

        self.ds = ViewportStructure.initial()

        self._edge_event = None
        self._transitions = []

    def on_transform(self, *args):
        pass

    # ## Reading
    @property
    def scale(self):
        return self.ds.scale

    @property
    def translate_x(self):
        return self.ds.translate_x

    @property
    def translate_y(self):
        return self.ds.translate_y

    @property
    def size(self):
        return self.ds.size

    def has_surface(self):
        return self.ds.has_surface()

    def screen_to_world(self, screen_x, screen_y):
        return self.ds.screen_to_world(screen_x, screen_y)

    def world_to_screen(self, world_x, world_y):
        return self.ds.world_to_screen(world_x, world_y)

    def clamp(self, translate_x, translate_y, scale=None):
        """Returns the translation as restricted at `scale` (default: the current scale) and whether it was restricted.
        A restriction shows as edge feedback."""
        if not self.has_surface():
            return translate_x, translate_y, False

        width, height = self.ds.size
        result = clamp_translation(
            translate_x, translate_y, self.ds.scale if scale is None else scale, width, height)

        if result[2]:
            self._flag_edge()

        return result

    # ## Changing
    def _play(self, note):
        self.ds, hit_edge = play_viewport_note(note, self.ds)

        if hit_edge:
            self._flag_edge()

        self.dispatch('on_transform')

    def resize(self, width, height):
        had_surface = self.has_surface()
        self._play(ViewportResize(width, height))

        if self.has_surface() and not had_surface:
            # the first time we have something to show, we show it centered.
            self.center_view()

    def zoom_at(self, screen_x, screen_y, delta):
        if not self.has_surface():
            return

        self._cancel_transitions()
        self._play(ZoomAt(screen_x, screen_y, delta))

    def pan_to(self, translate_x, translate_y):
        if not self.has_surface():
            return

        self._cancel_transitions()
        self._play(PanTo(translate_x, translate_y))

    def set_transform(self, scale=None, translate_x=None, translate_y=None):
        self._play(SetTransform(scale, translate_x, translate_y))

    def center_view(self):
        if not self.has_surface():
            return

        self._cancel_transitions()

        target_x, target_y = self.ds.screen_center()

        self._transitions = [
            self._start_transition(self.scale, 1, 'scale'),
            self._start_transition(self.translate_x, target_x, 'translate_x'),
            self._start_transition(self.translate_y, target_y, 'translate_y'),
        ]

    def _start_transition(self, start, end, attribute):
        def on_update(value):
            self.set_transform(**{attribute: value})

        return Transition(start, end, on_update, clock=self.clock).start()

    def is_animating(self):
        return any(not t.done for t in self._transitions)

    def _cancel_transitions(self):
        for transition in self._transitions:
            transition.cancel()
        self._transitions = []

    # ## Edge feedback
    def _flag_edge(self):
        self.at_edge = True

        if self._edge_event is not None:
            self._edge_event.cancel()
        self._edge_event = self.clock.schedule_once(self._clear_edge, EDGE_FLAG_DURATION)

    def _clear_edge(self, *args):
        self.at_edge = False
        self._edge_event = None
