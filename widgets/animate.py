from kivy.clock import Clock


ANIMATION_LENGTH = .5  # Seconds


def animate_scalar(fraction, a, b):
    return a + ((b - a) * fraction)


def ease_in_out(t):
    """Cubic-ish "ease-in-out": slow start, slow finish, symmetric around the middle.

    >>> ease_in_out(0), ease_in_out(.25), ease_in_out(.5), ease_in_out(.75), ease_in_out(1)
    (0, 0.125, 0.5, 0.875, 1.0)
    """
    if t < 0.5:
        return 2 * t * t
    return 1 - ((-2 * t + 2) ** 2) / 2


class Transition(object):
    """Drives a single value from `start` to `end` over `duration` seconds, calling `on_update` once per frame with the
    value for that frame. Time is measured by summing the `dt`s that the clock passes to each tick.

    Transitions are independent of each other; animating several values at once is done by starting several
    transitions. A transition runs to completion unless cancelled.
    """

    def __init__(self, start, end, on_update, duration=ANIMATION_LENGTH, easing=ease_in_out, clock=Clock):
        self.start_value = start
        self.end_value = end
        self.on_update = on_update
        self.duration = duration
        self.easing = easing
        self.clock = clock

        self.elapsed = 0
        self.done = False
        self._event = None

    def start(self):
        # An interval of 0 means: every frame.
        self._event = self.clock.schedule_interval(self.tick, 0)
        return self

    def progress(self):
        if self.duration <= 0:
            return 1
        return min(self.elapsed / self.duration, 1)

    def tick(self, dt):
        if self.done:
            return False

        self.elapsed += dt
        progress = self.progress()

        self.on_update(animate_scalar(self.easing(progress), self.start_value, self.end_value))

        if progress >= 1:
            self.done = True
            return False  # Kivy: returning False from an interval callback unschedules it

    def cancel(self):
        self.done = True
        if self._event is not None:
            self._event.cancel()
            self._event = None
