import unittest

from test_utils import FakeClock

from dsn.viewport.utils import clamp_translation, translate_range, WORLD_BOUNDS
from viewport import Viewport, EDGE_FLAG_DURATION

EPSILON = 1e-9

SCALES = [0.2, 0.35, 1, 1.7, 3, 6]
POINTS = [(0, 0), (50, 30), (-20000, 40000), (1e7, -1e7), (400.5, 299.25), (-4300, 5100)]


def settled_viewport(width=800, height=600):
    """A viewport with a surface, done with its initial centering."""
    clock = FakeClock()
    viewport = Viewport(clock=clock)
    viewport.resize(width, height)
    clock.advance_frames(60)
    return viewport, clock


class ClampTestCase(unittest.TestCase):

    def test_clamp_is_inside_range(self):
        for scale in SCALES:
            tx_min, tx_max = translate_range(800, scale, WORLD_BOUNDS.min_x, WORLD_BOUNDS.max_x)
            ty_min, ty_max = translate_range(600, scale, WORLD_BOUNDS.min_y, WORLD_BOUNDS.max_y)

            for tx, ty in POINTS:
                clamped_x, clamped_y, _ = clamp_translation(tx, ty, scale, 800, 600)
                self.assertTrue(tx_min <= clamped_x <= tx_max, (scale, tx))
                self.assertTrue(ty_min <= clamped_y <= ty_max, (scale, ty))

    def test_clamp_is_idempotent(self):
        for scale in SCALES:
            for tx, ty in POINTS:
                once = clamp_translation(tx, ty, scale, 800, 600)
                twice = clamp_translation(once[0], once[1], scale, 800, 600)
                self.assertEqual(once[:2], twice[:2])
                self.assertFalse(twice[2])

    def test_hit_edge_reports_alteration(self):
        self.assertEqual((50, 30, False), clamp_translation(50, 30, 1, 800, 600))
        self.assertEqual((5100, 30, True), clamp_translation(6000, 30, 1, 800, 600))

    def test_viewport_clamp_defaults_to_current_scale(self):
        viewport, clock = settled_viewport()
        self.assertEqual(clamp_translation(9000, 9000, 1, 800, 600), viewport.clamp(9000, 9000))
        self.assertEqual(clamp_translation(9000, 9000, 3, 800, 600), viewport.clamp(9000, 9000, 3))
        self.assertTrue(viewport.at_edge)


class ConversionTestCase(unittest.TestCase):

    def test_screen_world_round_trip(self):
        viewport, clock = settled_viewport()

        for scale, tx, ty in [(1, 0, 0), (0.2, 123.4, -56.7), (6, -2000, 1500), (2.345, 400, 300)]:
            viewport.set_transform(scale, tx, ty)

            for point in [(0, 0), (400, 300), (799.5, 0.25), (-10, 1e4)]:
                world = viewport.screen_to_world(*point)
                screen = viewport.world_to_screen(*world)
                self.assertAlmostEqual(point[0], screen[0], delta=EPSILON * max(1, abs(point[0])))
                self.assertAlmostEqual(point[1], screen[1], delta=EPSILON * max(1, abs(point[1])))

    def test_screen_to_world(self):
        viewport, clock = settled_viewport()
        viewport.set_transform(2, 100, 50)
        self.assertEqual((150, 75), viewport.screen_to_world(400, 200))
        self.assertEqual((400, 200), viewport.world_to_screen(150, 75))

    def test_visible_world_rect(self):
        viewport, clock = settled_viewport()
        viewport.set_transform(2, 100, 50)
        self.assertEqual((-50, -25, 350, 275), viewport.ds.visible_world_rect())


class ZoomTestCase(unittest.TestCase):

    def assert_point_stays_under_cursor(self, viewport, screen_x, screen_y, delta):
        world = viewport.screen_to_world(screen_x, screen_y)
        viewport.zoom_at(screen_x, screen_y, delta)
        after = viewport.world_to_screen(*world)

        self.assertAlmostEqual(screen_x, after[0], places=6)
        self.assertAlmostEqual(screen_y, after[1], places=6)

    def test_zoom_toward_pointer(self):
        viewport, clock = settled_viewport()

        self.assert_point_stays_under_cursor(viewport, 100, 200, 100)
        self.assertAlmostEqual(1.15, viewport.scale)

        self.assert_point_stays_under_cursor(viewport, 650.5, 20.25, -250)
        self.assert_point_stays_under_cursor(viewport, 400, 300, 333)
        self.assertFalse(viewport.at_edge)

    def test_zoom_scale_is_bounded(self):
        viewport, clock = settled_viewport()

        viewport.zoom_at(400, 300, 1e9)
        self.assertEqual(6, viewport.scale)

        viewport.zoom_at(400, 300, -1e9)
        self.assertEqual(0.2, viewport.scale)

    def test_clamped_zoom_deviation_is_the_clamp(self):
        viewport, clock = settled_viewport()
        viewport.set_transform(1, 5100, 5100)  # the world's top left corner (plus padding) is at the screen's

        previous_scale, tx, ty = viewport.scale, viewport.translate_x, viewport.translate_y
        viewport.zoom_at(700, 500, -400)

        new_scale = viewport.scale
        unclamped_x = 700 - ((700 - tx) / previous_scale) * new_scale
        unclamped_y = 500 - ((500 - ty) / previous_scale) * new_scale

        expected = clamp_translation(unclamped_x, unclamped_y, new_scale, 800, 600)
        self.assertTrue(expected[2])
        self.assertEqual(expected[:2], (viewport.translate_x, viewport.translate_y))
        self.assertTrue(viewport.at_edge)


class CenterViewTestCase(unittest.TestCase):

    def test_first_resize_centers(self):
        clock = FakeClock()
        viewport = Viewport(clock=clock)
        viewport.resize(800, 600)
        self.assertTrue(viewport.is_animating())

        clock.advance_frames(60)
        self.assertFalse(viewport.is_animating())
        self.assertEqual((1, 400, 300), (viewport.scale, viewport.translate_x, viewport.translate_y))

        # later resizes don't
        viewport.pan_to(10, 10)
        viewport.resize(1000, 600)
        self.assertFalse(viewport.is_animating())
        self.assertEqual((10, 10), (viewport.translate_x, viewport.translate_y))

    def test_center_view_converges_monotonically(self):
        viewport, clock = settled_viewport()
        viewport.set_transform(3, 500, -200)

        viewport.center_view()

        history = [(viewport.scale, viewport.translate_x, viewport.translate_y)]
        for i in range(4):
            clock.advance(0.125)  # 4 * .125 == the animation's duration
            history.append((viewport.scale, viewport.translate_x, viewport.translate_y))

        self.assertEqual((1, 400, 300), history[-1])
        self.assertFalse(viewport.is_animating())

        for previous, current in zip(history, history[1:]):
            self.assertTrue(current[0] <= previous[0])
            self.assertTrue(current[1] <= previous[1])
            self.assertTrue(current[2] >= previous[2])

        # nothing moves after the end
        clock.advance_frames(10)
        self.assertEqual((1, 400, 300), (viewport.scale, viewport.translate_x, viewport.translate_y))

    def test_new_center_view_cancels_running_one(self):
        viewport, clock = settled_viewport()
        viewport.set_transform(3, 500, -200)

        viewport.center_view()
        clock.advance(0.125)
        viewport.center_view()

        self.assertEqual(3, len(clock.pending()))

        clock.advance_frames(60)
        self.assertEqual((1, 400, 300), (viewport.scale, viewport.translate_x, viewport.translate_y))

    def test_pan_cancels_running_center_view(self):
        viewport, clock = settled_viewport()
        viewport.set_transform(3, 500, -200)

        viewport.center_view()
        clock.advance(0.125)
        viewport.pan_to(0, 0)
        scale = viewport.scale

        clock.advance_frames(60)
        self.assertEqual((scale, 0, 0), (viewport.scale, viewport.translate_x, viewport.translate_y))


class EdgeFlagTestCase(unittest.TestCase):

    def test_edge_flag_clears_after_delay(self):
        viewport, clock = settled_viewport()
        self.assertFalse(viewport.at_edge)

        viewport.pan_to(100000, 0)
        self.assertTrue(viewport.at_edge)
        self.assertEqual(5100, viewport.translate_x)

        clock.advance(EDGE_FLAG_DURATION - .1)
        self.assertTrue(viewport.at_edge)

        clock.advance(.2)
        self.assertFalse(viewport.at_edge)

    def test_new_edge_hit_restarts_the_delay(self):
        viewport, clock = settled_viewport()

        viewport.pan_to(100000, 0)
        clock.advance(.3)
        viewport.pan_to(100000, 0)
        clock.advance(.3)
        self.assertTrue(viewport.at_edge)
        self.assertEqual(1, len(clock.pending()))

        clock.advance(.2)
        self.assertFalse(viewport.at_edge)

    def test_no_edge_flag_within_bounds(self):
        viewport, clock = settled_viewport()
        viewport.pan_to(50, 30)
        self.assertFalse(viewport.at_edge)
        self.assertEqual([], clock.pending())


class NoSurfaceTestCase(unittest.TestCase):

    def test_operations_are_no_ops(self):
        clock = FakeClock()
        viewport = Viewport(clock=clock)
        transforms = []
        viewport.bind(on_transform=lambda *args: transforms.append(args))

        viewport.pan_to(100000, 100000)
        viewport.zoom_at(10, 10, 500)
        viewport.center_view()

        self.assertEqual([], transforms)
        self.assertEqual([], clock.pending())
        self.assertEqual((1, 0, 0), (viewport.scale, viewport.translate_x, viewport.translate_y))
        self.assertEqual((100000, 5, False), viewport.clamp(100000, 5))
        self.assertFalse(viewport.at_edge)

        # conversions work regardless
        self.assertEqual((10, 20), viewport.screen_to_world(10, 20))

    def test_zero_size_detaches(self):
        viewport, clock = settled_viewport()
        viewport.resize(0, 0)
        self.assertFalse(viewport.has_surface())

        viewport.pan_to(1, 2)
        self.assertEqual((400, 300), (viewport.translate_x, viewport.translate_y))


if __name__ == '__main__':
    unittest.main()
