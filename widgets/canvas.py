from kivy.clock import Clock
from kivy.graphics import Color, InstructionGroup, Line, Rectangle
from kivy.uix.stencilview import StencilView

from colorscheme import GRID_GREY, PAPER

from dsn.blocks.export import traverse_export

from input_controller import InputController, WHEEL_DELTA
from viewport import Viewport

from widgets.block import BlockWidget
from widgets.layout_constants import AT_EDGE_OPACITY
from widgets.utils import (
    apply_transform,
    grid_line_width,
    grid_lines,
    kivy_to_screen,
    overlay_center,
    screen_to_kivy,
)

# Kivy reports the mouse wheel as touches with these buttons; "scrolldown" is what Kivy calls rolling the wheel away
# from you, which zooms in.
ZOOM_IN_BUTTON = 'scrolldown'
ZOOM_OUT_BUTTON = 'scrollup'


class CanvasWidget(StencilView):
    """The infinite canvas: a grid in world space, with the session's blocks on top of it.

    The canvas owns the Viewport (and the InputController that drives it); it redraws whenever the viewport or the
    session's model changes. Redraws are scheduled rather than done immediately, such that a burst of changes (e.g.
    many touch-moves within a single frame) results in a single redraw.
    """

    def __init__(self, **kwargs):
        self._invalidated = False

        self.session = kwargs.pop('session')

        super(CanvasWidget, self).__init__(**kwargs)

        self.viewport = Viewport()
        self.input_controller = InputController(self.viewport, self.session)

        self.block_widgets = {}
        self.selected_id = None

        # StencilView uses canvas.before for its clipping; our background goes inside that.
        self._background = InstructionGroup()
        self.canvas.before.add(self._background)

        self.bind(pos=self.invalidate)
        self.bind(size=self.size_change)
        self.viewport.bind(on_transform=self.invalidate)
        self.viewport.bind(at_edge=self.invalidate)
        self.session.bind(on_model=self.invalidate)

    def invalidate(self, *args):
        if not self._invalidated:
            Clock.schedule_once(self.refresh, -1)
            self._invalidated = True

    def size_change(self, *args):
        self.viewport.resize(self.width, self.height)
        self.invalidate()

    def refresh(self, *args):
        self._background.clear()

        self._background.add(Color(*PAPER[:3], AT_EDGE_OPACITY if self.viewport.at_edge else 1))
        self._background.add(Rectangle(pos=self.pos, size=self.size))

        if self.viewport.has_surface():
            self._render_grid()

        self._place_blocks()

        self._invalidated = False

    def _render_grid(self):
        ds = self.viewport.ds
        left, top, right, bottom = ds.visible_world_rect()
        xs, ys = grid_lines(left, top, right, bottom)
        width = grid_line_width(ds.scale)

        self._background.add(Color(*GRID_GREY))

        with apply_transform(self._background, screen_to_kivy(self, (ds.translate_x, ds.translate_y)), ds.scale):
            for x in xs:
                self._background.add(Line(points=[x, top, x, bottom], width=width))

            for y in ys:
                self._background.add(Line(points=[left, y, right, y], width=width))

    def _place_blocks(self):
        present = set()

        for block in self.session.model.iter_blocks():
            present.add(block.id)

            widget = self.block_widgets.get(block.id)
            if widget is None:
                widget = BlockWidget(
                    block_id=block.id,
                    block_type=block.type,
                    label=block.label,
                    content=block.content,
                    on_edit=self.session.edit_block,
                    on_select=self.select,
                )
                self.block_widgets[block.id] = widget
                self.add_widget(widget)

            widget.show_block(block)
            widget.set_selected(block.id == self.selected_id)
            widget.place(overlay_center(self, self.viewport, block.x, block.y), self.viewport.scale)

        for block_id in list(self.block_widgets.keys()):
            if block_id not in present:
                self.remove_widget(self.block_widgets.pop(block_id))

        if self.selected_id not in present:
            self.selected_id = None

    def select(self, block_id):
        self.selected_id = block_id
        self.invalidate()

    # ## Actions (e.g. from the toolbar)
    def add_item(self, block_type):
        """Adds a block in the middle of the view; as a child of the selected block, if any."""
        return self.input_controller.add_item(block_type, parent_id=self.selected_id)

    def center_view(self):
        self.viewport.center_view()

    def export(self):
        return traverse_export(self.session.model)

    # ## Touch handling
    def on_touch_down(self, touch):
        # see https://kivy.org/docs/guide/inputs.html#touch-event-basics
        if not self.collide_point(*touch.pos):
            return False

        # The blocks get the first pick (e.g. clicking into a text field)
        if super(CanvasWidget, self).on_touch_down(touch):
            return True

        screen_x, screen_y = kivy_to_screen(self, touch.pos)

        if touch.is_mouse_scrolling:
            if touch.button == ZOOM_IN_BUTTON:
                self.input_controller.wheel(screen_x, screen_y, WHEEL_DELTA)
            elif touch.button == ZOOM_OUT_BUTTON:
                self.input_controller.wheel(screen_x, screen_y, -WHEEL_DELTA)

            return True  # sideways scrolling is swallowed too: there's nothing to scroll

        self.input_controller.pointer_down(
            touch.uid, screen_x, screen_y,
            capture=lambda: touch.grab(self),
            release=lambda: touch.ungrab(self))
        return True

    def on_touch_move(self, touch):
        if touch.grab_current is self:
            self.input_controller.pointer_move(touch.uid, *kivy_to_screen(self, touch.pos))
            return True

        return super(CanvasWidget, self).on_touch_move(touch)

    def on_touch_up(self, touch):
        if touch.grab_current is self:
            self.input_controller.pointer_up(touch.uid)
            return True

        return super(CanvasWidget, self).on_touch_up(touch)
