from kivy.graphics import Color, Line, RoundedRectangle
from kivy.metrics import pt
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.scatter import Scatter
from kivy.uix.textinput import TextInput

from colorscheme import (
    BARK,
    DARK_BARK,
    DARK_LEAF,
    DRY_GRASS,
    LEAF_GREEN,
    PALE_LEAF,
    SELECTION,
)

from dsn.blocks.structure import BRANCH

from widgets.layout_constants import (
    BLOCK_HEIGHT,
    BLOCK_WIDTH,
    FONT_SIZE,
    PADDING,
)


def colors_for_type(block_type):
    """(background, accent, text)"""
    if block_type == BRANCH:
        return BARK, DRY_GRASS, DARK_BARK

    return LEAF_GREEN, PALE_LEAF, DARK_LEAF


class BlockWidget(Scatter):
    """A branch or leaf, as shown on the canvas: a title and some content, both editable.

    The block is positioned by the canvas (centered on its world position) and scaled along with the zoom level; the
    user cannot move, rotate or scale it directly. Edits are reported through `on_edit(block_id, label, content)`;
    gaining focus is reported through `on_select(block_id)`.
    """

    def __init__(self, **kwargs):
        self.block_id = kwargs.pop('block_id')
        self.block_type = kwargs.pop('block_type')
        self.on_edit = kwargs.pop('on_edit')
        self.on_select = kwargs.pop('on_select')
        label = kwargs.pop('label')
        content = kwargs.pop('content')

        kwargs.update(
            do_rotation=False,
            do_scale=False,
            do_translation=False,
            size_hint=(None, None),
            size=(BLOCK_WIDTH, BLOCK_HEIGHT),
        )
        super(BlockWidget, self).__init__(**kwargs)

        self.selected = False
        self._showing = False

        background, accent, text_color = colors_for_type(self.block_type)

        with self.canvas.before:
            Color(*background)
            self._background = RoundedRectangle(pos=(0, 0), size=self.size, radius=[pt(12)])
            self._selection_color = Color(0, 0, 0, 0)
            self._selection_line = Line(rounded_rectangle=(0, 0, BLOCK_WIDTH, BLOCK_HEIGHT, pt(12)), width=2)

        layout = BoxLayout(
            orientation='vertical', padding=PADDING, spacing=PADDING / 2, pos=(0, 0), size=self.size)

        self.label_input = TextInput(
            text=label,
            multiline=False,
            size_hint=(1, None),
            height=pt(FONT_SIZE) * 2,
            font_size=pt(FONT_SIZE + 2),
            background_color=accent,
            foreground_color=text_color,
        )
        self.content_input = TextInput(
            text=content,
            font_size=pt(FONT_SIZE),
            background_color=accent,
            foreground_color=text_color,
        )

        layout.add_widget(self.label_input)
        layout.add_widget(self.content_input)
        self.add_widget(layout)

        self.label_input.bind(text=self._text_changed, focus=self._focus_changed)
        self.content_input.bind(text=self._text_changed, focus=self._focus_changed)

    def _text_changed(self, *args):
        if self._showing:
            return

        self.on_edit(self.block_id, self.label_input.text, self.content_input.text)

    def _focus_changed(self, instance, focus):
        if focus:
            self.on_select(self.block_id)

    def is_editing(self):
        return self.label_input.focus or self.content_input.focus

    def show_block(self, block):
        """Brings the texts up to date with the block, unless the user is typing in them."""
        if self.is_editing():
            return

        self._showing = True
        try:
            if self.label_input.text != block.label:
                self.label_input.text = block.label

            if self.content_input.text != block.content:
                self.content_input.text = block.content
        finally:
            self._showing = False

    def set_selected(self, selected):
        if selected == self.selected:
            return

        self.selected = selected
        self._selection_color.rgba = SELECTION if selected else (0, 0, 0, 0)

    def place(self, center, scale):
        """Centers the block on `center` (in the parent's coordinates) at the given scale."""
        if self.scale != scale:
            self.scale = scale
        self.center = center
