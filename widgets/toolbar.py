from kivy.uix.boxlayout import BoxLayout
from kivy.uix.button import Button
from kivy.uix.label import Label

from dsn.blocks.structure import BRANCH, LEAF

from widgets.layout_constants import MARGIN, TOOLBAR_HEIGHT


def zoom_text(scale):
    """
    >>> zoom_text(1), zoom_text(0.2), zoom_text(1.234)
    ('Zoom: 100%', 'Zoom: 20%', 'Zoom: 123%')
    """
    return "Zoom: %d%%" % round(scale * 100)


class Toolbar(BoxLayout):

    def __init__(self, **kwargs):
        self.canvas_widget = kwargs.pop('canvas_widget')
        self.on_export = kwargs.pop('on_export')

        kwargs.update(
            orientation='horizontal',
            size_hint=(1, None),
            height=TOOLBAR_HEIGHT,
            padding=MARGIN,
            spacing=MARGIN,
        )
        super(Toolbar, self).__init__(**kwargs)

        for text, on_press in [
                ("Add Branch", lambda *args: self.canvas_widget.add_item(BRANCH)),
                ("Add Leaf", lambda *args: self.canvas_widget.add_item(LEAF)),
                ("Center View", lambda *args: self.canvas_widget.center_view()),
                ("Export", lambda *args: self.on_export(self.canvas_widget.export())),
                ]:
            button = Button(text=text)
            button.bind(on_press=on_press)
            self.add_widget(button)

        self.zoom_label = Label(text=zoom_text(self.canvas_widget.viewport.scale))
        self.add_widget(self.zoom_label)

        self.canvas_widget.viewport.bind(on_transform=self.transform_change)

    def transform_change(self, viewport):
        self.zoom_label.text = zoom_text(viewport.scale)
