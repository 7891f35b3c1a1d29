from sys import argv

from kivy.app import App
from kivy.config import Config
from kivy.uix.boxlayout import BoxLayout

from filehandler import FileItemStore
from session import CanvasSession

from widgets.canvas import CanvasWidget
from widgets.toolbar import Toolbar

Config.set('kivy', 'exit_on_escape', '0')

# Right-clicking should not leave red multitouch-emulation dots on the canvas.
Config.set('input', 'mouse', 'mouse,multitouch_on_demand')

DEFAULT_OWNER = 'local'
DEFAULT_PROJECT = 'default'


class CanvasGUI(App):

    def __init__(self, filename, owner_id=DEFAULT_OWNER, project_id=DEFAULT_PROJECT):
        super(CanvasGUI, self).__init__()

        self.title = "Idea Canvas: %s" % project_id
        self.session = CanvasSession(FileItemStore(filename), owner_id, project_id)

    def build(self):
        layout = BoxLayout(orientation='vertical')

        canvas_widget = CanvasWidget(session=self.session)
        toolbar = Toolbar(canvas_widget=canvas_widget, on_export=self.export)

        layout.add_widget(toolbar)
        layout.add_widget(canvas_widget)

        # the blocks are loaded once the canvas is listening for them.
        self.session.load()

        return layout

    def export(self, text):
        print(text)


def main():
    if len(argv) not in (2, 3, 4):
        print("Usage: ", argv[0], "FILENAME [OWNER [PROJECT]]")
        exit()

    CanvasGUI(*argv[1:]).run()


if __name__ == "__main__":
    main()
