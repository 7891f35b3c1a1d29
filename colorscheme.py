from kivy.utils import get_color_from_hex


def rgba(s):
    '''Return a Kivy color (4 value from 0-1 range) from either a hex string or
    a list of 0-255 values.
    '''
    if isinstance(s, str):
        return get_color_from_hex(s)
    elif isinstance(s, (list, tuple)):
        s = list(map(lambda x: x / 255., s))
        return s
    raise Exception('Invalid value (not a string / list / tuple)')


# Background of the canvas, and its grid
PAPER = rgba((250, 248, 243, 255))
GRID_GREY = rgba((128, 128, 128, 31))

# Branches are bark-colored, leaves are leaf-colored
BARK = rgba('#8d6748')
DRY_GRASS = rgba('#c2b280')
DARK_BARK = rgba('#3e2c18')
LEAF_GREEN = rgba('#7fb069')
PALE_LEAF = rgba('#d7e8ba')
DARK_LEAF = rgba('#23401a')

SELECTION = rgba((38, 141, 210, 255))
