MARGIN = 5
PADDING = 8

# World units between grid lines
GRID_SIZE = 50

# Size (in pixels, at scale 1) of a block on the canvas
BLOCK_WIDTH = 260
BLOCK_HEIGHT = 120

TOOLBAR_HEIGHT = 48

# Opacity of the canvas while the view is being held back at the edge of the world
AT_EDGE_OPACITY = .95


# In points
FONT_SIZE = 14
