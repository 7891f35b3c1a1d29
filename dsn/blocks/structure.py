from copy import copy

from utils import pmts, pmts_or_none


# Block types
BRANCH = 'branch'
LEAF = 'leaf'

BLOCK_TYPES = (BRANCH, LEAF)

# Directions (of a block, as seen from its parent)
UP = 'up'
DOWN = 'down'
LEFT = 'left'
RIGHT = 'right'

DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


class CanvasBlock(object):

    def __init__(self, id, type, label, content="", parent_id=None, children=(), direction_from_parent=None, x=0,
                 y=0):
        """A single block; `children` are ids (not blocks) in display order. (x, y) is the block's position in world
        coordinates."""
        pmts(id, str)
        assert type in BLOCK_TYPES, "Unknown block type: %s" % type
        pmts(label, str)
        pmts_or_none(parent_id, str)
        assert direction_from_parent is None or direction_from_parent in DIRECTIONS, \
            "Unknown direction: %s" % direction_from_parent

        self.id = id
        self.type = type
        self.label = label
        self.content = content or ""
        self.parent_id = parent_id
        self.children = tuple(children)
        self.direction_from_parent = direction_from_parent
        self.x = x
        self.y = y

    def set(self, **kwargs):
        """Creates a copy of the CanvasBlock, with some values (as provided) changed."""
        result = copy(self)
        for key, value in kwargs.items():
            setattr(result, key, tuple(value) if key == 'children' else value)
        return result

    def __repr__(self):
        return "%s(%s, %r)" % (self.type.capitalize(), self.id, self.label)


class CanvasModel(object):

    def __init__(self, blocks, root_ids):
        """The tree of blocks. `blocks` maps ids to CanvasBlocks; `root_ids` are the top-level blocks, in order.

        Blocks refer to each other by id only. The tree is the single representation of the canvas' contents; the flat
        list of blocks to be drawn is derived from it (iter_blocks).
        """
        pmts(blocks, dict)

        self.blocks = blocks
        self.root_ids = tuple(root_ids)

    @classmethod
    def empty(cls):
        return cls({}, ())

    def __len__(self):
        return len(self.blocks)

    def __contains__(self, block_id):
        return block_id in self.blocks

    def __repr__(self):
        return "CanvasModel(%s)" % list(self.iter_blocks())

    def get(self, block_id):
        return self.blocks.get(block_id)

    def iter_blocks(self):
        for depth, block in self.depths():
            yield block

    def depths(self):
        """Pairs (depth, block): depth first, pre-order, starting at the roots in order. Ids that point to nothing are
        skipped, as is any id that was already visited (which can only happen if the tree is malformed)."""
        visited = set()
        stack = [(0, root_id) for root_id in reversed(self.root_ids)]

        while stack:
            depth, block_id = stack.pop()
            if block_id in visited or block_id not in self.blocks:
                continue

            visited.add(block_id)
            block = self.blocks[block_id]
            yield depth, block

            stack.extend((depth + 1, child_id) for child_id in reversed(block.children))

    def ancestor_ids(self, block_id):
        """The ids of the parent, grandparent, etc. of block_id (nearest first)."""
        result = []
        current = self.blocks[block_id].parent_id

        while current is not None and current in self.blocks and current not in result:
            result.append(current)
            current = self.blocks[current].parent_id

        return result


def direction_between(parent_position, child_position):
    """The direction in which the child lies as seen from the parent; the dominant axis wins. (World coordinates: y
    grows downwards.)

    >>> direction_between((0, 0), (100, 20))
    'right'
    >>> direction_between((0, 0), (10, -200))
    'up'
    >>> direction_between((0, 0), (0, 0)) is None
    True
    """
    dx = child_position[0] - parent_position[0]
    dy = child_position[1] - parent_position[1]

    if dx == 0 and dy == 0:
        return None

    if abs(dx) >= abs(dy):
        return RIGHT if dx > 0 else LEFT

    return DOWN if dy > 0 else UP
