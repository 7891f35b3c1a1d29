"""
Export of a CanvasModel as a plain-text outline: one line per block, indented two spaces per level of depth, each
followed by a line for the block's content (if any):

>>> from dsn.blocks.structure import CanvasBlock, CanvasModel
>>> model = CanvasModel({
...     'A': CanvasBlock('A', 'branch', 'Root', content='Grow the garden', children=['B']),
...     'B': CanvasBlock('B', 'leaf', 'Q1', content='Answer1', parent_id='A'),
... }, ['A'])
>>> print(traverse_export(model))
Branch: Root
  Mission: Grow the garden
  Leaf: Q1
    Answer: Answer1
"""

from dsn.blocks.structure import BRANCH

INDENT = '  '


def traverse_export(model):
    lines = []

    for depth, block in model.depths():
        indent = INDENT * depth

        if block.type == BRANCH:
            lines.append("%sBranch: %s" % (indent, block.label))
            if block.content:
                lines.append("%s%sMission: %s" % (indent, INDENT, block.content))
        else:
            lines.append("%sLeaf: %s" % (indent, block.label))
            if block.content:
                lines.append("%s%sAnswer: %s" % (indent, INDENT, block.content))

    return "\n".join(lines)
