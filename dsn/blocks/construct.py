from kivy.logger import Logger

from utils import pmts

from dsn.blocks.clef import (
    AddBlock,
    EditBlock,
    Reparent,
)
from dsn.blocks.structure import CanvasBlock, CanvasModel, BLOCK_TYPES, DIRECTIONS, LEAF


def _detached(model, block_id):
    """Returns (blocks, root_ids) of the model with block_id removed from wherever it is attached (as a root or as a
    child); the blocks dict is a copy, the block itself stays in it."""
    block = model.blocks[block_id]
    blocks = dict(model.blocks)
    root_ids = model.root_ids

    if block.parent_id is None or block.parent_id not in blocks:
        root_ids = tuple(i for i in root_ids if i != block_id)
    else:
        parent = blocks[block.parent_id]
        blocks[parent.id] = parent.set(children=[i for i in parent.children if i != block_id])

    return blocks, root_ids


def _attached(blocks, root_ids, block, parent_id):
    """Returns (blocks, root_ids) with `block` attached as the last child of parent_id (or as the last root)."""
    if parent_id is None:
        blocks[block.id] = block.set(parent_id=None, direction_from_parent=None)
        return blocks, root_ids + (block.id,)

    parent = blocks[parent_id]
    blocks[parent_id] = parent.set(children=parent.children + (block.id,))
    blocks[block.id] = block.set(parent_id=parent_id)
    return blocks, root_ids


def play_block_note(note, model):
    """Returns a new CanvasModel; `model` itself is left untouched."""

    if isinstance(note, AddBlock):
        block = note.block
        pmts(block, CanvasBlock)

        if block.id in model.blocks:
            raise Exception("Block already exists: %s" % block.id)

        if block.parent_id is not None and block.parent_id not in model.blocks:
            raise Exception("Unknown parent: %s" % block.parent_id)

        blocks, root_ids = _attached(dict(model.blocks), model.root_ids, block.set(children=[]), block.parent_id)
        return CanvasModel(blocks, root_ids)

    if note.block_id not in model.blocks:
        raise Exception("Unknown block: %s" % note.block_id)

    block = model.blocks[note.block_id]

    if isinstance(note, EditBlock):
        blocks = dict(model.blocks)
        blocks[block.id] = block.set(label=note.label, content=note.content or "")
        return CanvasModel(blocks, model.root_ids)

    elif isinstance(note, Reparent):
        if note.parent_id is not None:
            if note.parent_id not in model.blocks:
                raise Exception("Unknown parent: %s" % note.parent_id)

            if note.parent_id == block.id or block.id in model.ancestor_ids(note.parent_id):
                raise Exception("A block cannot become its own descendant: %s" % block.id)

        assert note.direction is None or note.direction in DIRECTIONS, "Unknown direction: %s" % note.direction

        blocks, root_ids = _detached(model, block.id)
        blocks, root_ids = _attached(blocks, root_ids, blocks[block.id], note.parent_id)

        if note.parent_id is not None:
            blocks[block.id] = blocks[block.id].set(direction_from_parent=note.direction)

        return CanvasModel(blocks, root_ids)

    raise Exception("Unknown Note")


def _id_or_none(value):
    # JSON stores may hand us numeric ids; bools are not ids.
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return None


def _text(value):
    return "" if value is None else str(value)


def _number(value):
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return 0


def block_from_record(record):
    """Persisted items are flat records {id, x, y, label, content} with optionally a type, a parent_id and a direction.
    Records without a (known) type are leaves; other fields that don't make sense fall back to their defaults. Returns
    None for records without a usable id."""
    if not isinstance(record, dict):
        return None

    block_id = _id_or_none(record.get('id'))
    if block_id is None:
        return None

    block_type = record.get('type')
    direction = record.get('direction')

    return CanvasBlock(
        id=block_id,
        type=block_type if block_type in BLOCK_TYPES else LEAF,
        label=_text(record.get('label')),
        content=_text(record.get('content')),
        parent_id=_id_or_none(record.get('parent_id')),
        direction_from_parent=direction if direction in DIRECTIONS else None,
        x=_number(record.get('x')),
        y=_number(record.get('y')),
    )


def model_from_records(records):
    """Rebuilds the tree from a sequence of records. The order of the records determines the order of roots and
    children. A record whose parent cannot be found, or which is itself part of a cycle of parent links, is put at the
    root level instead; duplicate ids are ignored after their first occurrence and records without a usable id are
    skipped."""
    candidates = {}
    ordered_ids = []

    for record in records:
        block = block_from_record(record)
        if block is None:
            Logger.warning("Canvas: Skipping record without a usable id: %r", record)
            continue

        if block.id not in candidates:
            candidates[block.id] = block
            ordered_ids.append(block.id)

    def on_cycle(block_id):
        seen = set()
        current = candidates[block_id].parent_id
        while current is not None and current in candidates and current not in seen:
            if current == block_id:
                return True
            seen.add(current)
            current = candidates[current].parent_id
        return False

    cyclic = {block_id for block_id in ordered_ids if on_cycle(block_id)}

    blocks = {}
    children = {block_id: [] for block_id in ordered_ids}
    root_ids = []

    for block_id in ordered_ids:
        block = candidates[block_id]

        if block.parent_id is None or block.parent_id not in candidates or block_id in cyclic:
            blocks[block_id] = block.set(parent_id=None, direction_from_parent=None)
            root_ids.append(block_id)
        else:
            blocks[block_id] = block
            children[block.parent_id].append(block_id)

    for block_id in ordered_ids:
        blocks[block_id] = blocks[block_id].set(children=children[block_id])

    return CanvasModel(blocks, root_ids)
