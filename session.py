"""
A CanvasSession connects the tree of blocks (dsn.blocks) to the store that persists them.

The model is never edited in place: each change produces a new CanvasModel which replaces the previous one, after which
`on_model` is dispatched. Failures of the store are logged and otherwise absorbed:

* loading fails: we continue with an empty canvas;
* creating fails: the block is not added (the block only exists locally once the store has given it an id);
* updating fails: the local edit stays (no rollback), it's simply not reflected in the store.
"""

from kivy.event import EventDispatcher
from kivy.logger import Logger

from filehandler import LoadError, StoreError

from dsn.blocks.clef import AddBlock, EditBlock, Reparent
from dsn.blocks.construct import model_from_records, play_block_note
from dsn.blocks.structure import CanvasBlock, CanvasModel, BRANCH, direction_between

DEFAULT_BRANCH_LABEL = "New Branch"
DEFAULT_LEAF_LABEL = "New Question"


class CanvasSession(EventDispatcher):

    __events__ = ('on_model',)

    def __init__(self, store, owner_id, project_id, **kwargs):
        super(CanvasSession, self).__init__(**kwargs)

        self.store = store
        self.owner_id = owner_id
        self.project_id = project_id

        self.model = CanvasModel.empty()

    def on_model(self, *args):
        pass

    def _set_model(self, model):
        self.model = model
        self.dispatch('on_model', model)

    def load(self):
        try:
            records = self.store.list_items(self.owner_id, self.project_id)
        except LoadError as e:
            Logger.error("Canvas: Failed to load items for %s/%s: %s", self.owner_id, self.project_id, e)
            records = []

        self._set_model(model_from_records(records))

    def add_block(self, block_type, x, y, parent_id=None):
        """Creates a block at world position (x, y); returns its id, or None if the store failed to create it."""
        label = DEFAULT_BRANCH_LABEL if block_type == BRANCH else DEFAULT_LEAF_LABEL

        direction = None
        if parent_id is not None:
            parent = self.model.get(parent_id)
            if parent is None:
                Logger.warning("Canvas: Unknown parent %s; adding at the top level", parent_id)
                parent_id = None
            else:
                direction = direction_between((parent.x, parent.y), (x, y))

        data = {
            'type': block_type,
            'label': label,
            'content': "",
            'parent_id': parent_id,
            'direction': direction,
            'x': x,
            'y': y,
        }

        try:
            block_id = self.store.create_item(self.owner_id, self.project_id, data)
        except StoreError as e:
            Logger.error("Canvas: Failed to create item %r: %s", label, e)
            return None

        block = CanvasBlock(
            block_id, block_type, label, "", parent_id=parent_id, direction_from_parent=direction, x=x, y=y)
        self._set_model(play_block_note(AddBlock(block), self.model))
        return block_id

    def edit_block(self, block_id, label, content):
        if block_id not in self.model:
            Logger.warning("Canvas: Ignoring edit of unknown block %s", block_id)
            return

        self._set_model(play_block_note(EditBlock(block_id, label, content), self.model))

        self._update_store(block_id, {'label': label, 'content': content})

    def reparent(self, block_id, parent_id, direction=None):
        """Moves block_id under parent_id (None: to the top level); returns whether it did. Moves that don't fit the tree
        (unknown blocks, or a block under itself or its own descendant) are logged and ignored."""
        if block_id not in self.model or (parent_id is not None and parent_id not in self.model):
            Logger.warning("Canvas: Ignoring move of %s under unknown block %s", block_id, parent_id)
            return False

        if parent_id is not None and (parent_id == block_id or block_id in self.model.ancestor_ids(parent_id)):
            Logger.warning("Canvas: Ignoring move of %s under its own descendant %s", block_id, parent_id)
            return False

        self._set_model(play_block_note(Reparent(block_id, parent_id, direction), self.model))

        block = self.model.get(block_id)
        self._update_store(block_id, {'parent_id': block.parent_id, 'direction': block.direction_from_parent})
        return True

    def _update_store(self, block_id, data):
        try:
            self.store.update_item(self.owner_id, self.project_id, block_id, data)
        except StoreError as e:
            Logger.error("Canvas: Failed to update item %s: %s", block_id, e)
