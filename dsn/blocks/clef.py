class BlockNote(object):
    pass


class AddBlock(BlockNote):
    def __init__(self, block):
        """Adds the block to the model: as the last child of block.parent_id if it has one, as the last root otherwise.
        Any children the block claims to have are ignored; they are added by their own AddBlock."""
        self.block = block


class EditBlock(BlockNote):
    def __init__(self, block_id, label, content):
        self.block_id = block_id
        self.label = label
        self.content = content


class Reparent(BlockNote):
    def __init__(self, block_id, parent_id, direction=None):
        """Makes block_id the last child of parent_id; parent_id=None makes it the last root."""
        self.block_id = block_id
        self.parent_id = parent_id
        self.direction = direction
