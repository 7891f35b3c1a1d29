"""
The persistence collaborator: where the canvas' items are stored between sessions.

Items are stored as flat records, one per block: {id, type, label, content, parent_id, direction, x, y}; the store
knows nothing about trees (the tree is rebuilt from the records on load, see dsn.blocks.construct).

Records are grouped per owner and per project.
"""

import json
from os.path import isfile
from uuid import uuid4

from utils import pmts


class LoadError(Exception):
    pass


class StoreError(Exception):
    pass


class ItemStore(object):
    """The interface of a store; calls may fail with LoadError (reads) or StoreError (writes)."""

    def list_items(self, owner_id, project_id):
        raise NotImplementedError()

    def create_item(self, owner_id, project_id, data):
        """Stores a new item; returns its (newly assigned) id."""
        raise NotImplementedError()

    def update_item(self, owner_id, project_id, item_id, data):
        raise NotImplementedError()


def project_key(owner_id, project_id):
    return "%s/%s" % (owner_id, project_id)


class FileItemStore(ItemStore):
    """For lack of a better name: a store that keeps all items in a single JSON file. The whole file is read and
    rewritten on each call; this is fine for the number of items a human can put on a canvas."""

    def __init__(self, filename):
        self.filename = filename

    def _read(self):
        if not isfile(self.filename):
            return {}

        try:
            with open(self.filename, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise LoadError("Cannot read %s: %s" % (self.filename, e))

        if not isinstance(data, dict):
            raise LoadError("Unexpected contents in %s" % self.filename)

        return data

    def _write(self, data):
        try:
            with open(self.filename, 'w') as f:
                json.dump(data, f, indent=2)
        except (OSError, TypeError) as e:
            raise StoreError("Cannot write %s: %s" % (self.filename, e))

    def list_items(self, owner_id, project_id):
        return list(self._read().get(project_key(owner_id, project_id), []))

    def create_item(self, owner_id, project_id, data):
        pmts(data, dict)

        try:
            all_items = self._read()
        except LoadError as e:
            raise StoreError(str(e))

        item_id = uuid4().hex
        record = dict(data, id=item_id)

        all_items.setdefault(project_key(owner_id, project_id), []).append(record)
        self._write(all_items)
        return item_id

    def update_item(self, owner_id, project_id, item_id, data):
        pmts(data, dict)

        try:
            all_items = self._read()
        except LoadError as e:
            raise StoreError(str(e))

        for record in all_items.get(project_key(owner_id, project_id), []):
            if record.get('id') == item_id:
                record.update(data)
                break
        else:
            raise StoreError("No such item: %s" % item_id)

        self._write(all_items)
