"""
Realtime Database Adapter

Gives request handlers the path/reference interface of a hosted realtime
database (ref('players').push(...), ref('players').child(key).once(), ...)
on top of the SQLAlchemy Record table.

Author: Esports Platform Team
"""

import time
import uuid

from models import db, Record


def server_timestamp():
    """Milliseconds since the epoch, as the hosted database would stamp it."""
    return int(time.time() * 1000)


def generate_key():
    """Generate a unique push key for a new document."""
    return uuid.uuid4().hex


class Reference:
    """
    A location in the database: either a collection path ('players')
    or a single document inside it ('players/<key>').
    """

    def __init__(self, path, key=None):
        self.path = path
        self.key = key

    def child(self, key):
        """Reference to one document under this collection."""
        return Reference(self.path, key)

    def _record(self):
        return Record.find(self.path, self.key)

    def push(self, payload):
        """
        Store payload under a freshly generated key.

        Returns:
            str: The new key
        """
        key = generate_key()
        db.session.add(Record(path=self.path, key=key, data=dict(payload)))
        db.session.commit()
        return key

    def once(self):
        """
        Read the value at this location.

        Returns:
            dict: key -> document for a collection (empty dict when none),
                  or the document / None for a child reference
        """
        if self.key is None:
            return {record.key: record.data for record in Record.under(self.path)}
        record = self._record()
        return record.data if record is not None else None

    def set(self, payload):
        """Replace the document at this child reference."""
        record = self._record()
        if record is None:
            record = Record(path=self.path, key=self.key)
            db.session.add(record)
        record.data = dict(payload)
        db.session.commit()

    def update(self, updates):
        """Shallow-merge updates into the document, creating it if absent."""
        record = self._record()
        if record is None:
            record = Record(path=self.path, key=self.key, data={})
            db.session.add(record)
        # Reassign so SQLAlchemy notices the JSON change
        record.data = {**(record.data or {}), **updates}
        db.session.commit()

    def remove(self):
        """Delete the document. Removing a missing document is a no-op."""
        record = self._record()
        if record is not None:
            db.session.delete(record)
            db.session.commit()

    def __repr__(self):
        if self.key is None:
            return f'Reference({self.path!r})'
        return f'Reference({self.path!r}/{self.key!r})'


class RealtimeDatabase:
    """Entry point mirroring the hosted client: rtdb.ref('players')."""

    def ref(self, path):
        """Return a reference for 'collection' or 'collection/key'."""
        collection, _, key = path.partition('/')
        return Reference(collection, key or None)


rtdb = RealtimeDatabase()
