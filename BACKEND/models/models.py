"""
Database Models for the Esports Management Platform

The platform stores its data as JSON documents grouped under collection
paths (players, Team, Match, users), the same shape a hosted realtime
database exposes. A single Record table holds every document.

Author: Esports Platform Team
"""

from datetime import datetime

import pytz
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def utc_now():
    """Timezone-aware current time in UTC."""
    return datetime.now(pytz.UTC)


class Record(db.Model):
    """
    One JSON document stored under a collection path.

    Attributes:
        path (str): Collection name, e.g. 'players' or 'Match'
        key (str): Push key, unique within its path
        data (dict): The document itself
    """

    __tablename__ = 'records'
    __table_args__ = (db.UniqueConstraint('path', 'key', name='uq_records_path_key'),)

    id = db.Column(db.Integer, primary_key=True)
    path = db.Column(db.String(64), nullable=False, index=True)
    key = db.Column(db.String(64), nullable=False)
    data = db.Column(db.JSON, nullable=False, default=dict)
    created_at = db.Column(db.DateTime, default=utc_now)
    updated_at = db.Column(db.DateTime, default=utc_now, onupdate=utc_now)

    @classmethod
    def find(cls, path, key):
        """Return the record at path/key, or None."""
        return cls.query.filter_by(path=path, key=key).first()

    @classmethod
    def under(cls, path):
        """All records of a collection, oldest first."""
        return cls.query.filter_by(path=path).order_by(cls.id).all()

    def __repr__(self):
        return f'<Record {self.path}/{self.key}>'
