import sqlite3

import pytest

from database import Database


@pytest.fixture
def db():
    conn = sqlite3.connect(":memory:")
    conn.execute("PRAGMA foreign_keys = ON;")
    database = Database(conn, backend="sqlite")
    database.create_tables()
    yield database
    conn.close()


@pytest.fixture
def feed_input(monkeypatch):
    """Answer successive input() prompts from a list of strings"""
    prompts = []

    def feed(*answers):
        remaining = iter(answers)

        def fake_input(prompt=""):
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError
        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    return feed


def add_model(db, model_no, dims=(10.0, 20.0, 5.0, 3.0, 15.0)):
    db.insert_model((model_no,) + tuple(dims))


def add_display(db, serial_no, scheduler_system, model_no):
    db.insert_display(serial_no, scheduler_system, model_no)


def table_count(db, table):
    return db.fetch(f"SELECT COUNT(*) FROM {table}")[0][0]


class RecordingCursor:
    def __init__(self, conn):
        self.conn = conn
        self.rowcount = -1

    def execute(self, query, params=None):
        self.conn.statements.append((query, params))
        if self.conn.fail_with is not None:
            raise self.conn.fail_with
        self.rowcount = self.conn.rowcount

    def fetchall(self):
        return list(self.conn.rows)

    def close(self):
        pass


class RecordingConnection:
    """Stands in for a MySQL connection, recording every statement"""

    def __init__(self, rows=(), rowcount=1, fail_with=None):
        self.rows = rows
        self.rowcount = rowcount
        self.fail_with = fail_with
        self.statements = []
        self.commits = 0
        self.closed = False

    def cursor(self):
        return RecordingCursor(self)

    def commit(self):
        self.commits += 1

    def close(self):
        self.closed = True
