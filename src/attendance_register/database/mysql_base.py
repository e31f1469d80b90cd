from __future__ import annotations

from contextlib import contextmanager

from .connection import DatabaseConnection


@contextmanager
def transaction(conn_factory: DatabaseConnection):
    """Yield a dictionary cursor on a fresh connection.

    The work is committed when the block exits cleanly and rolled back otherwise.
    """
    conn = conn_factory.connect()
    cur = None
    try:
        cur = conn.cursor(dictionary=True)
        yield cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        if cur is not None:
            cur.close()
        conn.close()
