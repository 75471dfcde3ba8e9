# surveydemo/transactions.py
import logging
from contextlib import contextmanager

from sqlalchemy.dialects import mysql, postgresql, sqlite

from .extensions import db
from .models import Answer

logger = logging.getLogger(__name__)


@contextmanager
def transaction():
    """
    Borrow one pooled connection and run a single transaction on it.

    acquire -> begin -> (caller's statements) -> commit, or rollback and
    re-raise on any error. The connection goes back to the pool on every path.
    """
    conn = db.engine.connect()
    trans = None
    try:
        trans = conn.begin()
        yield conn
        trans.commit()
    except Exception as e:
        logger.warning(f"Rolling back transaction: {e}")
        if trans is not None:
            trans.rollback()
        raise
    finally:
        conn.close()


def answer_upsert(dialect_name, respondent_id, question_no, value):
    """INSERT ... that overwrites ``value`` when the (respondent, question) row already exists."""
    table = Answer.__table__
    row = {"respondent_id": respondent_id, "question_no": question_no, "value": value}

    if dialect_name in ("mysql", "mariadb"):
        stmt = mysql.insert(table).values(**row)
        return stmt.on_duplicate_key_update(value=stmt.inserted.value)

    if dialect_name == "postgresql":
        stmt = postgresql.insert(table).values(**row)
    elif dialect_name == "sqlite":
        stmt = sqlite.insert(table).values(**row)
    else:
        raise NotImplementedError(f"No upsert for dialect {dialect_name!r}")
    return stmt.on_conflict_do_update(
        index_elements=[table.c.respondent_id, table.c.question_no],
        set_={"value": stmt.excluded.value},
    )
