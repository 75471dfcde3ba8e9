# surveydemo/bootstrap.py
import logging
import threading

from sqlalchemy import func, insert, select

from .extensions import db
from .models import Question

logger = logging.getLogger(__name__)

SEED_QUESTIONS = [
    {"question_no": 1, "text_a": "Le gusta matemáticas.", "text_b": "Prefiere diseñar modelos."},
    {"question_no": 2, "text_a": "Disfruta laboratorio.", "text_b": "Prefiere leer/escribir."},
    {"question_no": 3, "text_a": "Ayudar a personas.", "text_b": "Dirigir equipos."},
]


def ensure_schema():
    """CREATE TABLE IF NOT EXISTS for respondent, question and answer."""
    db.create_all()


def seed_questions():
    """Insert the seed questions when the question table is empty. Returns rows inserted."""
    count = db.session.execute(select(func.count()).select_from(Question)).scalar_one()
    if count:
        return 0
    db.session.execute(insert(Question), SEED_QUESTIONS)
    db.session.commit()
    logger.info(f"Seed ok: {len(SEED_QUESTIONS)} questions")
    return len(SEED_QUESTIONS)


def run_bootstrap(app):
    """Create tables and seed. Failures are logged, never raised: the API stays up degraded."""
    with app.app_context():
        try:
            ensure_schema()
            seed_questions()
        except Exception:
            db.session.rollback()
            logger.exception("Boot DB error")
            return False
        finally:
            db.session.remove()
    logger.info("DB ready")
    return True


def start_bootstrap(app):
    """Run the bootstrap on a daemon thread so the listener does not wait for the database."""
    t = threading.Thread(target=run_bootstrap, args=(app,), name="db-bootstrap", daemon=True)
    t.start()
    return t
