# surveydemo/routes/answers.py
import logging
import math

from flask import Blueprint, jsonify, request
from sqlalchemy import select

from ..transactions import answer_upsert, transaction
from ..models import Question

bp = Blueprint("answers", __name__)
logger = logging.getLogger(__name__)

DEMO_VALUE = 1


def parse_respondent_id(value):
    """Positive integer id from a JSON number or numeric string, else None."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and (not math.isfinite(value) or not value.is_integer()):
        return None
    value = int(value)
    return value if value > 0 else None


def record_answer(conn, respondent_id, question_no, value=DEMO_VALUE):
    conn.execute(answer_upsert(conn.dialect.name, respondent_id, question_no, value))


@bp.post("/submit-demo")
def submit_demo():
    """Mark value=1 on every question for the respondent, all or nothing."""
    body = request.get_json(silent=True)
    raw = body.get("respondent_id") if isinstance(body, dict) else None
    respondent_id = parse_respondent_id(raw)
    if respondent_id is None:
        return jsonify({"error": "respondent_id requerido"}), 400

    try:
        with transaction() as conn:
            question_nos = conn.execute(select(Question.question_no).order_by(Question.question_no)).scalars().all()
            for question_no in question_nos:
                record_answer(conn, respondent_id, question_no)
        return jsonify({"ok": True, "saved": len(question_nos)})
    except Exception as e:
        logger.error(f"Submit-demo error for respondent {respondent_id}: {e}")
        return jsonify({"error": str(e)}), 500
