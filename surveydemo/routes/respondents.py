# surveydemo/routes/respondents.py
import logging

from flask import Blueprint, jsonify, request

from ..extensions import db
from ..models import Respondent

bp = Blueprint("respondents", __name__)
logger = logging.getLogger(__name__)

SEX_VALUES = (0, 1)
GRADE_VALUES = (0, 4, 5)
DEFAULT_SEX = 1
DEFAULT_GRADE = 4


def _pick(value, allowed, default):
    # bool is an int subclass, True would otherwise pass as 1
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return int(value) if value in allowed else default


@bp.post("/register")
def register():
    # demo flow: anything outside the allowed sets silently becomes the default
    body = request.get_json(silent=True) or {}
    if not isinstance(body, dict):
        body = {}
    sex = _pick(body.get("sex"), SEX_VALUES, DEFAULT_SEX)
    grade = _pick(body.get("grade"), GRADE_VALUES, DEFAULT_GRADE)

    try:
        respondent = Respondent(sex=sex, grade=grade)
        db.session.add(respondent)
        db.session.flush()
        respondent_id = respondent.id
        db.session.commit()
        return jsonify({"respondent_id": respondent_id})
    except Exception as e:
        db.session.rollback()
        logger.error(f"Register error: {e}")
        return jsonify({"error": str(e)}), 500
