import logging

from flask import Blueprint, jsonify
from sqlalchemy import select

from ..extensions import db
from ..models import Question

bp = Blueprint("questions", __name__)
logger = logging.getLogger(__name__)


@bp.get("/questions")
def list_questions():
    try:
        rows = db.session.execute(select(Question).order_by(Question.question_no)).scalars().all()
        return jsonify([q.to_dict() for q in rows])
    except Exception as e:
        logger.error(f"Error fetching questions: {e}")
        return jsonify({"error": str(e)}), 500
