import logging

from flask import Blueprint, jsonify
from sqlalchemy import text

from ..extensions import db

bp = Blueprint("health", __name__)
logger = logging.getLogger(__name__)


@bp.get("/health")
def health():
    try:
        db.session.execute(text("SELECT 1"))
        return jsonify({"ok": True, "db": "up"})
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return jsonify({"ok": False, "error": str(e)}), 500
