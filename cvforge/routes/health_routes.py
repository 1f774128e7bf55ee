from flask import Blueprint, jsonify
from sqlalchemy import text

from cvforge.extensions import db

health_bp = Blueprint("health", __name__)


@health_bp.route("/health", methods=["GET"])
def health():
    db.session.execute(text("SELECT 1"))
    return jsonify({"status": "ok"}), 200
