# cvforge/routes/cv_routes.py
from flask import Blueprint, request
from flask_jwt_extended import jwt_required, get_jwt_identity

from cvforge.services.cv_service import CvService
from cvforge.services.sections import SECTION_KEYS, get_section
from .responses import ok, created

cv_bp = Blueprint("cv", __name__)

SECTION = f"<any({', '.join(SECTION_KEYS)}):section>"


# === [1] CV documents ===
@cv_bp.route("", methods=["GET"])
@jwt_required()
def list_cvs():
    return ok(CvService.list_cvs(get_jwt_identity()))


@cv_bp.route("", methods=["POST"])
@jwt_required()
def create_cv():
    cv = CvService.create_cv(get_jwt_identity(), request.get_json(silent=True))
    return created(cv, "CV created successfully")


@cv_bp.route("/<cv_id>", methods=["GET"])
@jwt_required()
def get_cv(cv_id):
    """CV with its included library items, each section in display order."""
    return ok(CvService.get_composed_cv(get_jwt_identity(), cv_id))


@cv_bp.route("/<cv_id>", methods=["PATCH"])
@jwt_required()
def update_cv(cv_id):
    cv = CvService.update_cv(get_jwt_identity(), cv_id, request.get_json(silent=True))
    return ok(cv, "CV updated successfully")


@cv_bp.route("/<cv_id>", methods=["DELETE"])
@jwt_required()
def delete_cv(cv_id):
    CvService.delete_cv(get_jwt_identity(), cv_id)
    return ok(message="CV deleted successfully")


# === [2] Inclusions ===
@cv_bp.route(f"/<cv_id>/{SECTION}", methods=["POST"])
@jwt_required()
def add_inclusion(cv_id, section):
    inclusion = CvService.add_inclusion(get_jwt_identity(), cv_id, section, request.get_json(silent=True))
    return created(inclusion, f"{get_section(section).label} added to CV")


@cv_bp.route(f"/<cv_id>/{SECTION}/<item_id>", methods=["DELETE"])
@jwt_required()
def remove_inclusion(cv_id, section, item_id):
    CvService.remove_inclusion(get_jwt_identity(), cv_id, section, item_id)
    return ok(message=f"{get_section(section).label} removed from CV")


@cv_bp.route(f"/<cv_id>/{SECTION}/<item_id>", methods=["PATCH"])
@jwt_required()
def reorder_inclusion(cv_id, section, item_id):
    inclusion = CvService.reorder_inclusion(
        get_jwt_identity(), cv_id, section, item_id, request.get_json(silent=True)
    )
    return ok(inclusion, "Order updated successfully")
