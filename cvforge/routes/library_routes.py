# cvforge/routes/library_routes.py
from flask import Blueprint, request
from flask_jwt_extended import jwt_required, get_jwt_identity

from cvforge.services.library_service import LibraryService
from cvforge.services.sections import SECTION_KEYS, get_section
from .responses import ok, created

library_bp = Blueprint("library", __name__)

SECTION = f"<any({', '.join(SECTION_KEYS)}):section>"


@library_bp.route(f"/{SECTION}", methods=["GET"])
@jwt_required()
def list_items(section):
    return ok(LibraryService.list_items(get_jwt_identity(), section))


@library_bp.route(f"/{SECTION}", methods=["POST"])
@jwt_required()
def create_item(section):
    item = LibraryService.create_item(get_jwt_identity(), section, request.get_json(silent=True))
    return created(item, f"{get_section(section).label} added successfully")


@library_bp.route(f"/{SECTION}/<item_id>", methods=["PATCH"])
@jwt_required()
def update_item(section, item_id):
    item = LibraryService.update_item(get_jwt_identity(), section, item_id, request.get_json(silent=True))
    return ok(item, f"{get_section(section).label} updated successfully")


@library_bp.route(f"/{SECTION}/<item_id>", methods=["DELETE"])
@jwt_required()
def delete_item(section, item_id):
    LibraryService.delete_item(get_jwt_identity(), section, item_id)
    return ok(message=f"{get_section(section).label} deleted successfully")
