from flask import Blueprint, request
from flask_jwt_extended import jwt_required, get_jwt_identity

from cvforge.services import profile_service
from .responses import ok

profile_bp = Blueprint("profile", __name__)


@profile_bp.route("", methods=["GET"])
@jwt_required()
def get_profile():
    return ok(profile_service.get_profile(get_jwt_identity()))


@profile_bp.route("", methods=["PATCH"])
@jwt_required()
def update_profile():
    profile = profile_service.update_profile(get_jwt_identity(), request.get_json(silent=True))
    return ok(profile, "Profile updated successfully")
