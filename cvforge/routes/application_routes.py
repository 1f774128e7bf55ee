# cvforge/routes/application_routes.py
from flask import Blueprint, request
from flask_jwt_extended import jwt_required, get_jwt_identity

from cvforge.services.application_service import ApplicationService
from .responses import ok, created

application_bp = Blueprint("applications", __name__)


@application_bp.route("", methods=["POST"])
@jwt_required()
def create_application():
    application = ApplicationService.create_application(get_jwt_identity(), request.get_json(silent=True))
    return created(application, "Application created successfully")


@application_bp.route("", methods=["GET"])
@jwt_required()
def list_applications():
    # repeated ?status= keys become a list, single keys stay strings
    args = {key: values if len(values) > 1 else values[0] for key, values in request.args.lists()}
    applications, pagination = ApplicationService.list_applications(get_jwt_identity(), args)
    return ok(applications, pagination=pagination)


@application_bp.route("/<application_id>", methods=["GET"])
@jwt_required()
def get_application(application_id):
    return ok(ApplicationService.get_application(get_jwt_identity(), application_id))


@application_bp.route("/<application_id>", methods=["PATCH"])
@jwt_required()
def update_application(application_id):
    application = ApplicationService.update_application(
        get_jwt_identity(), application_id, request.get_json(silent=True)
    )
    return ok(application, "Application updated successfully")


@application_bp.route("/<application_id>", methods=["DELETE"])
@jwt_required()
def delete_application(application_id):
    ApplicationService.delete_application(get_jwt_identity(), application_id)
    return ok(message="Application deleted successfully")
