# cvforge/routes/snapshot_routes.py
from flask import Blueprint, request
from flask_jwt_extended import jwt_required, get_jwt_identity

from cvforge.services.snapshot_service import SnapshotService
from .responses import ok, created

snapshot_bp = Blueprint("snapshots", __name__)


# === [1] Snapshot attached to an application (at most one) ===
@snapshot_bp.route("/applications/<application_id>/snapshot", methods=["POST"])
@jwt_required()
def create_application_snapshot(application_id):
    """Create, or replace, the application's snapshot from a CV."""
    snapshot_id = SnapshotService.create_for_application(
        get_jwt_identity(), application_id, request.get_json(silent=True)
    )
    return created({"snapshot_id": snapshot_id}, "CV snapshot created successfully")


@snapshot_bp.route("/applications/<application_id>/snapshot", methods=["GET"])
@jwt_required()
def get_application_snapshot(application_id):
    return ok(SnapshotService.get_snapshot_for_application(get_jwt_identity(), application_id))


@snapshot_bp.route("/applications/<application_id>/snapshot", methods=["DELETE"])
@jwt_required()
def delete_application_snapshot(application_id):
    SnapshotService.delete_snapshot_for_application(get_jwt_identity(), application_id)
    return ok(message="CV snapshot deleted successfully")


# === [2] Snapshots by id ===
@snapshot_bp.route("/snapshots", methods=["POST"])
@jwt_required()
def create_snapshot():
    snapshot_id = SnapshotService.create_from_payload(get_jwt_identity(), request.get_json(silent=True))
    return created({"snapshot_id": snapshot_id}, "CV snapshot created successfully")


@snapshot_bp.route("/snapshots/<snapshot_id>", methods=["GET"])
@jwt_required()
def get_snapshot(snapshot_id):
    return ok(SnapshotService.get_snapshot(get_jwt_identity(), snapshot_id))


@snapshot_bp.route("/snapshots/<snapshot_id>", methods=["DELETE"])
@jwt_required()
def delete_snapshot(snapshot_id):
    SnapshotService.delete_snapshot(get_jwt_identity(), snapshot_id)
    return ok(message="CV snapshot deleted successfully")
