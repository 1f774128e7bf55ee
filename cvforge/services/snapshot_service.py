# cvforge/services/snapshot_service.py
"""Freeze a composed CV into a snapshot.

A snapshot is built in one transaction and never updated afterwards. Every
child row receives a copy of the values, not a reference, so later edits to
the profile, the CV or the library items cannot reach it.
"""
import copy
import logging

from sqlalchemy.exc import IntegrityError

from cvforge.errors import Conflict, NotFound
from cvforge.extensions import db
from cvforge.models import CvDocument, CvSnapshot, CvSnapshotHeader, JobApplication
from cvforge.schemas import SnapshotCreate, SnapshotForApplication, parse_payload
from cvforge.serializers import snapshot_to_dict
from cvforge.services.cv_service import composed_inclusions, lock_owner
from cvforge.services.ownership import get_owned_or_404
from cvforge.services.sections import SECTIONS

logger = logging.getLogger(__name__)

HEADER_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "location",
    "headline",
    "summary",
    "profile_picture_url",
    "linkedin_url",
    "github_url",
    "website_url",
)


def _copy_header(user):
    return CvSnapshotHeader(**{field: getattr(user, field) for field in HEADER_FIELDS})


def _copy_section(section, cv_id):
    rows = []
    for position, inclusion in enumerate(composed_inclusions(cv_id, section)):
        values = {field: copy.deepcopy(getattr(inclusion.item, field)) for field in section.copy_fields}
        rows.append(section.snapshot_model(order=inclusion.order, position=position, **values))
    return rows


class SnapshotService:

    @staticmethod
    def create_snapshot(user_id, cv_document_id, application_id=None):
        """Copy the CV and the owner's profile; replaces the application's previous snapshot.

        Returns the new snapshot id. Nothing is written unless every step succeeds.
        """
        try:
            owner = lock_owner(user_id)
            cv = get_owned_or_404(CvDocument, user_id, cv_document_id, "CV document")

            application = None
            if application_id:
                application = get_owned_or_404(JobApplication, user_id, application_id, "Application")
                previous = CvSnapshot.query.filter_by(application_id=application.id).first()
                if previous is not None:
                    db.session.delete(previous)
                    # the unique application_id must be free before the insert
                    db.session.flush()
                    logger.info(f"🔁 Replacing snapshot {previous.id} of application {application.id}")

            snapshot = CvSnapshot(
                user_id=user_id,
                source_cv_id=cv.id,
                application_id=application.id if application else None,
                title=f"Snapshot for {cv.title}" if application else cv.title,
                template=cv.template,
            )
            snapshot.header = _copy_header(owner)
            for section in SECTIONS.values():
                getattr(snapshot, section.collection).extend(_copy_section(section, cv.id))

            db.session.add(snapshot)
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            logger.warning(f"⚠️ Snapshot for application {application_id} lost a concurrent replace")
            raise Conflict("Another snapshot was created for this application at the same time") from e
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"✅ Snapshot {snapshot.id} created from CV {cv.id} for user {user_id}")
        return snapshot.id

    @staticmethod
    def create_from_payload(user_id, data):
        payload = parse_payload(SnapshotCreate, data)
        return SnapshotService.create_snapshot(user_id, payload.cv_document_id, payload.application_id)

    @staticmethod
    def create_for_application(user_id, application_id, data):
        payload = parse_payload(SnapshotForApplication, data)
        return SnapshotService.create_snapshot(user_id, payload.cv_document_id, application_id)

    @staticmethod
    def get_snapshot(user_id, snapshot_id):
        snapshot = get_owned_or_404(CvSnapshot, user_id, snapshot_id, "Snapshot")
        return snapshot_to_dict(snapshot)

    @staticmethod
    def _for_application(user_id, application_id):
        application = get_owned_or_404(JobApplication, user_id, application_id, "Application")
        snapshot = CvSnapshot.query.filter_by(application_id=application.id, user_id=user_id).first()
        if snapshot is None:
            raise NotFound("No snapshot found for this application")
        return snapshot

    @staticmethod
    def get_snapshot_for_application(user_id, application_id):
        return snapshot_to_dict(SnapshotService._for_application(user_id, application_id))

    @staticmethod
    def delete_snapshot(user_id, snapshot_id):
        snapshot = get_owned_or_404(CvSnapshot, user_id, snapshot_id, "Snapshot")
        SnapshotService._delete(snapshot)

    @staticmethod
    def delete_snapshot_for_application(user_id, application_id):
        SnapshotService._delete(SnapshotService._for_application(user_id, application_id))

    @staticmethod
    def _delete(snapshot):
        snapshot_id = snapshot.id
        try:
            db.session.delete(snapshot)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        logger.info(f"🗑️ Snapshot {snapshot_id} deleted")
