# cvforge/services/cv_service.py
import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import joinedload

from cvforge.errors import Conflict, NotFound, ValidationError
from cvforge.extensions import db
from cvforge.models import CvDocument, User
from cvforge.schemas import CvCreate, CvUpdate, InclusionCreate, InclusionReorder, parse_payload
from cvforge.serializers import cv_summary_to_dict, cv_to_dict, inclusion_to_dict
from cvforge.services.ownership import get_owned_or_404
from cvforge.services.sections import SECTIONS, get_section

logger = logging.getLogger(__name__)


def lock_owner(user_id):
    """Serialize default-flag changes per user (row lock where the database has one)."""
    owner = User.query.filter_by(id=user_id).with_for_update().first()
    if owner is None:
        raise NotFound("User not found")
    return owner


def composed_inclusions(cv_id, section):
    """Inclusions of one section in display order.

    Sorted by ``order``; equal values fall back to when the link was
    created, then to the link id, so the result never depends on storage order.
    """
    model = section.inclusion_model
    return (
        model.query
        .options(joinedload(model.item))
        .filter(model.cv_id == cv_id)
        .order_by(model.order.asc(), model.created_at.asc(), model.id.asc())
        .all()
    )


def find_link(section, cv_id, item_id):
    model = section.inclusion_model
    return model.query.filter(model.cv_id == cv_id, section.item_fk_column == str(item_id)).first()


def _clear_defaults(user_id, except_id=None):
    query = CvDocument.query.filter(CvDocument.user_id == user_id, CvDocument.is_default.is_(True))
    if except_id:
        query = query.filter(CvDocument.id != except_id)
    query.update({"is_default": False}, synchronize_session="fetch")


def _touch(cv):
    cv.updated_at = datetime.utcnow()


class CvService:

    @staticmethod
    def list_cvs(user_id):
        cvs = (
            CvDocument.query
            .filter_by(user_id=user_id)
            .order_by(CvDocument.is_default.desc(), CvDocument.updated_at.desc())
            .all()
        )
        return [cv_summary_to_dict(cv) for cv in cvs]

    @staticmethod
    def create_cv(user_id, data):
        """The first CV of a user becomes the default automatically."""
        payload = parse_payload(CvCreate, data if data is not None else {})

        try:
            lock_owner(user_id)
            existing_count = CvDocument.query.filter_by(user_id=user_id).count()
            make_default = existing_count == 0 or payload.is_default
            if make_default and existing_count:
                _clear_defaults(user_id)

            cv = CvDocument(
                user_id=user_id,
                title=payload.title or "Main CV",
                template=payload.template,
                is_default=make_default,
            )
            db.session.add(cv)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"✅ CV {cv.id} created for user {user_id} (default={cv.is_default})")
        return cv_to_dict(cv)

    @staticmethod
    def get_composed_cv(user_id, cv_id):
        cv = get_owned_or_404(CvDocument, user_id, cv_id, "CV")
        result = cv_to_dict(cv)
        for section in SECTIONS.values():
            result[section.collection] = [
                inclusion_to_dict(section, inclusion)
                for inclusion in composed_inclusions(cv.id, section)
            ]
        return result

    @staticmethod
    def update_cv(user_id, cv_id, data):
        """Partial update. Becoming default clears every other default in the same transaction."""
        payload = parse_payload(CvUpdate, data)
        changes = payload.changes()

        try:
            lock_owner(user_id)
            cv = get_owned_or_404(CvDocument, user_id, cv_id, "CV")

            if changes.get("is_default") is True:
                _clear_defaults(user_id, except_id=cv.id)
            elif changes.get("is_default") is False and cv.is_default:
                raise ValidationError(
                    "A default CV is required; mark another CV as default instead",
                    details=[{"field": "is_default", "message": "cannot unset the current default"}],
                )

            for field, value in changes.items():
                setattr(cv, field, value)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"✅ CV {cv.id} updated ({', '.join(sorted(changes)) or 'no changes'})")
        return cv_to_dict(cv)

    @staticmethod
    def delete_cv(user_id, cv_id):
        """Remove the CV and its inclusions; library items and snapshots stay."""
        try:
            lock_owner(user_id)
            cv = get_owned_or_404(CvDocument, user_id, cv_id, "CV")
            was_default = cv.is_default

            db.session.delete(cv)
            db.session.flush()

            if was_default:
                successor = (
                    CvDocument.query
                    .filter_by(user_id=user_id)
                    .order_by(CvDocument.updated_at.desc(), CvDocument.created_at.desc(), CvDocument.id.asc())
                    .first()
                )
                if successor is not None:
                    successor.is_default = True
                    logger.info(f"🔁 CV {successor.id} promoted to default")

            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"🗑️ CV {cv_id} deleted for user {user_id}")

    # ============ Inclusions ============

    @staticmethod
    def add_inclusion(user_id, cv_id, section_key, data):
        section = get_section(section_key)
        payload = parse_payload(InclusionCreate, data)

        cv = get_owned_or_404(CvDocument, user_id, cv_id, "CV")
        item = get_owned_or_404(section.item_model, user_id, payload.item_id, section.label)

        if find_link(section, cv.id, item.id) is not None:
            raise Conflict(f"This {section.label.lower()} is already in this CV")

        inclusion = section.inclusion_model(cv_id=cv.id, order=payload.order, **{section.item_fk: item.id})
        try:
            db.session.add(inclusion)
            _touch(cv)
            db.session.commit()
        except IntegrityError as e:
            # lost a race against an identical insert
            db.session.rollback()
            raise Conflict(f"This {section.label.lower()} is already in this CV") from e
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"✅ {section.label} {item.id} added to CV {cv.id} at order {inclusion.order}")
        return inclusion_to_dict(section, inclusion)

    @staticmethod
    def _find_inclusion(cv, section, item_id):
        inclusion = find_link(section, cv.id, item_id)
        if inclusion is None:
            raise NotFound(f"{section.label} not in this CV")
        return inclusion

    @staticmethod
    def remove_inclusion(user_id, cv_id, section_key, item_id):
        section = get_section(section_key)
        cv = get_owned_or_404(CvDocument, user_id, cv_id, "CV")
        inclusion = CvService._find_inclusion(cv, section, item_id)

        try:
            db.session.delete(inclusion)
            _touch(cv)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"🗑️ {section.label} {item_id} removed from CV {cv.id}")

    @staticmethod
    def reorder_inclusion(user_id, cv_id, section_key, item_id, data):
        section = get_section(section_key)
        payload = parse_payload(InclusionReorder, data)
        cv = get_owned_or_404(CvDocument, user_id, cv_id, "CV")
        inclusion = CvService._find_inclusion(cv, section, item_id)

        try:
            inclusion.order = payload.order
            _touch(cv)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        return inclusion_to_dict(section, inclusion)
