# cvforge/services/library_service.py
import logging

from cvforge.errors import ValidationError
from cvforge.extensions import db
from cvforge.schemas import parse_payload
from cvforge.services.ownership import get_owned_or_404
from cvforge.services.sections import get_section

logger = logging.getLogger(__name__)


class LibraryService:
    """CRUD for the four master kinds, always scoped to the acting user."""

    @staticmethod
    def list_items(user_id, section_key):
        section = get_section(section_key)
        model = section.item_model
        query = model.query.filter_by(user_id=user_id)

        if hasattr(model, "start_date"):
            # undated entries last, portable across MySQL and SQLite
            query = query.order_by(model.start_date.is_(None), model.start_date.desc(), model.created_at.desc())
        else:
            query = query.order_by(model.created_at.asc(), model.id.asc())

        return [section.serialize(item) for item in query.all()]

    @staticmethod
    def create_item(user_id, section_key, data):
        section = get_section(section_key)
        payload = parse_payload(section.create_schema, data)
        values = payload.model_dump()

        if values.get("is_current"):
            values["end_date"] = None

        item = section.item_model(user_id=user_id, **values)
        try:
            db.session.add(item)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"✅ {section.label} {item.id} created for user {user_id}")
        return section.serialize(item)

    @staticmethod
    def update_item(user_id, section_key, item_id, data):
        section = get_section(section_key)
        payload = parse_payload(section.update_schema, data)
        item = get_owned_or_404(section.item_model, user_id, item_id, section.label)

        changes = payload.changes()
        for field, value in changes.items():
            setattr(item, field, value)

        # rules that span fields are checked on the merged record
        if getattr(item, "is_current", False):
            item.end_date = None
        start = getattr(item, "start_date", None)
        end = getattr(item, "end_date", None)
        if start and end and end < start:
            db.session.rollback()
            raise ValidationError(
                "Invalid input data",
                details=[{"field": "end_date", "message": "End date must be after start date"}],
            )

        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"✅ {section.label} {item.id} updated ({', '.join(sorted(changes)) or 'no changes'})")
        return section.serialize(item)

    @staticmethod
    def delete_item(user_id, section_key, item_id):
        """Delete the item and every inclusion of it, across all of the user's CVs.

        Snapshots hold value copies and are not touched.
        """
        section = get_section(section_key)
        item = get_owned_or_404(section.item_model, user_id, item_id, section.label)

        try:
            removed = (
                section.inclusion_model.query
                .filter(section.item_fk_column == item.id)
                .delete(synchronize_session="fetch")
            )
            db.session.delete(item)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"🗑️ {section.label} {item_id} deleted, {removed} CV inclusion(s) removed")
