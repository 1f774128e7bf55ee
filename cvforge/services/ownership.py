"""Single ownership check shared by every entry point.

A row that exists but belongs to somebody else is reported exactly like a
row that does not exist, so callers can never probe for foreign ids.
"""
import logging
import uuid

from cvforge.errors import NotFound

logger = logging.getLogger(__name__)


def _is_uuid(value):
    try:
        uuid.UUID(str(value))
        return True
    except (ValueError, TypeError, AttributeError):
        return False


def get_owned_or_404(model, user_id, entity_id, label=None):
    label = label or model.__name__
    if not user_id or not entity_id or not _is_uuid(entity_id):
        raise NotFound(f"{label} not found")

    entity = model.query.filter_by(id=str(entity_id), user_id=str(user_id)).first()

    if entity is None:
        logger.debug(f"⚠️ {label} {entity_id} not visible to user {user_id}")
        raise NotFound(f"{label} not found")
    return entity
