# cvforge/services/profile_service.py
import logging

from cvforge.errors import NotFound
from cvforge.extensions import db
from cvforge.models import User
from cvforge.schemas import ProfileUpdate, parse_payload
from cvforge.serializers import user_to_profile_dict

logger = logging.getLogger(__name__)


def _get_user(user_id):
    user = db.session.get(User, user_id) if user_id else None
    if user is None:
        raise NotFound("User not found")
    return user


def get_profile(user_id):
    return user_to_profile_dict(_get_user(user_id))


def update_profile(user_id, data):
    payload = parse_payload(ProfileUpdate, data)
    user = _get_user(user_id)

    changes = payload.changes()
    try:
        for field, value in changes.items():
            # stripped empty strings clear the field
            setattr(user, field, value or None)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info(f"✅ Profile of user {user_id} updated ({len(changes)} field(s))")
    return user_to_profile_dict(user)
