# cvforge/services/application_service.py
import logging
import math

from sqlalchemy import or_

from cvforge.extensions import db
from cvforge.models import JobApplication
from cvforge.schemas import ApplicationCreate, ApplicationListQuery, ApplicationUpdate, parse_payload
from cvforge.serializers import application_to_dict
from cvforge.services.ownership import get_owned_or_404

logger = logging.getLogger(__name__)


class ApplicationService:

    @staticmethod
    def create_application(user_id, data):
        payload = parse_payload(ApplicationCreate, data)
        application = JobApplication(user_id=user_id, **payload.model_dump())
        try:
            db.session.add(application)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"✅ Application {application.id} created for user {user_id}")
        return application_to_dict(application)

    @staticmethod
    def list_applications(user_id, args):
        """Filtered, searched and paginated listing. Returns (items, pagination)."""
        query_args = parse_payload(ApplicationListQuery, args, "Invalid query parameters")

        query = JobApplication.query.filter(JobApplication.user_id == user_id)
        if query_args.status:
            query = query.filter(JobApplication.status.in_(query_args.status))
        if query_args.term:
            pattern = f"%{query_args.term.lower()}%"
            query = query.filter(or_(
                db.func.lower(JobApplication.company).like(pattern),
                db.func.lower(JobApplication.position).like(pattern),
            ))

        total = query.count()

        sort_column = getattr(JobApplication, query_args.sort_field)
        direction = sort_column.asc() if query_args.order == "asc" else sort_column.desc()
        applications = (
            query
            .order_by(direction, JobApplication.id.asc())
            .offset((query_args.page - 1) * query_args.page_size)
            .limit(query_args.page_size)
            .all()
        )

        pagination = {
            "page": query_args.page,
            "page_size": query_args.page_size,
            "total_count": total,
            "total_pages": math.ceil(total / query_args.page_size),
        }
        return [application_to_dict(a) for a in applications], pagination

    @staticmethod
    def get_application(user_id, application_id):
        application = get_owned_or_404(JobApplication, user_id, application_id, "Application")
        return application_to_dict(application)

    @staticmethod
    def update_application(user_id, application_id, data):
        payload = parse_payload(ApplicationUpdate, data)
        application = get_owned_or_404(JobApplication, user_id, application_id, "Application")

        try:
            for field, value in payload.changes().items():
                setattr(application, field, value)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        return application_to_dict(application)

    @staticmethod
    def delete_application(user_id, application_id):
        """Its snapshot, if any, goes with it."""
        application = get_owned_or_404(JobApplication, user_id, application_id, "Application")
        try:
            db.session.delete(application)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"🗑️ Application {application_id} deleted for user {user_id}")
