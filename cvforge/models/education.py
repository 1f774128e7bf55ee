from cvforge.extensions import db
from datetime import datetime
import uuid


class LibraryEducation(db.Model):
    __tablename__ = "library_educations"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    school = db.Column(db.String(200), nullable=False)
    degree = db.Column(db.String(200))
    field = db.Column(db.String(200))
    start_date = db.Column(db.Date)
    end_date = db.Column(db.Date)
    description = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    inclusions = db.relationship("CvEducationInclusion", back_populates="item", cascade="all, delete-orphan")
