from cvforge.extensions import db
from datetime import datetime
import uuid

APPLICATION_STATUSES = ("draft", "applied", "interview", "offer", "rejected")


class JobApplication(db.Model):
    __tablename__ = "job_applications"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    company = db.Column(db.String(200), nullable=False)
    position = db.Column(db.String(200), nullable=False)
    link = db.Column(db.String(500))
    status = db.Column(db.Enum(*APPLICATION_STATUSES, name="application_status"), nullable=False, default="applied")
    applied_at = db.Column(db.DateTime)
    last_contact_at = db.Column(db.DateTime)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="applications")
    # 0..1, owned through CvSnapshot.application_id
    snapshot = db.relationship("CvSnapshot", back_populates="application", uselist=False, cascade="all, delete-orphan")
