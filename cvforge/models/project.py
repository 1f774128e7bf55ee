from cvforge.extensions import db
from datetime import datetime
import uuid


class LibraryProject(db.Model):
    __tablename__ = "library_projects"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text)
    link = db.Column(db.String(300))
    # ordered technology tags
    tech = db.Column(db.JSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    inclusions = db.relationship("CvProjectInclusion", back_populates="item", cascade="all, delete-orphan")
