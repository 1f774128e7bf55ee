from ..extensions import db
from datetime import datetime
import uuid


class User(db.Model):
    """Account row; also the profile store the snapshot header is copied from."""
    __tablename__ = "users"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = db.Column(db.String(255), unique=True, nullable=False)
    first_name = db.Column(db.String(100))
    last_name = db.Column(db.String(100))
    phone = db.Column(db.String(50))
    location = db.Column(db.String(120))
    headline = db.Column(db.String(160))
    summary = db.Column(db.Text)
    profile_picture_url = db.Column(db.String(500))
    linkedin_url = db.Column(db.String(300))
    github_url = db.Column(db.String(300))
    website_url = db.Column(db.String(300))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    cv_documents = db.relationship("CvDocument", back_populates="user", cascade="all, delete-orphan")
    applications = db.relationship("JobApplication", back_populates="user", cascade="all, delete-orphan")

    # for string representation
    def __repr__(self):
        return f"<User {self.email}>"
