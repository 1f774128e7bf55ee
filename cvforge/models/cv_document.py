from cvforge.extensions import db
from datetime import datetime
import uuid

CV_TEMPLATES = ("clean_navy",)


class CvDocument(db.Model):
    __tablename__ = "cv_documents"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = db.Column(db.String(120), nullable=False, default="Main CV")
    template = db.Column(db.Enum(*CV_TEMPLATES, name="cv_template"), nullable=False, default="clean_navy")
    is_default = db.Column(db.Boolean, nullable=False, default=False)
    # replaces the profile summary on this CV only
    override_summary = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="cv_documents")
    work_inclusions = db.relationship("CvWorkInclusion", back_populates="cv", cascade="all, delete-orphan")
    education_inclusions = db.relationship("CvEducationInclusion", back_populates="cv", cascade="all, delete-orphan")
    skill_inclusions = db.relationship("CvSkillInclusion", back_populates="cv", cascade="all, delete-orphan")
    project_inclusions = db.relationship("CvProjectInclusion", back_populates="cv", cascade="all, delete-orphan")
