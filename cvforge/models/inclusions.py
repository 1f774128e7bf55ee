"""Join rows placing a library item inside a CV.

One table per library kind. ``order`` is only compared, never renumbered,
so gaps and duplicates between different items are allowed.
"""
from cvforge.extensions import db
from datetime import datetime
import uuid


class CvWorkInclusion(db.Model):
    __tablename__ = "cv_work_inclusions"
    __table_args__ = (db.UniqueConstraint("cv_id", "work_experience_id", name="uq_cv_work_inclusion"),)

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    cv_id = db.Column(db.String(36), db.ForeignKey("cv_documents.id", ondelete="CASCADE"), nullable=False, index=True)
    work_experience_id = db.Column(
        db.String(36), db.ForeignKey("library_work_experiences.id", ondelete="CASCADE"), nullable=False, index=True
    )
    order = db.Column("order", db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    cv = db.relationship("CvDocument", back_populates="work_inclusions")
    item = db.relationship("LibraryWorkExperience", back_populates="inclusions")


class CvEducationInclusion(db.Model):
    __tablename__ = "cv_education_inclusions"
    __table_args__ = (db.UniqueConstraint("cv_id", "education_id", name="uq_cv_education_inclusion"),)

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    cv_id = db.Column(db.String(36), db.ForeignKey("cv_documents.id", ondelete="CASCADE"), nullable=False, index=True)
    education_id = db.Column(
        db.String(36), db.ForeignKey("library_educations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    order = db.Column("order", db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    cv = db.relationship("CvDocument", back_populates="education_inclusions")
    item = db.relationship("LibraryEducation", back_populates="inclusions")


class CvSkillInclusion(db.Model):
    __tablename__ = "cv_skill_inclusions"
    __table_args__ = (db.UniqueConstraint("cv_id", "skill_id", name="uq_cv_skill_inclusion"),)

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    cv_id = db.Column(db.String(36), db.ForeignKey("cv_documents.id", ondelete="CASCADE"), nullable=False, index=True)
    skill_id = db.Column(
        db.String(36), db.ForeignKey("library_skills.id", ondelete="CASCADE"), nullable=False, index=True
    )
    order = db.Column("order", db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    cv = db.relationship("CvDocument", back_populates="skill_inclusions")
    item = db.relationship("LibrarySkill", back_populates="inclusions")


class CvProjectInclusion(db.Model):
    __tablename__ = "cv_project_inclusions"
    __table_args__ = (db.UniqueConstraint("cv_id", "project_id", name="uq_cv_project_inclusion"),)

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    cv_id = db.Column(db.String(36), db.ForeignKey("cv_documents.id", ondelete="CASCADE"), nullable=False, index=True)
    project_id = db.Column(
        db.String(36), db.ForeignKey("library_projects.id", ondelete="CASCADE"), nullable=False, index=True
    )
    order = db.Column("order", db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    cv = db.relationship("CvDocument", back_populates="project_inclusions")
    item = db.relationship("LibraryProject", back_populates="inclusions")
