"""Frozen copies of a composed CV.

Child rows are value copies: none of these tables references a library
table, and nothing updates them after the creating transaction commits.
"""
from cvforge.extensions import db
from datetime import datetime
import uuid


class CvSnapshot(db.Model):
    __tablename__ = "cv_snapshots"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    # historical only; the CV may be edited or deleted afterwards
    source_cv_id = db.Column(db.String(36), nullable=False)
    application_id = db.Column(
        db.String(36), db.ForeignKey("job_applications.id", ondelete="CASCADE"), unique=True, nullable=True
    )
    title = db.Column(db.String(255), nullable=False)
    template = db.Column(db.String(50), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    application = db.relationship("JobApplication", back_populates="snapshot")
    header = db.relationship(
        "CvSnapshotHeader", back_populates="snapshot", uselist=False, cascade="all, delete-orphan"
    )
    work_experiences = db.relationship(
        "CvSnapshotWorkExperience", back_populates="snapshot", cascade="all, delete-orphan",
        order_by=lambda: [CvSnapshotWorkExperience.order, CvSnapshotWorkExperience.position],
    )
    educations = db.relationship(
        "CvSnapshotEducation", back_populates="snapshot", cascade="all, delete-orphan",
        order_by=lambda: [CvSnapshotEducation.order, CvSnapshotEducation.position],
    )
    skills = db.relationship(
        "CvSnapshotSkill", back_populates="snapshot", cascade="all, delete-orphan",
        order_by=lambda: [CvSnapshotSkill.order, CvSnapshotSkill.position],
    )
    projects = db.relationship(
        "CvSnapshotProject", back_populates="snapshot", cascade="all, delete-orphan",
        order_by=lambda: [CvSnapshotProject.order, CvSnapshotProject.position],
    )


class CvSnapshotHeader(db.Model):
    __tablename__ = "cv_snapshot_headers"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    snapshot_id = db.Column(
        db.String(36), db.ForeignKey("cv_snapshots.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    first_name = db.Column(db.String(100))
    last_name = db.Column(db.String(100))
    email = db.Column(db.String(255))
    phone = db.Column(db.String(50))
    location = db.Column(db.String(120))
    headline = db.Column(db.String(160))
    summary = db.Column(db.Text)
    profile_picture_url = db.Column(db.String(500))
    linkedin_url = db.Column(db.String(300))
    github_url = db.Column(db.String(300))
    website_url = db.Column(db.String(300))

    snapshot = db.relationship("CvSnapshot", back_populates="header")


class CvSnapshotWorkExperience(db.Model):
    __tablename__ = "cv_snapshot_work_experiences"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    snapshot_id = db.Column(db.String(36), db.ForeignKey("cv_snapshots.id", ondelete="CASCADE"), nullable=False, index=True)
    company = db.Column(db.String(200), nullable=False)
    role = db.Column(db.String(200), nullable=False)
    location = db.Column(db.String(120))
    start_date = db.Column(db.Date)
    end_date = db.Column(db.Date)
    is_current = db.Column(db.Boolean, nullable=False, default=False)
    description = db.Column(db.Text)
    order = db.Column("order", db.Integer, nullable=False)
    # index in the composed sequence at copy time
    position = db.Column(db.Integer, nullable=False)

    snapshot = db.relationship("CvSnapshot", back_populates="work_experiences")


class CvSnapshotEducation(db.Model):
    __tablename__ = "cv_snapshot_educations"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    snapshot_id = db.Column(db.String(36), db.ForeignKey("cv_snapshots.id", ondelete="CASCADE"), nullable=False, index=True)
    school = db.Column(db.String(200), nullable=False)
    degree = db.Column(db.String(200))
    field = db.Column(db.String(200))
    start_date = db.Column(db.Date)
    end_date = db.Column(db.Date)
    description = db.Column(db.Text)
    order = db.Column("order", db.Integer, nullable=False)
    position = db.Column(db.Integer, nullable=False)

    snapshot = db.relationship("CvSnapshot", back_populates="educations")


class CvSnapshotSkill(db.Model):
    __tablename__ = "cv_snapshot_skills"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    snapshot_id = db.Column(db.String(36), db.ForeignKey("cv_snapshots.id", ondelete="CASCADE"), nullable=False, index=True)
    name = db.Column(db.String(80), nullable=False)
    level = db.Column(db.String(20))
    category = db.Column(db.String(80))
    order = db.Column("order", db.Integer, nullable=False)
    position = db.Column(db.Integer, nullable=False)

    snapshot = db.relationship("CvSnapshot", back_populates="skills")


class CvSnapshotProject(db.Model):
    __tablename__ = "cv_snapshot_projects"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    snapshot_id = db.Column(db.String(36), db.ForeignKey("cv_snapshots.id", ondelete="CASCADE"), nullable=False, index=True)
    name = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text)
    link = db.Column(db.String(300))
    tech = db.Column(db.JSON, nullable=False, default=list)
    order = db.Column("order", db.Integer, nullable=False)
    position = db.Column(db.Integer, nullable=False)

    snapshot = db.relationship("CvSnapshot", back_populates="projects")
