from cvforge.extensions import db
from datetime import datetime
import uuid

SKILL_LEVELS = ("beginner", "intermediate", "advanced", "expert")


class LibrarySkill(db.Model):
    __tablename__ = "library_skills"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = db.Column(db.String(80), nullable=False)
    level = db.Column(db.Enum(*SKILL_LEVELS, name="skill_level"))
    category = db.Column(db.String(80))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    inclusions = db.relationship("CvSkillInclusion", back_populates="item", cascade="all, delete-orphan")
