"""Binds each CV section key to its library, inclusion and snapshot models."""
from dataclasses import dataclass
from typing import Callable, Tuple, Type

from cvforge.errors import NotFound
from cvforge.models import (
    CvEducationInclusion,
    CvProjectInclusion,
    CvSkillInclusion,
    CvSnapshotEducation,
    CvSnapshotProject,
    CvSnapshotSkill,
    CvSnapshotWorkExperience,
    CvWorkInclusion,
    LibraryEducation,
    LibraryProject,
    LibrarySkill,
    LibraryWorkExperience,
)
from cvforge.schemas import (
    EducationCreate,
    EducationUpdate,
    ProjectCreate,
    ProjectUpdate,
    SkillCreate,
    SkillUpdate,
    WorkExperienceCreate,
    WorkExperienceUpdate,
)
from cvforge import serializers


@dataclass(frozen=True)
class Section:
    key: str
    label: str
    collection: str
    item_model: Type
    inclusion_model: Type
    item_fk: str
    snapshot_model: Type
    # library columns copied by value into the snapshot row
    copy_fields: Tuple[str, ...]
    create_schema: Type
    update_schema: Type
    serialize: Callable

    @property
    def item_fk_column(self):
        return getattr(self.inclusion_model, self.item_fk)


SECTIONS = {
    "work": Section(
        key="work",
        label="Work experience",
        collection="work_experiences",
        item_model=LibraryWorkExperience,
        inclusion_model=CvWorkInclusion,
        item_fk="work_experience_id",
        snapshot_model=CvSnapshotWorkExperience,
        copy_fields=("company", "role", "location", "start_date", "end_date", "is_current", "description"),
        create_schema=WorkExperienceCreate,
        update_schema=WorkExperienceUpdate,
        serialize=serializers.work_experience_to_dict,
    ),
    "education": Section(
        key="education",
        label="Education",
        collection="educations",
        item_model=LibraryEducation,
        inclusion_model=CvEducationInclusion,
        item_fk="education_id",
        snapshot_model=CvSnapshotEducation,
        copy_fields=("school", "degree", "field", "start_date", "end_date", "description"),
        create_schema=EducationCreate,
        update_schema=EducationUpdate,
        serialize=serializers.education_to_dict,
    ),
    "skills": Section(
        key="skills",
        label="Skill",
        collection="skills",
        item_model=LibrarySkill,
        inclusion_model=CvSkillInclusion,
        item_fk="skill_id",
        snapshot_model=CvSnapshotSkill,
        copy_fields=("name", "level", "category"),
        create_schema=SkillCreate,
        update_schema=SkillUpdate,
        serialize=serializers.skill_to_dict,
    ),
    "projects": Section(
        key="projects",
        label="Project",
        collection="projects",
        item_model=LibraryProject,
        inclusion_model=CvProjectInclusion,
        item_fk="project_id",
        snapshot_model=CvSnapshotProject,
        copy_fields=("name", "description", "link", "tech"),
        create_schema=ProjectCreate,
        update_schema=ProjectUpdate,
        serialize=serializers.project_to_dict,
    ),
}

SECTION_KEYS = tuple(SECTIONS)


def get_section(key):
    section = SECTIONS.get(key)
    if section is None:
        raise NotFound(f"Unknown CV section '{key}'")
    return section
