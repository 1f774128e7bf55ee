from .common import parse_payload
from .library import (
    WorkExperienceCreate,
    WorkExperienceUpdate,
    EducationCreate,
    EducationUpdate,
    SkillCreate,
    SkillUpdate,
    ProjectCreate,
    ProjectUpdate,
)
from .cv import CvCreate, CvUpdate, InclusionCreate, InclusionReorder
from .snapshots import SnapshotCreate, SnapshotForApplication
from .applications import ApplicationCreate, ApplicationUpdate, ApplicationListQuery
from .profile import ProfileUpdate
