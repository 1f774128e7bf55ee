from .user import User
from .work_experience import LibraryWorkExperience
from .education import LibraryEducation
from .skill import LibrarySkill
from .project import LibraryProject
from .cv_document import CvDocument
from .inclusions import CvWorkInclusion, CvEducationInclusion, CvSkillInclusion, CvProjectInclusion
from .job_application import JobApplication
from .snapshot import (
    CvSnapshot,
    CvSnapshotHeader,
    CvSnapshotWorkExperience,
    CvSnapshotEducation,
    CvSnapshotSkill,
    CvSnapshotProject,
)

__all__ = [
    "User",
    "LibraryWorkExperience",
    "LibraryEducation",
    "LibrarySkill",
    "LibraryProject",
    "CvDocument",
    "CvWorkInclusion",
    "CvEducationInclusion",
    "CvSkillInclusion",
    "CvProjectInclusion",
    "JobApplication",
    "CvSnapshot",
    "CvSnapshotHeader",
    "CvSnapshotWorkExperience",
    "CvSnapshotEducation",
    "CvSnapshotSkill",
    "CvSnapshotProject",
]
