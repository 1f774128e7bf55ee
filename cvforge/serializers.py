# ==================== HELPER FUNCTIONS ====================
# ORM row -> JSON-ready dict


def _iso(value):
    return value.isoformat() if value else None


def user_to_profile_dict(user):
    return {
        "id": user.id,
        "email": user.email,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "phone": user.phone,
        "location": user.location,
        "headline": user.headline,
        "summary": user.summary,
        "profile_picture_url": user.profile_picture_url,
        "linkedin_url": user.linkedin_url,
        "github_url": user.github_url,
        "website_url": user.website_url,
        "created_at": _iso(user.created_at),
        "updated_at": _iso(user.updated_at),
    }


def work_experience_to_dict(item):
    return {
        "id": item.id,
        "user_id": item.user_id,
        "company": item.company,
        "role": item.role,
        "location": item.location,
        "start_date": _iso(item.start_date),
        "end_date": _iso(item.end_date),
        "is_current": bool(item.is_current),
        "description": item.description,
        "created_at": _iso(item.created_at),
        "updated_at": _iso(item.updated_at),
    }


def education_to_dict(item):
    return {
        "id": item.id,
        "user_id": item.user_id,
        "school": item.school,
        "degree": item.degree,
        "field": item.field,
        "start_date": _iso(item.start_date),
        "end_date": _iso(item.end_date),
        "description": item.description,
        "created_at": _iso(item.created_at),
        "updated_at": _iso(item.updated_at),
    }


def skill_to_dict(item):
    return {
        "id": item.id,
        "user_id": item.user_id,
        "name": item.name,
        "level": item.level,
        "category": item.category,
        "created_at": _iso(item.created_at),
        "updated_at": _iso(item.updated_at),
    }


def project_to_dict(item):
    return {
        "id": item.id,
        "user_id": item.user_id,
        "name": item.name,
        "description": item.description,
        "link": item.link,
        "tech": list(item.tech or []),
        "created_at": _iso(item.created_at),
        "updated_at": _iso(item.updated_at),
    }


def cv_summary_to_dict(cv):
    return {
        "id": cv.id,
        "title": cv.title,
        "template": cv.template,
        "is_default": bool(cv.is_default),
        "updated_at": _iso(cv.updated_at),
    }


def cv_to_dict(cv):
    return {
        "id": cv.id,
        "user_id": cv.user_id,
        "title": cv.title,
        "template": cv.template,
        "is_default": bool(cv.is_default),
        "override_summary": cv.override_summary,
        "created_at": _iso(cv.created_at),
        "updated_at": _iso(cv.updated_at),
    }


def inclusion_to_dict(section, inclusion):
    """Library item flattened with the link that places it in the CV."""
    data = section.serialize(inclusion.item)
    data["inclusion_id"] = inclusion.id
    data["order"] = inclusion.order
    return data


def application_to_dict(application):
    return {
        "id": application.id,
        "user_id": application.user_id,
        "company": application.company,
        "position": application.position,
        "link": application.link,
        "status": application.status,
        "applied_at": _iso(application.applied_at),
        "last_contact_at": _iso(application.last_contact_at),
        "notes": application.notes,
        "has_snapshot": application.snapshot is not None,
        "created_at": _iso(application.created_at),
        "updated_at": _iso(application.updated_at),
    }


# ==================== SNAPSHOT ====================

def snapshot_header_to_dict(header):
    if header is None:
        return None
    return {
        "first_name": header.first_name,
        "last_name": header.last_name,
        "email": header.email,
        "phone": header.phone,
        "location": header.location,
        "headline": header.headline,
        "summary": header.summary,
        "profile_picture_url": header.profile_picture_url,
        "linkedin_url": header.linkedin_url,
        "github_url": header.github_url,
        "website_url": header.website_url,
    }


def snapshot_work_experience_to_dict(row):
    return {
        "id": row.id,
        "company": row.company,
        "role": row.role,
        "location": row.location,
        "start_date": _iso(row.start_date),
        "end_date": _iso(row.end_date),
        "is_current": bool(row.is_current),
        "description": row.description,
        "order": row.order,
    }


def snapshot_education_to_dict(row):
    return {
        "id": row.id,
        "school": row.school,
        "degree": row.degree,
        "field": row.field,
        "start_date": _iso(row.start_date),
        "end_date": _iso(row.end_date),
        "description": row.description,
        "order": row.order,
    }


def snapshot_skill_to_dict(row):
    return {
        "id": row.id,
        "name": row.name,
        "level": row.level,
        "category": row.category,
        "order": row.order,
    }


def snapshot_project_to_dict(row):
    return {
        "id": row.id,
        "name": row.name,
        "description": row.description,
        "link": row.link,
        "tech": list(row.tech or []),
        "order": row.order,
    }


def snapshot_to_dict(snapshot):
    return {
        "id": snapshot.id,
        "user_id": snapshot.user_id,
        "source_cv_id": snapshot.source_cv_id,
        "application_id": snapshot.application_id,
        "title": snapshot.title,
        "template": snapshot.template,
        "created_at": _iso(snapshot.created_at),
        "header": snapshot_header_to_dict(snapshot.header),
        "work_experiences": [snapshot_work_experience_to_dict(r) for r in snapshot.work_experiences],
        "educations": [snapshot_education_to_dict(r) for r in snapshot.educations],
        "skills": [snapshot_skill_to_dict(r) for r in snapshot.skills],
        "projects": [snapshot_project_to_dict(r) for r in snapshot.projects],
    }
