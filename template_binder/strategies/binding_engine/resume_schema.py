"""Built-in resume data schema.

Describes the data collected by the resume wizard. Used as the default
schema for binding suggestions when a request does not supply one.
"""

import copy
from typing import Any

_ACHIEVEMENT = {
    "type": "object",
    "properties": {
        "id": {"type": "string", "description": "Unique identifier"},
        "type": {"type": "string", "description": "Achievement type"},
        "title": {"type": "string", "description": "Achievement title"},
        "description": {"type": "string", "description": "Achievement description"},
    },
}

_WORK_EXPERIENCE = {
    "type": "object",
    "properties": {
        "id": {"type": "string", "description": "Unique identifier"},
        "jobTitle": {"type": "string", "description": "Job title"},
        "employer": {"type": "string", "description": "Employer name"},
        "location": {"type": "string", "description": "Job location"},
        "isRemote": {"type": "boolean", "description": "Remote work status"},
        "startMonth": {"type": "string", "description": "Start month"},
        "startYear": {"type": "string", "description": "Start year"},
        "endMonth": {"type": "string", "description": "End month"},
        "endYear": {"type": "string", "description": "End year"},
        "isCurrentJob": {"type": "boolean", "description": "Current job status"},
        "responsibilities": {
            "type": "string",
            "description": "Job responsibilities and achievements",
        },
    },
}

_EDUCATION = {
    "type": "object",
    "properties": {
        "id": {"type": "string", "description": "Unique identifier"},
        "schoolName": {"type": "string", "description": "Institution name"},
        "schoolLocation": {"type": "string", "description": "School location"},
        "degree": {"type": "string", "description": "Degree obtained"},
        "fieldOfStudy": {"type": "string", "description": "Field of study"},
        "graduationMonth": {"type": "string", "description": "Graduation month"},
        "graduationYear": {"type": "string", "description": "Graduation year"},
        "description": {"type": "string", "description": "Education description"},
        "achievements": {
            "type": "array",
            "items": _ACHIEVEMENT,
            "description": "Educational achievements",
        },
    },
}

RESUME_SCHEMA: dict[str, Any] = {
    "firstName": {"type": "string", "description": "First name"},
    "surname": {"type": "string", "description": "Last name"},
    "profession": {"type": "string", "description": "Professional title"},
    "city": {"type": "string", "description": "City"},
    "country": {"type": "string", "description": "Country"},
    "postalCode": {"type": "string", "description": "Postal code"},
    "phone": {"type": "string", "description": "Phone number"},
    "email": {"type": "string", "description": "Email address"},
    "photo": {"type": "string", "description": "Profile photo URL", "nullable": True},
    "summary": {"type": "string", "description": "Brief professional summary"},
    "professionalSummary": {
        "type": "string",
        "description": "Detailed professional summary",
    },
    "skills": {
        "type": "array",
        "items": {"type": "string"},
        "description": "List of professional skills",
    },
    "workExperience": {
        "type": "array",
        "items": _WORK_EXPERIENCE,
        "description": "Work experience history",
    },
    "education": {
        "type": "array",
        "items": _EDUCATION,
        "description": "Education history",
    },
    "certifications": {
        "type": "array",
        "items": {"type": "object"},
        "description": "Professional certifications",
    },
    "languages": {
        "type": "array",
        "items": {"type": "object"},
        "description": "Language proficiencies",
    },
    "selectedTemplateId": {
        "type": "number",
        "description": "Selected resume template ID",
    },
}


def get_resume_schema() -> dict[str, Any]:
    """Return a copy of the built-in resume schema."""
    return copy.deepcopy(RESUME_SCHEMA)
