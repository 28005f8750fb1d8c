from app.domain.resume.schemas.base import (
    AIFeedback,
    EnhanceOutcome,
    RewriteRequest,
    RewriteState,
)
from app.domain.resume.schemas.document import (
    ENTRY_MODELS,
    IDENTIFIED_COLLECTIONS,
    SCALAR_COLLECTIONS,
    CustomSection,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    Resume,
    WebsiteEntry,
)

__all__ = [
    "Resume",
    "ExperienceEntry",
    "EducationEntry",
    "WebsiteEntry",
    "ProjectEntry",
    "CustomSection",
    "IDENTIFIED_COLLECTIONS",
    "SCALAR_COLLECTIONS",
    "ENTRY_MODELS",
    "AIFeedback",
    "RewriteRequest",
    "EnhanceOutcome",
    "RewriteState",
]
