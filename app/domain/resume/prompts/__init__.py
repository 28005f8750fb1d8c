from app.domain.resume.prompts.feedback import (
    NO_REFERENCE_JUSTIFICATION,
    RESUME_FEEDBACK_HUMAN,
    RESUME_FEEDBACK_SYSTEM,
)
from app.domain.resume.prompts.rewrite import (
    RESUME_REWRITER_HUMAN,
    RESUME_REWRITER_REFERENCE_HUMAN,
    RESUME_REWRITER_SYSTEM,
)
from app.domain.resume.prompts.structuring import (
    RESUME_STRUCTURER_HUMAN,
    RESUME_STRUCTURER_SYSTEM,
)

__all__ = [
    "RESUME_STRUCTURER_SYSTEM",
    "RESUME_STRUCTURER_HUMAN",
    "RESUME_REWRITER_SYSTEM",
    "RESUME_REWRITER_HUMAN",
    "RESUME_REWRITER_REFERENCE_HUMAN",
    "RESUME_FEEDBACK_SYSTEM",
    "RESUME_FEEDBACK_HUMAN",
    "NO_REFERENCE_JUSTIFICATION",
]
