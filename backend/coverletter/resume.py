import os
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from .schemas import ResumeProfile

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_PATH = Path(__file__).resolve().parent / "data" / "resume_profile.json"


@lru_cache(maxsize=4)
def _load(path: str) -> ResumeProfile:
    logger.info(f"Loading candidate profile from {path}")
    return ResumeProfile.model_validate_json(Path(path).read_text(encoding="utf-8"))


def load_resume_profile(path: Optional[str] = None) -> ResumeProfile:
    """Candidate profile from RESUME_PROFILE_PATH, or the bundled sample."""
    return _load(str(path or os.getenv("RESUME_PROFILE_PATH") or DEFAULT_PROFILE_PATH))


def format_resume_text(profile: ResumeProfile) -> str:
    """Render the profile as the plain resume text fed into prompts."""
    contact = [c for c in (profile.contact.email, profile.contact.phone, profile.contact.linkedin) if c]
    lines = [f"# {profile.name}", " | ".join(contact), ""]

    lines.append("## Education")
    for edu in profile.education:
        parts = [f"**{edu.degree}**", edu.school, edu.location]
        if edu.gpa:
            parts.append(f"GPA: {edu.gpa}")
        parts.append(edu.date)
        lines.append(" | ".join(p for p in parts if p))
        if edu.details:
            lines.append(edu.details)
        lines.append("")

    lines.append("## Experience")
    for exp in profile.experience:
        lines.append(" | ".join(p for p in (f"**{exp.title}**", exp.company, exp.location, exp.dates) if p))
        lines.extend(f"- {b}" for b in exp.bullets)
        lines.append("")

    if profile.projects:
        lines.append("## Projects")
        for proj in profile.projects:
            lines.append(" | ".join(p for p in (f"**{proj.title}**", proj.organization, proj.location, proj.dates) if p))
            lines.extend(f"- {b}" for b in proj.bullets)
            lines.append("")

    if profile.skills:
        lines.append("## Skills")
        for category, skills in profile.skills.items():
            lines.append(f"**{category}:** {', '.join(skills)}")

    return "\n".join(lines).strip() + "\n"


def get_resume_text(path: Optional[str] = None) -> str:
    return format_resume_text(load_resume_profile(path))
