"""
Runs cover letter and resume bullet generation side by side.
Only a result where both calls succeed is usable.
"""
import asyncio
import logging
from typing import Optional

from .ai_services import AIService
from .schemas import GenerationResult
from .sessions import GenerationSession, SessionStore

logger = logging.getLogger(__name__)

COVER_LETTER = "Cover letter"
RESUME_BULLETS = "Resume bullets"

DASH_REPLACEMENTS = (
    ("—", ","),  # em dash
    ("–", "-"),  # en dash
)


def normalize_dashes(text: str) -> str:
    for dash, replacement in DASH_REPLACEMENTS:
        text = text.replace(dash, replacement)
    return text


class GenerationOrchestrator:
    def __init__(self, ai_service: AIService, store: Optional[SessionStore] = None):
        self.ai_service = ai_service
        self.store = store

    async def generate(self, resume_text: str, job_text: str, company_text: Optional[str],
                       role_title: Optional[str], company_name: Optional[str]) -> GenerationResult:
        """Generate both documents concurrently and wait for both to settle.

        On success the pair is stored (when a store is attached) and the new
        session id is returned with the texts.
        """
        context = (resume_text, job_text, company_text, role_title, company_name)
        cover_letter, bullets = await asyncio.gather(
            self.ai_service.generate_cover_letter(*context),
            self.ai_service.generate_resume_bullets(*context),
            return_exceptions=True,
        )

        errors = []
        for label, outcome in ((COVER_LETTER, cover_letter), (RESUME_BULLETS, bullets)):
            if isinstance(outcome, Exception):
                message = f"{label} generation failed: {str(outcome) or outcome.__class__.__name__}"
                logger.error(message)
                errors.append(message)
            elif isinstance(outcome, BaseException):
                raise outcome
        if errors:
            return GenerationResult(success=False, error="; ".join(errors))

        cover_letter = normalize_dashes(cover_letter)
        bullets = normalize_dashes(bullets)

        session_id = None
        if self.store is not None:
            session_id = self.store.put(GenerationSession(
                cover_letter=cover_letter,
                bullets=bullets,
                role_title=role_title,
                company_name=company_name,
            ))
            logger.info(f"Stored generation session {session_id}")

        return GenerationResult(success=True, cover_letter=cover_letter, bullets=bullets, session_id=session_id)
