import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse, Response

from ..deps import get_orchestrator, get_session_store
from ..documents import DOCX_MEDIA_TYPE, document_filename, render_bullets_docx, render_cover_letter_docx
from ..orchestrator import GenerationOrchestrator
from ..resume import get_resume_text, load_resume_profile
from ..schemas import GenerateRequest, GenerationResult, SessionOut
from ..sessions import GenerationSession, SessionStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["generate"])


def _get_session(store: SessionStore, session_id: str) -> GenerationSession:
    session = store.get(session_id)
    if session is None:
        raise HTTPException(404, "Session not found")
    return session


@router.post("/generate", response_model=GenerationResult, response_model_exclude_none=True)
async def generate(body: GenerateRequest, orchestrator: GenerationOrchestrator = Depends(get_orchestrator)):
    if not orchestrator.ai_service.is_configured:
        raise HTTPException(500, "Server API key not configured. Please set OPENAI_API_KEY environment variable.")
    if not (body.job_description or "").strip():
        raise HTTPException(400, "Job description is required")

    resume_text = body.resume_text or get_resume_text()
    result = await orchestrator.generate(
        resume_text, body.job_description, body.company_info, body.role_title, body.company_name
    )
    if not result.success:
        return JSONResponse(status_code=500, content=result.model_dump(by_alias=True, exclude_none=True))
    return result


@router.get("/session/{session_id}", response_model=SessionOut)
def get_session(session_id: str, store: SessionStore = Depends(get_session_store)):
    session = _get_session(store, session_id)
    return SessionOut(
        id=session.id,
        cover_letter=session.cover_letter,
        bullets=session.bullets,
        role_title=session.role_title,
        company_name=session.company_name,
        created_at=session.created_at,
    )


def _docx_response(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type=DOCX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/download/cover-letter/{session_id}")
def download_cover_letter(session_id: str, store: SessionStore = Depends(get_session_store)):
    session = _get_session(store, session_id)
    candidate = load_resume_profile().name
    try:
        content = render_cover_letter_docx(session.cover_letter, candidate, session.role_title, session.company_name)
    except Exception as e:
        logger.error(f"DOCX generation error for session {session_id}: {e}")
        raise HTTPException(500, "Failed to generate document")
    return _docx_response(content, document_filename("cover-letter", session.company_name, candidate))


@router.get("/download/bullets/{session_id}")
def download_bullets(session_id: str, store: SessionStore = Depends(get_session_store)):
    session = _get_session(store, session_id)
    candidate = load_resume_profile().name
    try:
        content = render_bullets_docx(session.bullets, session.role_title, session.company_name)
    except Exception as e:
        logger.error(f"DOCX generation error for session {session_id}: {e}")
        raise HTTPException(500, "Failed to generate document")
    return _docx_response(content, document_filename("bullets", session.company_name, candidate))
