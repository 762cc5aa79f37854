from fastapi import Depends, Request

from .ai_services import AIService, get_ai_service
from .company import CompanySiteCrawler
from .orchestrator import GenerationOrchestrator
from .sessions import SessionStore


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_generation_service() -> AIService:
    return get_ai_service()


def get_company_crawler() -> CompanySiteCrawler:
    return CompanySiteCrawler()


def get_orchestrator(ai_service: AIService = Depends(get_generation_service),
                     store: SessionStore = Depends(get_session_store)) -> GenerationOrchestrator:
    return GenerationOrchestrator(ai_service, store)
