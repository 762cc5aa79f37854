from fastapi import APIRouter, Depends, HTTPException

from ..ai_services import AIService, GenerationError
from ..company import CompanySiteCrawler, summarize_company
from ..deps import get_company_crawler, get_generation_service
from ..schemas import (
    CompanyAnalysisRequest, CompanyAnalysisResult, CompanyScrapeResult, ScrapeResult, UrlRequest
)
from ..scraper import scrape_job_posting

router = APIRouter(prefix="/api", tags=["scrape"])


def _require_url(body: UrlRequest) -> str:
    url = (body.url or "").strip()
    if not url:
        raise HTTPException(400, "URL is required")
    return url


@router.post("/scrape-job", response_model=ScrapeResult, response_model_exclude_none=True)
async def scrape_job(body: UrlRequest):
    return await scrape_job_posting(_require_url(body))


@router.post("/scrape-company", response_model=CompanyScrapeResult, response_model_exclude_none=True)
async def scrape_company(body: UrlRequest, crawler: CompanySiteCrawler = Depends(get_company_crawler)):
    result = await crawler.crawl(_require_url(body))
    if result.success and result.data is not None:
        result.summary = summarize_company(result.data)
    return result


@router.post("/analyze-company", response_model=CompanyAnalysisResult, response_model_exclude_none=True)
async def analyze_company(body: CompanyAnalysisRequest,
                          ai_service: AIService = Depends(get_generation_service)):
    if not (body.company_info or "").strip():
        raise HTTPException(400, "Company information is required")
    try:
        content = await ai_service.analyze_company(body.company_info, body.company_name)
    except GenerationError as e:
        return CompanyAnalysisResult(success=False, error=str(e))
    return CompanyAnalysisResult(success=True, content=content)
