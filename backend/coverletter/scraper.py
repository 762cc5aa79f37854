"""
Job posting scraper.
Single fetch, no retries; failures come back as ScrapeResult(success=False).
"""
import logging

import httpx

from .extract import POSTING, extract, parse_html
from .schemas import ScrapeResult

logger = logging.getLogger(__name__)

JOB_POSTING_TIMEOUT = 15.0

# Some job boards reject clients without a browser user agent
BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}


def error_message(exc: Exception) -> str:
    # httpx timeouts often stringify to ""
    return str(exc) or exc.__class__.__name__


async def fetch_html(client: httpx.AsyncClient, url: str, timeout: float) -> str:
    """GET url and return the body; raises on transport errors and non-2xx status."""
    response = await client.get(url, timeout=timeout)
    response.raise_for_status()
    return response.text


async def scrape_job_posting(url: str) -> ScrapeResult:
    """Fetch a job posting and pull out its description and title."""
    try:
        async with httpx.AsyncClient(headers=BROWSER_HEADERS, follow_redirects=True) as client:
            html = await fetch_html(client, url, JOB_POSTING_TIMEOUT)
    except Exception as e:
        logger.error(f"Error scraping job posting {url}: {e}")
        return ScrapeResult(success=False, source_url=url, error=error_message(e))

    extracted = extract(parse_html(html), POSTING)
    if not extracted.text:
        logger.warning(f"No text found on job posting {url}")
        return ScrapeResult(success=False, title=extracted.title, source_url=url,
                            error="No readable text found on the page")

    logger.info(f"Scraped job posting {url} ({len(extracted.text)} chars)")
    return ScrapeResult(
        success=True,
        title=extracted.title,
        content=extracted.text,
        source_url=url,
    )
