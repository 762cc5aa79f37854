"""
Company website crawler and summarizer.

The landing page is mandatory; a fixed set of well-known sub-pages is
fetched best-effort and routed into mission/science buckets by path.
"""
import asyncio
import logging
import re
from typing import Dict, List, Optional, Sequence
from urllib.parse import urlparse

import httpx
from bs4 import BeautifulSoup

from .extract import GENERIC, clean_text, extract, parse_html, strip_non_content
from .schemas import CompanyProfile, CompanyScrapeResult
from .scraper import BROWSER_HEADERS, error_message, fetch_html

logger = logging.getLogger(__name__)

LANDING_PAGE_TIMEOUT = 10.0
SUB_PAGE_TIMEOUT = 5.0

SUB_PATHS = ("/about", "/about-us", "/our-science", "/pipeline")

RAW_CONTENT_LIMIT = 5000
PAGE_CONTENT_LIMIT = 3000
FRAGMENT_DELIMITER = "\n\n"

MISSION = "mission"
SCIENCE = "science"

# Path substring -> bucket, first match wins
PATH_CATEGORIES = (
    ("about", MISSION),
    ("mission", MISSION),
    ("science", SCIENCE),
    ("pipeline", SCIENCE),
)

SUMMARY_SECTION_LIMIT = 2000
SUMMARY_RAW_LIMIT = 3000
NO_COMPANY_INFO = "No detailed company information could be extracted."

_SCHEME_RX = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


def normalize_base_url(url: str) -> str:
    """Prefix a scheme when missing and reduce to the origin."""
    url = (url or "").strip()
    if not _SCHEME_RX.match(url):
        url = "https://" + url
    parsed = urlparse(url)
    if not parsed.netloc:
        raise ValueError(f"Invalid URL: {url}")
    return f"{parsed.scheme.lower()}://{parsed.netloc.lower()}"


def classify_path(path: str) -> Optional[str]:
    for needle, category in PATH_CATEGORIES:
        if needle in path:
            return category
    return None


def company_name_from(soup: BeautifulSoup) -> str:
    """Page title up to the first '|' or '-', else the first h1."""
    title = soup.title.get_text() if soup.title else ""
    name = clean_text(title.split("|")[0].split("-")[0])
    if name:
        return name
    h1 = soup.select_one("h1")
    return clean_text(h1.get_text(" ")) if h1 else ""


class ProfileBuilder:
    """Accumulates page fragments per category with per-fragment truncation."""

    def __init__(self, fragment_limit: int = PAGE_CONTENT_LIMIT):
        self.fragment_limit = fragment_limit
        self.fragments: Dict[str, List[str]] = {MISSION: [], SCIENCE: []}

    def add(self, category: str, text: str):
        text = text[:self.fragment_limit].strip()
        if text:
            self.fragments[category].append(text)

    def build(self, name: str, raw_content: str) -> CompanyProfile:
        return CompanyProfile(
            name=name,
            mission=FRAGMENT_DELIMITER.join(self.fragments[MISSION]),
            science=FRAGMENT_DELIMITER.join(self.fragments[SCIENCE]),
            raw_content=raw_content,
        )


class CompanySiteCrawler:
    def __init__(self, sub_paths: Sequence[str] = SUB_PATHS):
        self.sub_paths = tuple(sub_paths)

    async def crawl(self, url: str) -> CompanyScrapeResult:
        try:
            base_url = normalize_base_url(url)
        except ValueError as e:
            return CompanyScrapeResult(success=False, source_url=url, error=str(e))

        async with httpx.AsyncClient(headers=BROWSER_HEADERS, follow_redirects=True) as client:
            try:
                landing_html = await fetch_html(client, base_url, LANDING_PAGE_TIMEOUT)
            except Exception as e:
                logger.error(f"Error scraping company website {base_url}: {e}")
                return CompanyScrapeResult(success=False, source_url=base_url, error=error_message(e))

            pages = await asyncio.gather(
                *(self._fetch_sub_page(client, base_url, path) for path in self.sub_paths)
            )

        soup = parse_html(landing_html)
        name = company_name_from(soup)
        strip_non_content(soup)
        body = soup.body or soup
        raw_content = clean_text(body.get_text(" "))[:RAW_CONTENT_LIMIT]

        builder = ProfileBuilder()
        for path, text in zip(self.sub_paths, pages):
            category = classify_path(path)
            if text and category:
                builder.add(category, text)

        profile = builder.build(name, raw_content)
        fetched = sum(1 for text in pages if text is not None)
        logger.info(f"Crawled {base_url}: {fetched}/{len(self.sub_paths)} sub-pages reachable")
        return CompanyScrapeResult(success=True, data=profile, source_url=base_url)

    async def _fetch_sub_page(self, client: httpx.AsyncClient, base_url: str, path: str) -> Optional[str]:
        """Generic-mode text of one sub-page, None when it cannot be fetched."""
        try:
            html = await fetch_html(client, base_url + path, SUB_PAGE_TIMEOUT)
        except Exception as e:
            logger.debug(f"Skipping {base_url}{path}: {error_message(e)}")
            return None
        return extract(parse_html(html), GENERIC).text


def summarize_company(profile: CompanyProfile) -> str:
    """Bounded text block for prompts and display. Never empty."""
    sections = []
    if profile.name:
        sections.append(f"Company: {profile.name}")
    if profile.mission:
        sections.append(f"About/Mission:\n{profile.mission[:SUMMARY_SECTION_LIMIT]}")
    if profile.science:
        sections.append(f"Science/Pipeline:\n{profile.science[:SUMMARY_SECTION_LIMIT]}")
    if profile.raw_content and not profile.mission and not profile.science:
        sections.append(f"Website Content:\n{profile.raw_content[:SUMMARY_RAW_LIMIT]}")
    return "\n\n".join(sections) or NO_COMPANY_INFO
