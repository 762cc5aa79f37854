"""
HTML text extraction for job postings and company pages.
Picks the first content container that yields enough text, falling back to <body>.
"""
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from bs4 import BeautifulSoup

POSTING = "posting"
GENERIC = "generic"

# Elements that never carry page content
NON_CONTENT_TAGS = "script, style, noscript, iframe, nav, footer, header, aside"

MIN_CONTENT_LENGTH = 200
TITLE_MIN_LENGTH = 5
TITLE_MAX_LENGTH = 200

# Tried strictly in order; body is always last
CONTENT_SELECTORS = {
    POSTING: (
        ".job-description",
        ".description",
        "#job-description",
        '[data-automation="jobDescription"]',
        ".jobs-description",
        ".job-details",
        ".posting-requirements",
        "article",
        ".content",
        "main",
        "body",
    ),
    GENERIC: (
        "main",
        "article",
        ".content",
        "body",
    ),
}

TITLE_SELECTORS: Tuple[str, ...] = (
    "h1",
    ".job-title",
    ".posting-title",
    '[data-automation="job-title"]',
)

_WHITESPACE_RX = re.compile(r"\s+")
_NEWLINES_RX = re.compile(r"\n+")


@dataclass
class ExtractedText:
    text: str
    title: str = ""


def clean_text(text: str) -> str:
    """Collapse whitespace runs and trim."""
    text = _WHITESPACE_RX.sub(" ", text or "")
    text = _NEWLINES_RX.sub("\n", text)
    return text.strip()


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "lxml")


def strip_non_content(soup: BeautifulSoup) -> BeautifulSoup:
    for el in soup.select(NON_CONTENT_TAGS):
        el.decompose()
    return soup


def _selector_text(soup: BeautifulSoup, selector: str) -> Optional[str]:
    """Normalized text of every element matching selector, None when nothing matches."""
    elements = soup.select(selector)
    if not elements:
        return None
    return clean_text(" ".join(el.get_text(" ") for el in elements))


def select_content(soup: BeautifulSoup, selectors: Iterable[str],
                   min_length: int = MIN_CONTENT_LENGTH) -> str:
    """Run the selector cascade.

    Returns the first candidate longer than min_length. When no candidate
    qualifies the last matched candidate (normally <body>) is returned as is,
    and when nothing matched at all the whole document text is used.
    """
    text = None
    for selector in selectors:
        candidate = _selector_text(soup, selector)
        if candidate is None:
            continue
        text = candidate
        if len(text) > min_length:
            return text
    if text is None:
        text = clean_text(soup.get_text(" "))
    return text


def select_title(soup: BeautifulSoup, selectors: Iterable[str] = TITLE_SELECTORS) -> str:
    for selector in selectors:
        el = soup.select_one(selector)
        if el is None:
            continue
        title = clean_text(el.get_text(" "))
        if TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH:
            return title
    return ""


def extract(soup: BeautifulSoup, mode: str = GENERIC) -> ExtractedText:
    """Extract readable text from a parsed page.

    Non-content elements are removed from the document in place before any
    selector runs. Only posting mode looks for a title.
    """
    if mode not in CONTENT_SELECTORS:
        raise ValueError(f"Unknown extraction mode: {mode}")
    strip_non_content(soup)
    text = select_content(soup, CONTENT_SELECTORS[mode])
    title = select_title(soup) if mode == POSTING else ""
    return ExtractedText(text=text, title=title)


def extract_html(html: str, mode: str = GENERIC) -> ExtractedText:
    return extract(parse_html(html), mode)
