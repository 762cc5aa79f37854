"""
AI Services Module for the Cover Letter Generator
Handles all LLM calls: cover letters, resume bullets, company analysis
"""
import os
import logging
from typing import Optional

import httpx

from .prompts import company_analysis_prompt, cover_letter_prompt, resume_bullets_prompt

logger = logging.getLogger(__name__)

COVER_LETTER_MAX_TOKENS = 1500
RESUME_BULLETS_MAX_TOKENS = 1000
COMPANY_ANALYSIS_MAX_TOKENS = 500

SYSTEM_PROMPT = "You are an expert career writer who produces polished, human-sounding application documents."


class GenerationError(Exception):
    """Raised when the text generation service fails or returns an error."""


class AIService:
    """Client for an OpenAI-compatible chat completions endpoint"""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self.api_key = api_key or os.getenv("OPENAI_API_KEY")
        self.model = model or os.getenv("DEFAULT_AI_MODEL", "gpt-4o-mini")
        # Route base URL depending on model vendor.
        if "deepseek" in self.model:
            self.base_url = os.getenv("DEEPSEEK_BASE_URL", "https://api.deepseek.com")
        else:
            self.base_url = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")

    @property
    def is_local(self) -> bool:
        return self.base_url.startswith("http://localhost") or \
            self.base_url.startswith("https://localhost") or \
            "host.docker.internal" in self.base_url

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key) or self.is_local

    async def generate_cover_letter(self, resume_text: str, job_description: str, company_info: Optional[str],
                                    role_title: Optional[str], company_name: Optional[str]) -> str:
        prompt = cover_letter_prompt(resume_text, job_description, company_info, role_title, company_name)
        return await self.complete(prompt, max_tokens=COVER_LETTER_MAX_TOKENS)

    async def generate_resume_bullets(self, resume_text: str, job_description: str, company_info: Optional[str],
                                      role_title: Optional[str], company_name: Optional[str]) -> str:
        prompt = resume_bullets_prompt(resume_text, job_description, company_info, role_title, company_name)
        return await self.complete(prompt, max_tokens=RESUME_BULLETS_MAX_TOKENS)

    async def analyze_company(self, company_info: str, company_name: Optional[str]) -> str:
        """Condense scraped company content into a short research summary"""
        prompt = company_analysis_prompt(company_info, company_name)
        return await self.complete(prompt, max_tokens=COMPANY_ANALYSIS_MAX_TOKENS)

    async def complete(self, prompt: str, max_tokens: int) -> str:
        """HTTP call to OpenAI-compatible endpoint (local or hosted)"""
        if not self.is_configured:
            raise GenerationError("No API key configured")

        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt}
            ],
            "temperature": 0.7,
            "max_tokens": max_tokens
        }

        try:
            async with httpx.AsyncClient(timeout=60.0) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    headers=headers,
                    json=payload
                )
        except httpx.HTTPError as e:
            raise GenerationError(f"Request to {self.base_url} failed: {str(e) or e.__class__.__name__}") from e

        if response.status_code != 200:
            raise GenerationError(f"API call failed: {response.status_code} {response.text}")

        try:
            result = response.json()
            content = result["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise GenerationError(f"Unexpected response from model API: {e}") from e
        if not content:
            raise GenerationError("Model returned an empty response")
        return content


# Utility function to get AI service instances
def get_ai_service(user_api_key: Optional[str] = None, model: Optional[str] = None) -> AIService:
    """Get AI service instance with user's API key or system default"""
    return AIService(api_key=user_api_key, model=model)
