from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ----- Scraping -----
class UrlRequest(BaseModel):
    url: Optional[str] = None


class ScrapeResult(CamelModel):
    success: bool
    title: str = ""
    content: str = ""
    source_url: str = ""
    error: Optional[str] = None


class CompanyProfile(CamelModel):
    name: str = ""
    mission: str = ""
    science: str = ""
    raw_content: str = ""


class CompanyScrapeResult(CamelModel):
    success: bool
    data: Optional[CompanyProfile] = None
    summary: Optional[str] = None
    source_url: str = ""
    error: Optional[str] = None


# ----- Generation -----
class GenerateRequest(CamelModel):
    job_description: Optional[str] = None
    company_info: Optional[str] = None
    role_title: Optional[str] = None
    company_name: Optional[str] = None
    # Overrides the configured candidate profile when given
    resume_text: Optional[str] = None


class GenerationResult(CamelModel):
    success: bool
    cover_letter: Optional[str] = None
    bullets: Optional[str] = None
    session_id: Optional[str] = None
    error: Optional[str] = None


class CompanyAnalysisRequest(CamelModel):
    company_info: Optional[str] = None
    company_name: Optional[str] = None


class CompanyAnalysisResult(CamelModel):
    success: bool
    content: Optional[str] = None
    error: Optional[str] = None


# ----- Candidate profile -----
class ContactInfo(BaseModel):
    email: str = ""
    phone: str = ""
    linkedin: str = ""


class EducationEntry(BaseModel):
    degree: str
    school: str
    location: str = ""
    gpa: Optional[str] = None
    date: str = ""
    details: str = ""


class ExperienceEntry(BaseModel):
    title: str
    company: str
    location: str = ""
    dates: str = ""
    bullets: List[str] = Field(default_factory=list)


class ProjectEntry(BaseModel):
    title: str
    organization: str = ""
    location: str = ""
    dates: str = ""
    bullets: List[str] = Field(default_factory=list)


class ResumeProfile(BaseModel):
    name: str
    contact: ContactInfo = Field(default_factory=ContactInfo)
    education: List[EducationEntry] = Field(default_factory=list)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    skills: Dict[str, List[str]] = Field(default_factory=dict)


class SessionOut(CamelModel):
    id: str
    cover_letter: str
    bullets: str
    role_title: Optional[str] = None
    company_name: Optional[str] = None
    created_at: datetime
