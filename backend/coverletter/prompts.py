"""
Prompt templates for cover letter, resume bullet and company analysis generation.
"""
from typing import Optional

WRITING_STYLE_RULES = """
CRITICAL WRITING STYLE REQUIREMENTS (MUST FOLLOW):

1. NEVER use em dashes. Use commas, periods, or parentheses instead.
2. Keep sentences SHORT. Aim for 15-20 words per sentence at most.
3. Use ACTIVE voice. Be direct. First person is encouraged.
4. AVOID these AI-telltale words and phrases:
   - "delve", "leverage", "spearhead", "synergy", "utilize"
   - "passionate about", "excited to", "thrilled"
   - "cutting-edge", "innovative"
   - "I believe", "I feel"
5. Sound CONFIDENT but APPROACHABLE. Not arrogant, not humble-bragging.
6. Use industry-specific biotech/pharma terminology naturally.
7. Write like a senior professional, not a fresh graduate.
8. No fluff. Every sentence must add value.
9. Use specific metrics and results where possible.
10. Vary sentence structure. Mix short sentences with medium ones.
"""

COVER_LETTER_INSTRUCTIONS = f"""You are a senior biotech/pharma professional with excellent writing skills. You write in a confident, direct and approachable manner. Your writing sounds unmistakably human.

{WRITING_STYLE_RULES}

COVER LETTER STRUCTURE (approximately 400 words total):

PARAGRAPH 1 - Hook (3-4 sentences):
- Open with something specific about the company (from the research provided)
- Connect to the role naturally
- State your interest clearly without being generic

PARAGRAPH 2 - Relevant Experience (4-5 sentences):
- Highlight 2-3 experiences directly relevant to the job requirements
- Use specific metrics and outcomes
- Show understanding of what the role actually requires

PARAGRAPH 3 - Value Proposition (3-4 sentences):
- What unique perspective or skill do you bring?
- Connect your background to company goals
- Show you understand the industry challenges

PARAGRAPH 4 - Close (2-3 sentences):
- Clear call to action
- Express genuine interest
- Keep it professional, not desperate

IMPORTANT:
- Personalize heavily to the specific company and role
- Reference specific company products, mission, or recent developments
- Mirror key terminology from the job description naturally
- Do NOT use generic phrases like "I am writing to apply for..."
"""

RESUME_BULLETS_INSTRUCTIONS = f"""You are an ATS optimization expert and senior biotech/pharma hiring manager. You understand what makes bullet points stand out in applicant tracking systems while still reading naturally to human recruiters.

{WRITING_STYLE_RULES}

BULLET POINT REQUIREMENTS:

1. FORMAT: Start with a strong action verb. Include metrics where possible.
2. LENGTH: Each bullet should be 1-2 lines (15-25 words).
3. ATS OPTIMIZATION: Naturally incorporate keywords from the job description.
4. RELEVANCE: Focus on skills and experiences most relevant to this specific role.
5. IMPACT: Show results, not just responsibilities.

GOOD EXAMPLE:
"Reduced validation cycle time by 30% through a test optimization framework, maintaining full ISO 14971 compliance."

BAD EXAMPLE:
"Responsible for validation testing and ensuring compliance with various regulatory standards."

IMPORTANT: Base all bullets on the candidate's actual experience. Do not fabricate accomplishments.
"""

NOT_SPECIFIED = "Not specified"
NO_COMPANY_RESEARCH = "No additional company information available."


def _job_block(job_description: str, role_title: Optional[str], company_name: Optional[str]) -> str:
    return (
        f"Role: {role_title or NOT_SPECIFIED}\n"
        f"Company: {company_name or NOT_SPECIFIED}\n\n"
        f"{job_description}"
    )


def cover_letter_prompt(resume_text: str, job_description: str, company_info: Optional[str],
                        role_title: Optional[str], company_name: Optional[str]) -> str:
    return f"""{COVER_LETTER_INSTRUCTIONS}

---

CANDIDATE'S RESUME:
{resume_text}

---

JOB DESCRIPTION:
{_job_block(job_description, role_title, company_name)}

---

COMPANY RESEARCH:
{company_info or NO_COMPANY_RESEARCH}

---

Generate a professional cover letter following all the requirements above. The letter should feel personal and specific to this exact opportunity, not generic.

Output ONLY the cover letter text. No headers, no salutation, no signature block. Start directly with the opening paragraph. End with a professional closing sentiment."""


def resume_bullets_prompt(resume_text: str, job_description: str, company_info: Optional[str],
                          role_title: Optional[str], company_name: Optional[str]) -> str:
    return f"""{RESUME_BULLETS_INSTRUCTIONS}

---

CANDIDATE'S CURRENT RESUME:
{resume_text}

---

TARGET JOB DESCRIPTION:
{_job_block(job_description, role_title, company_name)}

---

COMPANY RESEARCH:
{company_info or NO_COMPANY_RESEARCH}

---

Generate 6-8 ATS-optimized resume bullet points that the candidate can use to tailor their resume for this specific role.

CRITICAL: Base each bullet on the candidate's ACTUAL experiences shown in their resume. Do not invent new experiences.

Format your response as a simple list:
• [Bullet 1]
• [Bullet 2]
• [Bullet 3]

Output ONLY the bullet points. No explanations, no categories, no headers."""


def company_analysis_prompt(company_info: str, company_name: Optional[str]) -> str:
    return f"""Analyze this company information and extract key points useful for a job application cover letter.

Company: {company_name or "Unknown"}

Scraped Website Content:
{company_info}

---

Provide a brief summary (5-7 sentences) covering:
1. What the company does (therapeutic area, technology platform)
2. Their mission or values
3. Key products or pipeline
4. Recent developments or focus areas
5. Company culture indicators

Be specific. Use information from the scraped content only. Do not make up facts."""
