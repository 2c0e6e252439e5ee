from typing import Optional, Tuple

RESUME_LABEL = "RESUME:"
JOB_DESCRIPTION_LABEL = "JOB DESCRIPTION:"

SYSTEM_PROMPT = """
You are an expert ATS (Applicant Tracking System) analyzer. Analyze resumes and provide detailed feedback in JSON format.

Your response must be valid JSON with this exact structure:
{{
  "score": <integer 0-100>,
  "summary": "<brief summary in {language}>",
  "strengths": ["<strength 1 in {language}>", "<strength 2>", ...],
  "improvements": ["<improvement 1 in {language}>", "<improvement 2>", ...],
  "keywords": {{
    "found": ["<keyword 1>", "<keyword 2>", ...],
    "missing": ["<missing keyword 1>", "<missing keyword 2>", ...]
  }},
  "formatting": {{
    "score": <integer 0-100>,
    "issues": ["<formatting issue 1 in {language}>", "<formatting issue 2>", ...]
  }}
}}

Analyze based on:
1. Keyword optimization for ATS systems
2. Proper formatting (avoid tables, images, headers/footers)
3. Clear section headings
4. Quantifiable achievements
5. Action verbs
6. Industry-specific terminology
7. Contact information presence
8. Consistent date formatting
9. Appropriate length
10. No spelling/grammar errors

Return only the JSON object. Do not add keys. Do not return markdown or any text outside the JSON.
""".strip()

USER_PROMPT = """Analyze this resume for ATS compatibility:

{resume_label}
{resume_text}
{job_section}
Provide a comprehensive ATS analysis as a single JSON object. All feedback should be in {language}."""


def build_prompt(
    resume_text: str,
    job_description: Optional[str] = None,
    language: str = "Korean",
) -> Tuple[str, str]:
    """
    Returns the (system, user) message pair for one analysis request.

    The resume text is embedded verbatim. The job description section is
    included whenever `job_description` is non-empty.
    """
    job_section = ""
    if job_description:
        job_section = f"\n{JOB_DESCRIPTION_LABEL}\n{job_description}\n"

    system_message = SYSTEM_PROMPT.format(language=language)
    user_message = USER_PROMPT.format(
        resume_label=RESUME_LABEL,
        resume_text=resume_text,
        job_section=job_section,
        language=language,
    )
    return system_message, user_message
