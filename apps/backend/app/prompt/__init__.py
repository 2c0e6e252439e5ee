from .ats_analysis import build_prompt, JOB_DESCRIPTION_LABEL, RESUME_LABEL

__all__ = ["build_prompt", "JOB_DESCRIPTION_LABEL", "RESUME_LABEL"]
