from typing import List
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class KeywordReport(BaseModel):
    model_config = ConfigDict(extra="ignore")

    found: List[StrictStr]
    missing: List[StrictStr]


class FormattingReport(BaseModel):
    model_config = ConfigDict(extra="ignore")

    score: StrictInt = Field(ge=0, le=100)
    issues: List[StrictStr]


class AnalysisResult(BaseModel):
    """
    ATS report produced by the provider. Strict types: a score sent as
    "85" or 85.0 is a schema violation, not something to coerce.
    """
    model_config = ConfigDict(extra="ignore")

    score: StrictInt = Field(ge=0, le=100)
    summary: StrictStr
    strengths: List[StrictStr]
    improvements: List[StrictStr]
    keywords: KeywordReport
    formatting: FormattingReport
