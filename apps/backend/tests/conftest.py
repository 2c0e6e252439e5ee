"""
Shared fixtures: in-memory PDFs built with PyMuPDF, a canned provider reply
and a scriptable stub provider.
"""

import copy
import json
from typing import Callable, List, Optional, Tuple

import pymupdf
import pytest

from app.agent.providers.base import Provider

SAMPLE_RESUME_TEXT = "Jane Doe\nSenior Software Engineer\nPython, FastAPI, AWS"

SAMPLE_JOB_DESCRIPTION = "Looking for a backend engineer with Python and AWS experience."

VALID_ANALYSIS = {
    "score": 78,
    "summary": "백엔드 경험이 잘 드러난 이력서입니다.",
    "strengths": ["정량적 성과 제시", "명확한 섹션 구분"],
    "improvements": ["행동 동사 사용 확대"],
    "keywords": {
        "found": ["Python", "AWS"],
        "missing": ["Kubernetes", "CI/CD"],
    },
    "formatting": {
        "score": 85,
        "issues": ["날짜 형식이 일관되지 않음"],
    },
}


def make_pdf(text: Optional[str] = SAMPLE_RESUME_TEXT) -> bytes:
    """Build a one-page PDF; `text=None` gives a blank page."""
    doc = pymupdf.open()
    page = doc.new_page()
    if text:
        page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


class StubProvider(Provider):
    """Records every call and answers with `reply`, or raises `error`."""

    name = "stub"

    def __init__(self, reply: str = "", error: Optional[BaseException] = None,
                 side_effect: Optional[Callable] = None):
        self.reply = reply
        self.error = error
        self.side_effect = side_effect
        self.calls: List[Tuple[str, str]] = []

    async def analyze(self, system_message: str, user_message: str) -> str:
        self.calls.append((system_message, user_message))
        if self.side_effect is not None:
            return await self.side_effect(system_message, user_message)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def valid_analysis() -> dict:
    return copy.deepcopy(VALID_ANALYSIS)


@pytest.fixture
def resume_pdf() -> bytes:
    return make_pdf()


@pytest.fixture
def stub_provider() -> StubProvider:
    return StubProvider(reply=json.dumps(VALID_ANALYSIS, ensure_ascii=False))
