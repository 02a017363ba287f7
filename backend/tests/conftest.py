import json
from typing import Any, Dict, List, Optional

import pytest

from sentilens.config import Settings
from sentilens.database import create_session_factory, init_db
from sentilens.schemas.analysis import AnalysisResult


class FakeLLM:
    """In-process stand-in for LLMClient.generate_structured."""

    def __init__(self, responses: Optional[List[Any]] = None):
        self.responses = list(responses or [])
        self.calls: List[Dict[str, Any]] = []

    async def generate_structured(self, prompt, schema, schema_name="structured_output", system_prompt=""):
        self.calls.append({
            "prompt": prompt,
            "schema": schema,
            "schema_name": schema_name,
            "system_prompt": system_prompt,
        })
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def make_analysis_payload(
    text: str = "Great job!",
    spans: Optional[List[Dict[str, str]]] = None,
    scores: Optional[Dict[str, float]] = None,
    overall: str = "positive",
    keywords: Optional[List[Dict[str, Any]]] = None,
    moderation: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    if spans is None:
        spans = [{"text": "Great job", "sentiment": "positive"}, {"text": "!", "sentiment": "none"}]
    return {
        "overallSentiment": overall,
        "sentimentScore": scores or {"positive": 90, "negative": 2, "neutral": 8},
        "emotionScore": {"joy": 80, "sadness": 0, "anger": 0, "fear": 0, "surprise": 10, "disgust": 0},
        "keywords": keywords if keywords is not None else [
            {"word": "Great job", "sentiment": "positive", "score": 0.9},
        ],
        "highlightedSpans": spans,
        "moderation": moderation or [],
        "explanation": f"The text '{text}' expresses praise.",
    }


def make_analysis_json(**kwargs) -> str:
    return json.dumps(make_analysis_payload(**kwargs))


def make_analysis_result(**kwargs) -> AnalysisResult:
    return AnalysisResult.model_validate(make_analysis_payload(**kwargs))


def make_comparison_json(**overrides) -> str:
    payload = {
        "summaryA": "A praises the service.",
        "summaryB": "B complains about delivery.",
        "sentimentComparison": "A is positive while B is negative.",
        "sharedThemes": ["customer experience"],
        "uniqueThemesA": ["staff friendliness"],
        "uniqueThemesB": ["late delivery"],
        "verdict": "Both discuss the same shop from opposite angles.",
    }
    payload.update(overrides)
    return json.dumps(payload)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        llm_api_key="test-key",
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        log_to_file=False,
        history_limit=50,
    )


@pytest.fixture
def session_factory(settings):
    factory = create_session_factory(settings.database_url)
    init_db(factory)
    return factory
