import io
import json
import logging

import docx
import pytest
from fastapi.testclient import TestClient

from conftest import FakeLLM, make_analysis_json, make_analysis_payload, make_comparison_json
from sentilens.errors import (
    ANALYSIS_FAILED_MESSAGE,
    EMPTY_ANALYSIS_INPUT_MESSAGE,
    EMPTY_COMPARISON_INPUT_MESSAGE,
)
from sentilens.main import create_app


@pytest.fixture
def llm():
    return FakeLLM()


@pytest.fixture
def client(settings, llm):
    app = create_app(settings, llm=llm)
    with TestClient(app) as test_client:
        yield test_client


def test_log_level_follows_app_settings(settings, llm):
    create_app(settings.model_copy(update={"log_level": "DEBUG"}), llm=llm)
    assert logging.getLogger("sentilens.analyzers.sentiment").isEnabledFor(logging.DEBUG)

    create_app(settings.model_copy(update={"log_level": "WARNING"}), llm=llm)
    assert not logging.getLogger("sentilens.analyzers.sentiment").isEnabledFor(logging.INFO)


def test_health(client):
    body = client.get("/health").json()
    assert body["status"] == "healthy"
    assert body["prompt_version"]


def test_analysis_returns_camel_case_and_records_history(client, llm):
    llm.responses.append(make_analysis_json(scores={"positive": 1, "negative": 1, "neutral": 1}))

    response = client.post("/api/v1/analysis", json={"text": "Great job!"})

    assert response.status_code == 200
    body = response.json()
    assert body["overallSentiment"] == "positive"
    assert body["sentimentScore"] == {"positive": 34, "negative": 33, "neutral": 33}
    assert body["highlightedSpans"][1] == {"text": "!", "sentiment": "none"}

    history = client.get("/api/v1/history").json()
    assert len(history) == 1
    assert history[0]["text"] == "Great job!"


def test_analysis_can_skip_history(client, llm):
    llm.responses.append(make_analysis_json())
    client.post("/api/v1/analysis", json={"text": "Great job!", "saveToHistory": False})
    assert client.get("/api/v1/history").json() == []


def test_blank_text_is_rejected_before_model_call(client, llm):
    response = client.post("/api/v1/analysis", json={"text": "   \n"})
    assert response.status_code == 400
    assert response.json() == {"detail": EMPTY_ANALYSIS_INPUT_MESSAGE}
    assert llm.calls == []


def test_transport_failure_returns_generic_message(client, llm):
    llm.responses.append(RuntimeError("socket closed by 10.0.0.7"))
    response = client.post("/api/v1/analysis", json={"text": "some text"})

    assert response.status_code == 502
    assert response.json() == {"detail": ANALYSIS_FAILED_MESSAGE}
    assert "10.0.0.7" not in response.text
    assert client.get("/api/v1/history").json() == []


def test_comparison(client, llm):
    llm.responses.append(make_comparison_json())
    response = client.post("/api/v1/comparison", json={"textA": "Lovely staff.", "textB": "Late again."})
    assert response.status_code == 200
    assert response.json()["uniqueThemesA"] == ["staff friendliness"]


def test_comparison_requires_both_texts(client, llm):
    response = client.post("/api/v1/comparison", json={"textA": "", "textB": "text"})
    assert response.status_code == 400
    assert response.json() == {"detail": EMPTY_COMPARISON_INPUT_MESSAGE}
    assert llm.calls == []


def test_document_extract(client):
    document = docx.Document()
    document.add_paragraph("Uploaded review.")
    buffer = io.BytesIO()
    document.save(buffer)

    response = client.post(
        "/api/v1/documents/extract",
        files={"file": ("review.docx", buffer.getvalue(), "application/octet-stream")},
    )
    assert response.status_code == 200
    assert response.json() == {"filename": "review.docx", "text": "Uploaded review."}


def test_document_errors_are_user_facing(client):
    response = client.post(
        "/api/v1/documents/extract",
        files={"file": ("old.doc", b"\xd0\xcf\x11\xe0", "application/msword")},
    )
    assert response.status_code == 400
    assert "Please use .docx instead." in response.json()["detail"]

    response = client.post(
        "/api/v1/documents/extract",
        files={"file": ("empty.txt", b"   ", "text/plain")},
    )
    assert response.json() == {"detail": "No content to analyze."}


def test_history_dashboard_clear_and_export(client, llm):
    assert client.get("/api/v1/history/dashboard").json() == {"dashboard": None}
    assert client.get("/api/v1/history/export", params={"format": "csv"}).status_code == 400

    llm.responses.append(make_analysis_json())
    client.post("/api/v1/analysis", json={"text": "Great job!"})

    dashboard = client.get("/api/v1/history/dashboard").json()["dashboard"]
    assert dashboard["stats"]["total"] == 1
    assert dashboard["mostCommon"] == "positive"
    assert dashboard["wordCloud"] == [{"text": "great job", "value": 1}]

    exported = client.get("/api/v1/history/export", params={"format": "csv"})
    assert exported.headers["content-type"].startswith("text/csv")
    assert "attachment; filename=\"history-" in exported.headers["content-disposition"]

    assert client.delete("/api/v1/history").json() == {"status": "cleared"}
    assert client.get("/api/v1/history").json() == []


def test_export_endpoints(client):
    response = client.post("/api/v1/exports/analysis", json={
        "result": make_analysis_payload(),
        "originalText": "Great job!",
        "format": "txt",
    })
    assert response.status_code == 200
    assert "Sentiment Analysis Report" in response.text

    comparison = json.loads(make_comparison_json())
    response = client.post("/api/v1/exports/comparison", json={"result": comparison, "format": "docx"})
    assert response.headers["x-export-notice"].startswith("Export to DOCX for comparisons")
    assert response.json()["summaryA"] == comparison["summaryA"]


def test_accuracy_and_samples(client):
    report = client.get("/api/v1/accuracy").json()
    assert report["totalSamples"] == 8
    assert report["confusionMatrix"]["negative"]["positive"] == 1

    samples = client.get("/api/v1/samples").json()
    assert samples[0]["manualSentiment"] == "positive"
