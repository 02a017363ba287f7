import csv
import io
import json
import re

import pytest

from conftest import make_analysis_result, make_comparison_json
from sentilens.errors import ExportError
from sentilens.schemas.comparison import ComparisonResult
from sentilens.schemas.export import ExportFormat
from sentilens.schemas.history import HistoryItem
from sentilens.services.export_service import (
    export_analysis,
    export_comparison,
    export_history,
    get_timestamp,
)

TEXT = 'Great job, "team"!'


def _result():
    return make_analysis_result(
        text=TEXT,
        moderation=[{"category": "profanity", "confidence": 0.4, "flaggedText": "job"}],
    )


def _history(count=2):
    return [
        HistoryItem(id=f"id-{i}", timestamp=1_700_000_000_000 + i, text=f"text {i}", result=_result())
        for i in range(count)
    ]


def test_timestamp_is_filename_safe():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}-\d{3}Z", get_timestamp())


def test_analysis_text_report():
    exported = export_analysis(_result(), TEXT, ExportFormat.TXT)
    content = exported.content.decode("utf-8")

    assert exported.filename.startswith("analysis-") and exported.filename.endswith(".txt")
    assert exported.media_type == "text/plain"
    assert "Overall Sentiment: positive" in content
    assert "  - Positive: 90.0%" in content
    assert "  - Joy: 80.0%" in content
    assert '  - [profanity] "job"' in content


def test_analysis_csv_quotes_text():
    exported = export_analysis(_result(), TEXT, ExportFormat.CSV)
    rows = list(csv.reader(io.StringIO(exported.content.decode("utf-8"))))

    assert rows[0][:3] == ["originalText", "overallSentiment", "explanation"]
    assert rows[1][0] == TEXT
    assert rows[1][3:6] == ["90", "2", "8"]
    assert rows[1][-1] == "[profanity] job"


def test_analysis_json_includes_original_text():
    exported = export_analysis(_result(), TEXT, ExportFormat.JSON)
    data = json.loads(exported.content)
    assert data["originalText"] == TEXT
    assert data["result"]["overallSentiment"] == "positive"
    assert exported.notice is None


def test_analysis_binary_formats():
    pdf = export_analysis(_result(), TEXT, ExportFormat.PDF)
    assert pdf.content.startswith(b"%PDF")
    assert pdf.filename.endswith(".pdf")

    word = export_analysis(_result(), TEXT, ExportFormat.DOCX)
    assert word.content.startswith(b"PK")
    assert word.filename.endswith(".docx")


def test_comparison_text_and_fallback():
    result = ComparisonResult.model_validate_json(make_comparison_json(sharedThemes=[]))

    text = export_comparison(result, ExportFormat.TXT).content.decode("utf-8")
    assert "Shared Themes:\nNone" in text
    assert "Unique to Text B:\n- late delivery" in text

    fallback = export_comparison(result, ExportFormat.PDF)
    assert fallback.filename.endswith(".json")
    assert fallback.notice == "Export to PDF for comparisons is not yet implemented. Downloading as JSON."
    assert json.loads(fallback.content)["verdict"].startswith("Both")


def test_history_exports():
    rows = list(csv.reader(io.StringIO(export_history(_history(), ExportFormat.CSV).content.decode("utf-8"))))
    assert len(rows) == 3
    assert rows[1][0] == "2023-11-14T22:13:20.000Z"

    assert export_history(_history(), ExportFormat.PDF).content.startswith(b"%PDF")

    fallback = export_history(_history(), ExportFormat.TXT)
    assert fallback.notice.startswith("Export to TXT for history")
    assert len(json.loads(fallback.content)) == 2


def test_empty_history_cannot_be_exported():
    with pytest.raises(ExportError) as excinfo:
        export_history([], ExportFormat.CSV)
    assert excinfo.value.message == "No history to export."
