"""分析结果 / 对比结果 / 历史记录导出"""
import csv
import io
import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional, Sequence
from xml.sax.saxutils import escape

import docx
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from sentilens.errors import ExportError
from sentilens.schemas.analysis import AnalysisResult
from sentilens.schemas.comparison import ComparisonResult
from sentilens.schemas.export import ExportFormat
from sentilens.schemas.history import HistoryItem

MEDIA_TYPES = {
    ExportFormat.JSON: "application/json",
    ExportFormat.TXT: "text/plain",
    ExportFormat.CSV: "text/csv",
    ExportFormat.PDF: "application/pdf",
    ExportFormat.DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

EMOTIONS = ["joy", "sadness", "anger", "fear", "surprise", "disgust"]


@dataclass
class ExportedFile:
    filename: str
    media_type: str
    content: bytes
    notice: Optional[str] = None


def get_timestamp(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    iso = now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
    return iso.replace(":", "-").replace(".", "-")


def _iso_millis(timestamp_ms: int) -> str:
    moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def _num(value: float) -> str:
    return format(value, "g")


def _pct(value: float) -> str:
    return f"{value:.1f}%"


def _emotion_items(result: AnalysisResult) -> List[tuple]:
    return [(name, getattr(result.emotion_score, name)) for name in EMOTIONS]


def _dump_json(data: Any) -> bytes:
    return json.dumps(data, indent=2, ensure_ascii=False).encode("utf-8")


def _make_file(kind: str, fmt: ExportFormat, content: bytes, notice: Optional[str] = None) -> ExportedFile:
    return ExportedFile(
        filename=f"{kind}-{get_timestamp()}.{fmt.value}",
        media_type=MEDIA_TYPES[fmt],
        content=content,
        notice=notice,
    )


def _csv_bytes(headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> bytes:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(headers)
    writer.writerows(rows)
    return buffer.getvalue().rstrip("\n").encode("utf-8")


# --- 单文本分析 ---

def analysis_to_text(result: AnalysisResult, original_text: str) -> str:
    lines = [
        "Sentiment Analysis Report",
        "=========================",
        "",
        "Original Text:",
        f'"{original_text}"',
        "",
        "--- Analysis ---",
        f"Overall Sentiment: {result.overall_sentiment.value} ({result.explanation})",
        "",
        "Scores:",
        f"  - Positive: {_pct(result.sentiment_score.positive)}",
        f"  - Negative: {_pct(result.sentiment_score.negative)}",
        f"  - Neutral: {_pct(result.sentiment_score.neutral)}",
        "",
        "Emotions:",
    ]
    lines.extend(f"  - {name.capitalize()}: {_pct(value)}" for name, value in _emotion_items(result))
    lines.append("")
    lines.append("Keywords:")
    lines.extend(f"  - {k.word} ({k.sentiment.value})" for k in result.keywords)
    if result.moderation:
        lines.append("")
        lines.append("Content Moderation Warnings:")
        lines.extend(f'  - [{w.category.value}] "{w.flagged_text}"' for w in result.moderation)
    return "\n".join(lines) + "\n"


def analysis_to_csv(result: AnalysisResult, original_text: str) -> bytes:
    headers = [
        "originalText", "overallSentiment", "explanation",
        "positiveScore", "negativeScore", "neutralScore",
        *EMOTIONS,
        "keywords", "moderationWarnings",
    ]
    row = [
        original_text,
        result.overall_sentiment.value,
        result.explanation,
        _num(result.sentiment_score.positive),
        _num(result.sentiment_score.negative),
        _num(result.sentiment_score.neutral),
        *[_num(value) for _, value in _emotion_items(result)],
        "; ".join(f"{k.word} ({k.sentiment.value})" for k in result.keywords),
        "; ".join(f"[{w.category.value}] {w.flagged_text}" for w in result.moderation),
    ]
    return _csv_bytes(headers, [row])


def _pdf_table(rows: List[List[str]], header_color=colors.HexColor("#2563EB")) -> Table:
    styles = getSampleStyleSheet()
    body = [[Paragraph(escape(str(cell)), styles["BodyText"]) for cell in row] for row in rows]
    table = Table(body, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), header_color),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ]))
    return table


def _build_pdf(flow: list) -> bytes:
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4)
    doc.build(flow)
    return buffer.getvalue()


def analysis_to_pdf(result: AnalysisResult, original_text: str) -> bytes:
    styles = getSampleStyleSheet()
    flow: list = [
        Paragraph("Sentiment Analysis Report", styles["Title"]),
        Paragraph(f"Analyzed on: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}", styles["Italic"]),
        Spacer(1, 12),
        Paragraph("Original Text:", styles["Heading2"]),
        Paragraph(escape(original_text), styles["BodyText"]),
        Spacer(1, 12),
        _pdf_table([
            ["Metric", "Result"],
            ["Overall Sentiment", result.overall_sentiment.value],
            ["Explanation", result.explanation],
            ["Positive Score", _pct(result.sentiment_score.positive)],
            ["Negative Score", _pct(result.sentiment_score.negative)],
            ["Neutral Score", _pct(result.sentiment_score.neutral)],
        ]),
        Spacer(1, 12),
        _pdf_table([["Emotion", "Score"], *[[name, _pct(value)] for name, value in _emotion_items(result)]]),
    ]
    if result.keywords:
        flow.append(Spacer(1, 12))
        flow.append(_pdf_table([
            ["Keyword", "Sentiment", "Score"],
            *[[k.word, k.sentiment.value, f"{k.score:.2f}"] for k in result.keywords],
        ]))
    if result.moderation:
        flow.append(Spacer(1, 12))
        flow.append(Paragraph("Content Moderation Warnings", styles["Heading2"]))
        flow.append(_pdf_table([
            ["Category", "Flagged Text"],
            *[[w.category.value, w.flagged_text] for w in result.moderation],
        ]))
    return _build_pdf(flow)


def analysis_to_docx(result: AnalysisResult, original_text: str) -> bytes:
    document = docx.Document()
    document.add_heading("Sentiment Analysis Report", 0)
    document.add_paragraph(f"Original Text: {original_text}", style="Intense Quote")
    document.add_heading("Summary", level=1)

    for label, value in (
        ("Overall Sentiment: ", result.overall_sentiment.value),
        ("Explanation: ", result.explanation),
    ):
        paragraph = document.add_paragraph()
        paragraph.add_run(label).bold = True
        paragraph.add_run(value)

    document.add_heading("Scores", level=2)
    table = document.add_table(rows=0, cols=2)
    table.style = "Table Grid"
    for label, value in (
        ("Positive", result.sentiment_score.positive),
        ("Negative", result.sentiment_score.negative),
        ("Neutral", result.sentiment_score.neutral),
    ):
        cells = table.add_row().cells
        cells[0].text = label
        cells[1].text = _pct(value)

    document.add_heading("Keywords", level=2)
    for k in result.keywords:
        document.add_paragraph(f"{k.word} ({k.sentiment.value})", style="List Bullet")

    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def export_analysis(result: AnalysisResult, original_text: str, fmt: ExportFormat) -> ExportedFile:
    if fmt == ExportFormat.JSON:
        payload = {
            "result": result.model_dump(mode="json", by_alias=True),
            "originalText": original_text,
        }
        content = _dump_json(payload)
    elif fmt == ExportFormat.TXT:
        content = analysis_to_text(result, original_text).encode("utf-8")
    elif fmt == ExportFormat.CSV:
        content = analysis_to_csv(result, original_text)
    elif fmt == ExportFormat.PDF:
        content = analysis_to_pdf(result, original_text)
    else:
        content = analysis_to_docx(result, original_text)
    return _make_file("analysis", fmt, content)


# --- 对比结果 ---

def _theme_lines(themes: Sequence[str]) -> str:
    return "\n".join(f"- {t}" for t in themes) if themes else "None"


def comparison_to_text(result: ComparisonResult) -> str:
    return (
        "Text Comparison Report\n======================\n\n"
        f"Summary of Text A:\n{result.summary_a}\n\n"
        f"Summary of Text B:\n{result.summary_b}\n\n"
        f"Sentiment Comparison:\n{result.sentiment_comparison}\n\n"
        f"Shared Themes:\n{_theme_lines(result.shared_themes)}\n\n"
        f"Unique to Text A:\n{_theme_lines(result.unique_themes_a)}\n\n"
        f"Unique to Text B:\n{_theme_lines(result.unique_themes_b)}\n\n"
        f"Verdict:\n{result.verdict}"
    )


def _fallback_notice(fmt: ExportFormat, kind: str) -> str:
    return f"Export to {fmt.value.upper()} for {kind} is not yet implemented. Downloading as JSON."


def export_comparison(result: ComparisonResult, fmt: ExportFormat) -> ExportedFile:
    if fmt == ExportFormat.TXT:
        return _make_file("comparison", fmt, comparison_to_text(result).encode("utf-8"))

    content = _dump_json(result.model_dump(mode="json", by_alias=True))
    notice = None if fmt == ExportFormat.JSON else _fallback_notice(fmt, "comparisons")
    return _make_file("comparison", ExportFormat.JSON, content, notice)


# --- 历史记录 ---

def history_to_csv(items: Sequence[HistoryItem]) -> bytes:
    headers = [
        "timestamp", "text", "overallSentiment", "positiveScore", "negativeScore", "neutralScore",
        *EMOTIONS, "keywords",
    ]
    rows = []
    for item in items:
        result = item.result
        rows.append([
            _iso_millis(item.timestamp),
            item.text,
            result.overall_sentiment.value,
            _num(result.sentiment_score.positive),
            _num(result.sentiment_score.negative),
            _num(result.sentiment_score.neutral),
            *[_num(value) for _, value in _emotion_items(result)],
            "; ".join(k.word for k in result.keywords),
        ])
    return _csv_bytes(headers, rows)


def _snippet(text: str, limit: int = 50) -> str:
    return text[:limit] + ("..." if len(text) > limit else "")


def history_to_pdf(items: Sequence[HistoryItem]) -> bytes:
    styles = getSampleStyleSheet()
    rows = [["Date", "Sentiment", "Text Snippet"]]
    for item in items:
        moment = datetime.fromtimestamp(item.timestamp / 1000)
        rows.append([
            moment.strftime("%Y-%m-%d %H:%M:%S"),
            item.result.overall_sentiment.value,
            _snippet(item.text),
        ])
    return _build_pdf([
        Paragraph("Analysis History Report", styles["Title"]),
        Spacer(1, 12),
        _pdf_table(rows),
    ])


def export_history(items: Sequence[HistoryItem], fmt: ExportFormat) -> ExportedFile:
    if not items:
        raise ExportError("No history to export.")

    if fmt == ExportFormat.CSV:
        return _make_file("history", fmt, history_to_csv(items))
    if fmt == ExportFormat.PDF:
        return _make_file("history", fmt, history_to_pdf(items))

    content = _dump_json([item.model_dump(mode="json", by_alias=True) for item in items])
    notice = None if fmt == ExportFormat.JSON else _fallback_notice(fmt, "history")
    return _make_file("history", ExportFormat.JSON, content, notice)
