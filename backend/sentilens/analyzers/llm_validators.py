"""Validation helpers for LLM outputs."""
from typing import List, Sequence

from sentilens.schemas.analysis import HighlightedSpan, SpanSentiment
from sentilens.utils.logger import get_logger

logger = get_logger(__name__)


def spans_reconstruct_text(text: str, spans: Sequence[HighlightedSpan]) -> bool:
    """True when the span texts, joined in order, equal ``text`` exactly."""
    return "".join(span.text for span in spans) == text


def validate_highlighted_spans(
    text: str,
    spans: Sequence[HighlightedSpan],
) -> List[HighlightedSpan]:
    """Return ``spans`` unchanged if they rebuild ``text``, else one neutral span.

    No partial repair is attempted: any mismatch degrades to a single span
    covering the whole text with sentiment ``none``.
    """
    if spans_reconstruct_text(text, spans):
        return list(spans)

    logger.warning(
        "Highlighted spans do not reconstruct the original text "
        "(%d spans, %d chars expected); falling back to a single span.",
        len(spans),
        len(text),
    )
    return [HighlightedSpan(text=text, sentiment=SpanSentiment.NONE)]
