"""历史记录聚合统计（仪表盘数据）"""
from typing import Dict, List, Optional, Sequence

from sentilens.schemas.analysis import Sentiment
from sentilens.schemas.history import (
    HistoryDashboard,
    HistoryItem,
    KeywordFrequency,
    SentimentCounts,
    SentimentTrendPoint,
)

EMOTIONS = ["joy", "sadness", "anger", "fear", "surprise", "disgust"]
WORD_CLOUD_LIMIT = 50


def _most_common(counts: Dict[Sentiment, int]) -> Sentiment:
    # ties go to the later sentiment in positive/negative/neutral order
    best = Sentiment.POSITIVE
    for sentiment in (Sentiment.NEGATIVE, Sentiment.NEUTRAL):
        if counts[sentiment] >= counts[best]:
            best = sentiment
    return best


def _keyword_frequencies(items: Sequence[HistoryItem]) -> List[KeywordFrequency]:
    counts: Dict[str, int] = {}
    for item in items:
        for keyword in item.result.keywords:
            word = keyword.word.lower()
            counts[word] = counts.get(word, 0) + 1
    ranked = sorted(counts.items(), key=lambda pair: pair[1], reverse=True)
    return [KeywordFrequency(text=word, value=value) for word, value in ranked[:WORD_CLOUD_LIMIT]]


def build_history_dashboard(items: Sequence[HistoryItem]) -> Optional[HistoryDashboard]:
    if not items:
        return None

    counts = {sentiment: 0 for sentiment in Sentiment}
    for item in items:
        counts[item.result.overall_sentiment] += 1

    trend = [
        SentimentTrendPoint(
            timestamp=item.timestamp,
            positive=item.result.sentiment_score.positive,
            negative=item.result.sentiment_score.negative,
            neutral=item.result.sentiment_score.neutral,
        )
        for item in sorted(items, key=lambda h: h.timestamp)
    ]

    totals = {emotion: 0.0 for emotion in EMOTIONS}
    for item in items:
        for emotion in EMOTIONS:
            totals[emotion] += getattr(item.result.emotion_score, emotion)

    return HistoryDashboard(
        stats=SentimentCounts(
            total=len(items),
            positive=counts[Sentiment.POSITIVE],
            negative=counts[Sentiment.NEGATIVE],
            neutral=counts[Sentiment.NEUTRAL],
        ),
        most_common=_most_common(counts),
        sentiment_trend=trend,
        word_cloud=_keyword_frequencies(items),
        emotion_averages={emotion: total / len(items) for emotion, total in totals.items()},
    )
