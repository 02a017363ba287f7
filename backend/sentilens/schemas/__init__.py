"""API请求/响应模型"""
from sentilens.schemas.analysis import (
    Sentiment,
    SpanSentiment,
    ModerationCategory,
    SentimentScore,
    EmotionScore,
    Keyword,
    HighlightedSpan,
    ModerationWarning,
    AnalysisResult,
    AnalyzeRequest,
)
from sentilens.schemas.comparison import ComparisonResult, CompareRequest
from sentilens.schemas.history import (
    HistoryItem,
    HistoryDashboard,
    HistoryDashboardResponse,
    SentimentCounts,
    SentimentTrendPoint,
    KeywordFrequency,
)
from sentilens.schemas.accuracy import AccuracySample, AccuracyItem, AccuracyReport, SampleText
from sentilens.schemas.export import ExportFormat, AnalysisExportRequest, ComparisonExportRequest

__all__ = [
    "Sentiment",
    "SpanSentiment",
    "ModerationCategory",
    "SentimentScore",
    "EmotionScore",
    "Keyword",
    "HighlightedSpan",
    "ModerationWarning",
    "AnalysisResult",
    "AnalyzeRequest",
    "ComparisonResult",
    "CompareRequest",
    "HistoryItem",
    "HistoryDashboard",
    "HistoryDashboardResponse",
    "SentimentCounts",
    "SentimentTrendPoint",
    "KeywordFrequency",
    "AccuracySample",
    "AccuracyItem",
    "AccuracyReport",
    "SampleText",
    "ExportFormat",
    "AnalysisExportRequest",
    "ComparisonExportRequest",
]
