"""历史记录与仪表盘模型"""
from typing import Dict, List, Optional

from sentilens.schemas.analysis import AnalysisResult, Sentiment
from sentilens.schemas.base import CamelModel


class HistoryItem(CamelModel):
    """一条分析历史"""
    id: str
    timestamp: int
    text: str
    result: AnalysisResult


class SentimentCounts(CamelModel):
    total: int
    positive: int
    negative: int
    neutral: int


class SentimentTrendPoint(CamelModel):
    timestamp: int
    positive: float
    negative: float
    neutral: float


class KeywordFrequency(CamelModel):
    text: str
    value: int


class HistoryDashboard(CamelModel):
    """历史聚合统计"""
    stats: SentimentCounts
    most_common: Sentiment
    sentiment_trend: List[SentimentTrendPoint]
    word_cloud: List[KeywordFrequency]
    emotion_averages: Dict[str, float]


class HistoryDashboardResponse(CamelModel):
    dashboard: Optional[HistoryDashboard] = None
