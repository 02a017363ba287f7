"""准确率报告模型"""
from typing import Dict, List

from sentilens.schemas.analysis import AnalysisResult, Sentiment
from sentilens.schemas.base import CamelModel


class AccuracySample(CamelModel):
    """人工标注样本及其 API 分析结果"""
    id: int
    text: str
    manual_sentiment: Sentiment
    api_result: AnalysisResult


class AccuracyItem(CamelModel):
    id: int
    text: str
    manual_sentiment: Sentiment
    api_sentiment: Sentiment
    is_correct: bool


class AccuracyReport(CamelModel):
    total_samples: int
    correct_predictions: int
    accuracy: float
    confusion_matrix: Dict[Sentiment, Dict[Sentiment, int]]
    items: List[AccuracyItem]


class SampleText(CamelModel):
    id: int
    text: str
    manual_sentiment: Sentiment
