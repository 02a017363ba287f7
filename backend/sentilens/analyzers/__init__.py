"""AI分析模块"""
from sentilens.analyzers.llm_client import LLMClient
from sentilens.analyzers.sentiment import SentimentAnalyzer
from sentilens.analyzers.comparison import ComparisonAnalyzer
from sentilens.analyzers.scoring import normalize_sentiment_scores, normalize_sentiment_triple
from sentilens.analyzers.llm_validators import validate_highlighted_spans

__all__ = [
    "LLMClient",
    "SentimentAnalyzer",
    "ComparisonAnalyzer",
    "normalize_sentiment_scores",
    "normalize_sentiment_triple",
    "validate_highlighted_spans",
]
