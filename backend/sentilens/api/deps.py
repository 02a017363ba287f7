"""API dependencies."""
from fastapi import Request

from sentilens.analyzers.comparison import ComparisonAnalyzer
from sentilens.analyzers.sentiment import SentimentAnalyzer
from sentilens.config import Settings
from sentilens.services.history_store import HistoryStore


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_sentiment_analyzer(request: Request) -> SentimentAnalyzer:
    return request.app.state.sentiment_analyzer


def get_comparison_analyzer(request: Request) -> ComparisonAnalyzer:
    return request.app.state.comparison_analyzer


def get_history_store(request: Request) -> HistoryStore:
    return request.app.state.history_store
