"""分析与对比API"""
from fastapi import APIRouter, Depends

from sentilens.analyzers.comparison import ComparisonAnalyzer
from sentilens.analyzers.sentiment import SentimentAnalyzer
from sentilens.api.deps import (
    get_comparison_analyzer,
    get_history_store,
    get_sentiment_analyzer,
)
from sentilens.errors import EMPTY_COMPARISON_INPUT_MESSAGE, require_text
from sentilens.schemas import AnalysisResult, AnalyzeRequest, ComparisonResult, CompareRequest
from sentilens.services.history_store import HistoryStore

router = APIRouter()


@router.post("/analysis", response_model=AnalysisResult)
async def analyze_text(
    payload: AnalyzeRequest,
    analyzer: SentimentAnalyzer = Depends(get_sentiment_analyzer),
    history: HistoryStore = Depends(get_history_store),
):
    """分析单段文本，成功后写入历史"""
    text = require_text(payload.text)
    result = await analyzer.analyze(text)
    if payload.save_to_history:
        history.add_entry(text, result)
    return result


@router.post("/comparison", response_model=ComparisonResult)
async def compare_texts(
    payload: CompareRequest,
    analyzer: ComparisonAnalyzer = Depends(get_comparison_analyzer),
):
    """对比两段文本"""
    text_a = require_text(payload.text_a, EMPTY_COMPARISON_INPUT_MESSAGE)
    text_b = require_text(payload.text_b, EMPTY_COMPARISON_INPUT_MESSAGE)
    return await analyzer.compare(text_a, text_b)
