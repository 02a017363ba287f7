"""单文本分析结果相关的请求/响应模型"""
import enum
from typing import List

from pydantic import Field

from sentilens.schemas.base import CamelModel


class Sentiment(str, enum.Enum):
    """整体情感"""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class SpanSentiment(str, enum.Enum):
    """高亮片段情感，none 表示不带情感"""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    NONE = "none"


class ModerationCategory(str, enum.Enum):
    """内容审核类别"""
    HATE_SPEECH = "hate_speech"
    PROFANITY = "profanity"
    RACIAL_SLURS = "racial_slurs"
    OFFENSIVE_LANGUAGE = "offensive_language"
    SELF_HARM = "self_harm"


class SentimentScore(CamelModel):
    """三分类情感得分，归一化后总和为 100"""
    positive: float = Field(ge=0)
    negative: float = Field(ge=0)
    neutral: float = Field(ge=0)


class EmotionScore(CamelModel):
    """六维情绪得分，各自 0-100"""
    joy: float = Field(ge=0, le=100)
    sadness: float = Field(ge=0, le=100)
    anger: float = Field(ge=0, le=100)
    fear: float = Field(ge=0, le=100)
    surprise: float = Field(ge=0, le=100)
    disgust: float = Field(ge=0, le=100)


class Keyword(CamelModel):
    word: str
    sentiment: Sentiment
    score: float = Field(ge=0, le=1)


class HighlightedSpan(CamelModel):
    text: str
    sentiment: SpanSentiment


class ModerationWarning(CamelModel):
    category: ModerationCategory
    confidence: float = Field(ge=0, le=1)
    flagged_text: str


class AnalysisResult(CamelModel):
    """单文本分析结果"""
    overall_sentiment: Sentiment
    sentiment_score: SentimentScore
    emotion_score: EmotionScore
    keywords: List[Keyword]
    highlighted_spans: List[HighlightedSpan]
    moderation: List[ModerationWarning]
    explanation: str


class AnalyzeRequest(CamelModel):
    """分析请求"""
    text: str = Field(..., description="待分析文本")
    save_to_history: bool = Field(default=True, description="成功后写入历史记录")
