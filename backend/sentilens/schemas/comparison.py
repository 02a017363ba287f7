"""双文本对比相关的请求/响应模型"""
from typing import List

from pydantic import Field

from sentilens.schemas.base import CamelModel


class ComparisonResult(CamelModel):
    """双文本对比结果"""
    summary_a: str
    summary_b: str
    sentiment_comparison: str
    shared_themes: List[str]
    unique_themes_a: List[str]
    unique_themes_b: List[str]
    verdict: str


class CompareRequest(CamelModel):
    """对比请求"""
    text_a: str = Field(default="", description="文本 A")
    text_b: str = Field(default="", description="文本 B")
