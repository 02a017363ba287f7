"""情感分析器"""
from pydantic import ValidationError

from sentilens.analyzers.llm_client import LLMClient
from sentilens.analyzers.llm_validators import validate_highlighted_spans
from sentilens.analyzers.scoring import normalize_sentiment_scores
from sentilens.errors import AnalysisError
from sentilens.schemas.analysis import AnalysisResult
from sentilens.utils.logger import get_logger
from prompts.analysis_prompts import build_analysis_request

logger = get_logger(__name__)


class SentimentAnalyzer:
    """单文本情感分析：请求 -> 解析 -> 片段校验 -> 得分归一化"""

    def __init__(self, llm: LLMClient):
        self.llm = llm

    async def analyze(self, text: str) -> AnalysisResult:
        """调用一次模型并返回校验、归一化后的结果；任何失败都抛出 AnalysisError"""
        request = build_analysis_request(text)

        try:
            raw = await self.llm.generate_structured(
                prompt=request.prompt,
                schema=request.schema,
                schema_name=request.schema_name,
                system_prompt=request.system_prompt,
            )
        except Exception as exc:
            logger.exception("LLM analysis request failed: %s", exc)
            raise AnalysisError() from exc

        try:
            parsed = self._parse(raw)
        except (ValidationError, ValueError, TypeError) as exc:
            logger.error("LLM analysis response did not match schema: %s", exc)
            raise AnalysisError() from exc

        try:
            spans = validate_highlighted_spans(text, parsed.highlighted_spans)
            scores = normalize_sentiment_scores(parsed.sentiment_score)
        except Exception as exc:
            logger.exception("Unexpected error while post-processing analysis: %s", exc)
            raise AnalysisError() from exc

        return parsed.model_copy(update={
            "highlighted_spans": spans,
            "sentiment_score": scores,
        })

    def _parse(self, raw: str) -> AnalysisResult:
        if not isinstance(raw, str):
            raise TypeError(f"Expected JSON text, got {type(raw).__name__}")
        return AnalysisResult.model_validate_json(raw.strip())
