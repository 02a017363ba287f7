"""双文本对比分析"""
from pydantic import ValidationError

from sentilens.analyzers.llm_client import LLMClient
from sentilens.errors import ComparisonError
from sentilens.schemas.comparison import ComparisonResult
from sentilens.utils.logger import get_logger
from prompts.analysis_prompts import build_comparison_request

logger = get_logger(__name__)


class ComparisonAnalyzer:
    """对比两段文本的主题与情感，结果无需归一化"""

    def __init__(self, llm: LLMClient):
        self.llm = llm

    async def compare(self, text_a: str, text_b: str) -> ComparisonResult:
        request = build_comparison_request(text_a, text_b)

        try:
            raw = await self.llm.generate_structured(
                prompt=request.prompt,
                schema=request.schema,
                schema_name=request.schema_name,
                system_prompt=request.system_prompt,
            )
        except Exception as exc:
            logger.exception("LLM comparison request failed: %s", exc)
            raise ComparisonError() from exc

        try:
            if not isinstance(raw, str):
                raise TypeError(f"Expected JSON text, got {type(raw).__name__}")
            return ComparisonResult.model_validate_json(raw.strip())
        except (ValidationError, ValueError, TypeError) as exc:
            logger.error("LLM comparison response did not match schema: %s", exc)
            raise ComparisonError() from exc
