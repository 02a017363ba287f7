"""LLM客户端封装"""
import asyncio
from typing import Optional, Dict, Any, List

from openai import OpenAI

from sentilens.config import Settings


class LLMClient:
    """LLM API客户端，配置显式传入"""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str = "",
        timeout: float = 60.0,
        temperature: float = 0.2,
        max_tokens: int = 4000,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.model = model
        self.timeout = timeout
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.client = OpenAI(
            api_key=self.api_key,
            base_url=self.base_url or None,
            timeout=self.timeout,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "LLMClient":
        return cls(
            api_key=settings.llm_api_key,
            model=settings.llm_model,
            base_url=settings.llm_api_base_url,
            timeout=settings.llm_timeout,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
        )

    def _chat_sync(self, payload: Dict[str, Any]) -> str:
        response = self.client.chat.completions.create(**payload)
        return response.choices[0].message.content or ""

    async def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        response_format: Optional[Dict[str, Any]] = None,
    ) -> str:
        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature if temperature is None else temperature,
            "max_tokens": self.max_tokens if max_tokens is None else max_tokens,
        }

        if response_format is not None:
            payload["response_format"] = response_format

        return await asyncio.to_thread(self._chat_sync, payload)

    async def generate_structured(
        self,
        prompt: str,
        schema: Dict[str, Any],
        schema_name: str = "structured_output",
        system_prompt: str = "You are a helpful assistant that responds in JSON format.",
    ) -> str:
        """单次调用，返回符合 schema 的原始 JSON 文本（不解析、不重试）"""
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": prompt},
        ]
        response_format = {
            "type": "json_schema",
            "json_schema": {
                "name": schema_name,
                "schema": schema,
                "strict": True,
            },
        }
        return await self.chat(messages, response_format=response_format)
