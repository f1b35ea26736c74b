import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

import requests

from copyspark.errors import InvocationError
from copyspark.inference.base import ModelInvoker
from copyspark.llm.parser import ReplyParseError, load_json_reply
from copyspark.logging_utils import get_logger, log_event


SYSTEM_PROMPT = """
You produce marketing content as strict JSON.

Rules:
- Output ONLY valid JSON
- No markdown, no explanations
- The JSON must conform to this JSON schema:
"""

_log = get_logger("inference")


class ChatCompletionsClient(ModelInvoker):
    """
    Model invoker for any OpenAI-compatible /chat/completions endpoint.

    The HTTP call is blocking (requests) and runs in a worker thread so the
    event loop stays free.
    """

    def __init__(
        self,
        base_url: str,
        model: str,
        temperature: float = 0.7,
        timeout: float = 60,
        api_key: Optional[str] = None,
        json_mode: bool = True,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.temperature = temperature
        self.timeout = timeout
        self.api_key = api_key
        self.json_mode = json_mode

    def build_messages(self, prompt: str, output_schema: Dict[str, Any]) -> List[Dict[str, str]]:
        return [
            {
                "role": "system",
                "content": SYSTEM_PROMPT + json.dumps(output_schema, indent=2),
            },
            {"role": "user", "content": prompt},
        ]

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def generate(self, messages: List[Dict[str, str]]) -> str:
        """Blocking call; returns the assistant text."""
        url = f"{self.base_url}/chat/completions"
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
        }
        if self.json_mode:
            payload["response_format"] = {"type": "json_object"}

        try:
            response = requests.post(
                url,
                json=payload,
                headers=self._headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.Timeout as e:
            raise InvocationError(
                f"model request timed out after {self.timeout}s",
                details={"url": url, "model": self.model},
                timeout=True,
            ) from e
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise InvocationError(
                f"model service returned HTTP {status}",
                details={"url": url, "model": self.model, "status": status},
            ) from e
        except requests.RequestException as e:
            raise InvocationError(
                f"model service unreachable: {e}",
                details={"url": url, "model": self.model},
            ) from e

        try:
            return response.json()["choices"][0]["message"]["content"] or ""
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise InvocationError(
                "malformed chat completions envelope",
                details={"url": url, "model": self.model},
            ) from e

    def _invoke_sync(self, prompt: str, output_schema: Dict[str, Any]) -> Any:
        content = self.generate(self.build_messages(prompt, output_schema))
        try:
            return load_json_reply(content)
        except ReplyParseError as e:
            raise InvocationError(
                f"unparseable model reply: {e}",
                details={"model": self.model, "reply_length": len(content)},
            ) from e

    async def invoke(self, prompt: str, output_schema: Dict[str, Any]) -> Any:
        try:
            return await asyncio.to_thread(self._invoke_sync, prompt, output_schema)
        except InvocationError as e:
            log_event(logging.WARNING, "model invocation failed", _log, model=self.model, error=e.message)
            raise
