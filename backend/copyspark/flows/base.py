import asyncio
import logging
from typing import Any, Generic, Type, TypeVar

from pydantic import BaseModel

from copyspark.errors import InvalidInput, InvalidModelOutput, InvocationError
from copyspark.inference.base import ModelInvoker
from copyspark.logging_utils import get_logger, log_event
from copyspark.prompts.template import PromptTemplate
from copyspark.validation import output_schema_for, validate_record

InT = TypeVar("InT", bound=BaseModel)
OutT = TypeVar("OutT", bound=BaseModel)

_log = get_logger("flows")


class GenerationFlow(Generic[InT, OutT]):
    """
    request -> validate -> render prompt -> invoke model -> validate reply

    Holds no per-request state; one instance can serve concurrent calls.
    """

    def __init__(
        self,
        name: str,
        input_model: Type[InT],
        output_model: Type[OutT],
        template: PromptTemplate,
        invoker: ModelInvoker,
    ):
        if template.input_model is not input_model:
            raise ValueError(
                f"{name}: template '{template.name}' is bound to "
                f"{template.input_model.__name__}, not {input_model.__name__}"
            )
        self.name = name
        self.input_model = input_model
        self.output_model = output_model
        self.template = template
        self.invoker = invoker
        self.output_schema = output_schema_for(output_model)

    def validate_input(self, payload: Any) -> InT:
        result = validate_record(self.input_model, payload)
        if not result.is_valid:
            log_event(logging.WARNING, "invalid input", _log, flow=self.name, fields=len(result.errors))
            raise InvalidInput(self.name, result.errors)
        return result.value

    def render(self, payload: Any) -> str:
        """Validate the payload and return the prompt, without calling the model."""
        return self.template.render(self.validate_input(payload))

    async def _invoke(self, prompt: str) -> Any:
        try:
            return await self.invoker.invoke(prompt, self.output_schema)
        except InvocationError:
            raise
        except asyncio.TimeoutError as e:
            raise InvocationError(
                f"{self.name}: model invocation timed out",
                details={"flow": self.name},
                timeout=True,
            ) from e
        except Exception as e:
            raise InvocationError(
                f"{self.name}: model invocation failed: {e}",
                details={"flow": self.name, "error": type(e).__name__},
            ) from e

    def validate_output(self, raw: Any) -> OutT:
        result = validate_record(self.output_model, raw)
        if not result.is_valid:
            log_event(logging.WARNING, "invalid model output", _log, flow=self.name, fields=len(result.errors))
            raise InvalidModelOutput(self.name, result.errors)
        return result.value

    async def run(self, payload: Any) -> OutT:
        prompt = self.render(payload)
        log_event(logging.DEBUG, "invoking model", _log, flow=self.name, prompt_chars=len(prompt))

        raw = await self._invoke(prompt)
        return self.validate_output(raw)

    async def __call__(self, payload: Any) -> OutT:
        return await self.run(payload)
