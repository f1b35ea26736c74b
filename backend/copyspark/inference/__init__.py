from copyspark.inference.base import ModelInvoker
from copyspark.inference.chat_completions_client import ChatCompletionsClient
from copyspark.inference.config import get_model_invoker

__all__ = ["ModelInvoker", "ChatCompletionsClient", "get_model_invoker"]
