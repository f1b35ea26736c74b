from copyspark import config
from copyspark.inference.chat_completions_client import ChatCompletionsClient


def get_model_invoker() -> ChatCompletionsClient:
    return ChatCompletionsClient(
        base_url=config.LLM_BASE_URL,
        model=config.LLM_MODEL,
        temperature=config.LLM_TEMPERATURE,
        timeout=config.LLM_TIMEOUT,
        api_key=config.LLM_API_KEY,
        json_mode=config.LLM_JSON_MODE,
    )
