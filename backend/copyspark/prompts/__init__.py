from copyspark.prompts.template import (
    PROMPT_DIR,
    PromptTemplate,
    load_prompt,
    resolve_path,
)

__all__ = [
    "PROMPT_DIR",
    "PromptTemplate",
    "load_prompt",
    "resolve_path",
]
