from typing import Any

from copyspark.flows.base import GenerationFlow
from copyspark.inference.base import ModelInvoker
from copyspark.prompts.template import PromptTemplate
from copyspark.records.social_media import SocialPostRequest, SocialPostResult

FLOW_NAME = "generateSocialMediaContent"

PROMPT = PromptTemplate.from_file(
    "generateSocialMediaContentPrompt", "social_media.txt", SocialPostRequest
)


def social_post_flow(invoker: ModelInvoker) -> GenerationFlow[SocialPostRequest, SocialPostResult]:
    return GenerationFlow(FLOW_NAME, SocialPostRequest, SocialPostResult, PROMPT, invoker)


async def generate_social_media_content(payload: Any, invoker: ModelInvoker) -> SocialPostResult:
    return await social_post_flow(invoker).run(payload)
