from typing import Any

from copyspark.flows.base import GenerationFlow
from copyspark.inference.base import ModelInvoker
from copyspark.prompts.template import PromptTemplate
from copyspark.records.seo import SeoRequest, SeoResult

FLOW_NAME = "optimizeContentForSeo"

PROMPT = PromptTemplate.from_file("optimizeContentForSeoPrompt", "seo.txt", SeoRequest)


def seo_flow(invoker: ModelInvoker) -> GenerationFlow[SeoRequest, SeoResult]:
    return GenerationFlow(FLOW_NAME, SeoRequest, SeoResult, PROMPT, invoker)


async def optimize_content_for_seo(payload: Any, invoker: ModelInvoker) -> SeoResult:
    """Suggest keywords plus title/description metadata for a piece of content."""
    return await seo_flow(invoker).run(payload)
