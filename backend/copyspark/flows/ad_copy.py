from typing import Any

from copyspark.flows.base import GenerationFlow
from copyspark.inference.base import ModelInvoker
from copyspark.prompts.template import PromptTemplate
from copyspark.records.ad_copy import AdCopyRequest, AdCopyResult

FLOW_NAME = "generateAdCopyVariations"

PROMPT = PromptTemplate.from_file("generateAdCopyVariationsPrompt", "ad_copy.txt", AdCopyRequest)


def ad_copy_flow(invoker: ModelInvoker) -> GenerationFlow[AdCopyRequest, AdCopyResult]:
    return GenerationFlow(FLOW_NAME, AdCopyRequest, AdCopyResult, PROMPT, invoker)


async def generate_ad_copy_variations(payload: Any, invoker: ModelInvoker) -> AdCopyResult:
    """Generate ad copy variations, each paired with an AIDA/PAS rationale."""
    return await ad_copy_flow(invoker).run(payload)
