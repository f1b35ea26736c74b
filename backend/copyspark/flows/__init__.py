"""
The three generation flows.

Each flow is built around an injected ModelInvoker; nothing here holds a
process-wide client.
"""

from typing import Dict

from copyspark.flows.base import GenerationFlow
from copyspark.flows.ad_copy import ad_copy_flow, generate_ad_copy_variations
from copyspark.flows.social_media import generate_social_media_content, social_post_flow
from copyspark.flows.seo import optimize_content_for_seo, seo_flow
from copyspark.inference.base import ModelInvoker


def build_flows(invoker: ModelInvoker) -> Dict[str, GenerationFlow]:
    flows = [ad_copy_flow(invoker), social_post_flow(invoker), seo_flow(invoker)]
    return {flow.name: flow for flow in flows}


__all__ = [
    "GenerationFlow",
    "build_flows",
    "ad_copy_flow",
    "social_post_flow",
    "seo_flow",
    "generate_ad_copy_variations",
    "generate_social_media_content",
    "optimize_content_for_seo",
]
