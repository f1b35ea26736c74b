from typing import Optional, Tuple

from pydantic import Field, StrictStr

from copyspark.records.base import Record


class SeoRequest(Record):
    content: StrictStr = Field(..., description="The content to be optimized for SEO.")
    target_keyword: Optional[StrictStr] = Field(
        None, description="Optional target keyword for SEO optimization."
    )


class SeoMetadata(Record):
    title: StrictStr = Field(..., description="Suggested title metadata for SEO optimization.")
    description: StrictStr = Field(
        ..., description="Suggested description metadata for SEO optimization."
    )


class SeoResult(Record):
    keywords: Tuple[StrictStr, ...] = Field(
        ..., description="Suggested keywords for SEO optimization."
    )
    metadata: SeoMetadata = Field(..., description="Suggested metadata for SEO optimization.")
