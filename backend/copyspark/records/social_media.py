from typing import Tuple

from pydantic import Field, StrictStr

from copyspark.records.base import Record


class SocialPostRequest(Record):
    copy_text: StrictStr = Field(
        ..., alias="copy", description="The copy to generate social media content from."
    )


class SocialPostResult(Record):
    content: StrictStr = Field(..., description="The generated social media content.")
    hashtags: Tuple[StrictStr, ...] = Field(..., description="The suggested hashtags.")
