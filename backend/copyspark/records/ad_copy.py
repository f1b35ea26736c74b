from typing import Tuple

from pydantic import Field, StrictInt, StrictStr

from copyspark.records.base import Record


# ---- Input ----

class AudienceProfile(Record):
    age_range: StrictStr = Field(..., description="The age range of the target audience, e.g. 25-35.")
    gender: StrictStr = Field(..., description="The gender of the target audience.")
    location: StrictStr = Field(..., description="The geographic location of the target audience.")
    interests: StrictStr = Field(..., description="The interests and hobbies of the target audience.")


class AdCopyRequest(Record):
    product_name: StrictStr = Field(..., description="The name of the product.")
    product_description: StrictStr = Field(..., description="A detailed description of the product.")
    target_audience: AudienceProfile = Field(..., description="The target audience for the ad copy.")
    # hint for the model, not enforced against the reply
    number_of_variations: StrictInt = Field(
        ..., ge=0, description="The number of ad copy variations to generate."
    )


# ---- Output ----

class AdCopyVariation(Record):
    copy_text: StrictStr = Field(..., alias="copy", description="The ad copy variation.")
    explanation: StrictStr = Field(
        ...,
        description=(
            "Why this copy works for the target audience, naming the "
            "persuasion framework (AIDA or PAS) that was applied."
        ),
    )


class AdCopyResult(Record):
    ad_copy_variations: Tuple[AdCopyVariation, ...] = Field(
        ..., description="An array of ad copy variations, each with an explanation."
    )
