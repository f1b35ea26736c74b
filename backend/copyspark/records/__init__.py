"""
Input / output records for the three generation flows.
"""

from copyspark.records.base import Record
from copyspark.records.ad_copy import (
    AdCopyRequest,
    AdCopyResult,
    AdCopyVariation,
    AudienceProfile,
)
from copyspark.records.social_media import SocialPostRequest, SocialPostResult
from copyspark.records.seo import SeoMetadata, SeoRequest, SeoResult

__all__ = [
    "Record",
    "AudienceProfile",
    "AdCopyRequest",
    "AdCopyVariation",
    "AdCopyResult",
    "SocialPostRequest",
    "SocialPostResult",
    "SeoRequest",
    "SeoMetadata",
    "SeoResult",
]
