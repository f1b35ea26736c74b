"""
HTTP request bodies.

These carry the form rules the dashboard applies before a flow is called
(minimum lengths, variation range, tone / language selections). The flows
themselves only enforce their record shapes.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TONES = ["Professional", "Witty", "Bold", "Casual", "Informative", "Sarcastic", "Friendly", "Luxury"]
LANGUAGES = ["English", "Spanish", "French", "German", "Mandarin", "Japanese", "Portuguese"]
GENDERS = ["All", "Female", "Male", "Non-binary"]

# dashboard wording for a missing or too-short field, by wire path
FORM_MESSAGES = {
    "productName": "Product name is required.",
    "productDescription": "Description must be at least 10 characters.",
    "targetAudience.ageRange": "Age range is required (e.g., 25-35).",
    "targetAudience.location": "Location is required.",
    "targetAudience.interests": "Interests are required.",
    "copy": "Content must be at least 10 characters.",
    "content": "Content must be at least 10 characters.",
}
FORM_MESSAGE_KINDS = ("missing", "string_too_short")


class _Body(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StyleOptions(_Body):
    tone: str = TONES[0]
    language: str = LANGUAGES[0]


class AudienceForm(_Body):
    age_range: str = Field(..., min_length=2)
    gender: str = GENDERS[0]
    location: str = Field(..., min_length=2)
    interests: str = Field(..., min_length=2)


class AdCopyForm(StyleOptions):
    product_name: str = Field(..., min_length=2)
    product_description: str = Field(..., min_length=10)
    target_audience: AudienceForm
    number_of_variations: int = Field(3, ge=1, le=5)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "productName": self.product_name,
            "productDescription": (
                f"Style: {self.tone}. Language: {self.language}. "
                f"Description: {self.product_description}"
            ),
            "targetAudience": self.target_audience.model_dump(by_alias=True),
            "numberOfVariations": self.number_of_variations,
        }


class SocialPostForm(StyleOptions):
    copy_text: str = Field(..., alias="copy", min_length=10)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "copy": f"Tone: {self.tone}. Language: {self.language}. Content: {self.copy_text}",
        }


class SeoForm(_Body):
    content: str = Field(..., min_length=10)
    target_keyword: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"content": self.content}
        # a blank keyword box means "no keyword"
        if self.target_keyword and self.target_keyword.strip():
            payload["targetKeyword"] = self.target_keyword.strip()
        return payload


class FormOptions(BaseModel):
    tones: List[str] = TONES
    languages: List[str] = LANGUAGES
    genders: List[str] = GENDERS
