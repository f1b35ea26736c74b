from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from copyspark.errors import FieldIssue

R = TypeVar("R", bound=BaseModel)


@dataclass
class ValidationResult(Generic[R]):
    is_valid: bool
    errors: List[FieldIssue] = field(default_factory=list)
    value: Optional[R] = None

    @classmethod
    def success(cls, value: R) -> "ValidationResult[R]":
        return cls(is_valid=True, errors=[], value=value)

    @classmethod
    def failure(cls, errors: List[FieldIssue]) -> "ValidationResult[R]":
        return cls(is_valid=False, errors=errors)


def _dotted(loc) -> str:
    """("targetAudience", "interests") -> "targetAudience.interests" """
    return ".".join(str(part) for part in loc)


def issues_from_pydantic(exc: PydanticValidationError) -> List[FieldIssue]:
    return [
        FieldIssue(
            path=_dotted(err.get("loc", ())),
            message=err.get("msg", "invalid value"),
            kind=err.get("type", "value_error"),
        )
        for err in exc.errors()
    ]


def validate_record(model: Type[R], payload: Any) -> ValidationResult[R]:
    """
    Validate an untyped payload against a record model.

    Every offending field is reported, addressed by its dotted wire path.
    Never raises for bad data.
    """
    if isinstance(payload, model):
        # re-check instances built elsewhere (model_construct skips validation)
        payload = payload.model_dump(by_alias=True)

    if not isinstance(payload, dict):
        return ValidationResult.failure([
            FieldIssue(
                path="",
                message=f"expected an object, got {type(payload).__name__}",
                kind="model_type",
            )
        ])

    try:
        return ValidationResult.success(model.model_validate(payload))
    except PydanticValidationError as e:
        return ValidationResult.failure(issues_from_pydantic(e))


def output_schema_for(model: Type[BaseModel]) -> dict:
    """JSON schema (wire names, field descriptions) handed to the model."""
    return model.model_json_schema(by_alias=True)
