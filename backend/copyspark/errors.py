"""
Error taxonomy for the generation flows.

InvalidInput        -> caller payload failed the input record schema
InvocationError     -> model service failed, timed out or sent garbage
InvalidModelOutput  -> model answered, but not in the declared shape

All three are recoverable at the flow boundary.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass
class FieldIssue:
    """A single offending field found while validating a record"""
    path: str       # dotted wire path, "" for the record itself
    message: str
    kind: str       # machine-readable error type

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "message": self.message,
            "kind": self.kind,
        }


class CopySparkError(Exception):
    """Base exception class for CopySpark errors"""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to standard error format"""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(CopySparkError):
    """Raised when an environment setting is missing or malformed"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)


class _RecordError(CopySparkError):
    """Shared shape for errors that carry per-field validation detail"""

    default_code = "RECORD_ERROR"

    def __init__(
        self,
        flow: str,
        issues: List[FieldIssue],
        message: Optional[str] = None,
    ):
        self.flow = flow
        self.issues = list(issues)
        super().__init__(
            message or f"{flow}: {len(self.issues)} invalid field(s)",
            code=self.default_code,
            details={
                "flow": flow,
                "errors": [i.to_dict() for i in self.issues],
            },
        )


class InvalidInput(_RecordError):
    """The caller's payload does not match the flow's input record"""

    default_code = "INVALID_INPUT"


class InvalidModelOutput(_RecordError):
    """The model replied, but the reply does not match the output record"""

    default_code = "INVALID_MODEL_OUTPUT"


class InvocationError(CopySparkError):
    """The model service failed to respond or returned an unusable reply"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        timeout: bool = False,
    ):
        super().__init__(message, code="INVOCATION_ERROR", details=details)
        self.timeout = timeout


class TemplateError(ValueError):
    """
    A prompt template does not fit its input record.

    Raised when the template is defined, never while serving a request.
    """
