"""
Prompt templates with named placeholders and conditional sections.

Syntax:
    {{productName}}                  -> field value, by wire name
    {{targetAudience.interests}}     -> dotted path into a nested record
    {{#if targetKeyword}}...{{/if}}  -> kept only when the field is present

Templates are checked against their input record when they are defined,
so a typo in a placeholder fails at import time, not at request time.
"""

import re
import typing
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel

from copyspark.errors import TemplateError


PROMPT_DIR = Path(__file__).resolve().parent

_BLOCK = re.compile(r"\{\{#if\s+([\w.]+)\s*\}\}(.*?)\{\{/if\}\}", re.DOTALL)
_PLACEHOLDER = re.compile(r"\{\{\s*([\w.]+)\s*\}\}")
_TOKEN = re.compile(
    r"\{\{#if\s+(?P<cond>[\w.]+)\s*\}\}(?P<body>.*?)\{\{/if\}\}"
    r"|\{\{\s*(?P<path>[\w.]+)\s*\}\}",
    re.DOTALL,
)


def load_prompt(filename: str) -> str:
    """
    Load a prompt template shipped next to this module.
    """
    return (PROMPT_DIR / filename).read_text(encoding="utf-8")


# ----------------------------
# Schema introspection
# ----------------------------

def _nested_model(annotation: Any) -> Optional[Type[BaseModel]]:
    """Unwrap Optional[...] and return the record class, if any."""
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    for arg in typing.get_args(annotation):
        if isinstance(arg, type) and issubclass(arg, BaseModel):
            return arg
    return None


def _fields_by_wire_name(model: Type[BaseModel]) -> Dict[str, Any]:
    return {
        (info.alias or name): info
        for name, info in model.model_fields.items()
    }


def resolve_path(model: Type[BaseModel], path: str) -> bool:
    """
    Check that a dotted wire path is declared by the record.

    Returns True when every segment is required, False when any segment is
    optional. Raises TemplateError for undeclared paths.
    """
    required = True
    current: Optional[Type[BaseModel]] = model
    parts = path.split(".")

    for i, part in enumerate(parts):
        if current is None:
            raise TemplateError(
                f"'{path}': '{parts[i - 1]}' is not a nested record"
            )
        info = _fields_by_wire_name(current).get(part)
        if info is None:
            raise TemplateError(
                f"'{path}' is not declared by {model.__name__}"
            )
        required = required and info.is_required()
        current = _nested_model(info.annotation)

    return required


# ----------------------------
# Rendering helpers
# ----------------------------

_MISSING = object()


def _lookup(data: Dict[str, Any], path: str) -> Any:
    value: Any = data
    for part in path.split("."):
        if not isinstance(value, dict) or part not in value:
            return _MISSING
        value = value[part]
    return value


def _is_present(value: Any) -> bool:
    if value is _MISSING or value is None:
        return False
    if isinstance(value, (str, list, tuple, dict)) and not value:
        return False
    return True


def _format(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(_format(v) for v in value)
    return str(value)


class PromptTemplate:
    """
    A fixed prompt text bound to one input record type.

    Rendering is a pure function of the record.
    """

    def __init__(self, name: str, text: str, input_model: Type[BaseModel]):
        self.name = name
        self.text = text
        self.input_model = input_model
        self.placeholders: List[str] = []
        self.conditions: List[str] = []
        self._check()

    @classmethod
    def from_file(
        cls, name: str, filename: str, input_model: Type[BaseModel]
    ) -> "PromptTemplate":
        return cls(name, load_prompt(filename), input_model)

    # ----------------------------
    # Definition-time checks
    # ----------------------------

    def _check(self) -> None:
        blocks: List[Tuple[str, str]] = _BLOCK.findall(self.text)

        for condition, body in blocks:
            if "{{#if" in body:
                raise TemplateError(f"{self.name}: nested conditional sections are not supported")
            resolve_path(self.input_model, condition)
            self.conditions.append(condition)

            for path in _PLACEHOLDER.findall(body):
                required = resolve_path(self.input_model, path)
                guarded = path == condition or path.startswith(condition + ".")
                if not required and not guarded:
                    raise TemplateError(
                        f"{self.name}: optional field '{path}' used outside "
                        f"a '{{{{#if {path}}}}}' section"
                    )
                self.placeholders.append(path)

            if "{{" in _PLACEHOLDER.sub("", body):
                raise TemplateError(f"{self.name}: malformed tag inside '{condition}' section")

        outside = _BLOCK.sub("", self.text)
        for path in _PLACEHOLDER.findall(outside):
            if not resolve_path(self.input_model, path):
                raise TemplateError(
                    f"{self.name}: optional field '{path}' used outside "
                    f"a '{{{{#if {path}}}}}' section"
                )
            self.placeholders.append(path)

        leftover = _PLACEHOLDER.sub("", outside)
        if "{{" in leftover or "}}" in leftover:
            raise TemplateError(f"{self.name}: unbalanced or malformed template tags")

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self, record: BaseModel) -> str:
        if not isinstance(record, self.input_model):
            raise TypeError(
                f"{self.name} renders {self.input_model.__name__}, "
                f"got {type(record).__name__}"
            )

        data = record.model_dump(by_alias=True)

        def value_of(path: str) -> str:
            value = _lookup(data, path)
            if value is _MISSING or value is None:
                raise TemplateError(f"{self.name}: no value for '{path}'")
            return _format(value)

        def substitute(text: str) -> str:
            return _PLACEHOLDER.sub(lambda m: value_of(m.group(1)), text)

        # single left-to-right pass: inserted values are never re-scanned
        def token(match: "re.Match[str]") -> str:
            if match.group("cond") is not None:
                if not _is_present(_lookup(data, match.group("cond"))):
                    return ""
                return substitute(match.group("body"))
            return value_of(match.group("path"))

        return _TOKEN.sub(token, self.text)
