"""Typed conversion of Value records, dispatched by block keyword.

Each converter validates one Value and returns a typed record or raises
SemanticError. `classify` runs a converter over every Value that carries the
requested keyword, either stopping at the first invalid element (strict) or
collecting every valid record alongside the per-element errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, List, Sequence, TypeVar

from ..errors import SemanticError
from ..models import ModuleReference, Output, Resource, Value, Variable

VARIABLE = "variable"
OUTPUT = "output"
RESOURCE = "resource"
MODULE = "module"

T = TypeVar("T")


@dataclass
class ClassificationResult(Generic[T]):
    """Records converted by one classify call plus the errors of skipped elements."""

    items: List[T] = field(default_factory=list)
    errors: List[SemanticError] = field(default_factory=list)


def _require_identifiers(value: Value, count: int, kind: str) -> None:
    if len(value.identifiers) < count:
        raise SemanticError(f"name is required for a {kind}", kind=kind, field="name")


def _require_attribute(value: Value, name: str, kind: str) -> str:
    attribute = value.attribute(name)
    if attribute is None:
        raise SemanticError(f"{name} is required for a {kind}", kind=kind, field=name)
    return attribute


def to_variable(value: Value) -> Variable:
    _require_identifiers(value, 1, VARIABLE)
    declared_type = _require_attribute(value, "type", VARIABLE)
    return Variable(
        name=value.identifiers[0],
        type=declared_type,
        description=value.attribute("description") or "",
        default=value.attribute("default") or "",
    )


def to_output(value: Value) -> Output:
    _require_identifiers(value, 1, OUTPUT)
    return Output(name=value.identifiers[0], description=value.attribute("description") or "")


def to_resource(value: Value) -> Resource:
    _require_identifiers(value, 2, RESOURCE)
    return Resource(
        type=value.identifiers[0],
        name=value.identifiers[1],
        description=value.comment.text,
    )


def to_module_reference(value: Value) -> ModuleReference:
    _require_identifiers(value, 1, MODULE)
    source = _require_attribute(value, "source", MODULE)
    return ModuleReference(
        name=value.identifiers[0],
        source=source,
        description=value.comment.text,
    )


CLASSIFIERS: Dict[str, Callable[[Value], object]] = {
    VARIABLE: to_variable,
    OUTPUT: to_output,
    RESOURCE: to_resource,
    MODULE: to_module_reference,
}


def select(values: Sequence[Value], keyword: str) -> List[Value]:
    """Return the values declared with `keyword`, in their original order."""
    return [value for value in values if value.keyword == keyword]


def classify(values: Sequence[Value], keyword: str, *, strict: bool = True) -> ClassificationResult:
    """Convert every value declared with `keyword`.

    In strict mode the first invalid element raises and nothing from this call
    is returned.
    """
    try:
        convert = CLASSIFIERS[keyword]
    except KeyError:
        raise ValueError(f"no classifier registered for {keyword!r}") from None

    result: ClassificationResult = ClassificationResult()
    for value in select(values, keyword):
        try:
            result.items.append(convert(value))
        except SemanticError as exc:
            if strict:
                raise
            result.errors.append(exc)
    return result


def extract_variables(values: Sequence[Value]) -> List[Variable]:
    return classify(values, VARIABLE).items


def extract_outputs(values: Sequence[Value]) -> List[Output]:
    return classify(values, OUTPUT).items


def extract_resources(values: Sequence[Value]) -> List[Resource]:
    return classify(values, RESOURCE).items


def extract_modules(values: Sequence[Value]) -> List[ModuleReference]:
    return classify(values, MODULE).items


__all__ = [
    "CLASSIFIERS",
    "ClassificationResult",
    "MODULE",
    "OUTPUT",
    "RESOURCE",
    "VARIABLE",
    "classify",
    "extract_modules",
    "extract_outputs",
    "extract_resources",
    "extract_variables",
    "select",
    "to_module_reference",
    "to_output",
    "to_resource",
    "to_variable",
]
