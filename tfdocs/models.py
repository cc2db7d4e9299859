"""Core data models shared across tfdocs components."""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Comment:
    """Normalized comment text with the 1-based position of its group."""

    text: str = ""
    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class Value:
    """Intermediate record for one top-level block of a parsed file."""

    keyword: str
    identifiers: Tuple[str, ...] = ()
    attributes: Optional[Dict[str, str]] = None
    comment: Comment = field(default_factory=Comment)

    def attribute(self, name: str) -> Optional[str]:
        if self.attributes is None:
            return None
        return self.attributes.get(name)


@dataclass(frozen=True)
class Variable:
    """Input variable declared by a module."""

    name: str
    type: str
    description: str = ""
    default: str = ""
    required: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "required", self.default == "")


@dataclass(frozen=True)
class Output:
    name: str
    description: str = ""


@dataclass(frozen=True)
class Resource:
    type: str
    name: str
    description: str = ""


@dataclass(frozen=True)
class ModuleReference:
    """A `module` block pointing at another module from within this one."""

    name: str
    source: str
    description: str = ""


@dataclass(frozen=True)
class SourceFile:
    """Raw text of one configuration file, tagged with its file name."""

    name: str
    text: str


@dataclass(frozen=True)
class ModuleDocument:
    """Documentation model for one module directory."""

    title: str
    path: str = ""
    link: str = ""
    description: str = ""
    variables: Tuple[Variable, ...] = ()
    outputs: Tuple[Output, ...] = ()
    resources: Tuple[Resource, ...] = ()
    modules: Tuple[ModuleReference, ...] = ()
    warnings: Tuple[str, ...] = ()
