"""Data model for a parsed custom elements manifest."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Parameter:
    """Single method parameter."""

    name: str
    type_text: str = ""
    description: str = ""
    optional: bool = False


@dataclass(frozen=True)
class Member:
    """Field or method declared on a component class.

    ``privacy`` is ``None`` for public members; any explicit marker
    (``private``, ``protected``) hides the member from the docs.
    """

    kind: str
    name: str
    description: str = ""
    privacy: Optional[str] = None
    type_text: str = ""
    default: str = ""
    attribute: str = ""
    reflects: bool = False
    static: bool = False
    parameters: List[Parameter] = field(default_factory=list)
    return_type: Optional[str] = None

    @property
    def is_public(self) -> bool:
        return self.privacy is None


@dataclass(frozen=True)
class Event:
    name: str
    type_text: str = ""
    description: str = ""


@dataclass(frozen=True)
class Slot:
    name: str = ""
    summary: str = ""
    description: str = ""


@dataclass(frozen=True)
class CssProperty:
    name: str
    summary: str = ""
    description: str = ""
    default: str = ""


@dataclass(frozen=True)
class CssPart:
    name: str
    description: str = ""


@dataclass(frozen=True)
class Declaration:
    """One exported declaration, usually a custom element class."""

    kind: str
    name: str
    tag_name: str = ""
    custom_element: bool = False
    description: str = ""
    superclass: Optional[str] = None
    members: List[Member] = field(default_factory=list)
    slots: List[Slot] = field(default_factory=list)
    events: List[Event] = field(default_factory=list)
    css_properties: List[CssProperty] = field(default_factory=list)
    css_parts: List[CssPart] = field(default_factory=list)


@dataclass(frozen=True)
class Module:
    """One source file record and the declarations it exports."""

    path: str
    declarations: List[Declaration] = field(default_factory=list)


@dataclass(frozen=True)
class PackageManifest:
    """Root of the manifest; modules are kept in manifest order."""

    modules: List[Module] = field(default_factory=list)


@dataclass(frozen=True)
class InventoryRow:
    """Summary row of an inventory table."""

    name: str
    target: str
    description: str
