"""Decides which manifest declarations belong in the generated docs."""

from __future__ import annotations

from typing import List

from .models import Declaration, Member, Module

INTERNAL_SUFFIX = "-internal"


def should_document(
    declaration: Declaration,
    module: Module | None = None,
    *,
    internal_suffix: str = INTERNAL_SUFFIX,
) -> bool:
    """Return True for public custom element classes."""
    return (
        declaration.kind == "class"
        and declaration.custom_element
        and bool(declaration.tag_name)
        and not declaration.tag_name.endswith(internal_suffix)
    )


def public_members(declaration: Declaration, kind: str) -> List[Member]:
    """Return members of ``kind`` that carry no privacy marker."""
    return [member for member in declaration.members if member.kind == kind and member.is_public]


__all__ = ["INTERNAL_SUFFIX", "public_members", "should_document"]
