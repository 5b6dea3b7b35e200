"""Anchor ids and ``$ref`` resolution shared by all renderers.

Anchors are built from the raw tag, method and path strings with no
escaping, so the table of contents and the body always agree. Two paths
that only differ by slashes (``/ab`` and ``/a/b``) share an anchor.
"""

from typing import Mapping

from pydantic import BaseModel, ConfigDict


def anchor(tag: str, method: str | None = None, path: str | None = None) -> str:
    """Build the anchor id for a tag, an operation, or a definition name."""
    result = tag
    if method is not None:
        result += f"-{method.lower()}"
    if path is not None:
        result += f"-{path.replace('/', '')}"
    return result


def ref_name(ref: str) -> str:
    """Definition name from a ``#/definitions/<Name>`` pointer."""
    return ref.split("/")[-1]


def definition_link(name: str, text: str | None = None) -> str:
    """Markdown link to a definition's anchor, labelled with its name by default."""
    return f"[{name if text is None else text}](#{anchor(name)})"


def ref_link(ref: str) -> str:
    """Markdown link to the definition a ``$ref`` points at."""
    return definition_link(ref_name(ref))


class ResolvedRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str

    def link(self) -> str:
        return definition_link(self.name)


class UnresolvedRef(BaseModel):
    """A pointer whose definition is missing; rendered as a broken link."""

    model_config = ConfigDict(frozen=True)

    ref: str

    def link(self) -> str:
        return definition_link(ref_name(self.ref), text=self.ref)


def resolve_ref(ref: str, definitions: Mapping) -> ResolvedRef | UnresolvedRef:
    name = ref_name(ref)
    if name in definitions:
        return ResolvedRef(name=name)
    return UnresolvedRef(ref=ref)
