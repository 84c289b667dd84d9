"""Models for the SVG allowlist policy: group ids, ingredients, config."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from pydantic import BaseModel, Field


# --- Attribute Groups ---

class AttributeGroup(str, Enum):
    CORE = "core"
    STYLE = "style"
    PRESENTATION = "presentation"
    CONDITIONAL_PROCESSING = "conditionalProcessing"
    FILTER_PRIMITIVE = "filterPrimitive"
    TRANSFER_FUNCTION = "transferFunction"
    ANIMATION_TARGET_ELEMENT = "animationTargetElement"
    ANIMATION_ATTRIBUTE_TARGET = "animationAttributeTarget"
    ANIMATION_TIMING = "animationTiming"
    ANIMATION_VALUE = "animationValue"
    ANIMATION_ADDITION = "animationAddition"
    ANIMATION_EVENT = "animationEvent"
    DOCUMENT_EVENT = "documentEvent"
    DOCUMENT_ELEMENT_EVENT = "documentElementEvent"
    GLOBAL_EVENT = "globalEvent"
    GRAPHICAL_EVENT = "graphicalEvent"
    ARIA = "aria"


# Groups made of inline event handler attributes (onclick, onload, ...)
EVENT_GROUPS: frozenset[AttributeGroup] = frozenset({
    AttributeGroup.ANIMATION_EVENT,
    AttributeGroup.DOCUMENT_EVENT,
    AttributeGroup.DOCUMENT_ELEMENT_EVENT,
    AttributeGroup.GLOBAL_EVENT,
    AttributeGroup.GRAPHICAL_EVENT,
})


# --- Element Specs ---

@dataclass(frozen=True)
class AttrList:
    """Literal attribute names contributed to an element."""

    names: tuple[str, ...] = ()


@dataclass(frozen=True)
class GroupRef:
    """Reference to a named attribute group."""

    group: AttributeGroup


Ingredient = Union[AttrList, GroupRef]


@dataclass(frozen=True)
class ElementSpec:
    name: str
    ingredients: tuple[Ingredient, ...] = field(default_factory=tuple)


# --- Config ---

class PolicyConfig(BaseModel):
    strip_event_handlers: bool = False
    blocked_elements: list[str] = Field(default_factory=list)


class AppConfig(BaseModel):
    policy: PolicyConfig = Field(default_factory=PolicyConfig)
    log_level: str = "INFO"
