"""Attribute groups shared across SVG elements (SVG 1.1/2 and WAI-ARIA families).

Deprecated attributes and the whole ``xlink:*`` family are left out on purpose.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from types import MappingProxyType

from svgpolicy.core.models import EVENT_GROUPS, AttributeGroup
from svgpolicy.policy.errors import ForbiddenAttributeError, InvalidGroupError, UnknownGroupError

XLINK_PREFIX = "xlink:"

_GROUPS: dict[AttributeGroup, tuple[str, ...]] = {
    AttributeGroup.CORE: (
        "id",
        "lang",
        "tabindex",
        "xml:base",
        "xml:lang",
        "xml:space",
    ),
    AttributeGroup.STYLE: ("class", "style"),
    AttributeGroup.PRESENTATION: (
        "alignment-baseline",
        "baseline-shift",
        "clip",
        "clip-path",
        "clip-rule",
        "color",
        "color-interpolation",
        "color-interpolation-filters",
        "color-profile",
        "color-rendering",
        "cursor",
        "direction",
        "display",
        "dominant-baseline",
        "enable-background",
        "fill",
        "fill-opacity",
        "fill-rule",
        "filter",
        "flood-color",
        "flood-opacity",
        "font-family",
        "font-size",
        "font-size-adjust",
        "font-stretch",
        "font-style",
        "font-variant",
        "font-weight",
        "glyph-orientation-horizontal",
        "glyph-orientation-vertical",
        "image-rendering",
        "kerning",
        "letter-spacing",
        "lighting-color",
        "marker-end",
        "marker-mid",
        "marker-start",
        "mask",
        "opacity",
        "overflow",
        "pointer-events",
        "shape-rendering",
        "stop-color",
        "stop-opacity",
        "stroke",
        "stroke-dasharray",
        "stroke-dashoffset",
        "stroke-linecap",
        "stroke-linejoin",
        "stroke-miterlimit",
        "stroke-opacity",
        "stroke-width",
        "text-anchor",
        "text-decoration",
        "text-rendering",
        "transform",
        "transform-origin",
        "unicode-bidi",
        "vector-effect",
        "visibility",
        "word-spacing",
        "writing-mode",
    ),
    AttributeGroup.CONDITIONAL_PROCESSING: (
        "requiredExtensions",
        "requiredFeatures",
        "systemLanguage",
    ),
    AttributeGroup.FILTER_PRIMITIVE: ("height", "result", "width", "x", "y"),
    AttributeGroup.TRANSFER_FUNCTION: (
        "type",
        "tableValues",
        "slope",
        "intercept",
        "amplitude",
        "exponent",
        "offset",
    ),
    AttributeGroup.ANIMATION_TARGET_ELEMENT: ("href",),
    AttributeGroup.ANIMATION_ATTRIBUTE_TARGET: ("attributeType", "attributeName"),
    AttributeGroup.ANIMATION_TIMING: (
        "begin",
        "dur",
        "end",
        "min",
        "max",
        "restart",
        "repeatCount",
        "repeatDur",
        "fill",
    ),
    AttributeGroup.ANIMATION_VALUE: (
        "calcMode",
        "values",
        "keyTimes",
        "keySplines",
        "from",
        "to",
        "by",
        "autoReverse",
        "accelerate",
        "decelerate",
    ),
    AttributeGroup.ANIMATION_ADDITION: ("additive", "accumulate"),
    AttributeGroup.ANIMATION_EVENT: ("onbegin", "onend", "onrepeat"),
    AttributeGroup.DOCUMENT_EVENT: ("onabort", "onerror", "onresize", "onscroll", "onunload"),
    AttributeGroup.DOCUMENT_ELEMENT_EVENT: ("oncopy", "oncut", "onpaste"),
    AttributeGroup.GLOBAL_EVENT: (
        "oncancel",
        "oncanplay",
        "oncanplaythrough",
        "onchange",
        "onclick",
        "onclose",
        "oncuechange",
        "ondblclick",
        "ondrag",
        "ondragend",
        "ondragenter",
        "ondragexit",
        "ondragleave",
        "ondragover",
        "ondragstart",
        "ondrop",
        "ondurationchange",
        "onemptied",
        "onended",
        "onerror",
        "onfocus",
        "oninput",
        "oninvalid",
        "onkeydown",
        "onkeypress",
        "onkeyup",
        "onload",
        "onloadeddata",
        "onloadedmetadata",
        "onloadstart",
        "onmousedown",
        "onmouseenter",
        "onmouseleave",
        "onmousemove",
        "onmouseout",
        "onmouseover",
        "onmouseup",
        "onmousewheel",
        "onpause",
        "onplay",
        "onplaying",
        "onprogress",
        "onratechange",
        "onreset",
        "onresize",
        "onscroll",
        "onseeked",
        "onseeking",
        "onselect",
        "onshow",
        "onstalled",
        "onsubmit",
        "onsuspend",
        "ontimeupdate",
        "ontoggle",
        "onvolumechange",
        "onwaiting",
    ),
    AttributeGroup.GRAPHICAL_EVENT: ("onactivate", "onfocusin", "onfocusout"),
    AttributeGroup.ARIA: (
        "aria-activedescendant",
        "aria-atomic",
        "aria-autocomplete",
        "aria-busy",
        "aria-checked",
        "aria-colcount",
        "aria-colindex",
        "aria-colspan",
        "aria-controls",
        "aria-current",
        "aria-describedby",
        "aria-details",
        "aria-disabled",
        "aria-dropeffect",
        "aria-errormessage",
        "aria-expanded",
        "aria-flowto",
        "aria-grabbed",
        "aria-haspopup",
        "aria-hidden",
        "aria-invalid",
        "aria-keyshortcuts",
        "aria-label",
        "aria-labelledby",
        "aria-level",
        "aria-live",
        "aria-modal",
        "aria-multiline",
        "aria-multiselectable",
        "aria-orientation",
        "aria-owns",
        "aria-placeholder",
        "aria-posinset",
        "aria-pressed",
        "aria-readonly",
        "aria-relevant",
        "aria-required",
        "aria-roledescription",
        "aria-rowcount",
        "aria-rowindex",
        "aria-rowspan",
        "aria-selected",
        "aria-setsize",
        "aria-sort",
        "aria-valuemax",
        "aria-valuemin",
        "aria-valuenow",
        "aria-valuetext",
        "role",
    ),
}

ATTRIBUTE_GROUPS: Mapping[AttributeGroup, tuple[str, ...]] = MappingProxyType(_GROUPS)


def attributes_of(group: AttributeGroup) -> tuple[str, ...]:
    """Return the ordered attribute names of a group."""
    try:
        return ATTRIBUTE_GROUPS[group]
    except KeyError:
        raise UnknownGroupError(group) from None


def event_handler_attributes() -> frozenset[str]:
    """Every attribute that belongs to one of the event handler groups."""
    return frozenset(name for group in EVENT_GROUPS for name in ATTRIBUTE_GROUPS[group])


def validate_groups(groups: Mapping[AttributeGroup, tuple[str, ...]] = ATTRIBUTE_GROUPS) -> None:
    """Check every group id has a non-empty, duplicate-free, xlink-free list."""
    missing = [g.value for g in AttributeGroup if g not in groups]
    if missing:
        raise InvalidGroupError(f"No attribute list for group(s): {', '.join(missing)}")

    for group, names in groups.items():
        if not isinstance(group, AttributeGroup):
            raise UnknownGroupError(group)
        if not names:
            raise InvalidGroupError(f"Attribute group '{group.value}' is empty")
        if len(set(names)) != len(names):
            dupes = sorted(n for n, count in Counter(names).items() if count > 1)
            raise InvalidGroupError(
                f"Attribute group '{group.value}' repeats: {', '.join(dupes)}"
            )
        for name in names:
            if name.startswith(XLINK_PREFIX):
                raise ForbiddenAttributeError(name)
