"""SVG elements allowed through the sanitizer and the attributes each one accepts.

Deprecated SVG elements and ``script`` are never listed here; see
``DEPRECATED_ELEMENTS`` and ``BLOCKED_ELEMENTS``.
"""

from __future__ import annotations

from svgpolicy.core.models import AttrList, AttributeGroup, ElementSpec, GroupRef, Ingredient

CORE = GroupRef(AttributeGroup.CORE)
STYLE = GroupRef(AttributeGroup.STYLE)
PRESENTATION = GroupRef(AttributeGroup.PRESENTATION)
CONDITIONAL_PROCESSING = GroupRef(AttributeGroup.CONDITIONAL_PROCESSING)
FILTER_PRIMITIVE = GroupRef(AttributeGroup.FILTER_PRIMITIVE)
TRANSFER_FUNCTION = GroupRef(AttributeGroup.TRANSFER_FUNCTION)
ANIMATION_TARGET_ELEMENT = GroupRef(AttributeGroup.ANIMATION_TARGET_ELEMENT)
ANIMATION_ATTRIBUTE_TARGET = GroupRef(AttributeGroup.ANIMATION_ATTRIBUTE_TARGET)
ANIMATION_TIMING = GroupRef(AttributeGroup.ANIMATION_TIMING)
ANIMATION_VALUE = GroupRef(AttributeGroup.ANIMATION_VALUE)
ANIMATION_ADDITION = GroupRef(AttributeGroup.ANIMATION_ADDITION)
ANIMATION_EVENT = GroupRef(AttributeGroup.ANIMATION_EVENT)
DOCUMENT_EVENT = GroupRef(AttributeGroup.DOCUMENT_EVENT)
DOCUMENT_ELEMENT_EVENT = GroupRef(AttributeGroup.DOCUMENT_ELEMENT_EVENT)
GLOBAL_EVENT = GroupRef(AttributeGroup.GLOBAL_EVENT)
GRAPHICAL_EVENT = GroupRef(AttributeGroup.GRAPHICAL_EVENT)
ARIA = GroupRef(AttributeGroup.ARIA)

# Removed from SVG 2
DEPRECATED_ELEMENTS: frozenset[str] = frozenset({
    "altGlyph",
    "altGlyphDef",
    "altGlyphItem",
    "animateColor",
    "color-profile",
    "cursor",
    "font",
    "font-face",
    "font-face-format",
    "font-face-name",
    "font-face-src",
    "font-face-uri",
    "glyph",
    "glyphRef",
    "hkern",
    "missing-glyph",
    "tref",
    "vkern",
})

# Too easy to hide executable content in
BLOCKED_ELEMENTS: frozenset[str] = frozenset({"script"})


def attrs(*names: str) -> AttrList:
    return AttrList(tuple(names))


def element(name: str, *ingredients: Ingredient) -> ElementSpec:
    return ElementSpec(name, tuple(ingredients))


# Group combinations repeated across element families
_SHAPE = (CORE, STYLE, CONDITIONAL_PROCESSING, GLOBAL_EVENT, GRAPHICAL_EVENT, PRESENTATION, ARIA)
_FILTER = (CORE, PRESENTATION, FILTER_PRIMITIVE, STYLE)
_DESCRIPTIVE = (CORE, STYLE, GLOBAL_EVENT, DOCUMENT_ELEMENT_EVENT)
_GRADIENT = (CORE, STYLE, GLOBAL_EVENT, DOCUMENT_ELEMENT_EVENT, PRESENTATION)

ELEMENT_SPECS: tuple[ElementSpec, ...] = (
    element(
        "svg",
        attrs("height", "preserveAspectRatio", "viewBox", "width", "x", "y"),
        CONDITIONAL_PROCESSING,
        STYLE,
        CORE,
        GLOBAL_EVENT,
        GRAPHICAL_EVENT,
        DOCUMENT_EVENT,
        DOCUMENT_ELEMENT_EVENT,
        PRESENTATION,
        ARIA,
    ),
    element(
        "a",
        attrs("href", "hreflang", "target", "type"),
        CORE,
        STYLE,
        CONDITIONAL_PROCESSING,
        GLOBAL_EVENT,
        DOCUMENT_ELEMENT_EVENT,
        GRAPHICAL_EVENT,
        PRESENTATION,
        ARIA,
    ),
    element(
        "animate",
        ANIMATION_TIMING,
        ANIMATION_VALUE,
        ANIMATION_ADDITION,
        ANIMATION_ATTRIBUTE_TARGET,
        CORE,
        STYLE,
        GLOBAL_EVENT,
        DOCUMENT_ELEMENT_EVENT,
    ),
    element(
        "animateMotion",
        attrs("keyPoints", "path", "rotate"),
        ANIMATION_TIMING,
        ANIMATION_VALUE,
        ANIMATION_ADDITION,
        ANIMATION_ATTRIBUTE_TARGET,
        ANIMATION_EVENT,
        CORE,
        STYLE,
        GLOBAL_EVENT,
        DOCUMENT_ELEMENT_EVENT,
    ),
    element(
        "animateTransform",
        attrs("by", "from", "to", "type"),
        CONDITIONAL_PROCESSING,
        CORE,
        ANIMATION_EVENT,
        ANIMATION_ATTRIBUTE_TARGET,
        ANIMATION_TIMING,
        ANIMATION_VALUE,
        ANIMATION_ADDITION,
    ),
    element("circle", attrs("cx", "cy", "r", "pathLength"), *_SHAPE),
    element(
        "clipPath",
        attrs("clipPathUnits"),
        CORE,
        STYLE,
        CONDITIONAL_PROCESSING,
        PRESENTATION,
    ),
    element(
        "defs",
        CORE,
        STYLE,
        GLOBAL_EVENT,
        DOCUMENT_ELEMENT_EVENT,
        GRAPHICAL_EVENT,
        PRESENTATION,
    ),
    element("desc", *_DESCRIPTIVE),
    element("ellipse", attrs("cx", "cy", "rx", "ry", "pathLength"), *_SHAPE),
    # Filter primitives
    element("feBlend", attrs("in", "in2", "mode"), *_FILTER),
    element("feColorMatrix", attrs("in", "type", "values"), *_FILTER),
    element("feComponentTransfer", attrs("in"), *_FILTER),
    element("feComposite", attrs("in", "in2", "operator", "k1", "k2", "k3", "k4"), *_FILTER),
    element(
        "feConvolveMatrix",
        attrs(
            "in", "order", "kernelMatrix", "divisor", "bias", "targetX", "targetY",
            "edgeMode", "kernelUnitLength", "preserveAlpha",
        ),
        *_FILTER,
    ),
    element(
        "feDiffuseLighting",
        attrs("in", "surfaceScale", "diffuseConstant", "kernelUnitLength"),
        *_FILTER,
    ),
    element(
        "feDisplacementMap",
        attrs("in", "in2", "scale", "xChannelSelector", "yChannelSelector"),
        *_FILTER,
    ),
    element("feDistantLight", attrs("azimuth", "elevation"), CORE),
    element("feDropShadow", attrs("in", "dx", "dy", "stdDeviation"), *_FILTER),
    element("feFlood", attrs("flood-color", "flood-opacity"), *_FILTER),
    element("feFuncA", CORE, TRANSFER_FUNCTION),
    element("feFuncB", CORE, TRANSFER_FUNCTION),
    element("feFuncG", CORE, TRANSFER_FUNCTION),
    element("feFuncR", CORE, TRANSFER_FUNCTION),
    element("feGaussianBlur", attrs("in", "stdDeviation", "edgeMode"), *_FILTER),
    element("feImage", attrs("preserveAspectRatio"), *_FILTER),
    element("feMerge", *_FILTER),
    element("feMergeNode", attrs("in"), CORE),
    element("feMorphology", attrs("in", "operator", "radius"), *_FILTER),
    element("feOffset", attrs("in", "dx", "dy"), *_FILTER),
    element("fePointLight", attrs("x", "y", "z"), CORE),
    element(
        "feSpecularLighting",
        attrs("in", "surfaceScale", "specularConstant", "specularExponent", "kernelUnitLength"),
        *_FILTER,
    ),
    element(
        "feSpotLight",
        attrs(
            "x", "y", "z", "pointsAtX", "pointsAtY", "pointsAtZ",
            "specularExponent", "limitingConeAngle",
        ),
        CORE,
    ),
    element("feTile", attrs("in"), *_FILTER),
    element(
        "feTurbulence",
        attrs("baseFrequency", "numOctaves", "seed", "stitchTiles", "type"),
        *_FILTER,
    ),
    element(
        "filter",
        attrs("x", "y", "width", "height", "filterRes", "filterUnits", "primitiveUnits"),
        CORE,
        PRESENTATION,
        STYLE,
    ),
    element(
        "foreignObject",
        attrs("height", "width", "x", "y"),
        CORE,
        STYLE,
        CONDITIONAL_PROCESSING,
        GLOBAL_EVENT,
        GRAPHICAL_EVENT,
        DOCUMENT_EVENT,
        DOCUMENT_ELEMENT_EVENT,
        PRESENTATION,
        ARIA,
    ),
    element("g", *_SHAPE),
    element(
        "image",
        attrs("x", "y", "width", "height", "href", "preserveAspectRatio", "crossorigin"),
        CORE,
        CONDITIONAL_PROCESSING,
        GRAPHICAL_EVENT,
        PRESENTATION,
        STYLE,
    ),
    element("line", attrs("x1", "y1", "x2", "y2", "pathLength"), *_SHAPE),
    element(
        "linearGradient",
        attrs("gradientUnits", "gradientTransform", "href", "spreadMethod", "x1", "x2", "y1", "y2"),
        *_GRADIENT,
    ),
    element(
        "marker",
        attrs(
            "markerHeight", "markerUnits", "markerWidth", "orient",
            "preserveAspectRatio", "refX", "refY", "viewBox",
        ),
        CORE,
        STYLE,
        CONDITIONAL_PROCESSING,
        GLOBAL_EVENT,
        DOCUMENT_ELEMENT_EVENT,
        PRESENTATION,
        ARIA,
    ),
    element(
        "mask",
        attrs("height", "maskContentUnits", "maskUnits", "x", "y", "width"),
        CORE,
        STYLE,
        CONDITIONAL_PROCESSING,
        PRESENTATION,
    ),
    element("metadata", CORE, GLOBAL_EVENT, DOCUMENT_ELEMENT_EVENT),
    element("mpath", attrs("href"), CORE, GLOBAL_EVENT, DOCUMENT_ELEMENT_EVENT),
    element("path", attrs("d", "pathLength"), *_SHAPE),
    element(
        "pattern",
        attrs(
            "height", "href", "patternContentUnits", "patternTransform", "patternUnits",
            "preserveAspectRatio", "viewBox", "width", "x", "y",
        ),
        CORE,
        STYLE,
        CONDITIONAL_PROCESSING,
        GLOBAL_EVENT,
        DOCUMENT_ELEMENT_EVENT,
        PRESENTATION,
    ),
    element("polygon", attrs("points", "pathLength"), *_SHAPE),
    element("polyline", attrs("points", "pathLength"), *_SHAPE),
    element(
        "radialGradient",
        attrs(
            "cx", "cy", "fr", "fx", "fy", "gradientUnits", "gradientTransform",
            "href", "r", "spreadMethod",
        ),
        *_GRADIENT,
    ),
    element("rect", attrs("x", "y", "width", "height", "rx", "ry", "pathLength"), *_SHAPE),
    element(
        "set",
        attrs("to"),
        ANIMATION_TIMING,
        ANIMATION_TARGET_ELEMENT,
        ANIMATION_ATTRIBUTE_TARGET,
        ANIMATION_EVENT,
        CONDITIONAL_PROCESSING,
        CORE,
        STYLE,
        GLOBAL_EVENT,
        DOCUMENT_ELEMENT_EVENT,
    ),
    element("stop", attrs("offset", "stop-color", "stop-opacity"), *_GRADIENT),
    element("style", attrs("type", "media", "title"), CORE, GLOBAL_EVENT, DOCUMENT_ELEMENT_EVENT),
    element("switch", *_SHAPE),
    element(
        "symbol",
        attrs("height", "preserveAspectRatio", "refX", "refY", "viewBox", "width", "x", "y"),
        CORE,
        STYLE,
        GLOBAL_EVENT,
        DOCUMENT_ELEMENT_EVENT,
        GRAPHICAL_EVENT,
        PRESENTATION,
        ARIA,
    ),
    element("text", attrs("x", "y", "dx", "dy", "rotate", "lengthAdjust", "textLength"), *_SHAPE),
    element(
        "textPath",
        attrs(
            "href", "lengthAdjust", "method", "path", "side", "spacing",
            "startOffset", "textLength",
        ),
        *_SHAPE,
        DOCUMENT_ELEMENT_EVENT,
    ),
    element("title", *_DESCRIPTIVE),
    element("tspan", attrs("x", "y", "dx", "dy", "rotate", "lengthAdjust", "textLength"), *_SHAPE),
    element("use", attrs("href", "x", "y", "width", "height"), *_SHAPE),
    element(
        "view",
        attrs("viewBox", "preserveAspectRatio"),
        CORE,
        GLOBAL_EVENT,
        DOCUMENT_ELEMENT_EVENT,
        ARIA,
    ),
)
