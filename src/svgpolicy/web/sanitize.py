"""XSS sanitization for SVG pasted into editor content."""

from __future__ import annotations

from functools import partial
from typing import Callable, Optional

from bleach.css_sanitizer import CSSSanitizer
from bleach.html5lib_shim import Filter, namespaces
from bleach.sanitizer import Cleaner

from svgpolicy.core.models import AttributeGroup
from svgpolicy.policy.builder import ElementAllowlist, get_allowlist
from svgpolicy.policy.groups import attributes_of

_ALLOWED_PROTOCOLS = ["http", "https", "mailto", "data"]

# Attribute namespaces html5lib splits off, mapped back to their prefixes
_ATTRIBUTE_PREFIXES = {
    namespaces["xml"]: "xml",
    namespaces["xlink"]: "xlink",
    namespaces["xmlns"]: "xmlns",
}

_TAG_TOKENS = ("StartTag", "EmptyTag", "EndTag")


def to_bleach_attributes(allowlist: ElementAllowlist) -> dict[str, list[str]]:
    """Allowlist as element -> sorted attribute names."""
    return allowlist.to_dict()


def _bleach_tags(allowlist: ElementAllowlist) -> set[str]:
    # bleach's tokenizer checks lowercased names; AllowlistFilter restores SVG casing
    return set(allowlist.elements) | {name.lower() for name in allowlist.elements}


def _element_names(allowlist: ElementAllowlist) -> dict[str, str]:
    return {name.lower(): name for name in allowlist.elements}


def _local_name_filter(allowlist: ElementAllowlist) -> Callable[[str, str, str], bool]:
    """First pass for bleach, which only sees local names (``space`` for ``xml:space``)."""
    names = _element_names(allowlist)
    local: dict[str, set[str]] = {
        element: {attr.rpartition(":")[2].lower() for attr in allowlist.allowed_attributes_for(element)}
        for element in allowlist.elements
    }

    def allow(tag: str, name: str, value: str) -> bool:
        element = names.get(tag.lower())
        return element is not None and name.lower() in local[element]

    return allow


class AllowlistFilter(Filter):
    """Restores allowlist casing and prefixes, then checks each qualified attribute name.

    Runs after bleach's own sanitizer, so URI and CSS checks have already
    happened; anything whose ``prefix:name`` form is not allowed is dropped.
    """

    def __init__(self, source, allowlist: ElementAllowlist) -> None:
        super().__init__(source)
        self.allowlist = allowlist
        self._names = _element_names(allowlist)

    def __iter__(self):
        for token in super().__iter__():
            if token["type"] in _TAG_TOKENS:
                token = self._restore(token)
            yield token

    def _restore(self, token: dict) -> dict:
        element = self._names.get(token["name"].lower(), token["name"])
        token["name"] = element
        if token["type"] == "EndTag":
            return token

        allowed = self.allowlist.allowed_attributes_for(element)
        by_lower = {attr.lower(): attr for attr in allowed}
        attrs = {}
        for (namespace, local), value in token["data"].items():
            if namespace is None:
                qualified = local
            elif namespace in _ATTRIBUTE_PREFIXES:
                qualified = f"{_ATTRIBUTE_PREFIXES[namespace]}:{local}"
            else:
                continue
            if qualified not in allowed:
                qualified = by_lower.get(qualified.lower())
            if qualified:
                # the serializer ignores namespaces, so keep the prefix in the name
                attrs[(None, qualified)] = value
        token["data"] = attrs
        return token


def sanitize_svg(raw_svg: str, allowlist: Optional[ElementAllowlist] = None) -> str:
    """Strip every element and attribute the allowlist does not permit."""
    if not raw_svg:
        return ""
    if allowlist is None:
        allowlist = get_allowlist()
    cleaner = Cleaner(
        tags=_bleach_tags(allowlist),
        attributes=_local_name_filter(allowlist),
        protocols=_ALLOWED_PROTOCOLS,
        css_sanitizer=CSSSanitizer(
            allowed_svg_properties=frozenset(attributes_of(AttributeGroup.PRESENTATION)),
        ),
        strip=True,
        filters=[partial(AllowlistFilter, allowlist=allowlist)],
    )
    return cleaner.clean(raw_svg)
