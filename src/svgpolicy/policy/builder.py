"""Allowlist builder: composes element attribute sets from groups and literals."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Optional

from svgpolicy.core.models import AttrList, ElementSpec, GroupRef, Ingredient, PolicyConfig
from svgpolicy.policy.elements import BLOCKED_ELEMENTS, DEPRECATED_ELEMENTS, ELEMENT_SPECS
from svgpolicy.policy.errors import (
    DuplicateElementError,
    ExcludedElementError,
    ForbiddenAttributeError,
    PolicyError,
    UnknownGroupError,
)
from svgpolicy.policy.groups import (
    ATTRIBUTE_GROUPS,
    XLINK_PREFIX,
    event_handler_attributes,
    validate_groups,
)

logger = logging.getLogger(__name__)


class ElementAllowlist:
    """Read-only map of element name -> permitted attribute names.

    Element names absent from the map are disallowed: the sanitizer strips the
    element, it does not keep it with zero attributes. Names are matched
    exactly, with SVG casing (``linearGradient``, ``viewBox``).
    """

    def __init__(self, ordered: Mapping[str, tuple[str, ...]]) -> None:
        self._ordered: Mapping[str, tuple[str, ...]] = MappingProxyType(dict(ordered))
        self._sets: Mapping[str, frozenset[str]] = MappingProxyType(
            {name: frozenset(names) for name, names in ordered.items()}
        )

    def __contains__(self, name: object) -> bool:
        return name in self._sets

    def __iter__(self) -> Iterator[str]:
        return iter(self._sets)

    def __len__(self) -> int:
        return len(self._sets)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElementAllowlist):
            return NotImplemented
        return dict(self._sets) == dict(other._sets)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ElementAllowlist({len(self)} elements)"

    @property
    def elements(self) -> frozenset[str]:
        return frozenset(self._sets)

    def lookup(self, name: str) -> Optional[frozenset[str]]:
        """Return the attribute set for ``name``, or None if the element is unknown."""
        return self._sets.get(name)

    def is_element_allowed(self, name: str) -> bool:
        return name in self._sets

    def allowed_attributes_for(self, name: str) -> frozenset[str]:
        """Attribute set for an allowed element; empty for unknown elements.

        An empty result is ambiguous on its own, so check
        ``is_element_allowed`` before treating it as "keep with no attributes".
        """
        return self._sets.get(name, frozenset())

    def is_attribute_allowed(self, element: str, attribute: str) -> bool:
        return attribute in self._sets.get(element, ())

    def ordered_attributes(self, name: str) -> tuple[str, ...]:
        """Attributes of ``name`` in first-seen composition order."""
        return self._ordered.get(name, ())

    def to_dict(self) -> dict[str, list[str]]:
        """Plain sorted representation, for export."""
        return {name: sorted(self._sets[name]) for name in sorted(self._sets)}


# --- Composition ---

def _resolve(ingredient: Ingredient, element: str = "") -> tuple[str, ...]:
    if isinstance(ingredient, AttrList):
        for name in ingredient.names:
            if name.startswith(XLINK_PREFIX):
                raise ForbiddenAttributeError(name, element)
        return ingredient.names
    if isinstance(ingredient, GroupRef):
        try:
            return ATTRIBUTE_GROUPS[ingredient.group]
        except (KeyError, TypeError):
            raise UnknownGroupError(ingredient.group, element) from None
    raise PolicyError(f"Unsupported ingredient {ingredient!r} for element '{element}'")


def compose(ingredients: Iterable[Ingredient], element: str = "") -> tuple[str, ...]:
    """Concatenate the resolved ingredients, keeping each name's first occurrence.

    The result has set semantics; the order only makes builds reproducible.
    """
    seen: dict[str, None] = {}
    for ingredient in ingredients:
        for name in _resolve(ingredient, element):
            seen.setdefault(name, None)
    return tuple(seen)


def build(
    specs: Iterable[ElementSpec] = ELEMENT_SPECS,
    config: Optional[PolicyConfig] = None,
) -> ElementAllowlist:
    """Compose every element spec into an ElementAllowlist.

    Raises a PolicyError subclass on any authoring defect; nothing is
    published in that case.
    """
    config = config or PolicyConfig()
    validate_groups()

    composed: dict[str, tuple[str, ...]] = {}
    for spec in specs:
        name = spec.name
        if name in composed:
            raise DuplicateElementError(name)
        if name in BLOCKED_ELEMENTS:
            raise ExcludedElementError(name, "blocked as a script execution vector")
        if name in DEPRECATED_ELEMENTS:
            raise ExcludedElementError(name, "deprecated in SVG 2")
        composed[name] = compose(spec.ingredients, name)
        logger.debug("Composed <%s> with %d attributes", name, len(composed[name]))

    for name in config.blocked_elements:
        if composed.pop(name, None) is not None:
            logger.info("Element <%s> blocked by configuration", name)

    handlers = event_handler_attributes()
    if config.strip_event_handlers:
        composed = {
            name: tuple(a for a in names if a not in handlers)
            for name, names in composed.items()
        }
        logger.info("Event handler attributes stripped from the allowlist")
    else:
        exposed = sorted(n for n, names in composed.items() if handlers.intersection(names))
        if exposed:
            logger.warning(
                "Inline event handler attributes (onclick, onload, ...) are allowed on %d "
                "elements; set policy.strip_event_handlers to remove them",
                len(exposed),
            )

    allowlist = ElementAllowlist(composed)
    logger.info("Built SVG allowlist with %d elements", len(allowlist))
    return allowlist


# --- Process-wide instance ---

_allowlist: Optional[ElementAllowlist] = None
_allowlist_lock = threading.Lock()


def load_allowlist(config: Optional[PolicyConfig] = None) -> ElementAllowlist:
    """Build a fresh allowlist for the host to inject into its sanitizer."""
    if config is None:
        from svgpolicy.core.config import load_config
        config = load_config().policy
    return build(ELEMENT_SPECS, config)


def get_allowlist() -> ElementAllowlist:
    """Return the process-wide allowlist, building it on first use."""
    global _allowlist
    if _allowlist is not None:
        return _allowlist
    with _allowlist_lock:
        if _allowlist is None:
            _allowlist = load_allowlist()
        return _allowlist


def reset_allowlist() -> None:
    """Drop the cached instance so the next get_allowlist() rebuilds it."""
    global _allowlist
    with _allowlist_lock:
        _allowlist = None
