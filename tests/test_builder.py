from __future__ import annotations

import logging

import pytest

from svgpolicy.core.models import AttrList, AttributeGroup, ElementSpec, GroupRef, PolicyConfig
from svgpolicy.policy.builder import ElementAllowlist, build, compose
from svgpolicy.policy.elements import ELEMENT_SPECS, attrs, element
from svgpolicy.policy.errors import (
    DuplicateElementError,
    ExcludedElementError,
    ForbiddenAttributeError,
    PolicyError,
    UnknownGroupError,
)
from svgpolicy.policy.groups import attributes_of

CORE = GroupRef(AttributeGroup.CORE)
FILTER_PRIMITIVE = GroupRef(AttributeGroup.FILTER_PRIMITIVE)


def test_compose_keeps_first_occurrence_order() -> None:
    result = compose([attrs("y", "in", "x"), FILTER_PRIMITIVE])
    assert result == ("y", "in", "x", "height", "result", "width")


def test_compose_literal_passes_through_unchanged() -> None:
    assert compose([attrs("b", "a")]) == ("b", "a")


def test_compose_deduplicates_within_a_literal_list() -> None:
    assert compose([attrs("a", "b", "a")]) == ("a", "b")


def test_compose_group_then_literal_overlap() -> None:
    result = compose([CORE, attrs("id", "extra")])
    assert result == attributes_of(AttributeGroup.CORE) + ("extra",)


def test_compose_empty_ingredients() -> None:
    assert compose([]) == ()
    assert compose([attrs(), AttrList()]) == ()
    assert compose([attrs(), CORE]) == attributes_of(AttributeGroup.CORE)


def test_compose_unknown_group() -> None:
    with pytest.raises(UnknownGroupError, match="bogus"):
        compose([GroupRef("bogus")], "rect")  # type: ignore[arg-type]


def test_compose_rejects_xlink_literal() -> None:
    with pytest.raises(ForbiddenAttributeError, match="xlink:href"):
        compose([attrs("href", "xlink:href")], "use")


def test_compose_rejects_untagged_ingredient() -> None:
    with pytest.raises(PolicyError):
        compose([["x", "y"]])  # type: ignore[list-item]


def test_build_zero_ingredient_element_is_allowed_without_attributes() -> None:
    allowlist = build([ElementSpec("empty")])
    assert allowlist.is_element_allowed("empty")
    assert allowlist.allowed_attributes_for("empty") == frozenset()
    assert allowlist.lookup("empty") == frozenset()


def test_build_rejects_duplicate_element() -> None:
    specs = [element("rect", attrs("x")), element("rect", attrs("y"))]
    with pytest.raises(DuplicateElementError, match="rect"):
        build(specs)


def test_build_rejects_unknown_group() -> None:
    specs = [element("rect", GroupRef("notAGroup"))]  # type: ignore[arg-type]
    with pytest.raises(UnknownGroupError):
        build(specs)


@pytest.mark.parametrize("name", ["script", "altGlyph", "tref", "font-face", "vkern"])
def test_build_rejects_excluded_elements(name: str) -> None:
    with pytest.raises(ExcludedElementError):
        build([element(name, CORE)])


def test_build_rejects_xlink_literal() -> None:
    with pytest.raises(ForbiddenAttributeError):
        build([element("use", attrs("xlink:href"))])


def test_build_is_idempotent() -> None:
    first = build(ELEMENT_SPECS)
    second = build(ELEMENT_SPECS)
    assert first == second
    assert first.to_dict() == second.to_dict()
    for name in first:
        assert first.ordered_attributes(name) == second.ordered_attributes(name)


def test_build_accepts_any_iterable() -> None:
    allowlist = build(spec for spec in ELEMENT_SPECS if spec.name.startswith("fe"))
    assert allowlist.is_element_allowed("feBlend")
    assert not allowlist.is_element_allowed("rect")


def test_strip_event_handlers() -> None:
    allowlist = build(ELEMENT_SPECS, PolicyConfig(strip_event_handlers=True))
    for name in allowlist:
        assert not any(a.startswith("on") for a in allowlist.allowed_attributes_for(name))
    assert allowlist.is_attribute_allowed("rect", "x")
    assert not allowlist.is_attribute_allowed("rect", "onclick")


def test_blocked_elements_from_config() -> None:
    allowlist = build(ELEMENT_SPECS, PolicyConfig(blocked_elements=["foreignObject", "nope"]))
    assert not allowlist.is_element_allowed("foreignObject")
    assert allowlist.is_element_allowed("rect")


def test_event_handler_warning_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="svgpolicy"):
        build(ELEMENT_SPECS)
    assert "event handler" in caplog.text


def test_no_warning_when_handlers_stripped(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="svgpolicy"):
        build(ELEMENT_SPECS, PolicyConfig(strip_event_handlers=True))
    assert "event handler" not in caplog.text


def test_allowlist_is_read_only() -> None:
    allowlist = ElementAllowlist({"rect": ("x", "y")})
    with pytest.raises(TypeError):
        allowlist._sets["circle"] = frozenset()  # type: ignore[index]
    assert isinstance(allowlist.allowed_attributes_for("rect"), frozenset)
