from __future__ import annotations

import re

import pytest

from svgpolicy.core.models import PolicyConfig
from svgpolicy.policy.builder import build
from svgpolicy.policy.elements import ELEMENT_SPECS
from svgpolicy.web.sanitize import sanitize_svg, to_bleach_attributes


def test_empty_input() -> None:
    assert sanitize_svg("") == ""


def test_unknown_attribute_is_stripped() -> None:
    cleaned = sanitize_svg('<svg><rect x="0" y="0" evil="x"></rect></svg>')
    assert 'x="0"' in cleaned
    assert 'y="0"' in cleaned
    assert "evil" not in cleaned


def test_script_element_is_removed() -> None:
    cleaned = sanitize_svg("<svg><script>alert(1)</script><circle r=\"4\"></circle></svg>")
    assert "<script" not in cleaned
    assert 'r="4"' in cleaned


def test_event_handlers_follow_policy() -> None:
    raw = '<svg><rect x="1" onclick="alert(1)"></rect></svg>'
    assert "onclick" in sanitize_svg(raw, build(ELEMENT_SPECS))
    strict = build(ELEMENT_SPECS, PolicyConfig(strip_event_handlers=True))
    assert "onclick" not in sanitize_svg(raw, strict)


def test_bleach_attributes_shape() -> None:
    attributes = to_bleach_attributes(build(ELEMENT_SPECS))
    assert "script" not in attributes
    assert isinstance(attributes["rect"], list)
    assert "x" in attributes["rect"]


@pytest.mark.parametrize(
    "element, attribute, value",
    [
        ("linearGradient", "gradientUnits", "userSpaceOnUse"),
        ("radialGradient", "fx", "0.5"),
        ("clipPath", "clipPathUnits", "objectBoundingBox"),
        ("textPath", "startOffset", "10"),
        ("feGaussianBlur", "stdDeviation", "3"),
        ("feDropShadow", "stdDeviation", "2"),
    ],
)
def test_camel_case_names_come_out_as_written(element: str, attribute: str, value: str) -> None:
    cleaned = sanitize_svg(f'<svg><{element} {attribute}="{value}"></{element}></svg>')
    assert f'<{element} {attribute}="{value}"></{element}>' in cleaned


def test_svg2_filter_keeps_its_attributes() -> None:
    cleaned = sanitize_svg('<svg><feDropShadow dx="1" stdDeviation="2"></feDropShadow></svg>')
    assert "<feDropShadow " in cleaned
    assert 'dx="1"' in cleaned
    assert 'stdDeviation="2"' in cleaned
    assert "fedropshadow" not in cleaned


@pytest.mark.parametrize(
    "element, attribute, value",
    [
        ("text", "xml:space", "preserve"),
        ("rect", "xml:base", "/x"),
        ("g", "xml:lang", "en"),
    ],
)
def test_namespaced_attributes_keep_their_prefix(element: str, attribute: str, value: str) -> None:
    cleaned = sanitize_svg(f'<svg><{element} {attribute}="{value}"></{element}></svg>')
    assert f'<{element} {attribute}="{value}"></{element}>' in cleaned


def test_xml_lang_is_not_renamed() -> None:
    cleaned = sanitize_svg('<svg><g xml:lang="en"></g></svg>')
    assert 'xml:lang="en"' in cleaned
    assert ' lang="en"' not in cleaned


def test_local_name_without_prefix_is_stripped() -> None:
    cleaned = sanitize_svg('<svg><text space="preserve" base="/x" x="1">hi</text></svg>')
    assert "space=" not in cleaned
    assert "base=" not in cleaned
    assert 'x="1"' in cleaned


def test_xlink_href_is_stripped() -> None:
    cleaned = sanitize_svg('<svg><use xlink:href="#a" href="#a"></use></svg>')
    assert "xlink:" not in cleaned
    assert 'href="#a"' in cleaned


def test_xml_base_with_script_url_is_stripped() -> None:
    cleaned = sanitize_svg('<svg><rect xml:base="javascript:alert(1)" x="1"></rect></svg>')
    assert "javascript" not in cleaned
    assert 'x="1"' in cleaned


def test_output_only_contains_allowed_element_names() -> None:
    allowlist = build(ELEMENT_SPECS)
    raw = (
        '<svg viewBox="0 0 10 10"><defs><linearGradient id="g"><stop offset="0"></stop>'
        '</linearGradient><filter id="f"><feDropShadow dx="1"></feDropShadow></filter></defs>'
        '<clipPath id="c"><rect width="1"></rect></clipPath><foo bar="1"></foo>'
        '<script>x()</script><altGlyph>a</altGlyph></svg>'
    )
    cleaned = sanitize_svg(raw, allowlist)
    names = re.findall(r"</?([A-Za-z][\w:-]*)", cleaned)
    assert names
    assert all(allowlist.is_element_allowed(name) for name in names)
    assert 'viewBox="0 0 10 10"' in cleaned
