"""Policy-authoring defects raised while the allowlist is being built."""

from __future__ import annotations


class PolicyError(Exception):
    """Base class: the policy tables are inconsistent and must not be published."""


class UnknownGroupError(PolicyError):
    def __init__(self, group: object, element: str = "") -> None:
        self.group = group
        self.element = element
        where = f" (element '{element}')" if element else ""
        super().__init__(f"Unknown attribute group {group!r}{where}")


class InvalidGroupError(PolicyError):
    """A group is empty or lists the same attribute twice."""


class DuplicateElementError(PolicyError):
    def __init__(self, element: str) -> None:
        self.element = element
        super().__init__(f"Element '{element}' is defined more than once")


class ForbiddenAttributeError(PolicyError):
    def __init__(self, attribute: str, element: str = "") -> None:
        self.attribute = attribute
        self.element = element
        where = f" on '{element}'" if element else ""
        super().__init__(f"Attribute '{attribute}'{where} is excluded from the policy")


class ExcludedElementError(PolicyError):
    def __init__(self, element: str, reason: str) -> None:
        self.element = element
        self.reason = reason
        super().__init__(f"Element '{element}' cannot be allowed: {reason}")
