"""Exceptions raised by the badge components and style registry."""

from __future__ import annotations


class InvalidCategoryError(ValueError):
    """A category value outside success/warning/danger/info/default."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Unknown badge category {value!r}; expected one of "
            "success, warning, danger, info, default"
        )


class UnknownStyleError(KeyError):
    """A stylesheet handle was used before being registered."""

    def __init__(self, handle: str):
        self.handle = handle
        super().__init__(handle)

    def __str__(self) -> str:
        return f"Stylesheet {self.handle!r} is not registered"
