"""Exceptions raised while transforming and applying UI hints."""

from __future__ import annotations


class HintError(Exception):
    pass


class UnknownSymbolError(HintError, LookupError):
    """A symbolic name (color, constant, style) did not resolve."""

    kind = "symbol"

    def __init__(self, name: str, kind: str | None = None) -> None:
        self.name = name
        if kind is not None:
            self.kind = kind
        super().__init__(f"unknown {self.kind} name {name!r}")


class UnknownColorName(UnknownSymbolError):
    kind = "color"


class UnknownStyleToken(UnknownSymbolError):
    kind = "font style"


class UnknownConstantName(UnknownSymbolError):
    kind = "constant"


class InvalidHintValue(HintError, ValueError):
    pass


class MissingSetterError(HintError, AttributeError):
    def __init__(self, target: object, setter_name: str) -> None:
        self.target = target
        self.setter_name = setter_name
        super().__init__(f"invalid method {setter_name} on target {target!r}")
