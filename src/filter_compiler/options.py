"""
Compiler options for the SQL-text emitter.

``CompilerOptions`` controls how placeholders are rendered and how the
bound parameters are shaped. It never affects which filters are valid.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum

_PREFIX_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class ParamStyle(str, Enum):
    """Placeholder binding styles."""

    # ``:param1`` placeholders, parameters as a name -> value dict
    NAMED = "named"
    # ``$1`` placeholders, parameters as a positional list
    NUMERIC = "numeric"


@dataclass(frozen=True)
class CompilerOptions:
    """
    Immutable container for SQL emission settings.

    Attributes:
        param_style: Placeholder style, see :class:`ParamStyle`.
        param_prefix: Name prefix for ``NAMED`` placeholders.
    """

    param_style: ParamStyle = ParamStyle.NAMED
    param_prefix: str = "param"

    def __post_init__(self) -> None:
        if not _PREFIX_RE.match(self.param_prefix):
            raise ValueError(f"Invalid parameter prefix: {self.param_prefix!r}")
        if not isinstance(self.param_style, ParamStyle):
            object.__setattr__(self, "param_style", ParamStyle(self.param_style))

    def with_param_style(self, style: ParamStyle | str) -> CompilerOptions:
        """Return a copy with the placeholder style replaced."""
        return replace(self, param_style=ParamStyle(style))


DEFAULT_OPTIONS = CompilerOptions()
