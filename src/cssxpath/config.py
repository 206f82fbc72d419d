from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompilerConfig:
    escape_literals: bool = False  # quote-safe XPath literals instead of raw "..."
    sibling_first_only: bool = True  # "~" compiles like "+" (first following sibling)
    cache_enabled: bool = True
