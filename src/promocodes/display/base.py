"""Base protocol for code displays."""

from __future__ import annotations

import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class CodeDisplay(Protocol):
    """Protocol for anything that presents a finished list of codes."""

    @property
    def name(self) -> str:
        ...

    def show(self, codes: list[str], rng: random.Random | None = None) -> None:
        """Present codes until the user quits. Never modifies codes."""
        ...
