"""Display rows shared by the tables of the application."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class RowEmphasis(Enum):
    """How prominently a row is drawn."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class RowState:
    """The cells of one table row and how much it stands out."""

    cells: list[str] = field(default_factory=list)
    emphasis: RowEmphasis = RowEmphasis.MEDIUM