# pattern_core/models.py
from __future__ import annotations
from typing import Dict, List, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

Grid = Tuple[Tuple[str, ...], ...]


class GridConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    rows: int = 19
    cols: int = 24
    num_values: int = Field(default=9, alias="numValues")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols


class GenerationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    config: GridConfig
    grid: Grid
    counts: Dict[str, int] = Field(default_factory=dict)
    fallbacks: int = 0
    conflict_ratio: float = 0.0

    def grid_data(self) -> List[List[str]]:
        return [list(row) for row in self.grid]


class SavedConfiguration(BaseModel):
    """One entry of the saved pattern history (camelCase on disk)."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    timestamp: str
    grid_config: GridConfig = Field(alias="gridConfig")
    colors: Dict[str, str] = Field(default_factory=dict)
    grid_data: List[List[str]] = Field(alias="gridData")

    @field_validator("grid_data")
    @classmethod
    def _rectangular(cls, v):
        if v and len({len(r) for r in v}) != 1:
            raise ValueError("gridData rows must all have the same length")
        return v

    def grid(self) -> Grid:
        return tuple(tuple(r) for r in self.grid_data)
