"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

DEFAULT_FRUITS = ["Apple", "Orange", "Banana", "Pear", "Peach", "Tomato"]
DEFAULT_VEGGIES = ["Corn", "Potato", "Carrot", "Pea", "Tomato"]


class DatasetConfig(BaseModel):
    """Configuration for the fixed datasets."""

    fruits: List[str] = Field(default_factory=lambda: list(DEFAULT_FRUITS))
    veggies: List[str] = Field(default_factory=lambda: list(DEFAULT_VEGGIES))
    integer_count: int = Field(default=1000, ge=0)
    integer_min: int = Field(default=0)
    # Inclusive upper bound
    integer_max: int = Field(default=1000)
    seed: Optional[int] = Field(default=None)

    @model_validator(mode="after")
    def _check_integer_bounds(self) -> "DatasetConfig":
        if self.integer_min > self.integer_max:
            raise ValueError(
                f"integer_min={self.integer_min} must be <= integer_max={self.integer_max}"
            )
        return self


class PipelineConfig(BaseModel):
    """Configuration for pipeline limits and formatting."""

    first_n: int = Field(default=2, ge=0)
    top_n: int = Field(default=10, ge=0)
    join_separator: str = Field(default=", ")
    excluded_prefix: str = Field(default="A", min_length=1)


class StreamConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    datasets: DatasetConfig = Field(default_factory=DatasetConfig)
    pipelines: PipelineConfig = Field(default_factory=PipelineConfig)
