"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe characteristics of entities
but have no conceptual identity.
"""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, Field

# A collection may be absent (None) and may hold null entries
StringCollection = Optional[Tuple[Optional[str], ...]]
IntegerCollection = Optional[Tuple[Optional[int], ...]]


class Datasets(BaseModel):
    """The three fixed collections a pipeline operates on."""

    fruits: StringCollection = Field(..., description="Ordered fruit names")
    veggies: StringCollection = Field(..., description="Ordered vegetable names")
    integer_values: IntegerCollection = Field(
        ..., description="Pseudo-random integers drawn at construction"
    )

    model_config = {"frozen": True}

    @property
    def sizes(self) -> dict:
        """Collection sizes, None for absent collections."""
        return {
            "fruits": None if self.fruits is None else len(self.fruits),
            "veggies": None if self.veggies is None else len(self.veggies),
            "integer_values": (
                None if self.integer_values is None else len(self.integer_values)
            ),
        }
