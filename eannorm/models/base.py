"""
Common base models.
"""

from pydantic import BaseModel, ConfigDict


class ValueModel(BaseModel):
    """Immutable value object shared by profiles and options."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
