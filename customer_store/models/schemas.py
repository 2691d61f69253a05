from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Customer(BaseModel):
    """A customer record. ``name`` travels as ``nome`` on the wire."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = ""
    name: str = Field(default="", alias="nome")
    email: str = ""
