"""
Input validation schemas using Pydantic for better data integrity.
"""
import math
from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Optional


class GenerateGroceryListInput(BaseModel):
    """Schema for the generate request: recipe ids plus optional serving multipliers."""
    recipeIds: List[str] = Field(default_factory=list)
    servingsMultiplier: Dict[str, float] = Field(default_factory=dict)

    @field_validator('recipeIds')
    @classmethod
    def strip_ids(cls, v):
        """Drop blank ids."""
        return [rid.strip() for rid in v if rid and rid.strip()]

    @field_validator('servingsMultiplier')
    @classmethod
    def validate_multipliers(cls, v):
        """Multipliers must be finite and not negative."""
        for rid, value in v.items():
            if not math.isfinite(value):
                raise ValueError(f'Multiplier for {rid} must be a finite number')
            if value < 0:
                raise ValueError(f'Multiplier for {rid} cannot be negative')
        return v


class GroceryItemInput(BaseModel):
    """Schema for adding an item to the standing grocery list."""
    name: str = Field(default="", max_length=100)
    amount: Optional[str] = Field(default=None, max_length=50)
    unit: Optional[str] = Field(default=None, max_length=20)
    category: Optional[str] = Field(default=None, max_length=50)
    checked: bool = False

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class GroceryItemUpdate(BaseModel):
    """Schema for partial item updates; omitted fields stay unchanged."""
    name: Optional[str] = Field(default=None, max_length=100)
    amount: Optional[str] = Field(default=None, max_length=50)
    unit: Optional[str] = Field(default=None, max_length=20)
    category: Optional[str] = Field(default=None, max_length=50)
    checked: Optional[bool] = None
