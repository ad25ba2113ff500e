from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AddCartItemDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    variant_id: int | str = Field(..., alias="variantId")
    quantity: int = Field(1, ge=1)


class CartLineDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    variant_id: int | str = Field(..., alias="variantId")
    quantity: int = Field(..., ge=1)
    added_at: datetime | None = Field(None, alias="addedAt")


class UpdateCartDTO(BaseModel):
    lines: list[CartLineDTO] = []
