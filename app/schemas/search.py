"""Schemas for shopping search results."""

from pydantic import BaseModel, Field


class ItemDto(BaseModel):
    """One shopping search result, reduced to the fields a product keeps."""

    model_config = {"extra": "ignore"}

    title: str = Field(..., description="Item title with markup removed")
    link: str = Field(default="", description="Item page URL")
    image: str = Field(default="", description="Thumbnail URL")
    lprice: int = Field(default=0, ge=0, description="Lowest listed price")
