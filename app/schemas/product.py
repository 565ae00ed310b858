"""Schemas for interest products and paginated product listings."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.schemas.folder import FolderResponse


class ProductRequest(BaseModel):
    """Item picked from search results to register as an interest product."""

    title: str = Field(..., min_length=1, max_length=512)
    link: str = Field(default="", max_length=2048)
    image: str = Field(default="", max_length=2048)
    lprice: int = Field(..., ge=0)


class ProductMypriceRequest(BaseModel):
    """Owner's target price."""

    myprice: int = Field(..., ge=0)


class ProductResponse(BaseModel):
    """Product projection returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    link: str
    image: str
    lprice: int
    myprice: int
    created_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createAt"),
        serialization_alias="createAt",
    )
    modified_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("modified_at", "modifiedAt"),
        serialization_alias="modifiedAt",
    )
    folders: list[FolderResponse] = Field(
        default_factory=list,
        validation_alias=AliasChoices("folders", "folderList"),
        serialization_alias="folderList",
    )


class ProductPage(BaseModel):
    """One page of products; number is 0-indexed."""

    content: list[ProductResponse]
    total_elements: int = Field(
        validation_alias=AliasChoices("total_elements", "totalElements"),
        serialization_alias="totalElements",
    )
    total_pages: int = Field(
        validation_alias=AliasChoices("total_pages", "totalPages"),
        serialization_alias="totalPages",
    )
    number: int
    size: int
