"""Schemas for folders."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

MAX_FOLDERS_PER_REQUEST = 50

FolderName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


class FolderRequest(BaseModel):
    """Names of folders to create for the caller. Surrounding whitespace is stripped."""

    model_config = ConfigDict(populate_by_name=True)

    folder_names: list[FolderName] = Field(
        ...,
        alias="folderNames",
        min_length=1,
        max_length=MAX_FOLDERS_PER_REQUEST,
    )


class FolderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class UserFolderResponse(BaseModel):
    """Data the main page needs: the caller's name and folders."""

    username: str
    folders: list[FolderResponse]
