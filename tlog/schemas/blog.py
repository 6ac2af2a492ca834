from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PostData(BaseModel):
    """Validated post metadata, the schema every loaded post must satisfy."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: Optional[str] = None
    date: datetime
    tags: Optional[List[str]] = None
    draft: Optional[bool] = None
    image: Optional[str] = None


class PostRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    data: PostData
    body: str
    file_path: str
    deferred_render: bool = True


class PostSummary(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    image: Optional[str] = None
    date: datetime
    formattedDate: str
    tags: List[str] = Field(default_factory=list)
    readingTime: Optional[str] = None
    draft: bool = False


class PostDetail(PostSummary):
    body: str
    filePath: str


class SearchEntry(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    date: datetime
    tags: List[str] = Field(default_factory=list)
