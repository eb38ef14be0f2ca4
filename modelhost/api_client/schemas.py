"""
Request/Response schemas for the model hosting API.
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenType(str, Enum):
    """Authorization schemes, valued by their header prefix."""
    BEARER = "Bearer"  # OAuth2 access token
    TOKEN = "Token"  # Personal API token


class ProcessingStatus(str, Enum):
    """Server-side processing states of an uploaded model."""
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


class UploadModelRequest(BaseModel):
    """
    Description of a model to upload or of the metadata to update.

    `model_id` is filled in by a successful upload.
    """
    model_config = ConfigDict(protected_namespaces=())

    file_path: Optional[str] = Field(None, description="Local path of the model archive to upload")
    source: Optional[str] = Field(None, description="Tag identifying the tool that produced the model")
    name: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    categories: Optional[List[str]] = None
    license: Optional[str] = Field(None, description="License slug (e.g. 'by', 'cc0')")
    private: Optional[bool] = None
    password: Optional[str] = Field(None, description="Viewer password, private models only")
    is_published: Optional[bool] = None
    is_inspectable: Optional[bool] = None
    token_type: TokenType = TokenType.BEARER
    model_id: Optional[str] = None


class UploadResponse(BaseModel):
    """Outcome of an upload attempt."""
    model_config = ConfigDict(protected_namespaces=())

    model_id: Optional[str] = None
    status_code: int = 0
    message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


# Response schemas

class ModelStatus(BaseModel):
    """Processing status block of a model."""
    model_config = ConfigDict(extra="ignore")

    processing: ProcessingStatus = ProcessingStatus.PENDING
    error: Optional[str] = None


class ModelTag(BaseModel):
    """Tag attached to a model."""
    model_config = ConfigDict(extra="ignore")

    name: str
    slug: Optional[str] = None


class Model(BaseModel):
    """Model resource as returned by GET /models/{uid}."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    uid: str
    name: Optional[str] = None
    description: Optional[str] = None
    status: ModelStatus = Field(default_factory=ModelStatus)
    is_published: Optional[bool] = Field(None, alias="isPublished")
    is_inspectable: Optional[bool] = Field(None, alias="isInspectable")
    viewer_url: Optional[str] = Field(None, alias="viewerUrl")
    embed_url: Optional[str] = Field(None, alias="embedUrl")
    tags: List[ModelTag] = Field(default_factory=list)
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    published_at: Optional[datetime] = Field(None, alias="publishedAt")

    def is_ready(self) -> bool:
        """True once the server has finished processing the model."""
        return self.status.processing == ProcessingStatus.SUCCEEDED
