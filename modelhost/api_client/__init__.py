"""
API Client - async HTTP client for the 3D model hosting service.
Uploads models, updates their metadata and polls their processing state.
"""
from modelhost.api_client.client import ModelApiClient, get_model_client
from modelhost.api_client.schemas import (
    Model,
    ModelStatus,
    ProcessingStatus,
    TokenType,
    UploadModelRequest,
    UploadResponse,
)

__all__ = [
    "ModelApiClient",
    "get_model_client",
    "Model",
    "ModelStatus",
    "ProcessingStatus",
    "TokenType",
    "UploadModelRequest",
    "UploadResponse",
]
