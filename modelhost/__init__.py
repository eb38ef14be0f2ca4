"""
modelhost - client library for a 3D model hosting REST API.
"""
from modelhost.api_client import (
    Model,
    ModelApiClient,
    ProcessingStatus,
    TokenType,
    UploadModelRequest,
    UploadResponse,
    get_model_client,
)

__version__ = "1.0.0"

__all__ = [
    "Model",
    "ModelApiClient",
    "ProcessingStatus",
    "TokenType",
    "UploadModelRequest",
    "UploadResponse",
    "get_model_client",
]
