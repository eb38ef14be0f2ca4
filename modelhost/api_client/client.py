"""
HTTP Client for the model hosting API.
Provides async methods to upload, update and query 3D models.
"""
import asyncio
import logging
from pathlib import Path
from typing import Optional

import httpx

from modelhost.api_client.forms import (
    MultipartForm,
    add_authorization_header,
    add_common_model_fields,
    has_text,
)
from modelhost.api_client.schemas import Model, UploadModelRequest, UploadResponse
from modelhost.core.config import settings
from modelhost.core.logging import get_logger

SOURCE_GUIDELINES_URL = "https://sketchfab.com/developers/guidelines#source"

# Singleton instance
_client: Optional["ModelApiClient"] = None


class ModelApiClient:
    """
    HTTP client for the model hosting API.

    Usage:
        client = ModelApiClient("https://api.sketchfab.com/v3")
        response = await client.upload_model(UploadModelRequest(file_path="chair.zip"), token)
        if response.is_success and await client.is_ready(response.model_id):
            ...
    """

    def __init__(
        self,
        base_url: str = None,
        http_client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
        default_source: Optional[str] = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: API root URL (default from settings)
            http_client: Shared transport; created lazily when omitted
            logger: Logger receiving per-call events (default "modelhost.api_client")
            default_source: Source tag used when a request carries none (default from settings)
        """
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.default_source = default_source if default_source is not None else settings.upload_source
        self.logger = logger or get_logger("api_client")
        self._client = http_client
        self._owns_client = http_client is None
        self.logger.info(f"ModelApiClient initialized with base_url={self.base_url}")

    async def __aenter__(self) -> "ModelApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient()
            self._owns_client = True
        return self._client

    async def close(self):
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    # =========================================================================
    # Upload
    # =========================================================================

    async def upload_model(self, request: UploadModelRequest, token: str) -> UploadResponse:
        """
        Upload a new model.

        A rejected upload is reported through the returned status code and
        message rather than raised. On success the assigned model id is also
        written back to `request.model_id`.

        Args:
            request: Model file and metadata
            token: Caller's API token, formatted with `request.token_type`

        Returns:
            UploadResponse with model_id (on success), status_code and message

        Raises:
            ValueError: `request.file_path` is empty
            FileNotFoundError: `request.file_path` does not exist
        """
        result = UploadResponse()
        try:
            self.logger.info(f"Uploading model [{request.file_path}].")
            if not request.file_path or not request.file_path.strip():
                raise ValueError("file_path is required")

            path = Path(request.file_path)
            if not path.is_file():
                raise FileNotFoundError(f"File [{request.file_path}] not found.")

            data = await asyncio.to_thread(path.read_bytes)

            with MultipartForm() as form:
                form.add_file("modelFile", path.name, data)
                source = request.source if has_text(request.source) else self.default_source
                if has_text(source):
                    form.add("source", source)
                else:
                    self.logger.warning(
                        "Upload has no source configured. It's better to set one to uniquely identify "
                        f"all the models generated by the exporter, see {SOURCE_GUIDELINES_URL}"
                    )
                add_common_model_fields(form, request)
                self.logger.debug(f"upload_model sending {len(form)} form fields: {form.names}")

                client = await self._get_client()
                http_request = client.build_request("POST", f"{self.base_url}/models", files=form.files)
                add_authorization_header(http_request, token, request.token_type)
                response = await client.send(http_request)

            self.logger.info(f"upload_model responded {response.status_code}")

            result.status_code = response.status_code
            result.message = response.reason_phrase

            if response.is_success:
                locations = response.headers.get_list("Location")
                model_id = locations[0] if locations else None
                if model_id is None:
                    self.logger.warning("Upload succeeded but the response has no Location header")
                result.model_id = model_id
                request.model_id = model_id
                self.logger.info(f"Uploading is complete. Model uuid is {model_id}")
            else:
                self.logger.error(f"Error in model upload: {response.status_code} {response.reason_phrase}")

            return result
        except Exception as e:
            self.logger.error(f"Model upload error: {e}")
            raise

    # =========================================================================
    # Update
    # =========================================================================

    async def update_model(self, model_id: str, request: UploadModelRequest, token: str) -> None:
        """
        Update the metadata of an existing model.

        Args:
            model_id: Identifier of the model to update
            request: New metadata (file_path is ignored)
            token: Caller's API token, formatted with `request.token_type`

        Raises:
            ValueError: model_id is empty
            httpx.HTTPStatusError: the server rejected the update
        """
        try:
            self.logger.info(f"Updating model [{request.name}].")
            if not model_id or not model_id.strip():
                raise ValueError("model_id is required")

            with MultipartForm() as form:
                add_common_model_fields(form, request)
                self.logger.debug(f"update_model sending {len(form)} form fields: {form.names}")

                client = await self._get_client()
                http_request = client.build_request(
                    "PATCH", f"{self.base_url}/models/{model_id}", files=form.files
                )
                add_authorization_header(http_request, token, request.token_type)
                response = await client.send(http_request)

            self.logger.info(f"update_model responded {response.status_code}")
            response.raise_for_status()
        except Exception as e:
            self.logger.error(f"Model update error: {e}")
            raise

    # =========================================================================
    # Query
    # =========================================================================

    async def get_model(self, model_id: str) -> Model:
        """
        Fetch the current state of a model.

        Raises:
            ValueError: model_id is empty
            httpx.HTTPStatusError: the server answered with a non-success status
            pydantic.ValidationError: the body is not a valid model
        """
        try:
            self.logger.info(f"Get model [{model_id}]")
            if not model_id or not model_id.strip():
                raise ValueError("model_id is required")

            client = await self._get_client()
            response = await client.get(f"{self.base_url}/models/{model_id}")
            self.logger.info(f"get_model responded {response.status_code}")
            response.raise_for_status()

            model = Model.model_validate_json(response.content)
            self.logger.debug(f"get_model OK: {model.uid} is {model.status.processing.value}")

            return model
        except Exception as e:
            self.logger.error(f"get_model error: {e}")
            raise

    async def is_ready(self, model_id: str) -> bool:
        """Check whether the server has finished processing a model."""
        try:
            model = await self.get_model(model_id)
            return model.is_ready()
        except Exception as e:
            self.logger.error(f"is_ready error: {e}")
            raise


def get_model_client() -> ModelApiClient:
    """Get singleton API client instance."""
    global _client
    if _client is None:
        _client = ModelApiClient()
    return _client
