"""
Multipart form and request helpers for the model hosting API.
"""
from typing import Iterable, List, Optional, Tuple, Union

import httpx

from modelhost.api_client.schemas import TokenType, UploadModelRequest

# (field name, (filename, content[, content type])) as accepted by httpx `files=`
FormPart = Tuple[str, tuple]


def to_0_1(value: bool) -> str:
    """Render a flag the way the API expects form booleans."""
    return "1" if value else "0"


class MultipartForm:
    """
    Ordered multipart/form-data fields.

    Every field is passed to httpx as a file part so the body is always
    encoded as multipart/form-data, even when no file is attached (httpx
    would fall back to urlencoding for plain `data=`). Parts without a
    filename are rendered as ordinary form fields.

    Usage:
        with MultipartForm() as form:
            form.add("name", "Chair")
            form.add_range("tags", ["wood", "furniture"])
            response = await client.post(url, files=form.files)
    """

    def __init__(self):
        self._parts: List[FormPart] = []

    def __enter__(self) -> "MultipartForm":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __len__(self) -> int:
        return len(self._parts)

    @property
    def files(self) -> List[FormPart]:
        return list(self._parts)

    @property
    def names(self) -> List[str]:
        """Field names in insertion order (repeated fields appear once per value)."""
        return [name for name, _ in self._parts]

    def add(self, name: str, value: str):
        """Add a plain text field."""
        self._parts.append((name, (None, value)))

    def add_file(
        self,
        name: str,
        filename: str,
        data: bytes,
        content_type: str = "application/octet-stream",
    ):
        """Add a binary file part."""
        self._parts.append((name, (filename, data, content_type)))

    def add_range(self, name: str, values: Optional[Iterable[str]]):
        """Add one field per value under the same name. None is a no-op."""
        if values is None:
            return
        for value in values:
            self.add(name, value)

    def close(self):
        """Release the buffered parts."""
        self._parts.clear()


def add_common_model_fields(form: MultipartForm, request: UploadModelRequest):
    """Add the metadata fields shared by upload and update requests."""
    if has_text(request.name):
        form.add("name", request.name)
    if has_text(request.description):
        form.add("description", request.description)
    form.add_range("tags", request.tags)
    form.add_range("categories", request.categories)
    if has_text(request.license):
        form.add("license", request.license)
    if request.private is not None:
        form.add("private", to_0_1(request.private))
    if request.private and has_text(request.password):
        form.add("password", request.password)
    if request.is_published is not None:
        form.add("isPublished", to_0_1(request.is_published))
    if request.is_inspectable is not None:
        form.add("isInspectable", to_0_1(request.is_inspectable))


def add_authorization_header(
    request: httpx.Request,
    token: str,
    token_type: Union[TokenType, str] = TokenType.BEARER,
):
    """Set `Authorization: <scheme> <token>` on a pending request."""
    request.headers["Authorization"] = f"{TokenType(token_type).value} {token}"


def clone_request(request: httpx.Request) -> httpx.Request:
    """
    Shallow copy of a pending request.

    Method, URL, headers and extensions (timeouts, protocol options) are
    copied; the body stream is shared with the original.
    """
    return httpx.Request(
        request.method,
        request.url,
        headers=httpx.Headers(request.headers),
        stream=request.stream,
        extensions=dict(request.extensions),
    )


def has_text(value: Optional[str]) -> bool:
    return bool(value and value.strip())
