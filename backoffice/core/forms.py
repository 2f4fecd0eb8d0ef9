# backoffice/core/forms.py
"""
Helpers for admin forms sent as multipart/form-data.

Saves that carry files post the field map as a JSON string in the `data`
part, next to the optional file parts:

    data=<json>  logo=<file>  gallery=<file> gallery=<file> ...
"""

from typing import TypeVar

from fastapi import HTTPException, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from backoffice.core.assets import UploadedAsset

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_form_data(model: type[ModelT], raw: str) -> ModelT:
    """
    Validate the JSON `data` part against `model`.

    Raises:
        RequestValidationError: rendered by FastAPI as a regular 422.
    """
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False, include_context=False))


def require_upload(file: UploadFile) -> UploadedAsset:
    """Read a mandatory file part; an empty part is a 400."""
    asset = UploadedAsset.from_upload(file)
    if asset is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded",
        )
    return asset
