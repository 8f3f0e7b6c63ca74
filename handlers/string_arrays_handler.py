from fastapi import APIRouter, Depends, Request, HTTPException
from pydantic import BaseModel
from typing import List

from lib.storage.string_arrays import StringArraysStorage
from lib.txt_span import DEFAULT_LOCALE


class StringArrayRequest(BaseModel):
    items: List[str]
    locale: str = DEFAULT_LOCALE


router = APIRouter()


def get_string_arrays_storage(request: Request) -> StringArraysStorage:
    return request.app.state.string_arrays_storage


@router.put("/string-arrays/{array_id}")
def put_string_array(
    array_id: str,
    request: StringArrayRequest,
    string_arrays_storage: StringArraysStorage = Depends(get_string_arrays_storage),
):
    """Create or replace a localized string array."""
    document = string_arrays_storage.save(array_id, request.items, locale=request.locale)
    return {"array_id": array_id, "locale": document["locale"], "items": document["items"]}


@router.get("/string-arrays/{array_id}")
def get_string_array(
    array_id: str,
    locale: str = DEFAULT_LOCALE,
    string_arrays_storage: StringArraysStorage = Depends(get_string_arrays_storage),
):
    """Return the array for the locale, or the default locale as fallback."""
    document = string_arrays_storage.get(array_id, locale=locale)
    if not document:
        raise HTTPException(status_code=404, detail="String array not found")

    return {"array_id": array_id, "locale": document["locale"], "items": document["items"]}


@router.delete("/string-arrays/{array_id}")
def delete_string_array(
    array_id: str,
    locale: str = DEFAULT_LOCALE,
    string_arrays_storage: StringArraysStorage = Depends(get_string_arrays_storage),
):
    if not string_arrays_storage.delete(array_id, locale=locale):
        raise HTTPException(status_code=404, detail="String array not found")

    return {"deleted": True, "array_id": array_id, "locale": locale}
