import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from itemstore.schemas import Item
from itemstore.storage import ItemStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/items", tags=["items"])

ITEM_NOT_FOUND = "Item not found"


def get_store(request: Request) -> ItemStore:
    return request.app.state.store


async def read_item_body(request: Request) -> Item:
    """Decode the raw request body as an Item, whatever its Content-Type says."""
    raw_body = await request.body()
    try:
        return Item.model_validate_json(raw_body)
    except ValidationError as exc:
        errors = [{**error, "loc": ("body", *error["loc"])} for error in exc.errors()]
        raise RequestValidationError(errors, body=raw_body) from exc


@router.get("", response_model=list[Item])
def list_items(store: ItemStore = Depends(get_store)):
    return store.list()


@router.post("", response_model=Item, status_code=201)
def create_item(
    payload: Item = Depends(read_item_body),
    store: ItemStore = Depends(get_store),
):
    # Ids are caller-assigned; posting an existing id replaces that item.
    store.put(payload.id, payload)
    logger.debug("Stored item %r", payload.id)
    return payload


# ``path`` keeps everything after the prefix, slashes included.
@router.get("/{item_id:path}", response_model=Item)
def get_item(item_id: str, store: ItemStore = Depends(get_store)):
    item = store.get(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=ITEM_NOT_FOUND)
    return item


@router.put("/{item_id:path}", response_model=Item)
def replace_item(
    item_id: str,
    payload: Item = Depends(read_item_body),
    store: ItemStore = Depends(get_store),
):
    item = payload.model_copy(update={"id": item_id})
    store.put(item_id, item)
    logger.debug("Replaced item %r", item_id)
    return item


@router.delete("/{item_id:path}", status_code=204)
def delete_item(item_id: str, store: ItemStore = Depends(get_store)):
    if not store.delete(item_id):
        raise HTTPException(status_code=404, detail=ITEM_NOT_FOUND)
    logger.debug("Deleted item %r", item_id)
    return Response(status_code=204)
