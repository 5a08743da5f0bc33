"""Word cloud endpoints — the admin dashboard's view of the cached collection."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from wordclouds.application.interfaces import WordCloudStore
from wordclouds.application.schemas import (
    WordCloudCreate,
    WordCloudListResponse,
    WordCloudResponse,
    WordCloudUpdate,
    WordStyleResponse,
)
from wordclouds.application.services import WordCloudCollection, styles_for
from wordclouds.config import get_settings
from wordclouds.domain.exceptions import CmsError, EntityNotFoundError, ValidationError
from wordclouds.infrastructure.dependencies import (
    get_collection,
    get_word_cloud_store,
    require_authenticated,
)
from wordclouds.presentation.api.v1.errors import to_http_exception

router = APIRouter(prefix="/word-clouds", tags=["Word Clouds"])


def _list_response(collection: WordCloudCollection) -> WordCloudListResponse:
    return WordCloudListResponse(
        items=[WordCloudResponse.model_validate(r, from_attributes=True) for r in collection.items],
        is_loading=collection.is_loading,
        last_error=collection.last_error,
    )


@router.get("", response_model=WordCloudListResponse)
async def list_word_clouds(
    refresh: bool = Query(False, description="Re-fetch the collection from the CMS"),
    collection: WordCloudCollection = Depends(get_collection),
) -> WordCloudListResponse:
    """The cached collection, loaded on first access."""
    await collection.open()
    if refresh:
        await collection.refresh()
    return _list_response(collection)


@router.get("/active", response_model=list[WordCloudResponse])
async def list_active_word_clouds(
    store: WordCloudStore = Depends(get_word_cloud_store),
) -> list[WordCloudResponse]:
    """Active word clouds straight from the CMS, as the public site shows them."""
    try:
        records = await store.list_active()
    except CmsError as e:
        raise to_http_exception(e)
    return [WordCloudResponse.model_validate(r, from_attributes=True) for r in records]


@router.get("/{record_id}", response_model=WordCloudResponse)
async def get_word_cloud(
    record_id: str,
    store: WordCloudStore = Depends(get_word_cloud_store),
) -> WordCloudResponse:
    """A single word cloud, read from the CMS rather than the cache."""
    try:
        record = await store.get(record_id)
    except CmsError as e:
        raise to_http_exception(e)
    return WordCloudResponse.model_validate(record, from_attributes=True)


@router.post(
    "",
    response_model=WordCloudResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_authenticated)],
)
async def create_word_cloud(
    data: WordCloudCreate,
    collection: WordCloudCollection = Depends(get_collection),
) -> WordCloudResponse:
    try:
        record = await collection.create(data)
    except (CmsError, ValidationError) as e:
        raise to_http_exception(e)
    return WordCloudResponse.model_validate(record, from_attributes=True)


@router.patch(
    "/{record_id}",
    response_model=WordCloudResponse,
    dependencies=[Depends(require_authenticated)],
)
async def update_word_cloud(
    record_id: str,
    data: WordCloudUpdate,
    collection: WordCloudCollection = Depends(get_collection),
) -> WordCloudResponse:
    """Partial update; the cache shows the change before the CMS confirms it."""
    await collection.open()
    try:
        record = await collection.update(record_id, data)
    except (CmsError, ValidationError, EntityNotFoundError) as e:
        raise to_http_exception(e)
    return WordCloudResponse.model_validate(record, from_attributes=True)


@router.delete(
    "/{record_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_authenticated)],
)
async def delete_word_cloud(
    record_id: str,
    collection: WordCloudCollection = Depends(get_collection),
) -> None:
    await collection.open()
    try:
        await collection.delete(record_id)
    except (CmsError, EntityNotFoundError) as e:
        raise to_http_exception(e)


@router.get("/{record_id}/styles", response_model=list[WordStyleResponse])
async def word_styles(
    record_id: str,
    collection: WordCloudCollection = Depends(get_collection),
) -> list[WordStyleResponse]:
    """Font size, weight, opacity and colour of every word, as the editor renders them."""
    await collection.open()
    cloud = collection.get(record_id)
    if cloud is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("WordCloud", record_id)),
        )
    settings = get_settings()
    return [
        WordStyleResponse(
            text=word.text,
            font_size=style.font_size,
            font_weight=style.font_weight,
            opacity=style.opacity,
            color=color,
        )
        for word, style, color in styles_for(
            cloud, base=settings.word_size_base, scale=settings.word_size_scale
        )
    ]
