"""Profile photo serving routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Response, status

from spoon.domain.error import StorageError
from spoon.domain.service import PhotoService

router = APIRouter(prefix="/photos", tags=["photos"], route_class=DishkaRoute)

# Keys are unique per upload, so a stored photo never changes
PHOTO_CACHE_CONTROL = "public, max-age=31536000, immutable"


@router.get("/{key:path}")
async def get_photo(key: str, photo_service: FromDishka[PhotoService]) -> Response:
    """Serve a stored photo by key.

    Args:
        key: Object key, e.g. "profiles/<user id>/1700000000000.jpg"
        photo_service: Photo service from DI

    Returns:
        Photo bytes with their stored content type

    Raises:
        HTTPException: 404 if not found, 503 if storage is unavailable
    """
    if not key:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    try:
        photo = await photo_service.fetch(key)
    except StorageError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Photo storage not available",
        )

    if photo is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Photo not found"
        )

    return Response(
        content=photo.content,
        media_type=photo.content_type,
        headers={"Cache-Control": PHOTO_CACHE_CONTROL},
    )
