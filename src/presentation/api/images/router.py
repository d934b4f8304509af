"""
Images Router - Endpoints images d'annonces.

Endpoints:
----------
- POST /adverts/{advert_id}/images: Televerser (proprietaire)
- GET /adverts/{advert_id}/images: Contenus en base64
- GET /adverts/{advert_id}/images/{image_id}: Contenu brut
- DELETE /adverts/{advert_id}/images/{image_id}: Supprimer (proprietaire)
"""

import base64

from fastapi import APIRouter, Depends, File, Response, UploadFile, status

from src.application.security.principal import AuthenticatedUser
from src.application.services.image_data_service import ImageDataService
from src.presentation.api.dependencies import get_current_user, get_image_data_service
from src.presentation.api.images.schemas import ImageListResponse, ImageResponse

router = APIRouter(prefix="/adverts/{advert_id}/images", tags=["Images"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ImageResponse,
    summary="Televerser une image",
)
def upload_image(
    advert_id: int,
    file: UploadFile = File(...),
    current_user: AuthenticatedUser = Depends(get_current_user),
    service: ImageDataService = Depends(get_image_data_service),
):
    image = service.upload_image_to_advert(advert_id, file, current_user)
    return ImageResponse(
        id=image.id,
        advert_id=image.advert_id,
        name=image.name,
        content_type=image.content_type,
        size=image.size,
    )


@router.get("", response_model=ImageListResponse, summary="Images d'une annonce")
def list_images(
    advert_id: int,
    service: ImageDataService = Depends(get_image_data_service),
):
    payloads = service.find_byte_list_to_advert(advert_id)
    return ImageListResponse(
        advert_id=advert_id,
        images=[base64.b64encode(payload).decode("ascii") for payload in payloads],
    )


@router.get(
    "/{image_id}",
    response_class=Response,
    summary="Contenu d'une image",
    responses={200: {"content": {"image/*": {}}}},
)
def get_image(
    advert_id: int,
    image_id: int,
    service: ImageDataService = Depends(get_image_data_service),
):
    image = service.find_image_by_id_and_by_advert_id(image_id, advert_id)
    return Response(content=image.payload, media_type=image.content_type)


@router.delete(
    "/{image_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Supprimer une image",
)
def delete_image(
    advert_id: int,
    image_id: int,
    current_user: AuthenticatedUser = Depends(get_current_user),
    service: ImageDataService = Depends(get_image_data_service),
):
    service.delete_image_by_id_and_by_advert_id(image_id, advert_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
