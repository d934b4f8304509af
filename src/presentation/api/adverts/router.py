"""
Adverts Router - Endpoints annonces.

Responsabilite unique:
----------------------
Exposer la recherche, la publication et la consultation d'annonces.

Endpoints:
----------
- GET /adverts: Toutes les annonces (vue publique)
- GET /adverts/sorted: Plus recentes d'abord
- GET /adverts/category/{name}: Par categorie
- GET /adverts/discounted | /promoted | /max-viewed
- GET /adverts/my: Annonces de l'appelant
- GET /adverts/viewed: Annonces consultees par l'appelant
- GET /adverts/{advert_id}: Une annonce (vue publique)
- POST /adverts: Publier une annonce (role USER)
- POST /adverts/{advert_id}/views: Enregistrer une consultation
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from src.application.security.principal import AuthenticatedUser
from src.application.services.advert_registration_service import AdvertRegistrationService
from src.application.services.advert_search_service import AdvertSearchService
from src.application.services.advert_view_service import AdvertViewService
from src.domain.exceptions import (
    AdvertRegistrationError,
    AuthorizationError,
    ResourceNotFoundError,
)
from src.presentation.api.adverts.schemas import (
    AdvertCreateRequest,
    AdvertPublicResponse,
    AdvertResponse,
    MessageResponse,
)
from src.presentation.api.dependencies import (
    get_advert_registration_service,
    get_advert_search_service,
    get_advert_view_service,
    get_current_user,
    require_role,
)
from src.infrastructure.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/adverts", tags=["Adverts"])


@router.get("", response_model=List[AdvertPublicResponse], summary="Toutes les annonces")
def find_all(service: AdvertSearchService = Depends(get_advert_search_service)):
    return service.find_all_adverts()


@router.get(
    "/sorted",
    response_model=List[AdvertResponse],
    summary="Annonces triees par date",
)
def find_all_sorted(service: AdvertSearchService = Depends(get_advert_search_service)):
    return service.find_all_by_order_by_created_date_desc()


@router.get(
    "/category/{category_name}",
    response_model=List[AdvertPublicResponse],
    summary="Annonces par categorie",
    description="Nom de categorie insensible a la casse; 400 si inconnu.",
)
def find_by_category(
    category_name: str,
    service: AdvertSearchService = Depends(get_advert_search_service),
):
    return service.find_by_category(category_name)


@router.get("/discounted", response_model=List[AdvertPublicResponse], summary="En promotion")
def find_discounted(service: AdvertSearchService = Depends(get_advert_search_service)):
    return service.find_discounted()


@router.get("/promoted", response_model=List[AdvertPublicResponse], summary="Mises en avant")
def find_promoted(service: AdvertSearchService = Depends(get_advert_search_service)):
    return service.find_promoted()


@router.get(
    "/max-viewed",
    response_model=List[AdvertPublicResponse],
    summary="Les 10 plus consultees",
)
def find_max_viewed(service: AdvertSearchService = Depends(get_advert_search_service)):
    return service.find_10_max_viewed()


@router.get("/my", response_model=List[AdvertResponse], summary="Mes annonces")
def find_my_adverts(
    current_user: AuthenticatedUser = Depends(get_current_user),
    service: AdvertSearchService = Depends(get_advert_search_service),
):
    return service.find_all_adverts_by_user(current_user)


@router.get("/viewed", response_model=List[AdvertResponse], summary="Annonces consultees")
def find_viewed(
    current_user: AuthenticatedUser = Depends(get_current_user),
    service: AdvertSearchService = Depends(get_advert_search_service),
):
    viewed = service.find_viewed_by_authenticated_user(current_user)
    return sorted(viewed, key=lambda dto: dto.id)


@router.get(
    "/{advert_id}",
    response_model=AdvertPublicResponse,
    summary="Une annonce",
    responses={404: {"model": MessageResponse}},
)
def find_by_id(
    advert_id: int,
    service: AdvertSearchService = Depends(get_advert_search_service),
):
    return service.find_advert_by_id(advert_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=AdvertResponse,
    summary="Publier une annonce",
    responses={
        400: {"model": MessageResponse},
        403: {"model": MessageResponse},
        500: {"model": MessageResponse},
    },
)
def register_advert(
    data: Optional[AdvertCreateRequest] = Body(None),
    current_user: AuthenticatedUser = Depends(require_role("USER")),
    service: AdvertRegistrationService = Depends(get_advert_registration_service),
):
    """
    Publie une annonce pour l'appelant.

    - 400 si titre ou description manquant, ou donnees invalides
    - 403 si l'appelant n'est pas autorise
    - 404 (handler global) si l'appelant n'existe plus
    - 500 pour toute autre erreur
    """
    if data is None or not data.title or not data.description:
        return _message(status.HTTP_400_BAD_REQUEST, "Please fill all fields")

    try:
        return service.register_advert(data.to_dto(), current_user)
    except AuthorizationError:
        return _message(status.HTTP_403_FORBIDDEN, "Unauthorized access")
    except AdvertRegistrationError as e:
        return _message(status.HTTP_400_BAD_REQUEST, e.message)
    except ResourceNotFoundError:
        raise
    except Exception as e:
        logger.exception("advert_registration_failed", user_id=current_user.id, error=str(e))
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred.")


@router.post(
    "/{advert_id}/views",
    response_model=AdvertResponse,
    summary="Enregistrer une consultation",
)
def register_view(
    advert_id: int,
    current_user: AuthenticatedUser = Depends(get_current_user),
    service: AdvertViewService = Depends(get_advert_view_service),
):
    return service.register_view(advert_id, current_user)


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})
