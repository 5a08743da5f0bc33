"""Site configuration endpoints (CMS single type)."""

from fastapi import APIRouter, Depends

from wordclouds.application.schemas import SiteConfigResponse, SiteConfigUpdate
from wordclouds.application.services import SiteConfigService
from wordclouds.domain.exceptions import CmsError
from wordclouds.infrastructure.dependencies import get_site_config_service, require_authenticated
from wordclouds.presentation.api.v1.errors import to_http_exception

router = APIRouter(prefix="/site-config", tags=["Site Config"])


@router.get("", response_model=SiteConfigResponse)
async def get_site_config(
    service: SiteConfigService = Depends(get_site_config_service),
) -> SiteConfigResponse:
    """The stored configuration, or the built-in fallback when the CMS has none."""
    config = await service.get()
    return SiteConfigResponse.model_validate(config, from_attributes=True)


@router.put(
    "",
    response_model=SiteConfigResponse,
    dependencies=[Depends(require_authenticated)],
)
async def replace_site_config(
    data: SiteConfigUpdate,
    service: SiteConfigService = Depends(get_site_config_service),
) -> SiteConfigResponse:
    try:
        config = await service.replace(data)
    except CmsError as e:
        raise to_http_exception(e)
    return SiteConfigResponse.model_validate(config, from_attributes=True)
