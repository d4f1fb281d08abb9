"""SMS monitoring settings endpoints."""

from fastapi import APIRouter, Depends

from yasinga.api.deps import get_current_user, get_sms_settings_service
from yasinga.models.user import User
from yasinga.schemas.sms_settings import SmsSettingsResponse, SmsSettingsUpdate
from yasinga.services.sms_settings import SmsSettingsService

router = APIRouter(prefix="/sms-settings", tags=["sms-settings"])


@router.get(
    "",
    response_model=SmsSettingsResponse,
    summary="Get SMS settings",
    description="Return the user's SMS monitoring settings, creating defaults on first access.",
)
async def get_sms_settings(
    current_user: User = Depends(get_current_user),
    service: SmsSettingsService = Depends(get_sms_settings_service),
) -> SmsSettingsResponse:
    return SmsSettingsResponse.model_validate(await service.get_or_create(current_user.id))


@router.put(
    "",
    response_model=SmsSettingsResponse,
    summary="Update SMS settings",
)
async def update_sms_settings(
    data: SmsSettingsUpdate,
    current_user: User = Depends(get_current_user),
    service: SmsSettingsService = Depends(get_sms_settings_service),
) -> SmsSettingsResponse:
    return SmsSettingsResponse.model_validate(await service.update(current_user.id, data))
