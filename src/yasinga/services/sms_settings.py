"""SMS monitoring settings service."""
import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from yasinga.models.sms_settings import SmsSettings
from yasinga.repositories.sms_settings import SmsSettingsRepository
from yasinga.schemas.sms_settings import SmsSettingsUpdate

logger = logging.getLogger(__name__)


class SmsSettingsService:
    def __init__(self, db: AsyncSession):
        self.repo = SmsSettingsRepository(db)

    async def get_or_create(self, user_id: UUID) -> SmsSettings:
        """Return the user's settings row, creating one with defaults on first access."""
        existing = await self.repo.get_by_user(user_id)
        if existing is not None:
            return existing
        logger.info("Creating default SMS settings", extra={"user_id": str(user_id)})
        return await self.repo.create(SmsSettings(user_id=user_id))

    async def update(self, user_id: UUID, data: SmsSettingsUpdate) -> SmsSettings:
        sms_settings = await self.get_or_create(user_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            if value is not None or key == "custom_keywords":
                setattr(sms_settings, key, value)
        return await self.repo.save(sms_settings)
