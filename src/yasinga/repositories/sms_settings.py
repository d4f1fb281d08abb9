"""SMS settings repository (one row per user)."""
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from yasinga.models.sms_settings import SmsSettings
from yasinga.repositories.base import BaseRepository


class SmsSettingsRepository(BaseRepository[SmsSettings]):
    """Repository for SmsSettings model."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, SmsSettings)

    async def get_by_user(self, user_id: UUID) -> SmsSettings | None:
        result = await self.db.execute(select(SmsSettings).where(SmsSettings.user_id == user_id))
        return result.scalar_one_or_none()
