"""Pydantic schemas for SMS monitoring settings."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class SmsSettingsUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    is_enabled: bool | None = None
    auto_detect_transactions: bool | None = None
    smart_supplier_recognition: bool | None = None
    auto_categorize_recurring: bool | None = None
    custom_keywords: str | None = None
    monitor_all_sim_cards: bool | None = None


class SmsSettingsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    is_enabled: bool
    auto_detect_transactions: bool
    smart_supplier_recognition: bool
    auto_categorize_recurring: bool
    custom_keywords: str | None
    monitor_all_sim_cards: bool
    last_sync_date: datetime | None
    updated_at: datetime
