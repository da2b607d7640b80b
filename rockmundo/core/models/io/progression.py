"""
Progression I/O models.

One endpoint serves every progression action; the ``action`` field selects
the handler. Field names accept both snake_case and camelCase because older
clients send the latter.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ProgressionAction(str, Enum):
    CLAIM_DAILY_XP = "claim_daily_xp"
    SPEND_SKILL_XP = "spend_skill_xp"
    SPEND_ATTRIBUTE_POINTS = "spend_attribute_points"
    AWARD_ACTION_XP = "award_action_xp"


class ProgressionRequest(BaseModel):
    action: str = Field(default="", validation_alias=AliasChoices("action", "type"))
    skill_slug: Optional[str] = Field(default=None, validation_alias=AliasChoices("skill_slug", "skillSlug"))
    xp_amount: Optional[int] = Field(default=None, validation_alias=AliasChoices("xp_amount", "xpAmount", "xp"))
    attribute_key: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("attribute_key", "attributeKey")
    )
    points: Optional[int] = Field(default=None, validation_alias=AliasChoices("points", "ap_cost", "apCost"))
    amount: Optional[int] = Field(default=None)
    category: str = Field(default="performance")
    action_key: str = Field(default="gameplay_action", validation_alias=AliasChoices("action_key", "actionKey"))
    metadata: Dict[str, Any] = Field(default_factory=dict)


class ProfileRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    username: str
    display_name: Optional[str] = None
    cash: int
    fame: int
    experience: int
    health: int


class WalletRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    profile_id: str
    skill_xp_balance: int
    skill_xp_lifetime: int
    skill_xp_spent: int
    attribute_points_balance: int
    attribute_points_lifetime: int
    stipend_claim_streak: int
    last_stipend_claim_date: Optional[date] = None


class SkillProgressRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    profile_id: str
    skill_slug: str
    current_level: int
    current_xp: int
    required_xp: int
    last_practiced_at: Optional[datetime] = None


class ProgressionResponse(BaseModel):
    success: bool = True
    action: ProgressionAction
    message: Optional[str] = None
    profile: ProfileRead
    wallet: Optional[WalletRead] = None
    attributes: Optional[Dict[str, int]] = None
    skill_progress: Optional[SkillProgressRead] = None
