"""
Player profile and progression entity models.

A profile is the in-game character of an auth user. Progression currencies
(skill XP and attribute points) live in the wallet; attributes, daily grants
and the experience ledger hang off the profile.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class Profile(Base, table=True):
    """In-game character of an auth user.

    Table: profiles
    """

    __tablename__ = "profiles"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    user_id: str = Field(index=True, max_length=36, description="auth.users id (JWT 'sub')")
    username: str = Field(max_length=100)
    display_name: Optional[str] = Field(default=None, max_length=255)
    cash: int = Field(default=0)
    fame: int = Field(default=0)
    experience: int = Field(default=0)
    health: int = Field(default=100)
    last_health_update: Optional[datetime] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"<Profile(id={self.id}, username={self.username})>"


class PlayerXpWallet(Base, table=True):
    """Skill XP and attribute point balances of a profile.

    Table: player_xp_wallet
    """

    __tablename__ = "player_xp_wallet"

    profile_id: str = Field(foreign_key="profiles.id", primary_key=True, max_length=36)
    skill_xp_balance: int = Field(default=0)
    skill_xp_lifetime: int = Field(default=0)
    skill_xp_spent: int = Field(default=0)
    attribute_points_balance: int = Field(default=0)
    attribute_points_lifetime: int = Field(default=0)
    stipend_claim_streak: int = Field(default=0)
    last_stipend_claim_date: Optional[date] = Field(default=None)
    last_recalculated: Optional[datetime] = Field(default=None)


class PlayerAttributes(Base, table=True):
    """Attribute scores bought with attribute points.

    Table: player_attributes
    """

    __tablename__ = "player_attributes"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    profile_id: str = Field(foreign_key="profiles.id", index=True, unique=True, max_length=36)
    user_id: Optional[str] = Field(default=None, max_length=36)
    attribute_points_spent: int = Field(default=0)

    physical_endurance: int = Field(default=10)
    mental_focus: int = Field(default=10)
    stage_presence: int = Field(default=10)
    crowd_engagement: int = Field(default=10)
    social_reach: int = Field(default=10)
    creativity: int = Field(default=10)
    technical: int = Field(default=10)
    business: int = Field(default=10)
    marketing: int = Field(default=10)
    composition: int = Field(default=10)
    musical_ability: int = Field(default=10)
    vocal_talent: int = Field(default=10)
    rhythm_sense: int = Field(default=10)
    creative_insight: int = Field(default=10)
    technical_mastery: int = Field(default=10)
    business_acumen: int = Field(default=10)
    marketing_savvy: int = Field(default=10)

    updated_at: datetime = Field(default_factory=utc_now)


class DailyXpGrant(Base, table=True):
    """One claimed daily stipend.

    Table: profile_daily_xp_grants
    """

    __tablename__ = "profile_daily_xp_grants"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    profile_id: str = Field(foreign_key="profiles.id", index=True, max_length=36)
    grant_date: date
    source: str = Field(default="daily_stipend", max_length=50)
    xp_amount: int = Field(default=0)
    attribute_points_amount: int = Field(default=0)
    details: Optional[dict] = Field(default=None, sa_column=Column("metadata", JSON))
    created_at: datetime = Field(default_factory=utc_now)


class ExperienceLedgerEntry(Base, table=True):
    """XP earned by an activity, credited to the wallet by a daily batch job.

    Table: experience_ledger
    """

    __tablename__ = "experience_ledger"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    user_id: str = Field(index=True, max_length=36)
    profile_id: str = Field(foreign_key="profiles.id", index=True, max_length=36)
    activity_type: str = Field(max_length=100)
    xp_amount: int
    details: Optional[dict] = Field(default=None, sa_column=Column("metadata", JSON))
    created_at: datetime = Field(default_factory=utc_now)
