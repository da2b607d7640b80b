"""
Profile and progression data access.

Covers the profile itself and the rows hanging off it: XP wallet, player
attributes, daily stipend grants and the experience ledger.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.profiles import (
    DailyXpGrant,
    ExperienceLedgerEntry,
    PlayerAttributes,
    PlayerXpWallet,
    Profile,
)
from .base import AsyncBaseRepository


class ProfileRepository(AsyncBaseRepository[Profile]):
    """Repository for profiles and their progression rows."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Profile)

    async def get_by_user_id(self, user_id: str) -> Optional[Profile]:
        """Get the profile owned by an auth user.

        Args:
            user_id: auth.users id taken from the JWT ``sub`` claim

        Returns:
            Profile instance or None
        """
        stmt = select(Profile).where(Profile.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_wallet(self, profile_id: str) -> Optional[PlayerXpWallet]:
        return await self.session.get(PlayerXpWallet, profile_id)

    async def get_or_create_wallet(self, profile_id: str) -> PlayerXpWallet:
        wallet = await self.get_wallet(profile_id)
        if wallet is None:
            wallet = PlayerXpWallet(profile_id=profile_id)
            self.session.add(wallet)
            await self.session.flush()
        return wallet

    async def get_attributes(self, profile_id: str) -> Optional[PlayerAttributes]:
        stmt = select(PlayerAttributes).where(PlayerAttributes.profile_id == profile_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_or_create_attributes(self, profile: Profile) -> PlayerAttributes:
        attributes = await self.get_attributes(profile.id)
        if attributes is None:
            attributes = PlayerAttributes(profile_id=profile.id, user_id=profile.user_id)
            self.session.add(attributes)
            await self.session.flush()
        return attributes

    async def get_daily_grant(self, profile_id: str, grant_date: date, source: str) -> Optional[DailyXpGrant]:
        stmt = select(DailyXpGrant).where(
            (DailyXpGrant.profile_id == profile_id)
            & (DailyXpGrant.grant_date == grant_date)
            & (DailyXpGrant.source == source)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def add_experience(self, profile: Profile, xp_amount: int) -> None:
        """Add XP to the profile's experience total."""
        profile.experience = (profile.experience or 0) + xp_amount
        self.session.add(profile)

    async def log_experience(self, entry: ExperienceLedgerEntry) -> ExperienceLedgerEntry:
        return await self.add(entry)

    async def has_ledger_event(self, profile_id: str, event_type: str, unique_event_id: str) -> bool:
        """Whether the profile's ledger already holds an entry for this event."""
        stmt = (
            select(ExperienceLedgerEntry.id)
            .where(
                (ExperienceLedgerEntry.profile_id == profile_id)
                & (ExperienceLedgerEntry.details["event_type"].as_string() == event_type)
                & (ExperienceLedgerEntry.details["unique_event_id"].as_string() == unique_event_id)
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def count_ledger_events_since(self, profile_id: str, event_type: str, since: datetime) -> int:
        stmt = select(func.count(ExperienceLedgerEntry.id)).where(
            (ExperienceLedgerEntry.profile_id == profile_id)
            & (ExperienceLedgerEntry.details["event_type"].as_string() == event_type)
            & (ExperienceLedgerEntry.created_at >= since)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
