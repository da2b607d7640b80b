"""Skill catalogue and skill progress data access."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.skills import SkillDefinition, SkillProgress
from .base import AsyncBaseRepository


class SkillRepository(AsyncBaseRepository[SkillProgress]):
    """Repository for per-profile skill progress and the skill catalogue."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, SkillProgress)

    async def list_definitions(self) -> List[SkillDefinition]:
        stmt = select(SkillDefinition).order_by(SkillDefinition.display_name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_progress(self, profile_id: str) -> List[SkillProgress]:
        return await self.list(filters={"profile_id": profile_id})

    async def get_progress(self, profile_id: str, skill_slug: str) -> Optional[SkillProgress]:
        stmt = select(SkillProgress).where(
            (SkillProgress.profile_id == profile_id) & (SkillProgress.skill_slug == skill_slug)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_or_create_progress(self, profile_id: str, skill_slug: str) -> SkillProgress:
        """Upsert on (profile_id, skill_slug): return the existing row or stage a fresh one."""
        progress = await self.get_progress(profile_id, skill_slug)
        if progress is None:
            progress = SkillProgress(profile_id=profile_id, skill_slug=skill_slug)
            self.session.add(progress)
            await self.session.flush()
        return progress
