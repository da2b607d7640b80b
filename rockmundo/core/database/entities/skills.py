"""
Skill entity models.

Skill definitions are admin-managed rows describing each trainable skill;
skill progress holds one profile's level and XP in one skill.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class SkillDefinition(Base, table=True):
    """Table: skill_definitions"""

    __tablename__ = "skill_definitions"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    slug: str = Field(index=True, unique=True, max_length=100)
    display_name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    tier_caps: Optional[dict] = Field(default=None, sa_column=Column(JSON))


class SkillProgress(Base, table=True):
    """Level and XP of one profile in one skill.

    Table: skill_progress
    """

    __tablename__ = "skill_progress"
    __table_args__ = (UniqueConstraint("profile_id", "skill_slug", name="uq_skill_progress_profile_skill"),)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    profile_id: str = Field(foreign_key="profiles.id", index=True, max_length=36)
    skill_slug: str = Field(max_length=100)
    current_level: int = Field(default=0)
    current_xp: int = Field(default=0)
    required_xp: int = Field(default=100)
    last_practiced_at: Optional[datetime] = Field(default=None)
    details: Optional[dict] = Field(default=None, sa_column=Column("metadata", JSON))
    created_at: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"<SkillProgress(profile_id={self.profile_id}, skill={self.skill_slug}, level={self.current_level})>"
