"""
Progression actions.

Handles the player-facing progression calls: claiming the daily stipend,
spending skill XP on a skill, spending attribute points and recording XP
earned by gameplay actions.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from rockmundo.core.database.base import utc_now
from rockmundo.core.database.entities.profiles import (
    DailyXpGrant,
    ExperienceLedgerEntry,
    PlayerAttributes,
    PlayerXpWallet,
    Profile,
)
from rockmundo.core.database.entities.skills import SkillProgress
from rockmundo.core.database.repositories import ProfileRepository, SkillRepository
from rockmundo.core.logging_config import get_logger
from rockmundo.core.models.io.progression import ProgressionAction, ProgressionRequest
from rockmundo.errors import ConflictError, NotFoundError, RateLimitError, ValidationError
from rockmundo.game import progression as rules
from rockmundo.game.skills import apply_skill_xp

logger = get_logger(__name__)

DAILY_STIPEND_SOURCE = "daily_stipend"


@dataclass
class ProgressionResult:
    action: ProgressionAction
    profile: Profile
    wallet: Optional[PlayerXpWallet]
    attributes: Optional[Dict[str, int]]
    skill_progress: Optional[SkillProgress] = None
    message: Optional[str] = None


def attribute_values(attributes: Optional[PlayerAttributes]) -> Optional[Dict[str, int]]:
    if attributes is None:
        return None
    return {key: getattr(attributes, key) for key in rules.ATTRIBUTE_KEYS}


class ProgressionService:
    """Service behind the ``progression`` edge function."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.profiles = ProfileRepository(session)
        self.skills = SkillRepository(session)

    async def handle(
        self,
        user_id: str,
        request: ProgressionRequest,
        today: Optional[date] = None,
        now: Optional[datetime] = None,
    ) -> ProgressionResult:
        """
        Run one progression action for the caller and return the updated state.

        Raises:
            NotFoundError: The caller has no profile.
            ValidationError: Unknown action, missing or invalid amounts,
                insufficient balance or a second stipend claim today.
            ConflictError: A replayed action XP event.
            RateLimitError: Action XP awarded too often.
        """
        now = now or utc_now()
        today = today or now.date()

        if not request.action:
            raise ValidationError("Unable to resolve progression action from request")
        try:
            action = ProgressionAction(request.action)
        except ValueError:
            raise ValidationError(f"No handler defined for action: {request.action}") from None

        try:
            profile = await self.profiles.get_by_user_id(user_id)
            if profile is None:
                raise NotFoundError("Active profile not found for user")

            skill_progress = None
            message = None
            if action is ProgressionAction.CLAIM_DAILY_XP:
                message = await self.claim_daily_xp(profile, today, now, request.metadata)
            elif action is ProgressionAction.SPEND_SKILL_XP:
                skill_progress = await self.spend_skill_xp(profile, request, now)
            elif action is ProgressionAction.SPEND_ATTRIBUTE_POINTS:
                await self.spend_attribute_points(profile, request, now)
            else:
                await self.award_action_xp(profile, request, now)

            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(f"Progression action {action.value} applied for profile {profile.id}")
        return ProgressionResult(
            action=action,
            profile=profile,
            wallet=await self.profiles.get_wallet(profile.id),
            attributes=attribute_values(await self.profiles.get_attributes(profile.id)),
            skill_progress=skill_progress,
            message=message,
        )

    async def claim_daily_xp(self, profile: Profile, today: date, now: datetime, metadata: dict) -> str:
        if await self.profiles.get_daily_grant(profile.id, today, DAILY_STIPEND_SOURCE) is not None:
            raise ValidationError("Daily XP already claimed today")

        wallet = await self.profiles.get_or_create_wallet(profile.id)
        streak = rules.next_streak(wallet.last_stipend_claim_date, wallet.stipend_claim_streak or 0, today)
        stipend = rules.daily_stipend(streak)

        self.session.add(
            DailyXpGrant(
                profile_id=profile.id,
                grant_date=today,
                source=DAILY_STIPEND_SOURCE,
                xp_amount=stipend.total_sxp,
                attribute_points_amount=stipend.total_ap,
                details={
                    **metadata,
                    "base_sxp": stipend.base_sxp,
                    "base_ap": stipend.base_ap,
                    "bonus_sxp": stipend.bonus_sxp,
                    "bonus_ap": stipend.bonus_ap,
                    "total_sxp": stipend.total_sxp,
                    "total_ap": stipend.total_ap,
                    "streak": streak,
                    "milestones_reached": stipend.milestones,
                },
            )
        )

        wallet.skill_xp_balance += stipend.total_sxp
        wallet.skill_xp_lifetime += stipend.total_sxp
        wallet.attribute_points_balance += stipend.total_ap
        wallet.attribute_points_lifetime += stipend.total_ap
        wallet.stipend_claim_streak = streak
        wallet.last_stipend_claim_date = today
        wallet.last_recalculated = now
        self.session.add(wallet)
        await self.session.flush()

        return f"Claimed {stipend.total_sxp} SXP and {stipend.total_ap} AP (streak {streak})"

    async def spend_skill_xp(self, profile: Profile, request: ProgressionRequest, now: datetime) -> SkillProgress:
        if not request.skill_slug:
            raise ValidationError("Skill slug is required")
        amount = request.xp_amount if request.xp_amount is not None else request.amount
        if amount is None:
            raise ValidationError("XP amount must be a positive number")

        wallet = await self.profiles.get_or_create_wallet(profile.id)
        rules.check_spend(wallet.skill_xp_balance, amount, "Skill XP")

        progress = await self.skills.get_or_create_progress(profile.id, request.skill_slug)
        result = apply_skill_xp(progress.current_level, progress.current_xp, amount, progress.required_xp)
        progress.current_level = result.level
        progress.current_xp = result.current_xp
        progress.required_xp = result.required_xp
        progress.last_practiced_at = now
        progress.details = dict(request.metadata)
        self.session.add(progress)

        wallet.skill_xp_balance -= amount
        wallet.skill_xp_spent += amount
        wallet.last_recalculated = now
        self.session.add(wallet)
        await self.session.flush()

        if result.levels_gained:
            logger.info(f"Profile {profile.id} raised {request.skill_slug} to level {result.level}")
        return progress

    async def spend_attribute_points(self, profile: Profile, request: ProgressionRequest, now: datetime) -> None:
        if not request.attribute_key:
            raise ValidationError("Attribute key is required for purchases")
        points = request.points if request.points is not None else request.amount
        if points is None:
            raise ValidationError("Attribute point amount is required")

        wallet = await self.profiles.get_or_create_wallet(profile.id)
        rules.check_spend(wallet.attribute_points_balance, points, "Attribute Points")

        attributes = await self.profiles.get_or_create_attributes(profile)
        new_value = rules.raise_attribute(request.attribute_key, getattr(attributes, request.attribute_key, None), points)
        setattr(attributes, request.attribute_key, new_value)
        attributes.attribute_points_spent = (attributes.attribute_points_spent or 0) + points
        attributes.updated_at = now
        self.session.add(attributes)

        wallet.attribute_points_balance -= points
        wallet.last_recalculated = now
        self.session.add(wallet)
        await self.session.flush()

    async def award_action_xp(self, profile: Profile, request: ProgressionRequest, now: datetime) -> None:
        """
        Record XP earned by a gameplay action.

        The XP only goes to the experience ledger; a daily batch job credits
        ledger entries to the wallet. Timed activities (``duration_minutes``
        in the metadata) also drain health.

        Raises:
            ValidationError: Non-positive amount.
            ConflictError: The metadata names an event already in the ledger.
            RateLimitError: Too many awards in the last minute.
        """
        amount = request.amount if request.amount is not None else request.xp_amount
        if amount is None or amount <= 0:
            raise ValidationError("XP amount must be a positive number")

        metadata = dict(request.metadata)
        unique_event_id = rules.resolve_unique_event_id(metadata)
        await self._enforce_ledger_rules(profile, unique_event_id, now)

        duration = metadata.get("duration_minutes")
        if not isinstance(duration, (int, float)) or isinstance(duration, bool):
            duration = None
        activity_type = metadata.get("activity_type") or request.action_key
        drain = rules.health_drain(activity_type, duration)

        if drain > 0:
            current = profile.health if profile.health is not None else 100
            profile.health = max(0, current - drain)
            profile.last_health_update = now
            self.session.add(profile)

        await self.profiles.log_experience(
            ExperienceLedgerEntry(
                user_id=profile.user_id,
                profile_id=profile.id,
                activity_type=request.action_key,
                xp_amount=amount,
                created_at=now,
                details={
                    "category": request.category,
                    "action_key": request.action_key,
                    "health_drain": drain,
                    "pending_daily_process": True,
                    **metadata,
                    "event_type": rules.ACTION_XP_EVENT_TYPE,
                    "unique_event_id": unique_event_id,
                },
            )
        )

    async def _enforce_ledger_rules(self, profile: Profile, unique_event_id: Optional[str], now: datetime) -> None:
        if unique_event_id and await self.profiles.has_ledger_event(
            profile.id, rules.ACTION_XP_EVENT_TYPE, unique_event_id
        ):
            raise ConflictError("Duplicate progression event detected")

        since = now - timedelta(seconds=rules.ACTION_XP_WINDOW_SECONDS)
        recent = await self.profiles.count_ledger_events_since(profile.id, rules.ACTION_XP_EVENT_TYPE, since)
        if recent >= rules.ACTION_XP_MAX_ENTRIES:
            raise RateLimitError("Progression action rate limit exceeded")
