"""
Jam session completion.

Only the host may complete an active session. Every participant (the host
included) earns the shared XP, instrument skill XP and chemistry; one of them
may receive a gifted demo song.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from rockmundo.core.database.base import utc_now
from rockmundo.core.database.entities.jam_sessions import JamGiftedSongLog, JamSession, JamSessionOutcome
from rockmundo.core.database.entities.songs import Song
from rockmundo.core.database.repositories import JamSessionRepository, ProfileRepository, SkillRepository
from rockmundo.core.logging_config import get_logger
from rockmundo.core.monitoring import log_reward_grant
from rockmundo.errors import ForbiddenError, NotFoundError, ValidationError
from rockmundo.game import jam_sessions as rules
from rockmundo.server.core.config import settings

logger = get_logger(__name__)


@dataclass
class JamCompletion:
    session_id: str
    duration_minutes: int
    synergy_score: int
    mood_score: int
    total_xp_awarded: int
    gifted_song_id: Optional[str] = None
    outcomes: List[JamSessionOutcome] = field(default_factory=list)


class JamSessionService:
    """Service behind ``complete-jam-session``."""

    def __init__(self, session: AsyncSession, rng: random.Random):
        self.session = session
        self.rng = rng
        self.jams = JamSessionRepository(session)
        self.profiles = ProfileRepository(session)
        self.skills = SkillRepository(session)

    async def complete_session(
        self, user_id: str, session_id: Optional[str], now: Optional[datetime] = None
    ) -> JamCompletion:
        """
        Complete a jam session on behalf of its host.

        Args:
            user_id: Authenticated auth user id of the caller
            session_id: jam_sessions.id from the request body
            now: Completion time; defaults to the current UTC time

        Raises:
            NotFoundError: Caller has no profile, or the session does not exist.
            ValidationError: No session id, or the session is not active.
            ForbiddenError: Caller is not the session host.
        """
        now = now or utc_now()
        try:
            caller = await self.profiles.get_by_user_id(user_id)
            if caller is None:
                raise NotFoundError("Profile not found")
            if not session_id:
                raise ValidationError("session_id is required")

            jam = await self.jams.get_by_id(session_id)
            if jam is None:
                raise NotFoundError("Session not found")
            if jam.host_id != caller.id:
                raise ForbiddenError("Only the host can complete the session")
            if jam.status != "active":
                raise ValidationError(f"Session is {jam.status}, must be active to complete")

            completion = await self._settle(jam, now)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            f"Jam session {jam.id} completed: {len(completion.outcomes)} players, "
            f"{completion.total_xp_awarded} XP awarded, gifted_song={completion.gifted_song_id}"
        )
        log_reward_grant(
            "jam_session",
            xp=completion.total_xp_awarded,
            players=len(completion.outcomes),
            gifted_song=completion.gifted_song_id is not None,
        )
        return completion

    async def _settle(self, jam: JamSession, now: datetime) -> JamCompletion:
        participants = await self.jams.list_participants(jam.id)
        slugs_by_profile = {p.profile_id: p.instrument_skill_slug for p in participants}
        player_ids = [p.profile_id for p in participants]
        if jam.host_id not in slugs_by_profile:
            player_ids.append(jam.host_id)

        duration = rules.session_duration_minutes(jam.started_at or jam.created_at, now)
        diversity = rules.instrument_diversity(slugs_by_profile.values())
        scores = rules.roll_scores(duration, diversity, self.rng, session_mood=jam.mood_score)
        xp = rules.xp_per_player(duration, diversity, scores.mood, len(player_ids)).total
        logger.debug(
            f"Jam session {jam.id}: duration={duration}m diversity={diversity} "
            f"synergy={scores.synergy} mood={scores.mood} xp_per_player={xp}"
        )

        gift_recipient, gifted_song_id = await self._roll_gifted_song(jam, player_ids, scores, now)

        completion = JamCompletion(
            session_id=jam.id,
            duration_minutes=duration,
            synergy_score=scores.synergy,
            mood_score=scores.mood,
            total_xp_awarded=0,
            gifted_song_id=gifted_song_id,
        )
        rating = rules.performance_rating(scores.synergy, scores.mood)
        chemistry = rules.chemistry_gain(duration)

        for profile_id in player_ids:
            skill_slug = slugs_by_profile.get(profile_id) or rules.DEFAULT_SKILL_SLUG
            progress = await self.skills.get_or_create_progress(profile_id, skill_slug)
            skill_xp = rules.skill_xp_gain(duration, progress.current_xp or 0)

            outcome = JamSessionOutcome(
                session_id=jam.id,
                participant_id=profile_id,
                xp_earned=xp,
                chemistry_gained=chemistry,
                skill_slug=skill_slug,
                skill_xp_gained=skill_xp,
                gifted_song_id=gifted_song_id if profile_id == gift_recipient else None,
                performance_rating=rating,
            )
            self.session.add(outcome)
            completion.outcomes.append(outcome)

            profile = await self.profiles.get_by_id(profile_id)
            if profile is not None:
                await self.profiles.add_experience(profile, xp)
            else:
                logger.warning(f"Jam participant {profile_id} has no profile row; XP not credited")

            progress.current_xp = (progress.current_xp or 0) + skill_xp
            progress.last_practiced_at = now
            self.session.add(progress)

            completion.total_xp_awarded += xp

        jam.status = "completed"
        jam.completed_at = now
        jam.total_xp_awarded = completion.total_xp_awarded
        jam.mood_score = scores.mood
        jam.synergy_score = scores.synergy
        jam.gifted_song_id = gifted_song_id
        self.session.add(jam)
        await self.session.flush()
        return completion

    async def _roll_gifted_song(
        self, jam: JamSession, player_ids: List[str], scores: rules.SessionScores, now: datetime
    ) -> tuple[Optional[str], Optional[str]]:
        """Roll for a gifted demo; returns (recipient profile id, song id) or (None, None)."""
        chance = rules.gifted_song_chance(len(player_ids), scores.synergy, scores.mood)
        if self.rng.random() >= chance:
            return None, None

        recipient = self.rng.choice(player_ids)
        cooldown = timedelta(days=settings.game.gifted_song_cooldown_days)
        if await self.jams.count_gifts_since(recipient, now - cooldown) > 0:
            logger.info(f"Recipient {recipient} already received a gifted song this week")
            return None, None

        gift = rules.generate_gifted_song(self.rng)
        song = Song(
            title=gift.title,
            genre=jam.genre,
            tempo=jam.tempo,
            quality_score=gift.quality_score,
            status="demo",
            duration_seconds=gift.duration_seconds,
        )
        self.session.add(song)
        self.session.add(JamGiftedSongLog(profile_id=recipient, session_id=jam.id, song_id=song.id, created_at=now))
        await self.session.flush()
        logger.info(f"Gifted song '{gift.title}' ({song.id}) to {recipient} from jam session {jam.id}")
        return recipient, song.id
