"""
Service Dependencies.

Annotated dependencies shared by the edge functions and the JSON API:
the request's database session, the random source for reward rolls and the
authenticated caller.
"""

import random
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rockmundo.core.database import get_session
from rockmundo.server.services.auth import get_current_user_id


def get_rng() -> random.Random:
    """Fresh random source per request; tests override it with a seeded one."""
    return random.Random()


SessionDep = Annotated[AsyncSession, Depends(get_session)]
RngDep = Annotated[random.Random, Depends(get_rng)]
CurrentUserDep = Annotated[str, Depends(get_current_user_id)]
