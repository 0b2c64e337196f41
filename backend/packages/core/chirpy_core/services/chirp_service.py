"""
Chirp service.

Handles chirp creation, retrieval and deletion, including body cleaning.
"""

import unicodedata

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy_core.schemas import ChirpCreate, ChirpResponse
from chirpy_database.models import MAX_CHIRP_LENGTH, Chirp

PROFANE_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
CENSORED_WORD = "****"


def _has_punctuation(word: str) -> bool:
    return any(unicodedata.category(char).startswith("P") for char in word)


def clean_chirp_body(body: str) -> str:
    """
    Censor profane words.

    Words are split on single spaces; a word containing punctuation is kept
    as is, so "Sharbert!" survives.

    Args:
        body: Raw chirp text.

    Returns:
        Cleaned text.
    """
    words = []
    for word in body.split(" "):
        lowered = word.lower()
        if lowered in PROFANE_WORDS and not _has_punctuation(lowered):
            words.append(CENSORED_WORD)
        else:
            words.append(word)
    return " ".join(words)


class ChirpService:
    """Chirp management service."""

    def __init__(self, session: AsyncSession):
        """
        Initialize chirp service.

        Args:
            session: Database session.
        """
        self.session = session

    async def _get(self, chirp_id: str) -> Chirp:
        result = await self.session.execute(select(Chirp).where(Chirp.id == chirp_id))
        chirp = result.scalar_one_or_none()
        if not chirp:
            raise ValueError("Chirp not found")
        return chirp

    async def create_chirp(self, user_id: str, data: ChirpCreate) -> ChirpResponse:
        """
        Create a chirp.

        Args:
            user_id: Author identifier.
            data: Chirp body.

        Returns:
            Created chirp.

        Raises:
            ValueError: If the body is longer than 140 characters.
        """
        if len(data.body) > MAX_CHIRP_LENGTH:
            raise ValueError("Chirp is too long")

        chirp = Chirp(body=clean_chirp_body(data.body), user_id=user_id)
        self.session.add(chirp)
        await self.session.commit()
        await self.session.refresh(chirp)

        return ChirpResponse.model_validate(chirp)

    async def list_chirps(self) -> list[ChirpResponse]:
        """
        Get all chirps, oldest first.

        Returns:
            List of chirps.
        """
        result = await self.session.execute(select(Chirp).order_by(Chirp.created_at.asc()))
        return [ChirpResponse.model_validate(chirp) for chirp in result.scalars().all()]

    async def get_chirp(self, chirp_id: str) -> ChirpResponse:
        """
        Get a chirp by ID.

        Args:
            chirp_id: Chirp identifier.

        Returns:
            Chirp response.

        Raises:
            ValueError: If chirp not found.
        """
        return ChirpResponse.model_validate(await self._get(chirp_id))

    async def delete_chirp(self, chirp_id: str, user_id: str) -> None:
        """
        Delete a chirp owned by the user.

        Args:
            chirp_id: Chirp identifier.
            user_id: Requesting user identifier.

        Raises:
            ValueError: If chirp not found.
            PermissionError: If the user is not the author.
        """
        chirp = await self._get(chirp_id)
        if chirp.user_id != user_id:
            raise PermissionError("Not the author of this chirp")

        await self.session.delete(chirp)
        await self.session.commit()
