"""
Newsletter Service for subscription management.

The only write path of the API: one subscriber row per email address.

Usage:
    from app.services.newsletter_service import newsletter_service

    await newsletter_service.subscribe(session, "reader@example.com")
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.errors import ConflictError, StorageError
from ..database.models import Subscriber

logger = logging.getLogger("zaryab.newsletter_service")


class NewsletterService:
    """Insert-if-absent subscription handling."""

    DUPLICATE_MESSAGE = "Email already subscribed"
    FAILURE_MESSAGE = "Failed to subscribe"
    SUCCESS_MESSAGE = "Subscription successful"

    @staticmethod
    def normalize(email: str) -> str:
        return email.strip().lower()

    async def is_subscribed(self, session: AsyncSession, email: str) -> bool:
        result = await session.execute(
            select(func.count(Subscriber.id)).where(Subscriber.email == self.normalize(email))
        )
        return result.scalar_one() > 0

    async def subscribe(self, session: AsyncSession, email: str) -> Subscriber:
        """
        Subscribe an address that has already passed email validation.

        Args:
            session: Database session
            email: Valid email address

        Returns:
            The new Subscriber

        Raises:
            ConflictError: The address is already subscribed (also raised when
                a concurrent request inserted it between check and insert)
            StorageError: The insert failed for any other reason
        """
        email = self.normalize(email)

        if await self.is_subscribed(session, email):
            logger.info(f"Duplicate newsletter subscription for {email}")
            raise ConflictError("already_subscribed", self.DUPLICATE_MESSAGE)

        subscriber = Subscriber(email=email)
        try:
            session.add(subscriber)
            await session.flush()
        except IntegrityError:
            await session.rollback()
            logger.info(f"Concurrent duplicate newsletter subscription for {email}")
            raise ConflictError("already_subscribed", self.DUPLICATE_MESSAGE)
        except SQLAlchemyError:
            await session.rollback()
            logger.exception(f"Failed to store newsletter subscription for {email}")
            raise StorageError("subscription_failed", self.FAILURE_MESSAGE)

        logger.info(f"New newsletter subscriber {subscriber.id}")
        return subscriber


# Global newsletter service instance
newsletter_service = NewsletterService()
