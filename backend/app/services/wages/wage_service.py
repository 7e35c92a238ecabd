"""Wage configuration service."""

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import utc_now
from app.models.wages import DEFAULT_WAGE_KEY, DEFAULT_WAGE_RATES, WageConfiguration
from app.services.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class WageService:
    """Service for the shop's piece-rate configuration."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_configuration(self) -> WageConfiguration:
        """Return the configuration, creating it with default rates on first use."""
        config = await self.session.get(WageConfiguration, DEFAULT_WAGE_KEY)
        if config is not None:
            return config

        config = WageConfiguration(key=DEFAULT_WAGE_KEY)
        self.session.add(config)
        try:
            await self.session.commit()
        except IntegrityError:
            # Created concurrently by another request
            await self.session.rollback()
            existing = await self.session.get(WageConfiguration, DEFAULT_WAGE_KEY)
            assert existing is not None
            return existing

        logger.info("Initialized wage configuration", **config.rates())
        return config

    async def update_rates(self, rates: dict[str, float]) -> WageConfiguration:
        """Replace all rates. Every rate must be given and non-negative."""
        missing = DEFAULT_WAGE_RATES.keys() - rates.keys()
        if missing:
            raise ValidationError(f"Missing wage rates: {', '.join(sorted(missing))}")
        negative = [name for name in DEFAULT_WAGE_RATES if rates[name] < 0]
        if negative:
            raise ValidationError(f"Wage rates must not be negative: {', '.join(negative)}")

        config = await self.get_configuration()
        for name in DEFAULT_WAGE_RATES:
            setattr(config, name, float(rates[name]))
        config.updated_at = utc_now()
        await self.session.commit()

        logger.info("Updated wage configuration", **config.rates())
        return config

    async def reset(self) -> WageConfiguration:
        """Restore the default rates."""
        return await self.update_rates(dict(DEFAULT_WAGE_RATES))
