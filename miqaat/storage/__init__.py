"""Local entity store for miqaats and daily duas."""

from miqaat.config import CalendarConfig
from miqaat.models.daily_dua import DailyDua
from miqaat.models.miqaat import Miqaat
from miqaat.storage.entity_repository import EntityRepository


def miqaat_repository(config: CalendarConfig) -> EntityRepository[Miqaat]:
    """Repository for miqaat records."""
    return EntityRepository("miqaat", Miqaat, config.miqaat_path)


def daily_dua_repository(config: CalendarConfig) -> EntityRepository[DailyDua]:
    """Repository for daily dua records."""
    return EntityRepository("daily_dua", DailyDua, config.daily_dua_path)


__all__ = ["EntityRepository", "daily_dua_repository", "miqaat_repository"]
