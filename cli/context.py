"""Shared CLI context with lazy-initialized dependencies."""

from miqaat.calendar import Calendar
from miqaat.config import CalendarConfig, WeekStart
from miqaat.ingestion import ReaderRegistry, setup_reader_registry
from miqaat.models.daily_dua import DailyDua
from miqaat.models.miqaat import Miqaat
from miqaat.storage import EntityRepository, daily_dua_repository, miqaat_repository


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        miqaats = ctx.miqaats.list()
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        config: CalendarConfig | None = None,
    ):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
            config: Configuration (loaded from the environment when omitted)
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config = config
        self._reader_registry: ReaderRegistry | None = None
        self._miqaats: EntityRepository[Miqaat] | None = None
        self._daily_duas: EntityRepository[DailyDua] | None = None

    @property
    def config(self) -> CalendarConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = CalendarConfig.from_env()
        return self._config

    @property
    def reader_registry(self) -> ReaderRegistry:
        """Get reader registry with all readers registered (lazy-loaded)."""
        if self._reader_registry is None:
            self._reader_registry = setup_reader_registry()
        return self._reader_registry

    @property
    def miqaats(self) -> EntityRepository[Miqaat]:
        """Get miqaat repository (lazy-loaded)."""
        if self._miqaats is None:
            self._miqaats = miqaat_repository(self.config)
        return self._miqaats

    @property
    def daily_duas(self) -> EntityRepository[DailyDua]:
        """Get daily dua repository (lazy-loaded)."""
        if self._daily_duas is None:
            self._daily_duas = daily_dua_repository(self.config)
        return self._daily_duas

    def calendar(
        self,
        year: int | None = None,
        month: int | None = None,
        week_start: WeekStart | None = None,
    ) -> Calendar:
        """Calendar for a zero-based month with stored events attached."""
        return Calendar(
            year=year,
            month=month,
            miqaats=self.miqaats.list(),
            daily_duas=self.daily_duas.list(),
            week_start=week_start or self.config.week_start,
            min_year=self.config.min_year,
            max_year=self.config.max_year,
        )


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx
