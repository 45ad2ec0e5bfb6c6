"""Shared CLI context with lazy-initialized dependencies."""

from todocal.config import TodoCalConfig
from todocal.service import TodoService
from todocal.storage import ItemStore, create_store


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        items = ctx.service.items_for_day(date.today())
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: TodoCalConfig | None = None
        self._store: ItemStore | None = None
        self._service: TodoService | None = None

    @property
    def config(self) -> TodoCalConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = TodoCalConfig.from_env()
        return self._config

    @property
    def store(self) -> ItemStore:
        """Get item store selected by config (lazy-loaded)."""
        if self._store is None:
            self._store = create_store(self.config)
        return self._store

    @property
    def service(self) -> TodoService:
        """Get todo service (lazy-loaded)."""
        if self._service is None:
            self._service = TodoService(self.store)
        return self._service


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context."""
    global _ctx
    _ctx = ctx
