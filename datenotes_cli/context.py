"""Shared CLI context with lazy-initialized dependencies."""

from pathlib import Path

from datenotes.config import AppConfig
from datenotes.service import DateNoteService
from datenotes.storage.json_store import JsonNoteStore


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        day_note = ctx.service.get_day_note("2024-03-15")
    """

    def __init__(
        self, verbose: bool = False, quiet: bool = False, store_path: Path | None = None
    ):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
            store_path: Overrides the configured store file
        """
        self.verbose = verbose
        self.quiet = quiet
        self.store_path = store_path

        # Lazy-loaded dependencies
        self._config: AppConfig | None = None
        self._store: JsonNoteStore | None = None
        self._service: DateNoteService | None = None

    @property
    def config(self) -> AppConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = AppConfig.from_env()
            if self.store_path is not None:
                self._config.store_path = self.store_path
        return self._config

    @property
    def store(self) -> JsonNoteStore:
        """Get note store (lazy-loaded)."""
        if self._store is None:
            self._store = JsonNoteStore(self.config.store_path)
        return self._store

    @property
    def service(self) -> DateNoteService:
        """Get date note service (lazy-loaded)."""
        if self._service is None:
            self._service = DateNoteService(self.store, self.config.session())
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
