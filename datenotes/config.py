"""Configuration for date notes."""

import os
from pathlib import Path

from pydantic import BaseModel, Field

from datenotes.models.session import SessionContext

try:
    from dotenv import load_dotenv
except ImportError:
    load_dotenv = None

TRUE_VALUES = {"1", "true", "yes", "on"}


class AppConfig(BaseModel):
    """Application configuration with Pydantic validation."""

    # Storage
    store_path: Path = Field(default=Path("data/notes.json"))

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="datenotes.log")

    # Session
    protected_session: bool = False
    workspace_note_id: str | None = None

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load configuration from environment variables and .env file."""
        # Load .env file if python-dotenv is available
        if load_dotenv is not None:
            load_dotenv()

        config_dict = {}

        if "DATENOTES_STORE" in os.environ:
            config_dict["store_path"] = Path(os.environ["DATENOTES_STORE"])
        if "DATENOTES_LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["DATENOTES_LOG_DIR"])
        if "DATENOTES_LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["DATENOTES_LOG_FILENAME"]
        if "DATENOTES_PROTECTED_SESSION" in os.environ:
            config_dict["protected_session"] = (
                os.environ["DATENOTES_PROTECTED_SESSION"].strip().lower() in TRUE_VALUES
            )
        if os.environ.get("DATENOTES_WORKSPACE"):
            config_dict["workspace_note_id"] = os.environ["DATENOTES_WORKSPACE"]

        return cls(**config_dict)

    def session(self) -> SessionContext:
        """Session context for resolution calls made by this process."""
        return SessionContext(
            protected_content_available=self.protected_session,
            workspace_note_id=self.workspace_note_id,
        )
