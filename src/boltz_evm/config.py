"""Process configuration using pydantic-settings.

Locates the Boltz data directory holding the wallet seed files and the
``boltz.conf`` chain configuration.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_DIR = Path("~/.boltz")

# Priority order: EVM specific seed first, generic seed second
DEFAULT_SEED_FILES = ["seedEvm.dat", "seed.dat"]

# BIP44 account 0, external chain, index 0
DEFAULT_DERIVATION_PATH = "m/44'/60'/0'/0/0"


class Settings(BaseSettings):
    """Settings loaded from environment variables prefixed with ``BOLTZ_``."""

    model_config = SettingsConfigDict(
        env_prefix="BOLTZ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Data directory
    # ======================
    data_dir: Path = Field(
        default=DEFAULT_DATA_DIR,
        validate_default=True,
        description="Boltz data directory",
    )
    config_file: str = Field(
        default="boltz.conf", description="Config filename inside the data directory"
    )

    # ======================
    # Wallet
    # ======================
    seed_files: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SEED_FILES),
        description="Seed filenames, highest priority first",
    )
    derivation_path: str = Field(
        default=DEFAULT_DERIVATION_PATH, description="BIP44 path of the signing key"
    )

    # ======================
    # Log queries
    # ======================
    logs_query_delta: int = Field(
        default=10000, ge=0, description="Default number of blocks to look back"
    )

    @field_validator("data_dir")
    @classmethod
    def _expand_data_dir(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("seed_files")
    @classmethod
    def _require_seed_files(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("at least one seed file name is required")
        return value

    def file_path(self, name: str) -> Path:
        """Resolve a filename against the data directory."""
        return self.data_dir / name

    @property
    def config_path(self) -> Path:
        return self.file_path(self.config_file)

    @property
    def seed_paths(self) -> list[Path]:
        """Candidate seed file paths in priority order."""
        return [self.file_path(name) for name in self.seed_files]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
