"""Application settings and per-run pipeline configuration."""

from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings
from pydantic import Field


MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

GITHUB_API = "https://api.github.com"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Project layout, relative to root
    root: Path = Field(default_factory=Path.cwd)
    raw_dir_name: str = "raw_images"
    processed_dir_name: str = "already_optimize_image"
    public_dir_name: str = "Public"
    url_log_dir_name: str = "optimized_image_url"
    url_log_file_name: str = "optimized_image_url.txt"

    # Public asset location
    asset_host: str = "assets.786313.xyz"
    site_path: str = "TMP_news"

    # Encoder
    encoder: str = "cwebp"
    quality: int = Field(default=60, ge=0, le=100)
    method: int = Field(default=6, ge=0, le=6)
    passes: int = Field(default=10, ge=1, le=10)
    max_width: int = Field(default=1280, ge=0)
    multithread: bool = True

    # Storage repository and deployment hook
    github_owner: str = "TMPnews-assets"
    public_repo: str = "TMPnews-assets-deployer-02"
    private_repo: str = "TMPnews-assets-02"
    remote: str = "origin"
    branch: str = "main"
    event_type: str = "deploy_assets"
    trigger_pat: str | None = Field(default=None, validation_alias="TRIGGER_PAT")

    class Config:
        env_prefix = "ADROP_"
        env_file = ".env"
        extra = "ignore"
        populate_by_name = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@dataclass(frozen=True)
class PipelineConfig:
    """Immutable values for a single pipeline run.

    Built once at process start so every file in the run shares the same
    dated destination and URL prefix.
    """

    root: Path
    raw_dir: Path
    processed_dir: Path
    public_root: Path
    url_log_file: Path
    year: str
    month: str
    day: str
    asset_host: str
    site_path: str
    github_owner: str
    public_repo: str
    private_repo: str
    encoder: str = "cwebp"
    quality: int = 60
    method: int = 6
    passes: int = 10
    max_width: int = 1280
    multithread: bool = True
    remote: str = "origin"
    branch: str = "main"
    event_type: str = "deploy_assets"
    trigger_pat: str | None = None

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        today: date | None = None,
    ) -> "PipelineConfig":
        """Freeze settings and the current date into a run configuration."""
        today = today or date.today()
        root = settings.root.resolve()
        return cls(
            root=root,
            raw_dir=root / settings.raw_dir_name,
            processed_dir=root / settings.processed_dir_name,
            public_root=root / settings.public_dir_name / settings.site_path / "images",
            url_log_file=root / settings.url_log_dir_name / settings.url_log_file_name,
            year=f"{today.year:04d}",
            month=MONTH_NAMES[today.month - 1],
            day=f"{today.day:02d}",
            asset_host=settings.asset_host,
            site_path=settings.site_path,
            github_owner=settings.github_owner,
            public_repo=settings.public_repo,
            private_repo=settings.private_repo,
            encoder=settings.encoder,
            quality=settings.quality,
            method=settings.method,
            passes=settings.passes,
            max_width=settings.max_width,
            multithread=settings.multithread,
            remote=settings.remote,
            branch=settings.branch,
            event_type=settings.event_type,
            trigger_pat=settings.trigger_pat or None,
        )

    @property
    def dest_dir(self) -> Path:
        """Dated output directory: <public-root>/<year>/<month>/<day>."""
        return self.public_root / self.year / self.month / self.day

    @property
    def url_prefix(self) -> str:
        return (
            f"https://{self.asset_host}/{self.site_path}/images/"
            f"{self.year}/{self.month}/{self.day}"
        )

    def url_for(self, filename: str) -> str:
        """Public URL of an asset written to the dated directory."""
        return f"{self.url_prefix}/{filename}"

    @property
    def dispatch_url(self) -> str:
        return f"{GITHUB_API}/repos/{self.github_owner}/{self.public_repo}/dispatches"
