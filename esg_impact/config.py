# esg_impact/config.py
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

ROOT = Path(__file__).resolve().parents[1]

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    data_dir: Path = ROOT / "data"
    dataset_file: str = "companies.json"

    # Report metadata
    report_title: str = "ESG Impact Dashboard"
    report_period: str = "2024"

    # Banner image path or URL; empty means no banner
    brand_banner: str = ""
    footer_note: str | None = None

    # Ranking: "co2" | "collection" | "participants"
    default_sort: str = "co2"

    # Max |parts - total| before a record is reported as inconsistent
    consistency_tolerance: float = 0.01

    log_level: str = "INFO"

    @property
    def dataset_path(self) -> Path:
        return self.data_dir / self.dataset_file

SETTINGS = Settings()
ROOT_DIR = ROOT
