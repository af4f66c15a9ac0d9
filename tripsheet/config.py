from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
        populate_by_name=True,
    )

    app_name: str = 'tripsheet itinerary renderer'

    output_dir: Path = Field(default=Path('./output'))

    # Static branding assets, resolved relative to assets_dir
    assets_dir: Path = Field(
        default=Path('./assets'),
        validation_alias=AliasChoices('TRIPSHEET_ASSETS_DIR', 'ASSETS_DIR'),
    )
    fonts_dir: Path | None = Field(
        default=Path('./assets/fonts'),
        validation_alias=AliasChoices('TRIPSHEET_FONTS_DIR', 'FONTS_DIR'),
    )
    why_choose_us_image: str = 'why-choose-us.png'
    basic_details_template: str = 'basic-details-template.png'
    footer_logo: str = 'logo-small.png'

    # Document defaults
    default_company_name: str = 'THE LUXE TRAILS'
    dark_mode: bool = Field(
        default=True,
        validation_alias=AliasChoices('TRIPSHEET_DARK_MODE', 'DARK_MODE'),
    )
    pdf_producer: str = 'tripsheet'
    pdf_subject: str = 'Travel itinerary'

    log_level: str = Field(
        default='INFO',
        validation_alias=AliasChoices('TRIPSHEET_LOG_LEVEL', 'LOG_LEVEL'),
    )

    def asset_path(self, name: str | None) -> Path | None:
        token = str(name or '').strip()
        if not token:
            return None
        return self.assets_dir / token


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
