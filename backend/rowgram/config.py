from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Output
    saved_images_dir: str = "assets/saved-images"  # Set via SAVED_IMAGES_DIR env var

    # Club icons
    club_icons_dir: str = "assets/club-icons"  # Preset icons shipped with the app
    upload_dir: str = "temp/club-icons"  # Uploaded icons land here

    # Rendering
    font_path: str = "assets/fonts"
    default_width: int = 1080
    default_height: int = 1080
    default_primary_color: str = "#2563eb"
    default_secondary_color: str = "#1e40af"

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
