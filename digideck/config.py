from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "DigiDeck"
    debug: bool = False

    digimon_api_url: str = "https://digimon-api.vercel.app/api/digimon"
    card_api_url: str = "https://digimoncard.io/api-public/search"
    card_image_url_template: str = "https://images.digimoncard.io/images/cards/{id}.webp"

    # Every card search is pinned to this series
    card_series: str = "Digimon Card Game"
    default_card_type: str = "Digimon"

    # Transport-level only; the search pipeline itself never times out or retries
    request_timeout: float = 30.0
    user_agent: str = "DigiDeck/1.0"


settings = Settings()


# =============================================================================
# USER-FACING TEXT
# =============================================================================

NO_RESULTS_MESSAGE = "No results found. Try a different search term."

# Shown instead of an image when a card has no id to build a URL from
NO_IMAGE_PLACEHOLDER = "No image available"
