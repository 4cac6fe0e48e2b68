from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    PROJECT_NAME: str = "QR Code ID"
    LOG_LEVEL: str = "INFO"

    # Lookup store (display/secure code -> identifier)
    DATABASE_URL: str = "sqlite:///./qrcodeid.db"

    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_ENABLED: bool = True
    LOOKUP_CACHE_TTL: int = 86400

    # Scan URLs are "<BASE_URL>/<short_code>" when set
    BASE_URL: str = ""

    # QR rendering defaults
    QR_SIZE: int = 200
    QR_MARGIN: int = 2
    QR_ERROR_CORRECTION: str = "M"
    QR_FORMAT: str = "png"
    QR_SERVICE: str = "qr-server"

    BATCH_MAX_ITEMS: int = 500

    model_config = SettingsConfigDict(env_file=".env")

settings = Settings()
