from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Cartwise API"
    DATABASE_URL: str = "sqlite:///./cartwise.db"
    SECRET_KEY: str = "supersecretkey_change_me_in_production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7 # 1 week

    # Wallet & address defaults for new users
    DEFAULT_WALLET_MONEY: float = 500
    DEFAULT_ADDRESS: str = "ADDRESS_NOT_SET"
    DEFAULT_PAYMENT_OPTION: str = "PAYMENT_OPTION_DEFAULT"

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*" # Comma-separated list or '*'

    @property
    def cors_origin_list(self) -> list[str]:
        if not self.CORS_ORIGINS or self.CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
