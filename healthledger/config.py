import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./healthledger.db")
    # Initial admin for every store; empty means the first caller becomes admin
    LEDGER_ADMIN: str = os.getenv("LEDGER_ADMIN", "")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
