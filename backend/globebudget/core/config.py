"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import Dict, List, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Application
    APP_NAME: str = "GlobeBudget"
    DEBUG: bool = False
    
    # Database
    DATABASE_URL: str = "sqlite:///./globebudget.db"
    DB_ECHO: bool = False
    
    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:5173"]
    
    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v
    
    # Exchange Rate
    HOME_CURRENCY: str = "USD"
    FX_API_URL: str = "https://api.frankfurter.app"
    FX_TIMEOUT: float = 10.0
    FX_TRANSACTION_FEE: float = 0.03  # Flat surcharge applied when a conversion includes the fee
    FX_FALLBACK_RATES: Dict[str, float] = {"EUR/USD": 1.08}  # Used when no cached rate exists
    
    # Recommendations
    LOW_BALANCE_RATIO: float = 0.10
    LOW_WEEK_BALANCE_RATIO: float = 0.20
    
    # Balance updates (remaining mode)
    BALANCE_ADJUSTMENT_CATEGORY: str = "Balance Adjustment"
    BALANCE_ADJUSTMENT_DESCRIPTION: str = "Balance Update"
    
    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
