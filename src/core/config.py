"""Application configuration using pydantic-settings."""
from functools import lru_cache
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str
    database_echo: bool = False

    # Development mode - bypasses auth for local development
    dev_mode: bool = False
    dev_user_email: str = "dev@localhost"

    # Accepts a comma-separated string from the environment
    cors_origins: Annotated[list[str], NoDecode] = ["http://localhost:5173"]

    # Auth0 - shares the frontend's VITE_ prefixed variables
    auth0_domain: str = Field(
        default="",
        validation_alias=AliasChoices("auth0_domain", "VITE_AUTH0_DOMAIN"),
    )
    auth0_client_id: str = Field(
        default="",
        validation_alias=AliasChoices("auth0_client_id", "VITE_AUTH0_CLIENT_ID"),
    )
    auth0_audience: str = Field(
        default="",
        validation_alias=AliasChoices("auth0_audience", "VITE_AUTH0_AUDIENCE"),
    )
    # Access tokens carry no email unless the tenant adds a (namespaced) claim
    auth0_email_claim: str = "email"

    # GraphiQL explorer on GET /graphql
    graphql_ide: bool = True

    log_level: str = "INFO"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | list[str]) -> list[str]:
        """Split a comma-separated origins string, dropping empty entries."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @property
    def auth0_issuer(self) -> str:
        """Issuer URL expected in the `iss` claim of Auth0 access tokens."""
        return f"https://{self.auth0_domain}/"

    @property
    def auth0_jwks_url(self) -> str:
        """URL of the Auth0 tenant's JSON Web Key Set."""
        return f"https://{self.auth0_domain}/.well-known/jwks.json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
