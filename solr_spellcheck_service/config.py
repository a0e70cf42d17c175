"""
Configuration module for the Solr Spellcheck Service.

This module defines the settings for the Solr Spellcheck Service, including the
Solr connection, the suggestion ranking parameters and the dictionary loader
batching behaviour.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from dotenv import find_dotenv, load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file from repository root, regardless of current working directory
load_dotenv(find_dotenv(".env"))


class Settings(BaseSettings):
    """
    Configuration settings for the Solr Spellcheck Service.

    Settings are loaded from .env files and environment variables.
    """

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = Field(
        default="development",
        validation_alias="ENVIRONMENT",  # Read from global ENVIRONMENT var
        description="Runtime environment for the service",
    )
    SERVICE_NAME: str = "solr_spellcheck_service"
    VERSION: str = "1.0.0"

    # Solr connection
    SOLR_URL: str = Field(
        default="http://localhost:8983/solr/liferay",
        description="Core URL of the Solr index holding spellcheck and suggestion documents",
    )
    SOLR_TIMEOUT: int = Field(default=60, description="Solr request timeout in seconds")

    # Dictionary loading
    SPELLCHECK_BATCH_SIZE: int = Field(
        default=1000, ge=1, description="Documents per bulk write when loading dictionaries"
    )
    SPELLCHECK_COMMIT: bool = Field(
        default=False, description="Issue a Solr commit after every bulk write and delete"
    )
    SUPPORTED_LOCALES: list[str] = Field(default_factory=lambda: ["en_US"])
    DICTIONARIES_DIRECTORY: str = "./data/dictionaries"

    # Suggestion ranking
    DISTANCE_THRESHOLD: float = Field(
        default=0.5, description="Candidates are kept only when their distance exceeds this"
    )
    STRING_DISTANCE: Literal["levenshtein", "damerau_levenshtein", "jaro_winkler"] = "levenshtein"
    NGRAM_QUERY_ROWS: int = Field(
        default=50, ge=1, description="Maximum candidates fetched per n-gram query"
    )
    NGRAM_START_BOOST: float = 2.0
    NGRAM_END_BOOST: float = 1.0

    @property
    def effective_dictionaries_directory(self) -> Path:
        """Dictionary base directory resolved against the working directory."""
        return Path(self.DICTIONARIES_DIRECTORY).expanduser().resolve()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="SOLR_SPELLCHECK_",  # To prefix env vars
    )


# Create a single instance for the application to use
settings = Settings()
