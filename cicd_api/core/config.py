"""App settings and config loader."""

import logging
from functools import lru_cache
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cicd_api import __version__

class Settings(BaseSettings):
	# Service
	APP_NAME: str = Field(default="CI/CD Demo API")
	APP_VERSION: str = Field(default=__version__)

	# Server
	HOST: str = Field(default="0.0.0.0")
	PORT: int = Field(default=3000)
	LOG_LEVEL: str = Field(default="INFO")

	# Static files, mounted under /static when the directory exists
	STATIC_DIR: Optional[str] = Field(default=None)

	# Interactive docs: /docs, /redoc, /openapi.json
	ENABLE_DOCS: bool = Field(default=False)

	model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

	def log_level(self) -> int:
		"""Return the numeric logging level, falling back to INFO."""
		level = logging.getLevelName(self.LOG_LEVEL.upper())
		return level if isinstance(level, int) else logging.INFO

	def docs_urls(self) -> dict:
		"""Return FastAPI docs keyword arguments."""
		if not self.ENABLE_DOCS:
			return {"docs_url": None, "redoc_url": None, "openapi_url": None}
		return {"docs_url": "/docs", "redoc_url": "/redoc", "openapi_url": "/openapi.json"}

@lru_cache(maxsize=1)
def get_settings() -> Settings:
	"""Return cached settings instance."""
	return Settings()
