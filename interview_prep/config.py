from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Optional
from pathlib import Path
from dotenv import load_dotenv


# Ensure .env is loaded eagerly
load_dotenv(dotenv_path=".env")

BUNDLED_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "interview-questions.json"


class Settings(BaseSettings):
	# Server
	host: str = "0.0.0.0"
	port: int = 8000
	cors_allow_origins: List[str] = [
		"http://localhost:3000",
		"http://localhost:5173",
		"http://127.0.0.1:3000",
		"http://127.0.0.1:5173"
	]

	# Auth
	api_key: Optional[str] = None  # simple bearer key if provided

	# Question catalog
	question_catalog_path: Optional[str] = None  # defaults to the bundled catalog
	max_question_count: int = 50
	default_question_count: int = 5  # clamped to max_question_count, keep declared after it

	# Logging
	log_level: str = "INFO"
	analytics_path: Optional[str] = None  # e.g., logs/answers.jsonl

	@field_validator("max_question_count")
	@classmethod
	def clamp_max_count(cls, v: int) -> int:
		return max(1, v)

	@field_validator("default_question_count")
	@classmethod
	def clamp_default_count(cls, v: int, info) -> int:
		upper = info.data.get("max_question_count", 50)
		return max(1, min(upper, v))

	@field_validator("log_level")
	@classmethod
	def normalize_log_level(cls, v: str) -> str:
		return v.strip().upper() or "INFO"

	@field_validator("cors_allow_origins", mode="before")
	@classmethod
	def parse_cors_origins(cls, v):
		# Allow environment variable override
		if isinstance(v, str):
			return [origin.strip() for origin in v.split(",")]
		return v

	class Config:
		env_file = ".env"
		env_file_encoding = "utf-8"


settings = Settings()
