from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "riasec" / "assets" / "riasec_questions.yml"

class EngineSettings(BaseSettings):
    catalog_path: Path = DEFAULT_CATALOG_PATH
    log_level: str = "INFO"
    reliability_alpha_threshold: float = 0.7

    model_config = SettingsConfigDict(env_prefix='RIASEC_')

# Instantiate settings
settings = EngineSettings()
