"""
Service configuration, read from the environment and the root .env file.
"""
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from root directory
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    # Fallback to current directory
    load_dotenv()


class Settings(BaseSettings):
    PROJECT_NAME: str = "Contract Forge Backend"
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    CORS_ORIGINS: List[str] = ["*"]

    # AI contract generation
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-3.5-turbo"

    # Compilation
    HARDHAT_PROJECT_DIR: Path = Path(__file__).parent.parent.parent / "hardhat"
    COMPILE_COMMAND: List[str] = ["npx", "hardhat", "compile", "--force"]
    COMPILE_WORK_DIR: Optional[Path] = None
    COMPILE_TIMEOUT_SECONDS: float = Field(120.0, gt=0)
    COMPILE_MAX_CONCURRENCY: int = Field(2, ge=1)

    # Self-transfer script
    RPC_URL: str = "http://localhost:8545"
    DEPLOYER_PRIVATE_KEY: Optional[str] = None
    TRANSFER_AMOUNT_ETH: str = "0.001"
    RECEIPT_TIMEOUT_SECONDS: float = Field(120.0, gt=0)

    model_config = SettingsConfigDict(case_sensitive=True, extra="ignore")


settings = Settings()
