from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Settings(BaseModel):
    # Cipher
    default_config: str = Field(default="RC5-32/12/16", description="Named RC5-w/r/b configuration")

    # Evaluation
    roundtrip_vectors: int = Field(default=1000, ge=1)
    sac_trials: int = Field(default=200, ge=1)

    # Reproducibility
    global_seed: int = Field(default=1337)

    # Logging
    log_level: str = Field(default="INFO")

    # Paths
    project_root: str = Field(default=os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir)))
    runs_dir: str = Field(default="runs")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    return Settings(
        default_config=os.getenv("RC5_DEFAULT_CONFIG", "RC5-32/12/16"),
        roundtrip_vectors=int(os.getenv("RC5_ROUNDTRIP_VECTORS", "1000")),
        sac_trials=int(os.getenv("RC5_SAC_TRIALS", "200")),
        global_seed=int(os.getenv("GLOBAL_SEED", "1337")),
        log_level=os.getenv("RC5_LOG_LEVEL", "INFO").upper(),
        runs_dir=os.getenv("RUNS_DIR", "runs"),
    )
