import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() not in ("0", "false", "no", "off")


class Settings:
    # Project Root (calculated relative to this file)
    ROOT_DIR: Path = Path(__file__).resolve().parents[3]

    # Logging
    LOG_LEVEL: str = os.getenv("SKYLINE_LOG_LEVEL", "WARNING").upper()

    # Solver defaults for the CLI
    PRUNE: bool = _flag("SKYLINE_PRUNE", "1")
    PRECHECK: bool = _flag("SKYLINE_PRECHECK", "1")

    # Storage Paths
    PUZZLE_PATH: Path = ROOT_DIR / os.getenv("SKYLINE_PUZZLE_PATH", "data/puzzles.json")

settings = Settings()
