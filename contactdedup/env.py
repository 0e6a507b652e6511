import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def load_env() -> None:
    """Load .env from the working directory if present.
    Variables already set in the environment win.
    """
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path, override=False)


def parse_threshold(value: str) -> float:
    """Parse a report threshold; NaN and infinities are rejected."""
    try:
        threshold = float(value)
    except ValueError:
        raise ValueError(f"must be a number, got {value!r}") from None
    if not math.isfinite(threshold):
        raise ValueError(f"must be a finite number, got {value!r}")
    return threshold


def _parse_bool(name: str, value: str) -> bool:
    v = value.strip().lower()
    if v in TRUE_VALUES:
        return True
    if v in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {value!r}")


@dataclass(frozen=True)
class Settings:
    """Report defaults; command-line flags override them."""

    threshold: float = 0.0
    use_labels: bool = True
    log_level: str = "INFO"
    log_dir: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Read settings from CONTACTDEDUP_* variables.

        Raises:
            ValueError: if a variable is set to an invalid value
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        threshold = defaults.threshold
        raw = env.get("CONTACTDEDUP_THRESHOLD", "").strip()
        if raw:
            try:
                threshold = parse_threshold(raw)
            except ValueError as e:
                raise ValueError(f"CONTACTDEDUP_THRESHOLD {e}") from None

        use_labels = defaults.use_labels
        raw = env.get("CONTACTDEDUP_USE_LABELS", "").strip()
        if raw:
            use_labels = _parse_bool("CONTACTDEDUP_USE_LABELS", raw)

        log_level = env.get("CONTACTDEDUP_LOG_LEVEL", "").strip().upper() or defaults.log_level
        if log_level not in LOG_LEVELS:
            raise ValueError(f"CONTACTDEDUP_LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {log_level!r}")

        raw = env.get("CONTACTDEDUP_LOG_DIR", "").strip()
        log_dir = Path(raw) if raw else defaults.log_dir

        return cls(threshold=threshold, use_labels=use_labels, log_level=log_level, log_dir=log_dir)
