import os
from dataclasses import dataclass

from .variants import VARIANTS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """
    startup options; the variant cannot change once a game is running
    """
    variant: str = "classic"
    log_level: str = "INFO"

    def __post_init__(self):
        if self.variant not in VARIANTS:
            raise ValueError(
                f"unknown variant {self.variant!r}, choose from {', '.join(VARIANTS)}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"unknown log level {self.log_level!r}")

    @classmethod
    def from_env(cls, environ=None):
        """
        read GRIDGAME_VARIANT and LOG_LEVEL
        """
        env = os.environ if environ is None else environ
        return cls(
            variant=env.get("GRIDGAME_VARIANT", "classic"),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )
