"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

from src.domain.constants import DEFAULT_CURRENCY
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class SplitterSettings:
    """Settings for the expense splitter adapters.

    Attributes:
        default_currency: Currency tag used when a trip document has none.
        trip_file: Optional path to the JSON trip document.
    """

    default_currency: str = DEFAULT_CURRENCY
    trip_file: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "SplitterSettings":
        """Build settings from environment variables.

        Returns:
            SplitterSettings: Settings sourced from environment variables.
        """
        currency = os.getenv("SPLITTER_DEFAULT_CURRENCY", DEFAULT_CURRENCY)
        currency = currency.strip().upper() or DEFAULT_CURRENCY
        raw_trip_file = os.getenv("TRIP_FILE")
        logger = get_app_logger()
        if raw_trip_file:
            trip_file = cls._normalize_path(raw_trip_file, logger=logger)
        else:
            trip_file = cls._default_trip_file(logger=logger)
        return cls(default_currency=currency, trip_file=trip_file)

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Expand and resolve the trip file path.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Resolved filesystem path.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Trip file does not exist at {path}")
        return path

    @staticmethod
    def _default_trip_file(logger) -> Path | None:
        """Return a default trip document when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single trip is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json trip files found in data/. "
                "Set TRIP_FILE to choose one."
            )
        return None


__all__ = ["SplitterSettings"]
