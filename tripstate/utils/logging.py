"""Structured logging for derivation and override passes."""

import logging
from typing import Any

from tripstate.config import get_settings

logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once for the service process."""
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


class StructuredDerivationLogger:
    """Structured logger for derivation and override passes."""

    def log_derivation(
        self,
        view: str,
        trip_id: str | None,
        item_count: int,
        latency_ms: float,
    ) -> None:
        """Log one derivation pass with structured data."""
        log_data: dict[str, Any] = {
            "view": view,
            "trip_id": trip_id,
            "item_count": item_count,
            "latency_ms": round(latency_ms, 2),
        }
        logger.info(f"Derived {view} view", extra={"structured": log_data})

    def log_edit(
        self,
        layer: str,
        op: str,
        trip_id: str | None,
        changed: bool,
    ) -> None:
        """Log one override edit with structured data."""
        log_data: dict[str, Any] = {
            "layer": layer,
            "op": op,
            "trip_id": trip_id,
            "changed": changed,
        }

        log_msg = f"Override edit: {layer}.{op}"

        if changed:
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(f"{log_msg} - no change", extra={"structured": log_data})
