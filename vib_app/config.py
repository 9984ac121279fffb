# vib_app/config.py
"""
Application configuration and defaults.
"""
from __future__ import annotations
from dataclasses import dataclass, field
import logging
import os


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    return float(value) if value else default


@dataclass
class AppConfig:
    """Global application configuration."""

    app_name: str = "Stator Vibration"
    version: str = "0.1.0"

    # modes evaluated for every radial order
    axial_orders: tuple[int, ...] = (1, 2, 3)

    # |Im(root)| <= tol * max(1, |root|) counts as real
    real_root_tol: float = field(default_factory=lambda: _env_float("VIB_REAL_ROOT_TOL", 1e-8))

    default_core_model: str = "donnell"

    log_level: str = field(default_factory=lambda: os.environ.get("VIB_LOG_LEVEL", "INFO"))

    cors_origins: list[str] = field(default_factory=lambda: [
        "http://127.0.0.1:5500",
        "http://localhost:5500",
        "http://127.0.0.1:3000",
        "http://localhost:3000",
    ])

    def configure_logging(self) -> None:
        logging.basicConfig(level=self.log_level.upper(),
                            format="%(asctime)s %(levelname)s %(name)s: %(message)s")


# Global config instance
CONFIG = AppConfig()
