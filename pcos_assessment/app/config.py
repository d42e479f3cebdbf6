# -*- coding: utf-8 -*-
"""Application settings, read from the environment and an optional .env file."""

from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# Inference service (unset = mock submission)
_INFERENCE_API_URL = os.getenv("INFERENCE_API_URL") or None
_INFERENCE_API_TIMEOUT = int(os.getenv("INFERENCE_API_TIMEOUT", "30"))
_INFERENCE_API_MAX_RETRIES = int(os.getenv("INFERENCE_API_MAX_RETRIES", "2"))

# Mock submission delay in milliseconds
_SUBMIT_DELAY_MS = int(os.getenv("SUBMIT_DELAY_MS", "2000"))

_LOGS_DIR = os.getenv("PCOS_LOGS_DIR")
_REPORTS_DIR = os.getenv("PCOS_REPORTS_DIR")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "PCOS Risk Assessment"
    APP_TITLE: str = "Clinical Assessment"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "PCOS Risk Assessment"

    # Inference service
    INFERENCE_API_URL: Optional[str] = _INFERENCE_API_URL
    INFERENCE_API_VERSION: str = "v1"
    INFERENCE_API_TIMEOUT: int = _INFERENCE_API_TIMEOUT
    INFERENCE_API_MAX_RETRIES: int = _INFERENCE_API_MAX_RETRIES

    # Submission
    SUBMIT_DELAY_MS: int = _SUBMIT_DELAY_MS

    # Model information shown on review and results
    MODEL_NAME: str = "GAN-PINN v2.1.0"
    MODEL_TRAINING: str = "Public + Synthetic (n=12,453)"
    MODEL_UPDATED: str = "2025-10-15"

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent.parent
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else PROJECT_ROOT / "logs"
    REPORTS_DIR: Path = Path(_REPORTS_DIR) if _REPORTS_DIR else PROJECT_ROOT / "reports"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # UI Settings
    WINDOW_MIN_WIDTH: int = 960
    WINDOW_MIN_HEIGHT: int = 720
    FONT_FAMILY: str = "Segoe UI"
    FONT_SIZE: int = 10

    # Colors
    PRIMARY_COLOR: str = "#7C3AED"
    TEXT_COLOR: str = "#1F2937"
    TEXT_LIGHT: str = "#6B7280"
    BORDER_COLOR: str = "#E5E7EB"
    SUCCESS_COLOR: str = "#16A34A"
    WARNING_COLOR: str = "#D97706"
    ERROR_COLOR: str = "#DC2626"
    BACKGROUND_COLOR: str = "#F9FAFB"

    # Date/Time Formats
    DATE_FORMAT: str = "%Y-%m-%d"
    DATE_FORMAT_DISPLAY: str = "%d/%m/%Y"


# Page identifiers
class Pages:
    ASSESSMENT = "assessment"
    RESULTS = "results"
