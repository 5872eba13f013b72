"""Data models for novel catalog."""

from .config import ReportConfig, YearRange, load_config, save_config

__all__ = ["ReportConfig", "YearRange", "load_config", "save_config"]
