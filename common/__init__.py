"""Shared configuration and logging for the twin chunking tools."""

from common.config import Config, default_config
from common.logging_setup import setup_logging, get_logger

__all__ = ["Config", "default_config", "setup_logging", "get_logger"]
