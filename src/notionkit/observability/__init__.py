"""Observability: structured logging for notionkit."""

from __future__ import annotations

from .logger import ROOT_LOGGER_NAME, StructuredFormatter, fields, get_logger

__all__ = [
    "ROOT_LOGGER_NAME",
    "StructuredFormatter",
    "fields",
    "get_logger",
]
