"""Builders de requests por endpoint."""

from core.api.mget import build_mget_request, mget

__all__ = ["build_mget_request", "mget"]
