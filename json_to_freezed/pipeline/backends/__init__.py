"""Code generation backends: IR to source text."""

from __future__ import annotations

from .base import CodeBackend
from .freezed_backend import FreezedBackend

__all__ = ["CodeBackend", "FreezedBackend"]
