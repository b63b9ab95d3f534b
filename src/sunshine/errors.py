# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exception classes shared by the session gate and the registration store."""

from __future__ import annotations


class SunshineError(Exception):
    """Base class for application errors."""


class ConfigError(SunshineError):
    """Raised when the environment does not yield a usable configuration."""


class InvalidPin(SunshineError):
    """Raised when the submitted admin PIN does not match."""


class Unauthenticated(SunshineError):
    """Raised when an admin-only request carries no valid credential."""


class StoreLoadFailure(SunshineError):
    """Raised when the persisted store file cannot be read or parsed."""


class StorePersistFailure(SunshineError):
    """Raised when the store file cannot be written."""
