"""Application settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_PORT = 3000
DEFAULT_ASSET_ROOT = Path("clientside")
DEFAULT_QR_SIZE = 400

ENV_PREFIX = "RETADI_"


class AppSettings(BaseModel):
    """Runtime settings for the pairing server and the desktop shell."""
    model_config = {"validate_assignment": True}

    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535, description="Pairing server port (0 = ephemeral)")
    asset_root: Path = Field(default=DEFAULT_ASSET_ROOT, description="Directory served to the companion device")
    qr_size: int = Field(default=DEFAULT_QR_SIZE, ge=21, description="QR bitmap edge length in pixels")
    auto_start: bool = Field(default=False, description="Start the pairing server when the shell opens")
    native: bool = Field(default=True, description="Open a desktop window instead of a browser tab")
    ui_port: int = Field(default=8080, ge=1, le=65535, description="Port of the shell's own web server")
    timeout_keep_alive: int = Field(default=5, ge=1, description="Idle keep-alive timeout in seconds")


def load_settings(environ: Mapping[str, str] | None = None, **overrides: Any) -> AppSettings:
    """Build settings from ``RETADI_*`` environment variables and overrides.

    Overrides whose value is ``None`` are ignored so CLI options left unset
    fall through to the environment or the defaults.

    Raises:
        pydantic.ValidationError: If a value is out of range or malformed.
    """
    if environ is None:
        environ = os.environ

    values: dict[str, Any] = {}
    for name in AppSettings.model_fields:
        raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None and raw != "":
            values[name] = raw

    values.update({k: v for k, v in overrides.items() if v is not None})
    return AppSettings.model_validate(values)
