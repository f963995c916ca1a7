"""
Client configuration.

Settings can be passed explicitly or loaded from the environment:

    DOPPLER_TOKEN        API token (service account, personal or service token)
    DOPPLER_API_HOST     API base URL, defaults to https://api.doppler.com
    DOPPLER_TIMEOUT      request timeout in seconds
    DOPPLER_VERIFY_TLS   set to "false", "0" or "no" to skip certificate checks
"""

import os
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_API_HOST = "https://api.doppler.com"
DEFAULT_TIMEOUT = 30.0

_FALSE_VALUES = {"false", "0", "no", "off"}


class DopplerSettings(BaseModel):
    token: Optional[str] = Field(None, description="Bearer token sent with every request")
    api_host: str = Field(DEFAULT_API_HOST, min_length=1)
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)
    verify_tls: bool = True
    headers: Dict[str, str] = Field(default_factory=dict)

    @field_validator("api_host")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DopplerSettings":
        """Build settings from DOPPLER_* environment variables."""
        env = os.environ if environ is None else environ
        values = {}
        if env.get("DOPPLER_TOKEN"):
            values["token"] = env["DOPPLER_TOKEN"]
        if env.get("DOPPLER_API_HOST"):
            values["api_host"] = env["DOPPLER_API_HOST"]
        if env.get("DOPPLER_TIMEOUT"):
            values["timeout"] = env["DOPPLER_TIMEOUT"]
        if env.get("DOPPLER_VERIFY_TLS"):
            values["verify_tls"] = env["DOPPLER_VERIFY_TLS"].strip().lower() not in _FALSE_VALUES
        return cls(**values)
