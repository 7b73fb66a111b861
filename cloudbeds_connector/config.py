"""
Configuration for the Cloudbeds connector
Validated client and node settings, loadable from a mapping or a YAML file
"""

import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .contracts import (
    BASE_URL,
    ApiKeyCredential,
    OAuth2Credential,
    ValidationError,
    credential_from_config,
)

logger = logging.getLogger(__name__)


class ClientConfig(BaseModel):
    """HTTP client configuration with strict validation"""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    credential: Union[ApiKeyCredential, OAuth2Credential] = Field(
        ..., description="Resolved credential used for the bearer token"
    )
    base_url: str = Field(default=BASE_URL, description="API base URL")
    timeout: float = Field(default=30.0, gt=0, description="Per-request timeout in seconds")
    max_pages: Optional[int] = Field(
        default=None, ge=1, description="Safety cap on pages fetched by one paginated call"
    )
    user_agent: str = Field(default="Cloudbeds-Connector/1.0", description="User-Agent header")
    property_id: Optional[str] = Field(default=None, description="Default property for log context")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        return v.rstrip("/")


class NodeConfig(BaseModel):
    """Settings owned by the hosting application"""

    continue_on_fail: bool = Field(default=False, description="Emit error items instead of raising")
    log_licensing_notice: bool = Field(default=True, description="Log the licensing notice once per node")


def load_config(config: Dict[str, Any]) -> ClientConfig:
    """
    Build a ClientConfig from a plain mapping.

    The mapping carries a ``credentials`` sub-mapping in the host's credential
    shape; every other key maps onto a ClientConfig field.
    """
    settings = dict(config)
    credentials = settings.pop("credentials", None)
    if credentials is None:
        raise ValidationError("Missing required configuration: credentials")

    try:
        return ClientConfig(credential=credential_from_config(credentials), **settings)
    except PydanticValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ValidationError(f"Invalid configuration: {fields}", description=str(e))


def load_config_file(path: Union[str, Path]) -> ClientConfig:
    """Load configuration from a YAML file"""
    config_path = Path(path)
    if not config_path.exists():
        raise ValidationError(f"Configuration file not found: {config_path}")

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValidationError(f"Configuration file must contain a mapping: {config_path}")

    logger.info(f"Loaded connector configuration from {config_path}")
    return load_config(data)
