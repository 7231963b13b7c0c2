# === FILE: sitemap_batcher/config.py ===
"""
Loading and validation of the sitemap_batcher pipeline configuration.
Pydantic describes the schema and checks the data.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Mapping, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    field_validator,
)

__all__ = ["PipelineConfig", "load_config", "config_from_env"]


class PipelineConfig(BaseModel):
    """Configuration for one pipeline run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    sitemap_url: HttpUrl = Field(..., description="Root sitemap index URL.")
    bucket_name: str = Field(..., min_length=1, description="Destination bucket/container.")
    keyword: str = Field("product", description="Substring selecting relevant child sitemaps.")
    batch_size: int = Field(25, ge=1, description="Maximum number of URLs per batch.")
    index_pattern: str = Field("sitemap/loc", min_length=1, description="Child sitemap locations in the index.")
    url_pattern: str = Field("url/loc", min_length=1, description="Page locations in a leaf sitemap.")
    timeout: float = Field(60.0, gt=0, description="Timeout per HTTP request (seconds).")
    user_agent: str = Field("SitemapBatcher/1.0", min_length=1, description="User-Agent header.")
    storage: Literal["s3", "local"] = Field("s3", description="Storage sink backend.")
    local_root: Path = Field(Path("exports"), description="Root directory of the local sink.")
    region: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_REGION"), description="S3 region."
    )
    endpoint_url: Optional[str] = Field(None, description="Custom S3-compatible endpoint.")
    deduplicate: bool = Field(False, description="Drop repeated URLs within a run.")

    @field_validator("bucket_name", "keyword", "user_agent", mode="before")
    def _strip(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("index_pattern", "url_pattern")
    def _check_pattern(cls, v: str) -> str:
        if not v.strip("/"):
            raise ValueError("selection pattern must name at least one element")
        return v


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None], **overrides: Any) -> PipelineConfig:
    """
    Read YAML or JSON and return a validated PipelineConfig.
    Raises FileNotFoundError when the file is missing.

    Keyword ``overrides`` that are not None replace values from the file.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(_DEFAULT_CFG))
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    data.update({k: v for k, v in overrides.items() if v is not None})
    return PipelineConfig(**data)


_ENV_FIELDS: Mapping[str, str] = {
    "SITEMAP_URL": "sitemap_url",
    "BUCKET_NAME": "bucket_name",
    "SITEMAP_KEYWORD": "keyword",
    "BATCH_SIZE": "batch_size",
    "STORAGE_BACKEND": "storage",
    "LOCAL_ROOT": "local_root",
    "S3_ENDPOINT_URL": "endpoint_url",
    "REQUEST_TIMEOUT": "timeout",
}


def config_from_env(
    environ: Optional[Mapping[str, str]] = None, **overrides: Any
) -> PipelineConfig:
    """Build a PipelineConfig from environment variables (serverless deployments)."""
    env = os.environ if environ is None else environ
    data: dict[str, Any] = {field: env[var] for var, field in _ENV_FIELDS.items() if env.get(var)}
    if env.get("AWS_REGION"):
        data["region"] = env["AWS_REGION"]
    data.update({k: v for k, v in overrides.items() if v is not None})
    return PipelineConfig(**data)
