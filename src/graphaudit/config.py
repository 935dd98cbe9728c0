from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional
import json

from graphaudit.errors import ConfigurationError


@dataclass(frozen=True)
class AnalysisSettings:
    parallel: bool = False
    max_workers: Optional[int] = None
    matrix_preview_limit: int = 100   # print the distance matrix below this node count
    listing_limit: int = 100          # nodes listed for degree / eccentricity

    def __post_init__(self) -> None:
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigurationError(f"max_workers must be positive, got {self.max_workers}")
        if self.matrix_preview_limit < 0:
            raise ConfigurationError("matrix_preview_limit must not be negative")
        if self.listing_limit < 0:
            raise ConfigurationError("listing_limit must not be negative")

    def override(self, **changes: Any) -> "AnalysisSettings":
        """Copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def load_settings(path: str) -> AnalysisSettings:
    """
    Settings JSON schema (all keys optional):

    {
      "parallel": true,
      "max_workers": 8,
      "matrix_preview_limit": 100,
      "listing_limit": 100
    }
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Settings file {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file {path} must contain a JSON object")

    known = {f.name for f in fields(AnalysisSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown setting(s): {', '.join(unknown)}")

    kwargs: Dict[str, Any] = {}
    try:
        if "parallel" in data:
            if not isinstance(data["parallel"], bool):
                raise ValueError("parallel must be true or false")
            kwargs["parallel"] = data["parallel"]
        if data.get("max_workers") is not None:
            kwargs["max_workers"] = int(data["max_workers"])
        for key in ("matrix_preview_limit", "listing_limit"):
            if key in data:
                kwargs[key] = int(data[key])
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid setting in {path}: {e}") from e

    return AnalysisSettings(**kwargs)
