from __future__ import annotations

from pathlib import Path
from typing import Optional
import yaml
from pydantic import BaseModel, ConfigDict, Field

from .engine.fields import GENDER_THRESHOLD, MAX_PLAUSIBLE_AGE

# ---- Scheme rules (defaults reproduce the published scheme) ----
class SchemeRules(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    gender_threshold: int = Field(default=GENDER_THRESHOLD, ge=0, le=9999)
    max_plausible_age: int = Field(default=MAX_PLAUSIBLE_AGE, ge=0, le=199)


# ---- Adapter settings ----
class WebConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    json_indent: int = 2  # pretty-printed JSON responses
    title: str = "South African ID Validator"


# ---- Root config ----
class RsaIdConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    rules: SchemeRules = Field(default_factory=SchemeRules)
    web: WebConfig = Field(default_factory=WebConfig)

# ---- Loader ----
def load_config(path: Optional[Path]) -> RsaIdConfig:
    if not path:
        return RsaIdConfig()
    data = yaml.safe_load(Path(path).read_text()) or {}
    return RsaIdConfig(**data)
