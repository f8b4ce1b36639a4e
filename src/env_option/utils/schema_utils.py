"""Pydantic models (V2) declaring which environment variables an app expects."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from env_option.utils.env_utils import OptionType, get
from env_option.utils.parse_utils import PARSERS


# ── Sub‑models ───────────────────────────────────────────────────────────

class EnvVarSpec(BaseModel):
    model_config = ConfigDict(extra='forbid')

    name: str = Field(..., min_length=1, description="Variable name, case-sensitive.")
    type: str = Field("str", description="Key into PARSERS.")
    mode: Literal["required", "optional", "default"] = "required"
    # Raw string, parsed with `type` when the variable is absent
    default: Optional[str] = None
    secret: bool = False
    description: str = ""

    @field_validator('type')
    @classmethod
    def known_type(cls, value: str) -> str:
        if value not in PARSERS:
            raise ValueError(f"unknown type {value!r}; expected one of {sorted(PARSERS)}")
        return value

    @model_validator(mode='after')
    def default_matches_mode(self) -> "EnvVarSpec":
        if self.mode == "default":
            if self.default is None:
                raise ValueError(f"{self.name}: mode 'default' needs a default value")
            # Fail at load time rather than on first use
            PARSERS[self.type](self.default)
        elif self.default is not None:
            raise ValueError(f"{self.name}: default is only allowed with mode 'default'")
        return self

    @property
    def option_type(self) -> OptionType:
        return OptionType(self.mode)

    def resolve(self, environ: Optional[Mapping[str, str]] = None) -> Any:
        """Read and parse this variable; raises NotPresent / ParseFailed like ``get``."""
        parse = PARSERS[self.type]
        default = parse(self.default) if self.default is not None else None
        return get(self.name, parse, self.option_type, default, environ=environ)


# ── Top‑level schema ────────────────────────────────────────────────────

class EnvSchema(BaseModel):
    model_config = ConfigDict(extra='ignore')

    variables: List[EnvVarSpec] = Field(default_factory=list)

    @field_validator('variables')
    @classmethod
    def unique_names(cls, variables: List[EnvVarSpec]) -> List[EnvVarSpec]:
        seen = set()
        for spec in variables:
            if spec.name in seen:
                raise ValueError(f"duplicate variable {spec.name!r}")
            seen.add(spec.name)
        return variables

    def resolve_all(self, environ: Optional[Mapping[str, str]] = None) -> dict:
        """Resolve every declared variable; the first failure propagates."""
        return {spec.name: spec.resolve(environ) for spec in self.variables}

    @classmethod
    def load(cls, path: Path | str) -> "EnvSchema":
        """Loads declarations from a JSON file."""
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))

    @classmethod
    def from_dict(cls, data: dict) -> "EnvSchema":
        """Loads declarations from a dictionary."""
        return cls.model_validate(data)
