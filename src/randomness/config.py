from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .core import Randomness
from .exceptions import ConfigError
from .generators import DefaultGenerator, LinearCongruential, MersenneTwister

logger = logging.getLogger(__name__)

DEFAULT = "default"
MERSENNE_TWISTER = "mersenne_twister"
NUMERICAL_RECIPES = "numerical_recipes"
BORLAND_C = "borland_c"
GLIBC = "glibc"
LINEAR_CONGRUENTIAL = "linear_congruential"

ALGORITHMS = (DEFAULT, MERSENNE_TWISTER, NUMERICAL_RECIPES, BORLAND_C, GLIBC, LINEAR_CONGRUENTIAL)

_ALIASES = {
    "mt": MERSENNE_TWISTER,
    "mt19937": MERSENNE_TWISTER,
    "mersennetwister": MERSENNE_TWISTER,
    "lcg": LINEAR_CONGRUENTIAL,
    "numerical_recipies": NUMERICAL_RECIPES,
    "borland": BORLAND_C,
    "system": DEFAULT,
}

_PRESETS: Dict[str, Callable[[Optional[int]], LinearCongruential]] = {
    NUMERICAL_RECIPES: LinearCongruential.numerical_recipes,
    BORLAND_C: LinearCongruential.borland_c,
    GLIBC: LinearCongruential.glibc,
}

ENV_PREFIX = "RANDOMNESS_"


def _as_int(value: str) -> int:
    # Accepts decimal as well as 0x/0o/0b prefixed literals
    return int(value.strip(), 0)


class GeneratorConfig(BaseModel):
    """Which unit generator to build and how to seed it."""

    algorithm: str = Field(DEFAULT, description="Generator algorithm or preset name")
    seed: Optional[int] = Field(default=None, description="Seed; wall clock is used when omitted")
    modulus: Optional[int] = Field(default=None, gt=0, description="Custom LCG modulus")
    multiplier: Optional[int] = Field(default=None, description="Custom LCG multiplier")
    increment: Optional[int] = Field(default=None, description="Custom LCG increment")
    averaged: Optional[int] = Field(default=None, ge=2, description="Average this many draws per value")

    @field_validator("algorithm", mode="before")
    @classmethod
    def canonical_algorithm(cls, v: Any) -> str:
        name = str(v).strip().lower().replace("-", "_")
        name = _ALIASES.get(name, name)
        if name not in ALGORITHMS:
            raise ValueError(f"Unknown algorithm {v!r}; expected one of {', '.join(ALGORITHMS)}")
        return name

    @model_validator(mode="after")
    def require_lcg_parameters(self) -> "GeneratorConfig":
        if self.algorithm == LINEAR_CONGRUENTIAL:
            missing = [k for k in ("modulus", "multiplier", "increment") if getattr(self, k) is None]
            if missing:
                raise ValueError(f"linear_congruential requires {', '.join(missing)}")
        return self

    def build_generator(self) -> Callable[[], float]:
        if self.algorithm == MERSENNE_TWISTER:
            return MersenneTwister(self.seed)
        if self.algorithm in _PRESETS:
            return _PRESETS[self.algorithm](self.seed)
        if self.algorithm == LINEAR_CONGRUENTIAL:
            return LinearCongruential(self.modulus, self.multiplier, self.increment, seed=self.seed)
        return DefaultGenerator(self.seed)

    def build(self) -> Randomness:
        generator = self.build_generator()
        logger.debug("Built %r from config", generator)
        rand = Randomness(generator)
        if self.averaged is not None:
            rand = rand.averaged_distribution(self.averaged)
        return rand


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """Read generator settings from YAML, either top-level or under a ``generator:`` section."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    section = raw.get("generator", raw)
    if not isinstance(section, dict):
        raise ConfigError(f"'generator' section in {path} must be a mapping")

    allowed = set(GeneratorConfig.model_fields)
    data = {}
    for key, value in section.items():
        if key in allowed:
            data[key] = value
        elif key != "generator":
            logger.warning("Ignoring unknown generator setting %r in %s", key, path)
    logger.info("Loaded generator config from %s: %s", path, data)
    return data


def from_env(env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    env = os.environ if env is None else env
    mapping = {
        ENV_PREFIX + "ALGORITHM": ("algorithm", str),
        ENV_PREFIX + "SEED": ("seed", _as_int),
        ENV_PREFIX + "AVERAGED": ("averaged", _as_int),
    }
    out: Dict[str, Any] = {}
    for env_key, (field_name, caster) in mapping.items():
        if env.get(env_key, "") != "":
            try:
                out[field_name] = caster(env[env_key])
            except ValueError:
                logger.warning("Ignoring invalid %s=%r", env_key, env[env_key])
    return out


def load_config(
    path: Optional[Union[str, Path]] = None,
    *,
    env: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> GeneratorConfig:
    """Assemble a GeneratorConfig.

    Precedence (lowest to highest): defaults < YAML file < environment < overrides.
    Overrides set to None are ignored.
    """
    data: Dict[str, Any] = {}
    if path is not None:
        data.update(load_yaml(path))
    data.update(from_env(env))
    data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return GeneratorConfig(**data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def build_randomness(
    path: Optional[Union[str, Path]] = None,
    *,
    env: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> Randomness:
    return load_config(path, env=env, **overrides).build()


__all__ = [
    "ALGORITHMS",
    "GeneratorConfig",
    "build_randomness",
    "from_env",
    "load_config",
    "load_yaml",
]
