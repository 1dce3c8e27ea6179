from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from streamstats.constants import DEFAULT_PRECISION, DEFAULT_STATISTICS, StatisticKind


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STREAMSTATS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    statistics: list[StatisticKind] = Field(
        default_factory=lambda: list(DEFAULT_STATISTICS),
        min_length=1,
        description="Statistics to compute, in report order",
    )

    legacy_max_sentinel: bool = Field(
        default=False,
        description="Start Max from the smallest positive double instead of the most negative one",
    )

    precision: int = Field(
        default=DEFAULT_PRECISION,
        ge=1,
        le=17,
        description="Significant digits when printing results",
    )

    @field_validator("statistics")
    @classmethod
    def validate_statistics(cls, v: list[StatisticKind]) -> list[StatisticKind]:
        seen: set[StatisticKind] = set()
        for kind in v:
            if kind in seen:
                raise ValueError(f"Statistic {kind.value!r} requested more than once")
            seen.add(kind)
        return v

    def __repr__(self) -> str:
        return (
            f"Settings("
            f"log_level={self.log_level!r}, "
            f"statistics={[k.value for k in self.statistics]!r}, "
            f"legacy_max_sentinel={self.legacy_max_sentinel!r}, "
            f"precision={self.precision!r}"
            f")"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
