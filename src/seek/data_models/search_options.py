import re

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchOptions(BaseModel):
    """Validated strategy selection: one search kind plus an optional frequency.

    Picking exactly one of exact/regex/between is left to the caller (the CLI's
    argument groups); make_search_strategy raises if none is set.
    """

    model_config = ConfigDict(frozen=True)

    exact: str | None = None
    regex: str | None = None
    between: tuple[str, str] | None = None
    exclude_matches: bool = False

    nth: int | None = Field(default=None, ge=1)
    every_nth: int | None = Field(default=None, ge=1)
    all: bool = False

    @field_validator("exact")
    @classmethod
    def _non_empty_exact(cls, v: str | None) -> str | None:
        if v is not None and not v:
            raise ValueError("exact string must not be empty")
        return v

    @field_validator("regex")
    @classmethod
    def _valid_regex(cls, v: str | None) -> str | None:
        if v is not None:
            _check_pattern(v)
        return v

    @field_validator("between")
    @classmethod
    def _valid_between(cls, v: tuple[str, str] | None) -> tuple[str, str] | None:
        if v is not None:
            for pattern in v:
                _check_pattern(pattern)
        return v


def _check_pattern(pattern: str) -> None:
    if not pattern:
        raise ValueError("pattern must not be empty")
    try:
        re.compile(pattern)
    except re.error as exc:
        raise ValueError(f"Invalid regex {pattern!r}: {exc}") from exc
