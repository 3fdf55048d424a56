import codecs

from pydantic import BaseModel, Field, field_validator
from typing import Literal


class InputConfig(BaseModel):
    comment_prefix: str = Field(default="#", min_length=1)
    skip_malformed: bool = False
    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"unknown encoding: {v}")
        return v


class SearchConfig(BaseModel):
    shortest_strategy: Literal["dfs", "bfs"] = "dfs"
    neighbor_order: Literal["insertion", "sorted"] = "insertion"


class OutputConfig(BaseModel):
    format: Literal["text", "json"] = "text"


class EdgepathConfig(BaseModel):
    input: InputConfig = Field(default_factory=InputConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "warn"
    log_format: Literal["text", "json"] = "text"
