from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator


class ListenerSpec(BaseModel):
    """Declaration of a single listener in a configuration file."""

    kind: Literal["no_op", "error_suppressing", "stream_writing", "compound"]
    target: Literal["stdout", "stderr"] | None = None
    listeners: list[ListenerSpec] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_kind_fields(self) -> ListenerSpec:
        if self.target is not None and self.kind != "stream_writing":
            raise ValueError(f"'target' is only valid for stream_writing, not {self.kind}")
        if self.listeners and self.kind != "compound":
            raise ValueError(f"'listeners' is only valid for compound, not {self.kind}")
        return self


class ListenerManifest(BaseModel):
    """The listeners.yaml schema."""

    listeners: list[ListenerSpec] = Field(default_factory=list)
