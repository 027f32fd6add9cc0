from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field


class WatsonBaseModel(BaseModel):
    """Base class for Watson payload helpers."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Self:
        """Hydrate a model from a raw service response."""
        return cls.model_validate(payload)


class SupportedFeatures(WatsonBaseModel):
    custom_pronunciation: bool = False
    voice_transformation: bool = False


class VoiceCustomization(WatsonBaseModel):
    """Custom model attached to a voice when a customisation id was requested."""

    customization_id: str
    name: str | None = None
    language: str | None = None
    owner: str | None = None
    created: str | None = None
    last_modified: str | None = None
    description: str | None = None
    words: list[dict[str, Any]] = Field(default_factory=list)
    prompts: list[dict[str, Any]] = Field(default_factory=list)


class WatsonVoice(WatsonBaseModel):
    url: str
    gender: str
    name: str
    language: str
    description: str = ""
    customizable: bool = False
    supported_features: SupportedFeatures = Field(default_factory=SupportedFeatures)
    customization: VoiceCustomization | None = None


class VoiceList(WatsonBaseModel):
    voices: list[WatsonVoice] = Field(default_factory=list)


__all__ = [
    "SupportedFeatures",
    "VoiceCustomization",
    "VoiceList",
    "WatsonBaseModel",
    "WatsonVoice",
]
