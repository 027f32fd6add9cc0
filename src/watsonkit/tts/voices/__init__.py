"""Voice listing and lookup for the Text to Speech service."""

from .errors import (
    GET_VOICE_CLASSIFIER,
    LIST_VOICES_CLASSIFIER,
    GetVoiceError,
    ListVoicesError,
)
from .models import SupportedFeatures, VoiceCustomization, WatsonVoice
from .service import VoicesService

__all__ = [
    "GET_VOICE_CLASSIFIER",
    "LIST_VOICES_CLASSIFIER",
    "GetVoiceError",
    "ListVoicesError",
    "SupportedFeatures",
    "VoiceCustomization",
    "VoicesService",
    "WatsonVoice",
]
