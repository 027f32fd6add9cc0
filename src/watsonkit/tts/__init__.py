"""Text to Speech service clients."""

from .voices import GetVoiceError, ListVoicesError, VoicesService, WatsonVoice

__all__ = ["GetVoiceError", "ListVoicesError", "VoicesService", "WatsonVoice"]
