"""Config loading and schema."""

from .loader import ConfigLoadError, load_config
from .schema import DrawConfig, LottoConfig, ParticipantConfig

__all__ = ["ConfigLoadError", "DrawConfig", "LottoConfig", "ParticipantConfig", "load_config"]
