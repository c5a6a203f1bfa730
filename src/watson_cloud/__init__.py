"""
Lightweight REST client for the Watson cloud AI services.

Each service class exposes one method per remote endpoint. Methods return the
decoded response body, or pass ``(error, body, response)`` to an optional
callback.
"""
__version__ = "0.1.0"

from .base_service import BaseService
from .config import ServiceConfig
from .helper import FileObject, MissingParametersError
from .language_translator_v2 import (
    CreateModelParams,
    IdentifyParams,
    LanguageTranslatorV2,
    ListModelsParams,
    ModelParams,
    TranslateParams,
)
from .request import WatsonApiError
from .tone_analyzer_v3 import ToneAnalyzerV3, ToneChatParams, ToneParams

__all__ = [
    "BaseService",
    "CreateModelParams",
    "FileObject",
    "IdentifyParams",
    "LanguageTranslatorV2",
    "ListModelsParams",
    "MissingParametersError",
    "ModelParams",
    "ServiceConfig",
    "ToneAnalyzerV3",
    "ToneChatParams",
    "ToneParams",
    "TranslateParams",
    "WatsonApiError",
]
