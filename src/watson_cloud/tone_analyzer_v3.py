"""Tone Analyzer detects emotional, social and language tones in text."""
from dataclasses import dataclass
from typing import Any, List, Optional, Union

import httpx

from .base_service import BaseService, Callback
from .config import ServiceConfig
from .request import RequestOptions

JSON = "application/json"


@dataclass
class ToneParams:
    """Parameters for ``tone``.

    ``tone_input`` is a dict (``{"text": ...}``) or a string; ``content_type``
    is one of application/json, text/plain or text/html.
    """

    tone_input: Any = None
    content_type: Optional[str] = None
    sentences: Optional[bool] = None
    tones: Optional[List[str]] = None
    content_language: Optional[str] = None
    accept_language: Optional[str] = None


@dataclass
class ToneChatParams:
    utterances: Optional[List[dict]] = None
    accept_language: Optional[str] = None


class ToneAnalyzerV3(BaseService):
    """Client for the Tone Analyzer v3 API."""

    name = "tone_analyzer"
    service_version = "v3"
    default_url = "https://gateway.watsonplatform.net/tone-analyzer/api"

    def __init__(
        self,
        config: ServiceConfig,
        *,
        timeout: float = 15.0,
        transport: Optional[httpx.BaseTransport] = None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not config.version:
            raise ValueError("version is required for ToneAnalyzerV3 (e.g. '2017-09-21')")
        super().__init__(config, timeout=timeout, transport=transport, async_transport=async_transport)

    def tone(self, params: Union[ToneParams, dict], callback: Optional[Callback] = None) -> Any:
        """Analyze the tones of a document and, optionally, of each sentence."""
        return self._call(self._tone_options, params, callback)

    async def tone_async(self, params: Union[ToneParams, dict], callback: Optional[Callback] = None) -> Any:
        return await self._call_async(self._tone_options, params, callback)

    def _tone_options(self, params) -> RequestOptions:
        params = self._coerce(params, ToneParams)
        self._require(params, ["tone_input", "content_type"])
        headers = {"Accept": JSON, "Content-Type": params.content_type}
        if params.content_language:
            headers["Content-Language"] = params.content_language
        if params.accept_language:
            headers["Accept-Language"] = params.accept_language
        options = RequestOptions(
            method="POST",
            url="/v3/tone",
            query={"version": self.config.version, "sentences": params.sentences, "tones": params.tones},
            headers=headers,
        )
        if params.content_type.startswith(JSON) and not isinstance(params.tone_input, (str, bytes)):
            options.json = params.tone_input
        elif isinstance(params.tone_input, (str, bytes)):
            options.content = params.tone_input
        else:
            raise ValueError(f"tone_input must be text when content_type is {params.content_type}")
        return options

    def tone_chat(self, params: Union[ToneChatParams, dict], callback: Optional[Callback] = None) -> Any:
        """Analyze customer-engagement tones of each utterance in a conversation."""
        return self._call(self._tone_chat_options, params, callback)

    async def tone_chat_async(self, params: Union[ToneChatParams, dict], callback: Optional[Callback] = None) -> Any:
        return await self._call_async(self._tone_chat_options, params, callback)

    def _tone_chat_options(self, params) -> RequestOptions:
        params = self._coerce(params, ToneChatParams)
        self._require(params, ["utterances"])
        headers = {"Accept": JSON, "Content-Type": JSON}
        if params.accept_language:
            headers["Accept-Language"] = params.accept_language
        return RequestOptions(
            method="POST",
            url="/v3/tone_chat",
            query={"version": self.config.version},
            json={"utterances": params.utterances},
            headers=headers,
        )
