"""Language Translator translates text from one language to another.

The service offers domain-specific models that can be customized with
glossaries and corpora.
"""
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from .base_service import BaseService, Callback
from .request import RequestOptions

JSON = "application/json"


@dataclass
class TranslateParams:
    # A single string is sent as a one-element list.
    text: Optional[Union[str, List[str]]] = None
    model_id: Optional[str] = None
    source: Optional[str] = None
    target: Optional[str] = None


@dataclass
class IdentifyParams:
    text: Optional[str] = None


@dataclass
class CreateModelParams:
    """Parameters for ``create_model``.

    The three corpus fields take bytes, str, an open binary file or a
    ``FileObject``; fields left as None are not uploaded.
    """

    base_model_id: Optional[str] = None
    name: Optional[str] = None
    forced_glossary: Any = None
    parallel_corpus: Any = None
    monolingual_corpus: Any = None


@dataclass
class ModelParams:
    model_id: Optional[str] = None


@dataclass
class ListModelsParams:
    source: Optional[str] = None
    target: Optional[str] = None
    default_models: Optional[bool] = None


class LanguageTranslatorV2(BaseService):
    """Client for the Language Translator v2 API."""

    name = "language_translator"
    service_version = "v2"
    default_url = "https://gateway.watsonplatform.net/language-translator/api"

    # translate

    def translate(self, params: Union[TranslateParams, dict], callback: Optional[Callback] = None) -> Any:
        """Translate the input text from the source language to the target language.

        Either ``model_id`` or both ``source`` and ``target`` select the model.
        """
        return self._call(self._translate_options, params, callback)

    async def translate_async(self, params: Union[TranslateParams, dict], callback: Optional[Callback] = None) -> Any:
        return await self._call_async(self._translate_options, params, callback)

    def _translate_options(self, params) -> RequestOptions:
        params = self._coerce(params, TranslateParams)
        self._require(params, ["text"])
        text = [params.text] if isinstance(params.text, str) else list(params.text)
        body = {"text": text, "model_id": params.model_id, "source": params.source, "target": params.target}
        return RequestOptions(
            method="POST",
            url="/v2/translate",
            json={key: value for key, value in body.items() if value is not None},
            headers={"Accept": JSON, "Content-Type": JSON},
        )

    # identify

    def identify(self, params: Union[IdentifyParams, dict], callback: Optional[Callback] = None) -> Any:
        """Identify the language of the input text; returns ranked JSON."""
        return self._call(self._identify_options, params, callback)

    async def identify_async(self, params: Union[IdentifyParams, dict], callback: Optional[Callback] = None) -> Any:
        return await self._call_async(self._identify_options, params, callback)

    def identify_plain(self, params: Union[IdentifyParams, dict], callback: Optional[Callback] = None) -> Any:
        """Identify the language of the input text; returns the plain-text ranking."""
        return self._call(self._identify_plain_options, params, callback)

    async def identify_plain_async(
        self, params: Union[IdentifyParams, dict], callback: Optional[Callback] = None
    ) -> Any:
        return await self._call_async(self._identify_plain_options, params, callback)

    def _identify_options(self, params, accept: str = JSON) -> RequestOptions:
        params = self._coerce(params, IdentifyParams)
        self._require(params, ["text"])
        return RequestOptions(
            method="POST",
            url="/v2/identify",
            content=params.text,
            headers={"Accept": accept, "Content-Type": "text/plain"},
        )

    def _identify_plain_options(self, params) -> RequestOptions:
        return self._identify_options(params, accept="text/plain")

    def list_identifiable_languages(self, params: Optional[dict] = None, callback: Optional[Callback] = None) -> Any:
        """List the languages the service can identify."""
        return self._call(self._list_identifiable_languages_options, params, callback)

    async def list_identifiable_languages_async(
        self, params: Optional[dict] = None, callback: Optional[Callback] = None
    ) -> Any:
        return await self._call_async(self._list_identifiable_languages_options, params, callback)

    def _list_identifiable_languages_options(self, params) -> RequestOptions:
        return RequestOptions(method="GET", url="/v2/identifiable_languages", headers={"Accept": JSON})

    # models

    def create_model(self, params: Union[CreateModelParams, dict], callback: Optional[Callback] = None) -> Any:
        """Upload a TMX glossary or corpus on top of a base model to customize it.

        Glossary files must be under 10 MB; all uploaded files for a model
        together are limited to 250 MB.
        """
        return self._call(self._create_model_options, params, callback)

    async def create_model_async(
        self, params: Union[CreateModelParams, dict], callback: Optional[Callback] = None
    ) -> Any:
        return await self._call_async(self._create_model_options, params, callback)

    def _create_model_options(self, params) -> RequestOptions:
        params = self._coerce(params, CreateModelParams)
        self._require(params, ["base_model_id"])
        return RequestOptions(
            method="POST",
            url="/v2/models",
            query={"base_model_id": params.base_model_id, "name": params.name},
            files={
                "forced_glossary": (params.forced_glossary, "application/octet-stream"),
                "parallel_corpus": (params.parallel_corpus, "application/octet-stream"),
                "monolingual_corpus": (params.monolingual_corpus, "text/plain"),
            },
            headers={"Accept": JSON, "Content-Type": "multipart/form-data"},
        )

    def delete_model(self, params: Union[ModelParams, dict], callback: Optional[Callback] = None) -> Any:
        """Delete a custom translation model."""
        return self._call(self._delete_model_options, params, callback)

    async def delete_model_async(self, params: Union[ModelParams, dict], callback: Optional[Callback] = None) -> Any:
        return await self._call_async(self._delete_model_options, params, callback)

    def _delete_model_options(self, params) -> RequestOptions:
        return self._model_options("DELETE", params)

    def get_model(self, params: Union[ModelParams, dict], callback: Optional[Callback] = None) -> Any:
        """Get a translation model, including training status for custom models."""
        return self._call(self._get_model_options, params, callback)

    async def get_model_async(self, params: Union[ModelParams, dict], callback: Optional[Callback] = None) -> Any:
        return await self._call_async(self._get_model_options, params, callback)

    def _get_model_options(self, params) -> RequestOptions:
        return self._model_options("GET", params)

    def _model_options(self, method: str, params) -> RequestOptions:
        params = self._coerce(params, ModelParams)
        self._require(params, ["model_id"])
        return RequestOptions(
            method=method,
            url="/v2/models/{model_id}",
            path={"model_id": params.model_id},
            headers={"Accept": JSON},
        )

    def list_models(
        self, params: Optional[Union[ListModelsParams, dict]] = None, callback: Optional[Callback] = None
    ) -> Any:
        """List available translation models.

        ``default_models`` left unset returns all models; True returns only
        default models and False only non-default ones.
        """
        return self._call(self._list_models_options, params, callback)

    async def list_models_async(
        self, params: Optional[Union[ListModelsParams, dict]] = None, callback: Optional[Callback] = None
    ) -> Any:
        return await self._call_async(self._list_models_options, params, callback)

    def _list_models_options(self, params) -> RequestOptions:
        params = self._coerce(params, ListModelsParams)
        return RequestOptions(
            method="GET",
            url="/v2/models",
            query={"source": params.source, "target": params.target, "default": params.default_models},
            headers={"Accept": JSON},
        )
