"""
DeepL REST client.

Sends one text blob per request to /v2/translate with HTML tag handling on
and outline detection off, so markup survives and the body is treated as
flowing text. No retries: every failure is raised to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple, Union

import requests

from ..errors import (
    BackendError,
    ConfigError,
    ResponseFormatError,
    TransportError,
)
from ..logging_utils import log

API_HOSTS: Dict[str, str] = {
    "free": "api-free.deepl.com",
    "pro": "api.deepl.com",
}
TRANSLATE_PATH = "/v2/translate"

MAX_BODY_PREVIEW = 512

Timeout = Optional[Union[float, Tuple[float, float]]]


def endpoint_for_tier(tier: str) -> str:
    """Full translate URL for an API tier ('free' or 'pro')."""
    try:
        host = API_HOSTS[tier]
    except KeyError:
        raise ConfigError(
            f"Unknown API tier: {tier!r} (expected one of: {', '.join(API_HOSTS)})"
        ) from None
    return f"https://{host}{TRANSLATE_PATH}"


def build_payload(text: str, source_lang: str, target_lang: str) -> Dict[str, Any]:
    return {
        "text": [text],
        "target_lang": target_lang,
        "source_lang": source_lang,
        "tag_handling": "html",
        "outline_detection": False,
    }


class DeepLClient:
    """
    Minimal DeepL translation client.

    Usage:
        client = DeepLClient(api_key, tier="free")
        french = client.translate("<p>Hi</p>", "EN", "FR")

    Thread Safety:
        Not thread-safe; the pipeline issues one request at a time.
    """

    def __init__(
        self,
        api_key: str,
        tier: str = "free",
        session: Optional[requests.Session] = None,
        timeout: Timeout = None,
    ) -> None:
        """
        Args:
            api_key: DeepL authentication key
            tier: 'free' or 'pro', selects the API host
            session: Optional requests session; left unmodified and not closed
            timeout: Passed through to requests; None waits indefinitely
        """
        self.tier = tier
        self.endpoint = endpoint_for_tier(tier)
        self.timeout = timeout
        self.headers = {
            "Authorization": f"DeepL-Auth-Key {api_key}",
            "Content-Type": "application/json",
        }
        self._owns_session = session is None
        self.session = session or requests.Session()

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """
        Translate a single text blob.

        Returns:
            Text of the first translation in the response

        Raises:
            TransportError: Network failure
            BackendError: Non-200 response
            ResponseFormatError: Response is not JSON or lacks translations[0].text
        """
        payload = build_payload(text, source_lang, target_lang)
        log(
            f"POST {self.endpoint} ({len(text)} chars, {source_lang} -> {target_lang})",
            logging.DEBUG,
        )

        try:
            resp = self.session.post(
                self.endpoint, json=payload, headers=self.headers, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise TransportError(f"Network error: {e}") from e

        if resp.status_code != 200:
            raise BackendError(resp.status_code, resp.text)

        try:
            data = resp.json()
        except ValueError as e:
            preview = (resp.text or "")[:MAX_BODY_PREVIEW]
            raise ResponseFormatError(
                f"Failed to parse response: {e} (body: {preview!r})"
            ) from e

        try:
            translated = data["translations"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            raise ResponseFormatError(
                f"Failed to parse response: missing translations[0].text ({e!r})"
            ) from e

        if not isinstance(translated, str):
            raise ResponseFormatError(
                f"Failed to parse response: translation text is {type(translated).__name__}"
            )

        return translated

    def close(self) -> None:
        if self._owns_session:
            self.session.close()
