"""Clean logs through an OpenAI-compatible chat completions endpoint."""

from __future__ import annotations

import logging

import requests

from .base import ServiceError

log = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an assistant that removes non-critical error messages, duplicates, "
    "and irrelevant content from error logs. Return only the cleaned log content "
    "without any additional commentary."
)


class OpenAICleaner:
    """POST the log to ``{base_url}/chat/completions`` and return the reply.

    Raises:
        ValueError: At construction time if *api_key* is empty.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 60,
    ) -> None:
        if not api_key:
            raise ValueError("An API key is required (set LOGTIDY_API_KEY or OPENAI_API_KEY).")
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def cleanup(self, text: str) -> str:
        """Send *text* to the model and return the cleaned log.

        Raises:
            ServiceError: On network failure, a non-2xx status, or a reply
                without message content.
        """
        url = f"{self.base_url}/chat/completions"
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": text},
            ],
            "temperature": 0.0,
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        log.debug("POST %s model=%s chars=%d", url, self.model, len(text))
        try:
            r = requests.post(url, json=payload, headers=headers, timeout=self.timeout)
            r.raise_for_status()
            data = r.json()
        except requests.RequestException as e:
            raise ServiceError(f"Cleanup request failed: {e}") from e
        except ValueError as e:
            raise ServiceError(f"Cleanup response is not JSON: {e}") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ServiceError(f"Cleanup response missing content: {data}") from e
        if not isinstance(content, str):
            raise ServiceError(f"Cleanup content is not a string: {content!r}")
        return content
