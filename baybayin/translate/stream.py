"""Client for the streamed translation service.

The service answers a POST of ``{"prompt": ...}`` with server-sent events:

    data: {"text": "Magandang"}
    data: {"text": " umaga"}
    data: [DONE]

Fragments are accumulated into one string which is then handed to
``convert``. The transliteration engine knows nothing about this protocol.
"""

import asyncio
import json
import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

import requests

from baybayin.errors import TranslationError
from baybayin.transliterate import convert
from baybayin.utils.log import log_with_context
from baybayin.utils.retry import RetryConfig, with_retry


DATA_PREFIX = "data: "
DONE_SENTINEL = "[DONE]"

# First double-quoted run in the model's answer
RE_QUOTED = re.compile(r'"([^"]+)"')

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StreamEvent:
    """A parsed `data:` event."""

    text: str = ""
    done: bool = False


@dataclass(frozen=True)
class TranslationResult:
    """Translation and its Baybayin rendering."""

    raw: str
    text: str
    baybayin: str


def parse_sse_line(line: str | bytes) -> StreamEvent | None:
    """
    Parse one line of the event stream.

    Args:
        line: Raw line (without trailing newline)

    Returns:
        The event, or None for blank lines, non-data lines, malformed JSON
        and payloads without text
    """
    if isinstance(line, bytes):
        line = line.decode("utf-8", errors="replace")

    if not line.startswith(DATA_PREFIX):
        return None

    data = line[len(DATA_PREFIX) :].strip()
    if data == DONE_SENTINEL:
        return StreamEvent(done=True)

    try:
        parsed = json.loads(data)
    except json.JSONDecodeError as e:
        logger.warning(f"Skipping malformed event payload {data[:80]!r}: {e}")
        return None

    if not isinstance(parsed, dict):
        return None

    text = parsed.get("text")
    if not isinstance(text, str) or not text:
        return None

    return StreamEvent(text=text)


def iter_fragments(lines: Iterable[str | bytes]) -> Iterator[str]:
    """
    Yield text fragments until the [DONE] sentinel or end of stream.

    Args:
        lines: Event stream lines

    Yields:
        Text fragments in arrival order
    """
    for line in lines:
        event = parse_sse_line(line)
        if event is None:
            continue
        if event.done:
            return
        yield event.text


def accumulate_stream(lines: Iterable[str | bytes]) -> str:
    """Concatenate all text fragments of an event stream."""
    return "".join(iter_fragments(lines))


def extract_quoted(text: str) -> str:
    """
    Pull the translation out of the model's answer.

    The service is prompted with the source text in quotes and usually
    answers in quotes as well.

    Args:
        text: Accumulated translation

    Returns:
        First quoted run, trimmed; the whole stripped text if none is quoted
    """
    match = RE_QUOTED.search(text)
    if match and match.group(1).strip():
        return match.group(1).strip()
    return text.strip()


class TranslationClient:
    """Client for a streamed translation endpoint."""

    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        endpoint: str,
        timeout: float = DEFAULT_TIMEOUT,
        retry: RetryConfig | None = None,
        session: requests.Session | None = None,
    ):
        """
        Initialize the client.

        Args:
            endpoint: URL accepting POST {"prompt": ...}
            timeout: Request timeout in seconds
            retry: Retry policy for translate_async
            session: Optional requests session (for connection reuse)
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self.retry = retry or RetryConfig(retryable_exceptions=(TranslationError,))
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: dict[str, Any]) -> "TranslationClient":
        """Build a client from the `translate` section of the settings."""
        cfg = settings["translate"]
        return cls(
            endpoint=cfg["endpoint"],
            timeout=cfg["timeout"],
            retry=RetryConfig(
                max_retries=cfg["max_retries"],
                backoff_start=cfg["backoff_start"],
                backoff_max=cfg["backoff_max"],
                retryable_exceptions=(TranslationError,),
            ),
        )

    def stream(self, prompt: str) -> Iterator[str]:
        """
        Stream translation fragments for a prompt.

        Args:
            prompt: Text to translate

        Yields:
            Text fragments

        Raises:
            TranslationError: If the request fails or the service errors
        """
        try:
            response = self.session.post(
                self.endpoint,
                json={"prompt": prompt},
                headers={"Accept": "text/event-stream"},
                stream=True,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TranslationError(f"Translation request failed: {e}") from e

        with response:
            if not response.ok:
                raise TranslationError(
                    f"Translation service returned {response.status_code}: {_error_message(response)}"
                )

            # Event streams are UTF-8; requests would guess latin-1 for text/*
            response.encoding = "utf-8"
            try:
                yield from iter_fragments(response.iter_lines(decode_unicode=True))
            except requests.RequestException as e:
                raise TranslationError(f"Translation stream interrupted: {e}") from e

    def translate(self, prompt: str) -> str:
        """
        Translate a prompt, blocking until the stream ends.

        Args:
            prompt: Text to translate

        Returns:
            Accumulated translation

        Raises:
            TranslationError: If the request fails or the service errors
        """
        logger.debug(f"Requesting translation from {self.endpoint}")
        text = "".join(self.stream(prompt))
        log_with_context(logger, "info", "Received translation", endpoint=self.endpoint, chars=len(text))
        return text

    async def translate_async(self, prompt: str) -> str:
        """
        Translate in a worker thread, with retries.

        Cancelling the awaiting task stops waiting immediately; the
        in-flight request is abandoned.

        Args:
            prompt: Text to translate

        Returns:
            Accumulated translation
        """

        async def _attempt() -> str:
            return await asyncio.to_thread(self.translate, prompt)

        return await with_retry(_attempt, self.retry)


def _error_message(response: requests.Response) -> str:
    """Extract the service's error message from a failed response."""
    try:
        body = response.json()
    except ValueError:
        return response.reason or "unknown error"
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return response.reason or "unknown error"


async def translate_to_baybayin(
    client: TranslationClient,
    prompt: str,
    canceller: str = "+",
    font: str = "Baybayin Simple",
) -> TranslationResult:
    """
    Translate a prompt (with retries) and render the translation in Baybayin.

    Args:
        client: Translation client
        prompt: Text to translate
        canceller: Requested vowel-canceller symbol
        font: Font name

    Returns:
        Raw answer, extracted translation, and its Baybayin rendering

    Raises:
        TranslationError: If the translation fails
    """
    raw = await client.translate_async(prompt)
    text = extract_quoted(raw)
    return TranslationResult(raw=raw, text=text, baybayin=convert(text, canceller, font))
