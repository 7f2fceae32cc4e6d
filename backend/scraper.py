"""Page fetcher: one GET per analysis, bounded by a timeout, no retries."""

import logging
import time

from charset_normalizer import from_bytes
import requests
from urllib3.exceptions import HTTPError as Urllib3HTTPError, ReadTimeoutError

from config import DEFAULT_USER_AGENT
from document import build_header_map
from errors import RetrievalError
from models import FetchedPage

logger = logging.getLogger(__name__)

_REQUEST_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}
_CHUNK_SIZE = 16 * 1024


def _timed_out(url: str, timeout: float) -> RetrievalError:
    logger.warning("Timed out fetching %s after %ss", url, timeout)
    return RetrievalError(f"Request to {url} timed out after {timeout:g} seconds")


def _decode(body: bytes, declared: str | None) -> str:
    encoding = declared
    if not encoding or encoding.lower() == "iso-8859-1":
        match = from_bytes(body).best()
        encoding = match.encoding if match is not None else "utf-8"
    try:
        return body.decode(encoding, errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")


def fetch_page(url: str, timeout: float = 10.0, user_agent: str = DEFAULT_USER_AGENT) -> FetchedPage:
    """
    Fetch `url` and return its markup, status code and headers.

    `timeout` caps the whole retrieval, body download included, not just each
    socket read. Raises RetrievalError on timeout, connection failure or an
    unusable URL. Non-2xx responses are returned as-is; their body is still
    worth analyzing.
    """
    headers = dict(_REQUEST_HEADERS)
    headers["User-Agent"] = user_agent

    started = time.monotonic()
    try:
        response = requests.get(url, timeout=timeout, headers=headers, stream=True)
    except requests.Timeout as exc:
        raise _timed_out(url, timeout) from exc
    except (requests.RequestException, ValueError) as exc:
        logger.warning("Failed to fetch %s: %s", url, exc)
        raise RetrievalError(str(exc) or f"Could not fetch {url}") from exc

    # read1 returns whatever has arrived, so a slow trickle still hits the deadline check.
    chunks: list[bytes] = []
    try:
        while True:
            chunk = response.raw.read1(_CHUNK_SIZE, decode_content=True)
            if time.monotonic() - started > timeout:
                raise _timed_out(url, timeout)
            if not chunk:
                break
            chunks.append(chunk)
    except (requests.Timeout, ReadTimeoutError) as exc:
        raise _timed_out(url, timeout) from exc
    except (requests.RequestException, Urllib3HTTPError) as exc:
        logger.warning("Failed to read %s: %s", url, exc)
        raise RetrievalError(str(exc) or f"Could not fetch {url}") from exc
    finally:
        response.close()

    body = b"".join(chunks)
    logger.info("Fetched %s status=%s size=%d bytes", url, response.status_code, len(body))
    return {
        "url": url,
        "html": _decode(body, response.encoding),
        "status_code": response.status_code,
        "headers": build_header_map(response.headers),
    }
