"""
bbcschedules.downloader - Schedule page downloader

Fetches schedule pages over plain HTTP GET with a persistent requests session.
There is no retry logic: a failed request raises FetchFailed carrying the URL.
"""

import logging
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .errors import FetchFailed

DEFAULT_TIMEOUT = 10
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64; rv:109.0) Gecko/20100101 Firefox/115.0"
)


class ScheduleDownloader:
    """Downloads schedule pages"""

    def __init__(self, timeout: int = DEFAULT_TIMEOUT, user_agent: Optional[str] = None):
        self.session: Optional[requests.Session] = None
        self.timeout = timeout
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.total_requests = 0
        self.failed_requests = 0
        self.bytes_received = 0

        self.init_session()

    def init_session(self):
        """Initialize session with browser-like headers"""
        if self.session:
            self.session.close()

        self.session = requests.Session()
        self.session.headers.update(
            {
                "Accept": "text/html, application/xhtml+xml, */*",
                "Accept-Language": "en-GB,en;q=0.9",
                "Connection": "keep-alive",
                "User-Agent": self.user_agent,
            }
        )

        # Failures surface to the caller, never retried here
        adapter = HTTPAdapter(max_retries=Retry(total=0, backoff_factor=0, status_forcelist=[]))
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)
        logging.debug("HTTP session initialized (timeout: %ds)", self.timeout)

    def fetch(self, url: str) -> str:
        """
        Download a schedule page

        Args:
            url: Page URL

        Returns:
            Page text, possibly empty

        Raises:
            FetchFailed: on connection problems or a non-200 response
        """
        if self.session is None:
            self.init_session()

        self.total_requests += 1
        logging.info("Fetching schedule: %s", url)

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            self.failed_requests += 1
            logging.warning("Timeout (%ds) fetching %s", self.timeout, url)
            raise FetchFailed(url, reason=f"timeout after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            self.failed_requests += 1
            logging.warning("Request error fetching %s: %s", url, str(e))
            raise FetchFailed(url, reason=str(e)) from e

        if response.status_code != 200:
            self.failed_requests += 1
            logging.warning("HTTP %d received for %s", response.status_code, url)
            raise FetchFailed(
                url, status_code=response.status_code, reason=f"HTTP {response.status_code}"
            )

        self.bytes_received += len(response.content)
        logging.debug("Success: %d bytes received", len(response.content))
        return response.text

    def close(self):
        """Clean shutdown"""
        if self.session:
            self.session.close()
            self.session = None

    def get_stats(self) -> Dict[str, Any]:
        """Get download statistics"""
        return {
            "total_requests": self.total_requests,
            "failed_requests": self.failed_requests,
            "bytes_received": self.bytes_received,
        }

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
