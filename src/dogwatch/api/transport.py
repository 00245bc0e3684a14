"""HTTP transport backed by a requests session."""

from typing import Optional

import requests

from .. import __version__

DEFAULT_TIMEOUT = 30


class SessionGetter:
    """GET-only transport that applies a timeout to every request.

    Usable as a context manager; the session is closed on exit.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = f"dogwatch/{__version__}"

    def get(self, url: str) -> requests.Response:
        return self.session.get(url, timeout=self.timeout)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
