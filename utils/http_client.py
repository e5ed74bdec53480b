"""HTTP client with response caching. Failures are raised, never retried."""
import time
import logging
import hashlib
import requests

logger = logging.getLogger("hashcalc.http")

DEFAULT_USER_AGENT = "hashcalc/1.0"


class APIError(Exception):
    """API request error with status code and response body."""
    def __init__(self, message, status_code=None, response_body=None, source=None):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body
        self.source = source


class HTTPClient:
    """Thin requests wrapper: one attempt per call, optional in-memory response cache."""

    def __init__(self, base_url, timeout=30, cache_ttl=0, user_agent=None, source=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.cache_ttl = cache_ttl
        self.source = source
        self._cache = {}
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": user_agent or DEFAULT_USER_AGENT})

    def get(self, path="", params=None):
        """Make a GET request, serving from cache when fresh."""
        return self._request("GET", path, params)

    def set_user_agent(self, user_agent):
        self.session.headers["User-Agent"] = user_agent

    def _cache_key(self, method, path, params):
        raw = f"{method}:{self.base_url}{path}:{sorted((params or {}).items())}"
        return hashlib.md5(raw.encode()).hexdigest()

    def _request(self, method, path, params=None):
        url = f"{self.base_url}/{path.lstrip('/')}" if path else self.base_url

        if self.cache_ttl > 0:
            cached = self._cache.get(self._cache_key(method, path, params))
            if cached and time.time() - cached["time"] < self.cache_ttl:
                logger.debug(f"{method} {url} served from cache")
                return cached["data"]

        try:
            start = time.time()
            resp = self.session.request(method, url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise APIError(f"Request to {url} failed: {e}", source=self.source) from e

        latency = int((time.time() - start) * 1000)
        logger.debug(f"{method} {url} → {resp.status_code} ({latency}ms)")

        if resp.status_code != 200:
            raise APIError(
                f"HTTP {resp.status_code} from {url}",
                status_code=resp.status_code,
                response_body=resp.text,
                source=self.source,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise APIError(
                f"Invalid JSON from {url}",
                status_code=resp.status_code,
                response_body=resp.text,
                source=self.source,
            ) from e

        if self.cache_ttl > 0:
            self._cache[self._cache_key(method, path, params)] = {
                "data": data, "time": time.time()
            }
        return data

    def close(self):
        self.session.close()
