import logging
import time
from typing import Any, Callable, Dict, List, Optional

import requests
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from app import settings
from app.normalizers import Record

log = logging.getLogger(__name__)

SUCCESS_CODE = 3000
NO_RECORDS_CODE = 9280


class PlatformError(RuntimeError):
    """A report call still failed after all retries."""


class _RetryableResponse(Exception):
    """One failed attempt: network error, HTTP error or non-success code."""


class CreatorClient:
    """
    Thin report reader for the hosted platform's REST API.
    Every call is retried `retries` times with a fixed delay on network
    errors, HTTP errors and non-success response codes.
    """
    def __init__(
        self,
        base_url: str = settings.PLATFORM_BASE_URL,
        owner: str = settings.PLATFORM_OWNER,
        app_name: str = settings.APP_NAME,
        auth: str = settings.PLATFORM_AUTH,
        timeout: float = settings.PLATFORM_TIMEOUT,
        retries: int = settings.RETRIES,
        retry_delay: float = settings.RETRY_DELAY,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.base_url = base_url.rstrip("/")
        self.owner = owner
        self.app_name = app_name
        self.timeout = timeout
        self.retries = max(0, retries)
        self.retry_delay = retry_delay
        self._sleep = sleep
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        if auth:
            self.session.headers.update({"Authorization": auth})

    def report_url(self, report: str) -> str:
        prefix = f"{self.base_url}/{self.owner}" if self.owner else self.base_url
        return f"{prefix}/{self.app_name}/report/{report}"

    def get_records(
        self, report: str, criteria: Optional[str] = None, page: int = 1, page_size: int = 200
    ) -> List[Record]:
        """Fetch one page (1-based) of a report. An empty report is an empty list."""
        if page_size < 1:
            raise ValueError(f"page_size must be at least 1, got {page_size}")
        url = self.report_url(report)
        params: Dict[str, Any] = {"from": (page - 1) * page_size + 1, "limit": page_size}
        if criteria:
            params["criteria"] = criteria

        def _log_retry(state: RetryCallState) -> None:
            log.warning("retrying %s page %d (%d retries left): %s",
                        report, page, self.retries - state.attempt_number + 1,
                        state.outcome.exception())

        retrying = Retrying(
            stop=stop_after_attempt(self.retries + 1),
            wait=wait_fixed(self.retry_delay),
            retry=retry_if_exception_type(_RetryableResponse),
            sleep=self._sleep,
            before_sleep=_log_retry,
            reraise=True,
        )
        try:
            data = retrying(self._fetch_page, url, params)
        except _RetryableResponse as e:
            log.error("giving up on %s page %d: %s", report, page, e)
            raise PlatformError(f"{report}: {e}") from e

        if not data:
            log.info("%s page %d: no records", report, page)
        else:
            log.debug("%s page %d: %d record(s)", report, page, len(data))
        return data

    def _fetch_page(self, url: str, params: Dict[str, Any]) -> List[Record]:
        """One attempt. Raises _RetryableResponse for anything worth another try."""
        try:
            r = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise _RetryableResponse(f"network error: {e}") from e

        try:
            body = r.json()
        except ValueError:
            body = None
        code = body.get("code") if isinstance(body, dict) else None

        if code == NO_RECORDS_CODE:
            return []
        if r.ok and code == SUCCESS_CODE:
            data = body.get("data") or []
            if not isinstance(data, list):
                log.warning("%s: unexpected data payload %r", url, type(data).__name__)
                return []
            return data

        message = body.get("message") if isinstance(body, dict) else None
        raise _RetryableResponse(f"HTTP {r.status_code}, code={code}, message={message or '-'}")

    def get_all_records(
        self, report: str, criteria: Optional[str] = None, page_size: int = 200
    ) -> List[Record]:
        """Page through a report until an empty or short page comes back."""
        if page_size < 1:
            raise ValueError(f"page_size must be at least 1, got {page_size}")
        out: List[Record] = []
        page = 1
        while True:
            batch = self.get_records(report, criteria=criteria, page=page, page_size=page_size)
            out.extend(batch)
            if not batch or len(batch) < page_size:
                break
            page += 1
        log.info("fetched %d record(s) from %s in %d page(s)", len(out), report, page)
        return out
