# qa_scanner/fetcher.py
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import DEFAULT_CONFIG
from .document import PageDocument
from .errors import DocumentUnavailableError


class PageFetcher:
    """
    Fetches a page over HTTP and wraps it as a static PageDocument.
    Static snapshots carry no render metrics, so layout-dependent sub-checks are skipped.
    """

    def __init__(self, config=None):
        self.config = config if config else DEFAULT_CONFIG
        self.global_config = self.config.get("Global", {})
        self.headers = {
            "User-Agent": self.global_config.get("user_agent", DEFAULT_CONFIG["Global"]["user_agent"]),
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": self.global_config.get("accept_language", "en-US,en;q=0.8"),
        }
        self.session = requests.Session()
        retries_total = int(self.global_config.get("http_retries_total", 2))
        if retries_total > 0:
            retry_cfg = Retry(
                total=retries_total,
                connect=retries_total,
                read=retries_total,
                backoff_factor=float(self.global_config.get("http_backoff_factor", 0.2)),
                status_forcelist=self.global_config.get("http_status_forcelist", [429, 500, 502, 503, 504]),
                allowed_methods={"HEAD", "GET", "OPTIONS"},
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retry_cfg)
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)
        self.session.headers.update(self.headers)

    def fetch(self, url: str) -> PageDocument:
        timeout = self.global_config.get("request_timeout", 10)
        try:
            resp = self.session.get(url, timeout=timeout)
            resp.raise_for_status()
        except requests.exceptions.RequestException as e:
            if self.global_config.get("debug"):
                print(f"Error fetching URL {url}: {e}")
            raise DocumentUnavailableError(f"Could not retrieve HTML from {url}: {e}") from e
        # Redirects land on a different URL; scheme-sensitive checks must see the final one
        return PageDocument.from_html(resp.url or url, resp.content)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
