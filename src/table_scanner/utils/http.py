"""HTTP client used to fetch scanned pages."""

import logging
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import get_settings
from ..scrapers.base import FetchError


class HTTPClient:
    """HTTP client returning page markup."""
    
    def __init__(self, timeout: Optional[float] = None, retry_count: Optional[int] = None):
        """Initialize HTTP client.
        
        Args:
            timeout: Request timeout in seconds (uses settings default if None)
            retry_count: Transport retries (uses settings default if None)
        """
        settings = get_settings()
        self.logger = logging.getLogger(__name__)
        self.timeout = timeout if timeout is not None else settings.timeout
        retry_count = retry_count if retry_count is not None else settings.retry_count
        
        self.session = requests.Session()
        
        if retry_count > 0:
            retry_strategy = Retry(
                total=retry_count,
                backoff_factor=2,
                status_forcelist=[429, 500, 502, 503, 504],
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)
        
        self.session.headers.update({
            "User-Agent": settings.user_agent,
            "Accept": "text/html, application/xhtml+xml, */*",
            "Accept-Language": "en-US,en;q=0.9",
        })
    
    def fetch(self, url: str) -> str:
        """Fetch a page and return its markup.
        
        Args:
            url: Absolute URL of the page
            
        Returns:
            Response body decoded as text
            
        Raises:
            FetchError: On transport failure or a non-success status
        """
        self.logger.info(f"Fetching content from {url}")
        
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Failed to fetch {url}: {e}")
            raise FetchError(f"Failed to fetch {url}: {e}") from e
        
        self.logger.info(f"Successfully fetched {len(response.content)} bytes from {url}")
        return response.text
    
    def close(self):
        """Close the session."""
        self.session.close()
