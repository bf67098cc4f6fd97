"""
HTTP client for the catalog API.

Every call returns the decoded JSON body. Failures raise CarServiceError with
the API's own error text when it sent one.
"""
import logging
from typing import Any, Dict, List, Optional

import requests

from ..core.config import settings

logger = logging.getLogger(__name__)


class CarServiceError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class CarService:
    def __init__(self, base_url: Optional[str] = None, session=None):
        self.base_url = (base_url or settings.API_URL).rstrip("/")
        # Anything with a requests-style .request() works, e.g. a test client
        self.session = session or requests.Session()

    def _request(self, method: str, path: str = "", payload: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, json=payload)
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise CarServiceError(f"Could not reach the catalog API: {e}") from e

        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = body.get("error") if isinstance(body, dict) else None
            logger.warning(f"{method} {url} -> {response.status_code}: {message}")
            raise CarServiceError(
                message or "An unexpected API error occurred.",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{method} {url} returned a body that is not JSON")
            raise CarServiceError(
                "Invalid response from the catalog API.",
                status_code=response.status_code,
            ) from e

    def get_all(self) -> List[Dict[str, Any]]:
        return self._request("GET")

    def get_by_id(self, car_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/{car_id}")

    def create(self, car_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", payload=car_data)

    def update(self, car_id: int, car_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/{car_id}", payload=car_data)

    def delete(self, car_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/{car_id}")
