"""
Spy Cat Agency console.
REST client for the spy cat backend - list, create, update and delete records.
"""

from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from util.logging import logger
from .schemas import (
    SpyCat,
    SpyCatCreateRequest,
    SpyCatSalaryUpdateRequest,
    SpyCatListResponse
)


class SpyCatsClientError(Exception):
    """Base exception for spy cat API failures."""

    def __init__(self, message: str, payload: Any = None):
        super().__init__(message)
        self.payload = payload


class ApiError(SpyCatsClientError):
    """Backend answered with a non-2xx status."""

    def __init__(self, status_code: int, payload: Any = None):
        super().__init__(f"Request failed with status {status_code}", payload)
        self.status_code = status_code


class ApiConnectionError(SpyCatsClientError):
    """Request never produced a response (connectivity, DNS, refused)."""
    pass


class SpyCatsClient:
    """
    Thin wrapper around the /api/cats endpoints.

    The base URL is injected at construction; nothing is read from the
    environment here.
    """

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def _url(self, cat_id: Optional[int] = None) -> str:
        if cat_id is None:
            return f"{self.base_url}/api/cats"
        return f"{self.base_url}/api/cats/{cat_id}"

    def _request(self, method: str, cat_id: Optional[int] = None, body: Dict[str, Any] = None) -> Any:
        """
        Issue one request and return the decoded success body.

        Raises:
            ApiConnectionError: when no response was received
            ApiError: when the status is outside 2xx
            SpyCatsClientError: when a success body is not JSON
        """
        url = self._url(cat_id)
        path = url[len(self.base_url):]

        try:
            if body is None:
                response = self.session.request(method, url)
            else:
                response = self.session.request(method, url, json=body)
        except requests.RequestException as e:
            logger.log_api_call(method, path, status="failed")
            raise ApiConnectionError(f"Could not reach spy cat backend: {e}") from e

        if not response.ok:
            logger.log_api_call(method, path, response.status_code, status="failed")
            raise ApiError(response.status_code, self._error_payload(response))

        logger.log_api_call(method, path, response.status_code)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise SpyCatsClientError(f"Unexpected response body: {e}", response.text) from e

    @staticmethod
    def _error_payload(response: requests.Response) -> Any:
        """Decode an error body: JSON when possible, raw text otherwise."""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def list_cats(self) -> List[SpyCat]:
        """GET /api/cats."""
        data = self._request("GET")
        try:
            return SpyCatListResponse(cats=data or []).cats
        except ValidationError as e:
            raise SpyCatsClientError(f"Unexpected spy cat list payload: {e}", data) from e

    def create_cat(self, payload: SpyCatCreateRequest) -> SpyCat:
        """POST /api/cats with all four fields."""
        data = self._request("POST", body=payload.model_dump())
        return self._parse_cat(data)

    def update_cat(self, cat_id: int, changes: Dict[str, Any]) -> SpyCat:
        """PATCH /api/cats/{id} with only the changed fields."""
        data = self._request("PATCH", cat_id, body=changes)
        return self._parse_cat(data)

    def update_salary(self, cat_id: int, salary: float) -> SpyCat:
        """PATCH /api/cats/{id} with {salary}."""
        request = SpyCatSalaryUpdateRequest(salary=salary)
        return self.update_cat(cat_id, request.model_dump())

    def delete_cat(self, cat_id: int) -> None:
        """DELETE /api/cats/{id}."""
        self._request("DELETE", cat_id)

    def close(self) -> None:
        self.session.close()

    @staticmethod
    def _parse_cat(data: Any) -> SpyCat:
        try:
            return SpyCat.model_validate(data)
        except ValidationError as e:
            raise SpyCatsClientError(f"Unexpected spy cat payload: {e}", data) from e
