from typing import Any, Dict, List, Mapping, Optional

import requests

JSON = Dict[str, Any]


class FormsApiError(Exception):
    def __init__(
        self, status_code: int, error: str, message: Optional[str] = None
    ) -> None:
        super().__init__(f"{status_code} {error}" + (f": {message}" if message else ""))
        self.status_code = status_code
        self.error = error
        self.message = message


class FormsClient(object):
    """
    Thin client for the forms HTTP API.

    `session` is anything with the `requests.Session` call interface, which
    includes FastAPI's `TestClient`. Every method returns the decoded JSON
    body of a successful call and raises `FormsApiError` otherwise.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000/api",
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, **kwargs: Any) -> JSON:
        if self.timeout is not None and isinstance(self.session, requests.Session):
            kwargs.setdefault("timeout", self.timeout)
        r = self.session.request(method, f"{self.base_url}{path}", **kwargs)
        try:
            body = r.json()
        except ValueError:
            body = {}
        if r.status_code >= 400:
            raise FormsApiError(
                r.status_code, body.get("error") or str(r.status_code), body.get("message")
            )
        return body

    def health(self) -> JSON:
        return self._request("GET", "/health")

    def list_forms(self, limit: int = 10, offset: int = 0) -> JSON:
        return self._request(
            "GET", "/forms", params={"limit": limit, "offset": offset}
        )

    def get_form(self, form_id: int) -> JSON:
        return self._request("GET", f"/forms/{form_id}")

    def create_form(
        self,
        title: str,
        description: str = "",
        fields: Optional[List[Mapping[str, Any]]] = None,
    ) -> JSON:
        return self._request(
            "POST",
            "/forms",
            json={"title": title, "description": description, "fields": fields or []},
        )

    def update_form(
        self,
        form_id: int,
        title: str,
        description: str = "",
        fields: Optional[List[Mapping[str, Any]]] = None,
    ) -> JSON:
        # The server replaces the whole field list, so send all of it
        return self._request(
            "PUT",
            f"/forms/{form_id}",
            json={"title": title, "description": description, "fields": fields or []},
        )

    def delete_form(self, form_id: int) -> JSON:
        return self._request("DELETE", f"/forms/{form_id}")

    def submit_response(
        self,
        form_id: int,
        responses: Mapping[str, Any],
        respondent_name: Optional[str] = None,
        respondent_email: Optional[str] = None,
    ) -> JSON:
        payload: JSON = {"responses": dict(responses)}
        if respondent_name is not None:
            payload["respondent_name"] = respondent_name
        if respondent_email is not None:
            payload["respondent_email"] = respondent_email
        return self._request("POST", f"/forms/{form_id}/responses", json=payload)

    def list_responses(self, form_id: int) -> JSON:
        return self._request("GET", f"/forms/{form_id}/responses")

    def get_response(self, response_id: int) -> JSON:
        return self._request("GET", f"/forms/responses/{response_id}")
