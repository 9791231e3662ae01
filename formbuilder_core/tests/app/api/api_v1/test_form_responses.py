"""
Tests for the response endpoints under /api/forms.
"""

from fastapi.testclient import TestClient

from formbuilder_core.app.config import settings
from formbuilder_core.tests.utils.utils import random_title, sample_fields

FORMS_URL = f"{settings.API_STR}/forms"


def _create_form(client: TestClient) -> int:
    r = client.post(FORMS_URL, json={"title": random_title(), "fields": sample_fields()})
    assert r.status_code == 201, r.json()
    return r.json()["formId"]


def _submit(client: TestClient, form_id: int, **payload) -> dict:
    r = client.post(f"{FORMS_URL}/{form_id}/responses", json=payload)
    assert r.status_code == 201, r.json()
    return r.json()


def test_submit_response(client: TestClient) -> None:
    form_id = _create_form(client)

    data = _submit(client, form_id, responses={"Color": "Red"})

    assert data["success"] is True
    assert data["message"] == "Response submitted successfully"
    response = data["response"]
    assert data["responseId"] == response["id"]
    assert response["form_id"] == form_id
    assert response["respondent_name"] == "Anonymous"
    assert response["respondent_email"] is None
    assert "submitted_at" in response


def test_submit_response_to_missing_form(client: TestClient) -> None:
    r = client.post(f"{FORMS_URL}/99999999/responses", json={"responses": {"a": "b"}})
    assert r.status_code == 404
    assert r.json() == {"success": False, "error": "Form not found"}


def test_list_responses(client: TestClient) -> None:
    form_id = _create_form(client)
    first = _submit(client, form_id, responses={"Color": "Red"})["responseId"]
    second = _submit(
        client,
        form_id,
        respondent_name="Ada",
        respondent_email="ada@example.com",
        responses={"Name": "Ada", "Subscribe": True, "Color": "Blue"},
    )["responseId"]

    r = client.get(f"{FORMS_URL}/{form_id}/responses")
    assert r.status_code == 200
    data = r.json()
    assert data["success"] is True
    assert data["count"] == 2
    newest, oldest = data["responses"]
    assert newest["response_id"] == second
    assert newest["respondent_name"] == "Ada"
    assert newest["respondent_email"] == "ada@example.com"
    assert newest["response_data"] == [
        {"field_label": "Name", "field_value": "Ada"},
        {"field_label": "Subscribe", "field_value": "true"},
        {"field_label": "Color", "field_value": "Blue"},
    ]
    assert oldest["response_id"] == first
    assert oldest["response_data"] == [{"field_label": "Color", "field_value": "Red"}]


def test_list_responses_shows_response_count(client: TestClient) -> None:
    form_id = _create_form(client)
    _submit(client, form_id, responses={"Color": "Red"})
    _submit(client, form_id)

    forms = client.get(FORMS_URL, params={"limit": 1}).json()["forms"]
    assert forms[0]["id"] == form_id
    assert forms[0]["response_count"] == 2


def test_list_responses_of_unknown_form(client: TestClient) -> None:
    r = client.get(f"{FORMS_URL}/99999999/responses")
    assert r.status_code == 200
    assert r.json() == {"success": True, "responses": [], "count": 0}


def test_get_response(client: TestClient) -> None:
    form_id = _create_form(client)
    title = client.get(f"{FORMS_URL}/{form_id}").json()["form"]["title"]
    response_id = _submit(
        client, form_id, respondent_name="Bob", responses={"Agree": False}
    )["responseId"]

    r = client.get(f"{FORMS_URL}/responses/{response_id}")
    assert r.status_code == 200
    response = r.json()["response"]
    assert response["id"] == response_id
    assert response["form_id"] == form_id
    assert response["form_title"] == title
    assert response["respondent_name"] == "Bob"
    assert response["response_data"] == [
        {"field_label": "Agree", "field_value": "false"}
    ]


def test_numbers_are_stored_as_text(client: TestClient) -> None:
    form_id = _create_form(client)
    response_id = _submit(
        client, form_id, responses={"Whole": 1.0, "Half": 0.5, "Count": 36}
    )["responseId"]

    r = client.get(f"{FORMS_URL}/responses/{response_id}")
    assert r.json()["response"]["response_data"] == [
        {"field_label": "Whole", "field_value": "1"},
        {"field_label": "Half", "field_value": "0.5"},
        {"field_label": "Count", "field_value": "36"},
    ]


def test_get_response_not_found(client: TestClient) -> None:
    r = client.get(f"{FORMS_URL}/responses/99999999")
    assert r.status_code == 404
    assert r.json() == {"success": False, "error": "Response not found"}


def test_deleting_form_removes_responses(client: TestClient) -> None:
    form_id = _create_form(client)
    response_id = _submit(client, form_id, responses={"Color": "Red"})["responseId"]

    assert client.delete(f"{FORMS_URL}/{form_id}").status_code == 200

    r = client.get(f"{FORMS_URL}/{form_id}/responses")
    assert r.json()["responses"] == []
    assert client.get(f"{FORMS_URL}/responses/{response_id}").status_code == 404
