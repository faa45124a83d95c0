"""Unit tests for the binding API routes."""

import pytest
from fastapi.testclient import TestClient

from template_binder.core.config import Settings
from template_binder.main import create_app


@pytest.fixture
def client(settings):
    """Test client for an app built with temporary settings."""
    return TestClient(create_app(settings))


class TestHealth:
    """Test suite for the health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestResumeSchemaRoute:
    """Test suite for GET /resume/schema."""

    def test_returns_builtin_schema(self, client):
        response = client.get("/resume/schema")

        assert response.status_code == 200
        body = response.json()
        assert body["workExperience"]["type"] == "array"
        assert body["email"]["type"] == "string"


class TestTemplateTokensRoute:
    """Test suite for POST /templates/tokens."""

    def test_lists_tokens_with_context(self, client, resume_template_html):
        response = client.post("/templates/tokens", json={"html": resume_template_html})

        assert response.status_code == 200
        entries = {entry["token"]: entry["context"] for entry in response.json()}
        assert "{{fullName}}" in entries
        assert entries["{{fullName}}"]["html_tag"] == "h1"
        assert entries["{{jobTitle}}"]["in_repeated_block"] is True
        assert entries["{{jobTitle}}"]["section"] == "workExperience"

    def test_empty_html(self, client):
        response = client.post("/templates/tokens", json={})

        assert response.status_code == 200
        assert response.json() == []


class TestSuggestBindingsRoute:
    """Test suite for POST /templates/suggest-bindings."""

    def test_uses_builtin_schema_by_default(self, client, resume_template_html):
        response = client.post(
            "/templates/suggest-bindings", json={"html": resume_template_html}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["[[FIELD:email]]"][0]["field_path"] == "email"
        for ranked in body.values():
            assert len(ranked) <= 5
            assert all(s["confidence"] > 0.1 for s in ranked)

    def test_custom_schema_and_existing_bindings(self, client):
        payload = {
            "html": '<h1>{{fullName}}</h1><a href="#">{{email}}</a>',
            "resumeSchema": {
                "email": {"type": "string"},
                "personalInfo": {
                    "type": "object",
                    "properties": {"fullName": {"type": "string", "title": "Full Name"}},
                },
            },
            "existingBindings": [
                {"id": 1, "templateId": 7, "placeholderToken": "{{email}}", "dataField": "email"}
            ],
        }
        response = client.post("/templates/suggest-bindings", json=payload)

        assert response.status_code == 200
        body = response.json()
        assert "{{email}}" not in body
        assert body["{{fullName}}"][0]["field_path"] == "personalInfo.fullName"

    def test_no_tokens(self, client):
        response = client.post("/templates/suggest-bindings", json={"html": "<p>Static</p>"})

        assert response.status_code == 200
        assert response.json() == {}

    def test_invalid_binding_rejected(self, client):
        response = client.post(
            "/templates/suggest-bindings",
            json={"html": "{{email}}", "existingBindings": [{"dataField": "email"}]},
        )

        assert response.status_code == 422
        assert response.json()["detail"] == "Validation error"

    def test_misconfigured_suggester(self, tmp_path):
        settings = Settings(log_dir=tmp_path / "logs", suggester_type="unknown")
        client = TestClient(create_app(settings))

        response = client.post("/templates/suggest-bindings", json={"html": "{{email}}"})

        assert response.status_code == 500
        assert response.json()["detail"] == "Binding suggester is misconfigured"
