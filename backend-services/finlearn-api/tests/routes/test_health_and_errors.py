# backend-services/finlearn-api/tests/routes/test_health_and_errors.py
"""
Health check, CORS and the JSON error shape for unknown routes, wrong methods
and unexpected exceptions.
"""
from unittest.mock import patch

import pytest


class TestHealth:

    def test_health(self, client):
        response = client.get('/api/health')
        assert response.status_code == 200
        data = response.json
        assert data["status"] == "ok"
        assert data["message"] == "FinLearn API is running"
        assert data["timestamp"].endswith("Z")
        assert data["version"]

    def test_cors_allows_frontend_origin(self, client):
        response = client.get('/api/health', headers={"Origin": "http://localhost:3000"})
        assert response.headers.get("Access-Control-Allow-Origin") == "http://localhost:3000"

    def test_cors_ignores_other_origins(self, client):
        response = client.get('/api/health', headers={"Origin": "http://evil.example"})
        assert "Access-Control-Allow-Origin" not in response.headers


class TestErrorShape:

    def test_unknown_route_is_json_404(self, client):
        response = client.get('/api/nothing-here')
        assert response.status_code == 404
        assert response.json == {"error": "Not Found"}

    def test_wrong_method_is_json_405(self, client):
        response = client.post('/api/health')
        assert response.status_code == 405
        assert response.json == {"error": "Method Not Allowed"}

    def test_unexpected_exception_is_500(self, client):
        with patch('app.lesson_service') as mock_service:
            mock_service.get_detail.side_effect = RuntimeError("secret detail")
            response = client.get('/api/lessons/pe-ratio')
        assert response.status_code == 500
        assert response.json == {"error": "Internal Server Error"}

    def test_development_mode_adds_message(self, client):
        with patch('app.APP_ENV', 'development'), patch('app.lesson_service') as mock_service:
            mock_service.list_categories.side_effect = RuntimeError("secret detail")
            response = client.get('/api/lessons/categories')
        assert response.status_code == 500
        assert response.json == {"error": "Internal Server Error", "message": "secret detail"}


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
