"""API tests package (TestClient, HTTP status codes and payloads)."""
