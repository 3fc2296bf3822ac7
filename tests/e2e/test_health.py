"""End-to-end tests for the health endpoint."""


def test_health_reports_build(api):
    response = api.client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert {"environment", "git_sha", "checked_at"} <= body.keys()
