from fastapi.testclient import TestClient

from api.main import app, get_gateway


def test_home(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "running" in r.json()["message"]


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_predict_success(client, valid_body):
    r = client.post("/api/predict-yield", json=valid_body)
    assert r.status_code == 200
    assert r.json() == {"predictedYield": 4.75, "message": "Prediction successful"}


def test_method_not_allowed(client):
    r = client.get("/api/predict-yield")
    assert r.status_code == 405
    assert r.json() == {"message": "Method Not Allowed"}


def test_missing_field(client, valid_body):
    body = dict(valid_body)
    del body["district"]
    r = client.post("/api/predict-yield", json=body)
    assert r.status_code == 400
    assert r.json()["message"].startswith("Missing or invalid parameters")


def test_invalid_json(client):
    r = client.post(
        "/api/predict-yield", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert r.status_code == 400
    assert r.json()["message"].startswith("Missing or invalid parameters")


def test_upstream_error_string(client, fake_upstream, valid_body):
    fake_upstream.reply = ("Error: district not found",)
    r = client.post("/api/predict-yield", json=valid_body)
    assert r.status_code == 400
    assert r.json() == {"message": "Error: district not found"}


def test_unparsable_reply(client, fake_upstream, valid_body):
    fake_upstream.reply = ("no data",)
    r = client.post("/api/predict-yield", json=valid_body)
    assert r.status_code == 500
    assert r.json() == {"message": "Could not parse yield from server response."}


def test_invalid_number(client, fake_upstream, valid_body):
    fake_upstream.reply = ("## " + "9" * 400 + " Tons per Hectare",)
    r = client.post("/api/predict-yield", json=valid_body)
    assert r.status_code == 500
    assert r.json() == {"message": "Prediction returned an invalid number."}


def test_transport_failure(client, fake_upstream, valid_body):
    fake_upstream.exc = OSError("Name or service not known")
    r = client.post("/api/predict-yield", json=valid_body)
    assert r.status_code == 500
    assert r.json() == {"message": "Internal Server Error", "error": "Name or service not known"}


def test_timeout(client, fake_upstream, valid_body, timeout_error):
    fake_upstream.exc = timeout_error
    r = client.post("/api/predict-yield", json=valid_body)
    assert r.status_code == 504
    assert r.json()["message"] == "Prediction service timed out."


def test_unexpected_gateway_error(client, gateway, valid_body, monkeypatch):
    def boom(req):
        raise KeyError("data")

    monkeypatch.setattr(gateway, "predict_yield", boom)
    r = client.post("/api/predict-yield", json=valid_body)
    assert r.status_code == 500
    assert r.json()["message"] == "Internal Server Error"
    assert "data" in r.json()["error"]


def test_token_never_in_response(client, valid_body):
    r = client.post("/api/predict-yield", json=valid_body)
    assert "hf_test" not in r.text


def test_boolean_fields_rejected(client, fake_upstream, valid_body):
    r = client.post("/api/predict-yield", json={**valid_body, "year": True, "area": True})
    assert r.status_code == 400
    assert fake_upstream.calls == []


def test_unexpected_error_outside_gateway(gateway, valid_body, monkeypatch):
    def broken(payload):
        raise RuntimeError("validator exploded")

    monkeypatch.setattr("api.main.validate_request", broken)
    app.dependency_overrides[get_gateway] = lambda: gateway
    try:
        with TestClient(app, raise_server_exceptions=False) as c:
            r = c.post("/api/predict-yield", json=valid_body)
    finally:
        app.dependency_overrides.clear()
    assert r.status_code == 500
    assert r.json() == {"message": "Internal Server Error", "error": "validator exploded"}


def test_error_contract_in_openapi(client):
    responses = client.get("/openapi.json").json()["paths"]["/api/predict-yield"]["post"]["responses"]
    for code in ("400", "405", "500", "504"):
        schema = responses[code]["content"]["application/json"]["schema"]
        assert schema["$ref"].endswith("/ErrorResponse")
