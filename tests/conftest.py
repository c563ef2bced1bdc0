import concurrent.futures

import pytest
from fastapi.testclient import TestClient

from api.gateway import InferenceGateway
from api.main import app, get_gateway


class FakeJob:
    def __init__(self, reply=None, exc=None):
        self.reply = reply
        self.exc = exc
        self.cancelled = False

    def result(self, timeout=None):
        if self.exc is not None:
            raise self.exc
        return self.reply

    def cancel(self):
        self.cancelled = True
        return True


class FakeGradioClient:
    """Stands in for gradio_client.Client; records every submit."""

    def __init__(self, reply=None, exc=None):
        self.reply = reply
        self.exc = exc
        self.calls = []
        self.jobs = []
        self.connects = []

    def __call__(self, src, hf_token=None):
        self.connects.append((src, hf_token))
        return self

    def submit(self, *args, api_name=None):
        self.calls.append((args, api_name))
        job = FakeJob(self.reply, self.exc)
        self.jobs.append(job)
        return job


@pytest.fixture
def fake_upstream():
    return FakeGradioClient(reply=("## 4.75 Tons per Hectare",))


@pytest.fixture
def gateway(fake_upstream):
    return InferenceGateway(
        space="rockstar00/Odisha-Crop-Yield-Predictor",
        hf_token="hf_test",
        timeout=30,
        client_factory=fake_upstream,
    )


@pytest.fixture
def client(gateway):
    app.dependency_overrides[get_gateway] = lambda: gateway
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def timeout_error():
    return concurrent.futures.TimeoutError()


@pytest.fixture
def valid_body():
    return {"district": "Cuttack", "crop": "Rice", "season": "Kharif", "year": 2024, "area": "2.5"}


@pytest.fixture
def upstream_factory():
    return FakeGradioClient
