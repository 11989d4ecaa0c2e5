import grpc
import pytest
from fastapi.testclient import TestClient

from app.core import config
from app.core.deps import get_registry
from app.main import app
from app.registry.registry import Registry
from app.registry.seed import seed_registry
from app.rpc.client import AcademicClient
from app.rpc.server import build_server


@pytest.fixture()
def registry():
    """A fresh, empty registry for each test."""
    return Registry()


@pytest.fixture()
def seeded_registry(registry):
    seed_registry(registry)
    return registry


@pytest.fixture()
def client(registry, monkeypatch):
    """Test client whose routes and GraphQL resolvers use the test registry."""
    monkeypatch.setattr(config, "RPC_ENABLED", False)
    monkeypatch.setattr(config, "SEED_FIXTURES", False)

    app.dependency_overrides[get_registry] = lambda: registry
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def rpc_client(registry):
    """gRPC client talking to an in-process server on an ephemeral port."""
    server, port = build_server(registry, "127.0.0.1:0", max_workers=4)
    server.start()
    channel = grpc.insecure_channel(f"127.0.0.1:{port}")
    try:
        yield AcademicClient(channel)
    finally:
        channel.close()
        server.stop(grace=None)


@pytest.fixture()
def course(registry):
    return registry.create_course(code="IF101", title="Dasar Pemrograman", credit_weight=3)


@pytest.fixture()
def learner(registry):
    return registry.create_learner(
        registration_number="2023001",
        name="Adi Nugraha",
        department="Teknik Informatika",
    )
