"""Shared fixtures for the cloud usage tests."""
import pytest

from cloudusage.config import Config
from cloudusage.ontap import ONTAPAPIClient

CLUSTER = "cluster1.example.com"
BASE_URL = f"https://{CLUSTER}/api"


@pytest.fixture
def config(tmp_path, monkeypatch):
    """A Config with credentials in the environment and no toml files."""
    monkeypatch.setenv("netapp_user", "admin")
    monkeypatch.setenv("netapp_pass", "secret")
    return Config(tmp_path / "config", tmp_path / "output", env_file=tmp_path / "missing.env")


@pytest.fixture
def client(config):
    return ONTAPAPIClient(CLUSTER, config)


class SizeStub:
    """Size resolver that records its calls."""

    def __init__(self, sizes=None, default="1.00 GiB"):
        self.sizes = sizes or {}
        self.default = default
        self.calls = []

    def __call__(self, container, identifier):
        self.calls.append((container, identifier))
        return self.sizes.get(identifier, self.default)


@pytest.fixture
def sizes():
    return SizeStub()
