"""Shared fixtures for network configuration tests."""

import pytest

from clusternet.core.models import DualStack, NetworkConfig
from clusternet.network import default_network


@pytest.fixture
def network() -> NetworkConfig:
    return default_network()


@pytest.fixture
def dual_stack_network(network: NetworkConfig) -> NetworkConfig:
    return network.model_copy(update={
        "dual_stack": DualStack(
            enabled=True,
            ipv6_pod_cidr="fd00::/108",
            ipv6_service_cidr="fd01::/108",
        )
    })
