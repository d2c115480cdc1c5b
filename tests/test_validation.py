"""Tests for network validation."""

import pytest

from clusternet.core.errors import ErrorType, NetworkValidationError
from clusternet.core.models import (
    CalicoConfig,
    CustomProvider,
    DualStack,
    KubeProxyConfig,
    NetworkConfig,
)
from clusternet.loader import load_network
from clusternet.network import ensure_valid, is_dns_name, validate_network


def _paths(errors):
    return [str(e.path) for e in errors]


class TestValidateNetwork:
    """Tests for validate_network."""

    def test_default_network_is_valid(self, network: NetworkConfig) -> None:
        assert validate_network(network) == []

    def test_none_is_valid(self) -> None:
        assert validate_network(None) == []

    def test_empty_provider_is_required(self, network: NetworkConfig) -> None:
        config = network.model_copy(update={"provider_settings": CustomProvider(name="")})
        errors = validate_network(config)
        assert len(errors) == 1
        assert errors[0].path == "provider"
        assert errors[0].type == ErrorType.REQUIRED

    @pytest.mark.parametrize("provider", ["flannel", "Calico", "weave", "cilium"])
    def test_unknown_provider_not_supported(self, network: NetworkConfig, provider: str) -> None:
        config = network.model_copy(update={"provider_settings": CustomProvider(name=provider)})
        errors = validate_network(config)
        assert len(errors) == 1
        assert errors[0].path == "provider"
        assert errors[0].type == ErrorType.NOT_SUPPORTED
        assert errors[0].value == provider
        assert '"kuberouter", "calico", "custom"' in errors[0].detail

    @pytest.mark.parametrize("provider", ["calico", "kuberouter", "custom"])
    def test_supported_providers(self, provider: str) -> None:
        config = load_network({
            "provider": provider,
            "podCIDR": "10.244.0.0/16",
            "serviceCIDR": "10.96.0.0/12",
            "clusterDomain": "cluster.local",
        })
        assert validate_network(config) == []

    def test_invalid_cidrs(self, network: NetworkConfig) -> None:
        config = network.model_copy(update={"pod_cidr": "10.244.0.0", "service_cidr": "nope"})
        errors = validate_network(config)
        assert _paths(errors) == ["podCIDR", "serviceCIDR"]
        assert all(e.type == ErrorType.INVALID for e in errors)
        assert errors[0].value == "10.244.0.0"
        assert errors[0].detail == "invalid CIDR address"

    def test_cidr_with_host_bits_is_valid(self, network: NetworkConfig) -> None:
        config = network.model_copy(update={"service_cidr": "10.96.0.1/12"})
        assert validate_network(config) == []

    def test_invalid_cluster_domain(self, network: NetworkConfig) -> None:
        config = network.model_copy(update={"cluster_domain": "bad domain!"})
        errors = validate_network(config)
        assert _paths(errors) == ["clusterDomain"]
        assert errors[0].detail == "invalid DNS name"

    def test_errors_are_collected_in_order(self) -> None:
        config = load_network({
            "provider": "",
            "dualStack": {"enabled": True},
            "kubeProxy": {"mode": "nftables"},
        })
        errors = validate_network(config)
        assert _paths(errors) == [
            "provider",
            "podCIDR",
            "serviceCIDR",
            "clusterDomain",
            "dualStack.IPv6podCIDR",
            "dualStack.IPv6serviceCIDR",
            "kubeProxy.mode",
        ]
        assert [e.type for e in errors] == [
            ErrorType.REQUIRED,
            ErrorType.INVALID,
            ErrorType.INVALID,
            ErrorType.INVALID,
            ErrorType.INVALID,
            ErrorType.INVALID,
            ErrorType.NOT_SUPPORTED,
        ]

    def test_dual_stack_cidrs_ignored_when_disabled(self, network: NetworkConfig) -> None:
        config = network.model_copy(update={
            "dual_stack": DualStack(enabled=False, ipv6_pod_cidr="junk")
        })
        assert validate_network(config) == []

    def test_dual_stack_valid(self, dual_stack_network: NetworkConfig) -> None:
        assert validate_network(dual_stack_network) == []


class TestDualStackCalico:
    """Tests for the calico mode restriction under dual-stack."""

    def _config(self, dual_stack_network: NetworkConfig, mode: str) -> NetworkConfig:
        return dual_stack_network.model_copy(update={"provider_settings": CalicoConfig(mode=mode)})

    def test_vxlan_mode_forbidden(self, dual_stack_network: NetworkConfig) -> None:
        errors = validate_network(self._config(dual_stack_network, "vxlan"))
        assert len(errors) == 1
        assert errors[0].path == "calico.mode"
        assert errors[0].type == ErrorType.FORBIDDEN
        assert "bird" in errors[0].detail

    def test_bird_mode_allowed(self, dual_stack_network: NetworkConfig) -> None:
        assert validate_network(self._config(dual_stack_network, "bird")) == []

    def test_single_stack_vxlan_allowed(self, network: NetworkConfig) -> None:
        config = network.model_copy(update={"provider_settings": CalicoConfig(mode="vxlan")})
        assert validate_network(config) == []


class TestKubeProxyValidation:
    """Tests for kube-proxy validation delegated from the network."""

    def test_unsupported_mode(self, network: NetworkConfig) -> None:
        config = network.model_copy(update={"kube_proxy": KubeProxyConfig(mode="nftables")})
        errors = validate_network(config)
        assert _paths(errors) == ["kubeProxy.mode"]
        assert errors[0].type == ErrorType.NOT_SUPPORTED

    def test_disabled_skips_checks(self, network: NetworkConfig) -> None:
        config = network.model_copy(update={
            "kube_proxy": KubeProxyConfig(disabled=True, mode="nftables")
        })
        assert validate_network(config) == []

    @pytest.mark.parametrize("mode", ["iptables", "ipvs", "userspace"])
    def test_supported_modes(self, mode: str) -> None:
        assert KubeProxyConfig(mode=mode).validate_config() == []


class TestEnsureValid:
    """Tests for ensure_valid."""

    def test_returns_config(self, network: NetworkConfig) -> None:
        assert ensure_valid(network) is network

    def test_raises_with_all_errors(self, network: NetworkConfig) -> None:
        config = network.model_copy(update={"pod_cidr": "x", "service_cidr": "y"})
        with pytest.raises(NetworkValidationError) as exc_info:
            ensure_valid(config)
        assert len(exc_info.value.errors) == 2
        assert 'podCIDR: Invalid value: "x": invalid CIDR address' in str(exc_info.value)


class TestIsDNSName:
    """Tests for is_dns_name."""

    @pytest.mark.parametrize("name", ["cluster.local", "example.com.", "k8s_internal", "a-b.c"])
    def test_valid(self, name: str) -> None:
        assert is_dns_name(name)

    @pytest.mark.parametrize(
        "name", ["", "-leading.dash", "has space", "10.0.0.1", "::1", "a..b", "a" * 64, "cluster.local\n"]
    )
    def test_invalid(self, name: str) -> None:
        assert not is_dns_name(name)
