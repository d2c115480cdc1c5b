"""Tests for the defaulting step."""

from clusternet.core.models import (
    CalicoConfig,
    CustomProvider,
    KubeProxyIPTablesConfig,
    KubeProxyIPVSConfig,
    KubeRouterConfig,
    NetworkDocument,
)
from clusternet.loader import load_network
from clusternet.network import apply_defaults, default_network


class TestDefaultNetwork:
    """Tests for the brand-new default configuration."""

    def test_default_values(self) -> None:
        config = default_network()
        assert config.pod_cidr == "10.244.0.0/16"
        assert config.service_cidr == "10.96.0.0/12"
        assert config.cluster_domain == "cluster.local"
        assert config.provider == "kuberouter"
        assert config.kuberouter == KubeRouterConfig()
        assert config.calico is None
        assert config.dual_stack.enabled is False
        assert config.kube_proxy.mode == "iptables"
        assert config.kube_proxy.iptables is not None
        assert config.kube_proxy.ipvs is not None


class TestApplyDefaults:
    """Tests for filling a partially populated document."""

    def test_missing_provider_becomes_kuberouter(self) -> None:
        config = apply_defaults(NetworkDocument())
        assert config.provider == "kuberouter"
        assert isinstance(config.provider_settings, KubeRouterConfig)

    def test_explicit_empty_provider_is_kept(self) -> None:
        config = load_network({"provider": ""})
        assert config.provider == ""
        assert isinstance(config.provider_settings, CustomProvider)

    def test_null_provider_is_treated_as_unset(self) -> None:
        config = load_network({"provider": None})
        assert config.provider == "kuberouter"

    def test_calico_without_block_gets_default_calico(self) -> None:
        config = load_network({"provider": "calico"})
        assert config.calico == CalicoConfig()
        assert config.calico.mode == "vxlan"
        assert config.kuberouter is None

    def test_kuberouter_without_block_gets_default_kuberouter(self) -> None:
        config = load_network({"provider": "kuberouter"})
        assert config.kuberouter == KubeRouterConfig()
        assert config.calico is None

    def test_calico_block_is_kept(self) -> None:
        config = load_network({"provider": "calico", "calico": {"mode": "bird", "mtu": 1450}})
        assert config.calico.mode == "bird"
        assert config.calico.mtu == 1450
        assert config.calico.vxlan_port == 4789

    def test_inactive_provider_block_is_dropped(self) -> None:
        config = load_network({
            "provider": "calico",
            "calico": {"mode": "ipip"},
            "kuberouter": {"mtu": 1400},
        })
        assert config.calico.mode == "ipip"
        assert config.kuberouter is None

    def test_custom_provider_has_no_provider_block(self) -> None:
        config = load_network({"provider": "custom", "calico": {"mode": "bird"}})
        assert config.provider == "custom"
        assert config.calico is None
        assert config.kuberouter is None
        assert config.is_custom_provider

    def test_missing_kube_proxy_gets_full_default(self) -> None:
        config = load_network({})
        assert config.kube_proxy.mode == "iptables"
        assert config.kube_proxy.iptables == KubeProxyIPTablesConfig()
        assert config.kube_proxy.ipvs == KubeProxyIPVSConfig()

    def test_kube_proxy_sub_configs_filled_independently(self) -> None:
        config = load_network({
            "kubeProxy": {"mode": "ipvs", "ipvs": {"scheduler": "rr", "strictARP": True}},
        })
        assert config.kube_proxy.mode == "ipvs"
        assert config.kube_proxy.ipvs.scheduler == "rr"
        assert config.kube_proxy.ipvs.strict_arp is True
        assert config.kube_proxy.iptables == KubeProxyIPTablesConfig()

        config = load_network({"kubeProxy": {"iptables": {"masqueradeAll": True}}})
        assert config.kube_proxy.iptables.masquerade_all is True
        assert config.kube_proxy.ipvs == KubeProxyIPVSConfig()
        assert config.kube_proxy.mode == "iptables"

    def test_addresses_are_not_defaulted(self) -> None:
        config = load_network({"provider": "kuberouter"})
        assert config.pod_cidr == ""
        assert config.service_cidr == ""
        assert config.cluster_domain == ""
        assert config.dual_stack.enabled is False
