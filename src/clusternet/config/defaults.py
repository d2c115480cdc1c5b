"""默认值常量"""

# 网络
DEFAULT_POD_CIDR = "10.244.0.0/16"
DEFAULT_SERVICE_CIDR = "10.96.0.0/12"
DEFAULT_CLUSTER_DOMAIN = "cluster.local"

# 网络提供者
PROVIDER_CALICO = "calico"
PROVIDER_KUBEROUTER = "kuberouter"
PROVIDER_CUSTOM = "custom"
DEFAULT_PROVIDER = PROVIDER_KUBEROUTER

# Calico
CALICO_DEFAULT_MODE = "vxlan"
CALICO_DEFAULT_OVERLAY = "Always"
CALICO_DEFAULT_VXLAN_PORT = 4789
CALICO_DEFAULT_VXLAN_VNI = 4096
CALICO_DEFAULT_MTU = 0
CALICO_DEFAULT_FLEX_VOLUME_DRIVER_PATH = "/usr/libexec/k0s/kubelet-plugins/volume/exec/nodeagent~uds"

# KubeRouter
KUBEROUTER_DEFAULT_MTU = 0
KUBEROUTER_DEFAULT_AUTO_MTU = True
KUBEROUTER_DEFAULT_METRICS_PORT = 8080
KUBEROUTER_DEFAULT_HAIRPIN = "Enabled"

# KubeProxy
KUBEPROXY_DEFAULT_MODE = "iptables"
KUBEPROXY_DEFAULT_METRICS_BIND_ADDRESS = "0.0.0.0:10249"
KUBEPROXY_DEFAULT_SYNC_PERIOD = "0s"

# 派生地址
DNS_ADDRESS_OFFSET = 10
DNS_ADDRESS_SMALL_BLOCK_OFFSET = 2
DNS_ADDRESS_SMALL_BLOCK_PREFIX = 29
INTERNAL_API_ADDRESS_INDEX = 1
