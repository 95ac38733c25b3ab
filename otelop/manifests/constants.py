"""Label and annotation keys stamped on compiled manifests."""


class ManifestConstants:
    """Constants shared by the bridge, collector and target allocator builders."""

    # Identity label keys
    LABEL_COMPONENT = "app.kubernetes.io/component"
    LABEL_INSTANCE = "app.kubernetes.io/instance"
    LABEL_MANAGED_BY = "app.kubernetes.io/managed-by"
    LABEL_PART_OF = "app.kubernetes.io/part-of"
    LABEL_VERSION = "app.kubernetes.io/version"
    LABEL_NAME = "app.kubernetes.io/name"

    # Identity label values
    MANAGED_BY = "opentelemetry-operator"
    PART_OF = "opentelemetry"
    DEFAULT_VERSION = "latest"

    # Component names
    COMPONENT_COLLECTOR = "opentelemetry-collector"
    COMPONENT_TARGET_ALLOCATOR = "opentelemetry-targetallocator"
    COMPONENT_OPAMP_BRIDGE = "opentelemetry-opamp-bridge"

    # Annotation keys
    ANNOTATION_CONFIG_SHA = "opentelemetry-operator-config/sha256"
    ANNOTATION_TA_CONFIG_HASH = "opentelemetry-targetallocator-config/hash"
    ANNOTATION_PROMETHEUS_SCRAPE = "prometheus.io/scrape"
    ANNOTATION_PROMETHEUS_PORT = "prometheus.io/port"
    ANNOTATION_PROMETHEUS_PATH = "prometheus.io/path"

    # DNS policies
    DNS_CLUSTER_FIRST = "ClusterFirst"
    DNS_CLUSTER_FIRST_WITH_HOST_NET = "ClusterFirstWithHostNet"

    # Mount point of every operator-generated ConfigMap
    CONFIG_MOUNT_PATH = "/conf"

    # ConfigMap data keys
    COLLECTOR_CONFIG_KEY = "collector.yaml"
    TARGET_ALLOCATOR_CONFIG_KEY = "targetallocator.yaml"
    OPAMP_BRIDGE_CONFIG_KEY = "remoteconfiguration.yaml"

    COLLECTOR_METRICS_PORT = 8888
    TARGET_ALLOCATOR_HTTP_PORT = 8080
