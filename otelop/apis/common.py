from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

API_GROUP = "opentelemetry.io"
API_VERSION = f"{API_GROUP}/v1alpha1"


class UpgradeStrategy(str, Enum):
    AUTOMATIC = "automatic"
    NONE = "none"


class ResourceModel(BaseModel):
    """Base for custom resource schemas.

    Fields are snake_case in Python and camelCase on the wire, matching the
    CRD. Nested Kubernetes types are kubernetes client models, see
    ``otelop.apis.k8s``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="ignore",
    )


class ObjectMeta(ResourceModel):
    name: str
    namespace: str = ""
    labels: dict[str, str] | None = None
    annotations: dict[str, str] | None = None


class CustomResource(ResourceModel):
    api_version: str = API_VERSION
    kind: str
    metadata: ObjectMeta

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    def to_dict(self) -> dict:
        """Render the resource back into its camelCase API form."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
