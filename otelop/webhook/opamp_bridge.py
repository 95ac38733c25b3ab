"""Admission hooks for OpAMPBridge resources."""

from otelop.apis.common import UpgradeStrategy
from otelop.apis.opamp_bridge import OpAMPBridge
from otelop.common.exceptions import InvalidResourceError
from otelop.logger import init_logger
from otelop.manifests.constants import ManifestConstants
from otelop.webhook.admission import AdmissionPipeline, DefaultingStage, ValidatingStage
from otelop.webhook.validation import is_valid_port_name, is_valid_port_num

logger = init_logger(__name__)


def default(bridge: OpAMPBridge) -> OpAMPBridge:
    """Return a copy of ``bridge`` with unset fields filled in. Idempotent."""
    logger.info(f"default name={bridge.name}")
    result = bridge.model_copy(deep=True)

    if result.spec.upgrade_strategy is None:
        result.spec.upgrade_strategy = UpgradeStrategy.AUTOMATIC

    if result.metadata.labels is None:
        result.metadata.labels = {}
    if not result.metadata.labels.get(ManifestConstants.LABEL_MANAGED_BY):
        result.metadata.labels[ManifestConstants.LABEL_MANAGED_BY] = ManifestConstants.MANAGED_BY

    if result.spec.replicas is None:
        result.spec.replicas = 1

    return result


def validate_create(bridge: OpAMPBridge) -> None:
    """Reject a new bridge whose spec cannot work.

    Raises:
        InvalidResourceError: On the first failing check; ``field`` names it
    """
    logger.info(f"validate create name={bridge.name}")
    spec = bridge.spec

    if not spec.endpoint.strip():
        raise InvalidResourceError("the OpAMP server endpoint is not specified", field="spec.endpoint")

    if not spec.protocol.strip():
        raise InvalidResourceError(
            "the transport for OpAMP server protocol is not specified", field="spec.protocol"
        )

    if not spec.capabilities:
        raise InvalidResourceError(
            "the capabilities supported by OpAMP Bridge are not specified", field="spec.capabilities"
        )

    for port in spec.ports or []:
        name_errors = is_valid_port_name(port.name)
        num_errors = is_valid_port_num(port.port)
        if name_errors or num_errors:
            raise InvalidResourceError(
                f"the OpAMPBridge Spec Ports configuration is incorrect, "
                f"port name '{port.name}' errors: {name_errors}, num '{port.port}' errors: {num_errors}",
                field="spec.ports",
            )


def validate_update(old: OpAMPBridge | None, new: OpAMPBridge) -> None:
    # updates are admitted without re-validating the resource
    logger.info(f"validate update name={new.name}")


def validate_delete(bridge: OpAMPBridge) -> None:
    logger.info(f"validate delete name={bridge.name}")


def pipeline() -> AdmissionPipeline:
    return AdmissionPipeline(
        [
            DefaultingStage(default),
            ValidatingStage(create=validate_create, update=validate_update, delete=validate_delete),
        ]
    )
