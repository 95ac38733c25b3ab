"""Admission webhooks: defaulting and validation run before a resource is persisted."""

from otelop.webhook.admission import (
    AdmissionPipeline,
    AdmissionRequest,
    AdmissionResponse,
    AdmissionStage,
    DefaultingStage,
    Operation,
    ValidatingStage,
)

__all__ = [
    "AdmissionPipeline",
    "AdmissionRequest",
    "AdmissionResponse",
    "AdmissionStage",
    "DefaultingStage",
    "Operation",
    "ValidatingStage",
]
