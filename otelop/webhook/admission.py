"""Admission pipeline: ordered defaulting and validating stages.

A resource entering the cluster goes through every stage in list order. The
defaulting stage always precedes the validating stage, so validators see the
defaulted resource.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from otelop._codes import codes
from otelop.common.exceptions import OperatorException, raise_for_code
from otelop.logger import init_logger

logger = init_logger(__name__)


class Operation(str, Enum):
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


@dataclass(frozen=True)
class AdmissionRequest:
    operation: Operation
    obj: Any
    old_obj: Any = None


@dataclass(frozen=True)
class AdmissionResponse:
    allowed: bool
    obj: Any
    code: codes = codes.OK
    message: str = ""

    def raise_for_status(self) -> None:
        raise_for_code(self.code, self.message)


class AdmissionStage:
    """One step of the pipeline; returns the (possibly new) object to hand on."""

    name: str = "stage"

    def __call__(self, request: AdmissionRequest) -> Any:
        raise NotImplementedError


class DefaultingStage(AdmissionStage):
    name = "default"

    def __init__(self, defaulter: Callable[[Any], Any]):
        self._defaulter = defaulter

    def __call__(self, request: AdmissionRequest) -> Any:
        # mutating webhooks are registered for create and update only
        if request.operation == Operation.DELETE:
            return request.obj
        return self._defaulter(request.obj)


class ValidatingStage(AdmissionStage):
    name = "validate"

    def __init__(
        self,
        create: Callable[[Any], None],
        update: Callable[[Any, Any], None],
        delete: Callable[[Any], None],
    ):
        self._create = create
        self._update = update
        self._delete = delete

    def __call__(self, request: AdmissionRequest) -> Any:
        if request.operation == Operation.CREATE:
            self._create(request.obj)
        elif request.operation == Operation.UPDATE:
            self._update(request.old_obj, request.obj)
        else:
            self._delete(request.obj)
        return request.obj


class AdmissionPipeline:
    def __init__(self, stages: list[AdmissionStage]):
        self._stages = list(stages)

    @property
    def stage_names(self) -> list[str]:
        return [stage.name for stage in self._stages]

    def admit(self, request: AdmissionRequest) -> AdmissionResponse:
        """Run every stage in order; the first operator error denies the request."""
        obj = request.obj
        for stage in self._stages:
            try:
                obj = stage(AdmissionRequest(operation=request.operation, obj=obj, old_obj=request.old_obj))
            except OperatorException as e:
                logger.info(f"admission denied by {stage.name} stage: {e}")
                code = e.code if e.code is not None else codes.INVALID_RESOURCE
                return AdmissionResponse(allowed=False, obj=request.obj, code=code, message=str(e))
        return AdmissionResponse(allowed=True, obj=obj)
