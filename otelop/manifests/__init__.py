"""Manifest compilers for the resources managed by the operator.

Each compiler is a set of pure functions of ``(OperatorConfig, resource)``
returning fresh kubernetes client models; nothing is cached or mutated.
"""

from otelop.apis.k8s import serialize

__all__ = ["serialize"]
