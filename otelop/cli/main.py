#!/usr/bin/env python3
"""
otelop CLI
Compile custom resources into manifests and run them through admission
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from otelop import OperatorException, apis
from otelop.config import OperatorConfig
from otelop.logger import init_logger
from otelop.manifests import serialize
from otelop.manifests.builder import build
from otelop.webhook import AdmissionRequest, Operation
from otelop.webhook import opamp_bridge as opamp_bridge_webhook

logger = init_logger("otelop.cli")

# kinds with an admission webhook
PIPELINES = {
    "OpAMPBridge": opamp_bridge_webhook.pipeline,
}


def load_resources(path: str) -> list[apis.CustomResource]:
    """Load every custom resource from a (possibly multi-document) YAML file, or stdin for ``-``."""
    if path == "-":
        documents = list(yaml.safe_load_all(sys.stdin))
    else:
        with open(Path(path)) as f:
            documents = list(yaml.safe_load_all(f))
    return [apis.from_dict(document) for document in documents if document]


def render(args: argparse.Namespace, config: OperatorConfig) -> int:
    objects = []
    for resource in load_resources(args.file):
        objects.extend(serialize(obj) for obj in build(config, resource))
    yaml.safe_dump_all(objects, sys.stdout, sort_keys=False)
    return 0


def admit(args: argparse.Namespace, config: OperatorConfig) -> int:
    operation = Operation(args.operation.upper())
    exit_code = 0
    for resource in load_resources(args.file):
        pipeline_factory = PIPELINES.get(resource.kind)
        if pipeline_factory is None:
            logger.warning(f"no admission webhook for kind {resource.kind}, admitting {resource.name} unchanged")
            continue

        response = pipeline_factory().admit(AdmissionRequest(operation=operation, obj=resource))
        result = {
            "kind": resource.kind,
            "name": resource.name,
            "allowed": response.allowed,
            "code": int(response.code),
            "message": response.message,
        }
        if response.allowed:
            result["object"] = response.obj.to_dict()
        else:
            exit_code = 1
        yaml.safe_dump(result, sys.stdout, sort_keys=False)
        sys.stdout.write("---\n")
    return exit_code


COMMANDS = {
    "render": render,
    "admit": admit,
}


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        description="OpenTelemetry operator manifest compiler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the manifests for a collector resource
  otelop render -f collector.yaml

  # Apply label filters from an operator config file
  otelop --config operator.yaml render -f bridge.yaml

  # Run a bridge through the admission webhook
  otelop admit -f bridge.yaml --operation create
        """,
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--config", help="Path to operator config file (default: $OTELOP_CONFIG)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser("render", help="Compile resources into manifests")
    render_parser.add_argument("-f", "--file", required=True, help="Resource YAML file, '-' for stdin")

    admit_parser = subparsers.add_parser("admit", help="Run resources through admission")
    admit_parser.add_argument("-f", "--file", required=True, help="Resource YAML file, '-' for stdin")
    admit_parser.add_argument(
        "--operation",
        choices=["create", "update", "delete"],
        default="create",
        help="Admission operation (default: create)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.verbose:
        logging.getLogger("otelop").setLevel(logging.DEBUG)

    try:
        config = OperatorConfig.from_env(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"invalid operator config: {e}")
        return 2

    try:
        return COMMANDS[args.command](args, config)
    except OperatorException as e:
        logger.error(f"{args.command} failed: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
