"""Command-line helper for the DevOps API.

This module serves as a CLI wrapper around app.core.devops services.

Examples:
    python scripts/devops.py --endpoint http://localhost:8080 engineers list
    python scripts/devops.py engineers create --name "John Doe" --email john.doe@example.com
    python scripts/devops.py developers update --id dev-1 --engineer-id eng-1 --engineer-id eng-2
    python scripts/devops.py devops create --dev-id dev-1 --ops-id ops-1
"""
from __future__ import annotations
import argparse
import json
import os
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, List, Optional

SCRIPT_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.devops import (
    DevOps,
    DevOpsError,
    Developer,
    Engineer,
    Operations,
)
from app.core.provider import ProviderData, configure_provider

KINDS = ("engineers", "developers", "operations", "devops")


def _emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2))


def _service(provider: ProviderData, kind: str):
    return {
        "engineers": provider.engineers,
        "developers": provider.developers,
        "operations": provider.operations,
        "devops": provider.devops,
    }[kind]


def _resolve_engineers(provider: ProviderData, engineer_ids: List[str]) -> List[Engineer]:
    return [provider.engineers.get(engineer_id) for engineer_id in engineer_ids]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="DevOps API helper")
    parser.add_argument("--endpoint", default=os.environ.get("DEVOPS_ENDPOINT"),
                        help="DevOps API base URL (default: DEVOPS_ENDPOINT)")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    parser.add_argument("--engineer-list-scan", action="store_true",
                        help="Look engineers up by listing the collection (API without GET /engineers/{id})")

    kinds = parser.add_subparsers(dest="kind")
    for kind in KINDS:
        kind_parser = kinds.add_parser(kind)
        actions = kind_parser.add_subparsers(dest="action")

        actions.add_parser("list")
        for name in ("get", "delete"):
            sp = actions.add_parser(name)
            sp.add_argument("--id", required=True)

        create = actions.add_parser("create")
        update = actions.add_parser("update")
        update.add_argument("--id", required=True)

        if kind == "engineers":
            create.add_argument("--name", required=True)
            create.add_argument("--email", required=True)
            update.add_argument("--name")
            update.add_argument("--email")
        elif kind in ("developers", "operations"):
            create.add_argument("--name", required=True)
            create.add_argument("--engineer-id", action="append", default=[])
            update.add_argument("--name")
            update.add_argument("--engineer-id", action="append", default=None,
                                help="Replace the team's engineers (repeatable); omit to keep them")
        else:
            create.add_argument("--dev-id", required=True)
            create.add_argument("--ops-id", required=True)
            update.add_argument("--dev-id")
            update.add_argument("--ops-id")

    return parser


def _desired_for_create(provider: ProviderData, args: argparse.Namespace):
    if args.kind == "engineers":
        return Engineer(name=args.name, email=args.email)
    if args.kind == "developers":
        return Developer(name=args.name, engineers=_resolve_engineers(provider, args.engineer_id))
    if args.kind == "operations":
        return Operations(name=args.name, engineers=_resolve_engineers(provider, args.engineer_id))
    return DevOps(dev=provider.developers.get(args.dev_id), ops=provider.operations.get(args.ops_id))


def _desired_for_update(provider: ProviderData, args: argparse.Namespace, current):
    # Full replace: start from the current remote entity and apply the flags
    if args.kind == "engineers":
        return replace(
            current,
            name=args.name if args.name is not None else current.name,
            email=args.email if args.email is not None else current.email,
        )
    if args.kind in ("developers", "operations"):
        desired = current if args.name is None else replace(current, name=args.name)
        if args.engineer_id is not None:
            desired = desired.with_engineers(_resolve_engineers(provider, args.engineer_id))
        return desired
    desired = current
    if args.dev_id:
        desired = replace(desired, dev=provider.developers.get(args.dev_id))
    if args.ops_id:
        desired = replace(desired, ops=provider.operations.get(args.ops_id))
    return desired


def run(provider: ProviderData, args: argparse.Namespace) -> None:
    service = _service(provider, args.kind)

    if args.action == "list":
        _emit([entity.to_dict() for entity in service.list()])
    elif args.action == "get":
        _emit(service.get(args.id).to_dict())
    elif args.action == "create":
        created = service.create(_desired_for_create(provider, args))
        print(f"[{args.kind}] Created id={created.id}", file=sys.stderr)
        _emit(created.to_dict())
    elif args.action == "update":
        current = service.get(args.id)
        updated = service.update(args.id, _desired_for_update(provider, args, current))
        print(f"[{args.kind}] Updated id={updated.id}", file=sys.stderr)
        _emit(updated.to_dict())
    elif args.action == "delete":
        service.delete(args.id)
        print(f"[{args.kind}] Deleted id={args.id}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.kind:
        parser.print_help()
        return 0
    if not args.action:
        parser.error(f"{args.kind}: an action is required (list, get, create, update, delete)")

    try:
        provider = configure_provider(
            endpoint=args.endpoint,
            timeout=args.timeout,
            engineer_item_lookup=False if args.engineer_list_scan else None,
        )
        run(provider, args)
    except DevOpsError as exc:
        print(json.dumps({"error": exc.to_dict()}), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
