"""CLI entry point for MRAN snapshot utilities."""

import argparse
import logging

from mransnap.config.loader import (
    get_config_value,
    load_config,
    resolve_mran_url,
    save_config,
    set_config_value,
)
from mransnap.ingest.mran_client import MranClient
from mransnap.mirror.store import MirrorStore
from mransnap.mirror.switcher import use_snapshot
from mransnap.models.snapshot import SnapshotError

DEFAULT_CONFIG = "mransnap.yaml"

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="mransnap",
        description="Point a CRAN mirror configuration at a dated MRAN snapshot",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("--mran-url", default=None, help="MRAN base URL")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # list
    sub.add_parser("list", help="List available snapshot dates")

    # use
    use_p = sub.add_parser("use", help="Switch CRAN to a snapshot date")
    use_p.add_argument("date", help="Snapshot date, YYYY-MM-DD")
    use_p.add_argument(
        "--validate", action="store_true", help="Check the date exists on the server"
    )

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    try:
        if args.command == "list":
            return _cmd_list(config, args)
        elif args.command == "use":
            return _cmd_use(config, args)
        elif args.command == "config":
            return _cmd_config(config, args)
        else:
            parser.print_help()
            return 1
    except SnapshotError as e:
        logger.error("%s: %s", e.kind, e)
        print(f"Error: {e}")
        return 1


def _cmd_list(config, args) -> int:
    client = MranClient.from_config(config, base_url=args.mran_url)
    for snapshot_date in client.list_snapshots():
        print(snapshot_date)
    return 0


def _cmd_use(config, args) -> int:
    mran_url = args.mran_url or resolve_mran_url(config)
    store = MirrorStore.from_mapping(config.repos)
    client = MranClient.from_config(config, base_url=mran_url) if args.validate else None
    entries = use_snapshot(
        args.date, mran_url, args.validate, store=store, client=client
    )
    for entry in entries:
        print(f"{entry.name}={entry.url}")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            save_config(new_config, args.config)
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1
