"""CLI entry point for the pollen forecast screen."""

import argparse
import logging
from pathlib import Path

from pollencast.config.defaults import DEFAULT_LOCATION
from pollencast.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from pollencast.config.schema import AppConfig
from pollencast.models.state import Failed, Loaded
from pollencast.reporting.formatters import format_forecast_json, format_state_text
from pollencast.state.container import build_container

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "ops/configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pollencast",
        description="Hourly pollen forecast",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # fetch
    fetch_p = sub.add_parser("fetch", help="Fetch and display the forecast")
    fetch_p.add_argument("--json", action="store_true", help="Print JSON")

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

    config = _load(args.config)

    if args.command == "fetch":
        return _cmd_fetch(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _load(path: str) -> AppConfig:
    if not Path(path).exists():
        logger.warning("Config %s not found, using defaults", path)
        return AppConfig(location=DEFAULT_LOCATION)
    return load_config(path)


def _cmd_fetch(config: AppConfig, args) -> int:
    container = build_container(config)
    state = container.fetch()
    if args.json and isinstance(state, Loaded):
        print(format_forecast_json(state.forecast))
    else:
        print(format_state_text(state))
    return 1 if isinstance(state, Failed) else 0


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = (part.strip() for part in kv.split("=", 1))
        try:
            new_config = set_config_value(config, key, value)
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1

        path = Path(args.config)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            save_config(new_config, path)
        except OSError as e:
            print(f"Error: cannot write {path}: {e}")
            return 1
        logger.info("Updated %s in %s", key, path)
        print(f"Set {key} = {get_config_value(new_config, key)} ({path})")
        return 0
    else:
        print("Use: config show | config set key=value")
        return 1
