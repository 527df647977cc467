from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from port_desc.config.loader import ConfigError, LookupConfig, resolve_config
from port_desc.dataset.reader import PortDescError
from port_desc.logging.init import get_logger, log_summary, setup_logging
from port_desc.models.port_entry import PortEntry
from port_desc.models.transport_protocol import TransportProtocol
from port_desc.services.registry import PortRegistry
from port_desc.services.summary import render_summary_line

"""CLI entrypoint.

Commands:
- info PORT         full entry (or every protocol with --all)
- service PORT      service name
- description PORT  description
- stats             SUMMARY line (or JSON counters) for the loaded dataset

Results go to stdout; labeled log lines go to stderr.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_NOT_FOUND = 2

MAX_PORT_NUMBER = 65535


def _port(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a port number: {text!r}") from None
    if not 0 <= value <= MAX_PORT_NUMBER:
        raise argparse.ArgumentTypeError(f"port out of range 0-{MAX_PORT_NUMBER}: {value}")
    return value


def _protocol(text: str) -> TransportProtocol:
    protocol = TransportProtocol.from_text(text)
    if protocol is None:
        choices = "|".join(p.value for p in TransportProtocol)
        raise argparse.ArgumentTypeError(f"unknown protocol {text!r} (expected {choices})")
    return protocol


class _ArgumentParser(argparse.ArgumentParser):
    # usage errors map to EXIT_FATAL instead of argparse's default 2 (reserved for not-found)
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(EXIT_FATAL, f"{self.prog}: error: {message}\n")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = _ArgumentParser(prog="port-desc", description="IANA service name / port number lookup")
    p.add_argument("--config", type=Path, help="YAML config (default: config/port_desc.yml if present)")
    p.add_argument("--csv", type=Path, help="Registry CSV to load instead of the configured/bundled one")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--json", action="store_true", help="Print entries and stats as JSON lines")
    sub = p.add_subparsers(dest="command", required=True, parser_class=_ArgumentParser)

    for name, help_text in (
        ("info", "Print the registry entry for a port"),
        ("service", "Print the service name for a port"),
        ("description", "Print the description for a port"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("port", type=_port)
        cmd.add_argument("-p", "--protocol", type=_protocol, help="tcp|udp|sctp|dccp (default from config)")
        if name == "info":
            cmd.add_argument("--all", action="store_true", help="Entries for every protocol")

    sub.add_parser(
        "stats",
        help="Print the SUMMARY line for the loaded dataset (JSON counters with --json)",
    )
    return p.parse_args(argv)


def _load_registry(args: argparse.Namespace, cfg: LookupConfig) -> PortRegistry:
    dataset = args.csv or cfg.dataset_path
    if dataset is None:
        return PortRegistry.default()
    return PortRegistry.from_csv_file(dataset)


def _format_entry(entry: PortEntry, as_json: bool) -> str:
    if as_json:
        return entry.to_json_line()
    protocol = entry.transport_protocol.value if entry.transport_protocol else ""
    return f"{entry.port_number}/{protocol}\t{entry.service_name}\t{entry.description}"


def _run_lookup(registry: PortRegistry, args: argparse.Namespace, cfg: LookupConfig) -> int:
    logger = get_logger()
    as_json = args.json or cfg.output_format == "json"
    protocol = args.protocol or cfg.default_protocol

    if args.command == "info" and args.all:
        entries = list(registry.lookup_all(args.port).values())
        if not entries:
            logger.warning(f"port {args.port} not indexed for any protocol")
            return EXIT_NOT_FOUND
        for entry in entries:
            print(_format_entry(entry, as_json))
        return EXIT_SUCCESS

    entry = registry.lookup_entry(args.port, protocol)
    if entry is None:
        logger.warning(f"{args.port}/{protocol.value} not indexed")
        return EXIT_NOT_FOUND

    if args.command == "info":
        print(_format_entry(entry, as_json))
    elif args.command == "service":
        print(registry.lookup_service_name(args.port, protocol))
    else:
        print(registry.lookup_description(args.port, protocol))
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None only: an explicit [] must not pick up pytest's own argv
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    try:
        cfg = resolve_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    setup_logging("DEBUG" if args.debug else cfg.log_level)
    logger.debug("debug mode enabled")

    try:
        registry = _load_registry(args, cfg)
    except PortDescError as e:
        logger.error(str(e))
        return EXIT_FATAL

    if args.command == "stats":
        # registries built through the classmethods always carry stats
        stats = registry.stats
        summary_line = render_summary_line(stats)
        log_summary(summary_line[len("SUMMARY "):])
        as_json = args.json or cfg.output_format == "json"
        print(stats.to_json_line() if as_json else summary_line)
        return EXIT_SUCCESS


    return _run_lookup(registry, args, cfg)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
