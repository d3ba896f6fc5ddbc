"""Command line entry point: ``daily-report``."""

from __future__ import annotations

import argparse
import logging
from typing import List

from .config import load_config, resolve_config_path
from .pipeline import DailyReportPipeline, RunOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="daily-report",
        description="Collect open tracker issues, edit the daily draft and mail it as HTML.",
    )
    parser.add_argument("--config", default=None, help="path to config.toml")
    parser.add_argument("--days", type=int, default=0, help="number days from now")
    parser.add_argument("--me", action="store_true", help="send to me instead of the work address")
    parser.add_argument("--forceDate", dest="force_date", default="", help="force date instead of 'days'")
    parser.add_argument("--dryRun", dest="dry_run", action="store_true", help="preview in a browser, do not send")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    return parser


def parse_options(argv: List[str] | None = None) -> tuple[argparse.Namespace, RunOptions]:
    args = build_parser().parse_args(argv)
    options = RunOptions(
        days=args.days,
        to_me=args.me,
        force_date=args.force_date or None,
        dry_run=args.dry_run,
    )
    return args, options


def main(argv: List[str] | None = None) -> None:
    args, options = parse_options(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = load_config(resolve_config_path(args.config))
    DailyReportPipeline(config).run(options)


if __name__ == "__main__":
    main()
