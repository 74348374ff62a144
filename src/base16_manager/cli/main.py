#!/usr/bin/env python3
"""Entry point for the base16-manager CLI."""

from __future__ import annotations

import argparse
import json
import sys
from collections import deque
from dataclasses import dataclass
from textwrap import dedent

from base16_manager import __version__
from base16_manager.adapters.fs_repository_store import FSRepositoryStore
from base16_manager.adapters.git_vcs import GitClient
from base16_manager.adapters.system import PkillSignaler, SubprocessRunner
from base16_manager.app.catalog_service import CatalogService
from base16_manager.app.targets import TargetContext
from base16_manager.app.targets.registry import build_registry
from base16_manager.app.theme_service import ThemeReport, ThemeService
from base16_manager.domain.repository import RepositoryId
from base16_manager.domain.themes import ThemeLocator
from base16_manager.errors import Base16ManagerError
from base16_manager.resources import COMPLETION_SCRIPTS, completion_script
from base16_manager.settings import RuntimeSettings, load_settings
from base16_manager.utils.telemetry import clear as telemetry_clear
from base16_manager.utils.telemetry import iter_events as telemetry_iter
from base16_manager.utils.telemetry import record_event, summarize as telemetry_summarize

HELP_OVERVIEW = dedent(
    """
    Manage base16 template repositories and apply a theme across applications.

    Typical session:
      - base16-manager list-installable
      - base16-manager install chriskempson/base16-shell
      - base16-manager set default-dark
    """
)

COMMANDS = (
    "install",
    "uninstall",
    "list",
    "list-themes",
    "list-support",
    "list-installable",
    "update",
    "set",
    "set-random",
    "clean",
    "log",
    "completion",
)


@dataclass
class Services:
    settings: RuntimeSettings
    store: FSRepositoryStore
    catalog: CatalogService
    themes: ThemeService


def _build_services(settings: RuntimeSettings) -> Services:
    runner = SubprocessRunner()
    locator = ThemeLocator(settings.data_dir)
    store = FSRepositoryStore(settings, GitClient())
    catalog = CatalogService(store, locator)
    context = TargetContext(
        settings=settings,
        locator=locator,
        runner=runner,
        signaler=PkillSignaler(runner),
    )
    themes = ThemeService(store, build_registry(), context, catalog)
    return Services(settings=settings, store=store, catalog=catalog, themes=themes)


def _require(args: argparse.Namespace, attr: str, label: str) -> str | None:
    value = getattr(args, attr, None)
    if not value:
        print(f"{args.command}: missing {label}", file=sys.stderr)
        return None
    return value


def _install_cmd(args: argparse.Namespace, services: Services) -> int:
    raw = _require(args, "repository", "repository identifier (maintainer/name)")
    if raw is None:
        return 1
    repo_id = RepositoryId.parse(raw)
    path = services.store.install(repo_id)
    record_event(services.settings, "install", {"repository": str(repo_id)}, status="ok")
    print(f"Installed {repo_id} into {path}")
    return 0


def _uninstall_cmd(args: argparse.Namespace, services: Services) -> int:
    raw = _require(args, "repository", "repository identifier (maintainer/name)")
    if raw is None:
        return 1
    repo_id = RepositoryId.parse(raw)
    services.store.uninstall(repo_id)
    record_event(services.settings, "uninstall", {"repository": str(repo_id)}, status="ok")
    print(f"Uninstalled {repo_id}")
    return 0


def _list_cmd(args: argparse.Namespace, services: Services) -> int:
    for repo_id in services.store.list_installed():
        print(repo_id)
    return 0


def _list_themes_cmd(args: argparse.Namespace, services: Services) -> int:
    order = "desc" if args.reverse else "asc"
    for name in services.catalog.list_themes(order):
        print(name)
    return 0


def _list_support_cmd(args: argparse.Namespace, services: Services) -> int:
    for repo_id in services.catalog.list_support():
        print(repo_id)
    return 0


def _list_installable_cmd(args: argparse.Namespace, services: Services) -> int:
    for repo_id in services.catalog.list_installable():
        print(repo_id)
    return 0


def _update_cmd(args: argparse.Namespace, services: Services) -> int:
    report = services.store.update_all()
    for repo_id in report.updated:
        print(f"Updated {repo_id}")
    for repo_id, message in report.failed:
        print(f"update: {repo_id}: {message}", file=sys.stderr)
    record_event(
        services.settings,
        "update",
        {"updated": len(report.updated), "failed": [str(repo_id) for repo_id, _ in report.failed]},
        level="info" if report.ok else "warn",
        status="ok" if report.ok else "error",
    )
    return 0 if report.ok else 1


def _print_theme_report(command: str, report: ThemeReport) -> int:
    for outcome in report.outcomes:
        if outcome.status == "ok":
            touched = ", ".join(
                f"{action.action} {action.path}" if action.path else action.action for action in outcome.actions
            )
            print(f"{outcome.repository}: {touched or 'nothing to do'}")
        else:
            print(f"{command}: {outcome.message}", file=sys.stderr)
    print(f"Theme {report.theme} applied to {len(report.applied)} of {len(report.outcomes)} packages")
    return 1 if report.failed else 0


def _set_cmd(args: argparse.Namespace, services: Services) -> int:
    theme = _require(args, "theme", "theme name")
    if theme is None:
        return 1
    report = services.themes.set_theme(theme)
    return _print_theme_report(args.command, report)


def _set_random_cmd(args: argparse.Namespace, services: Services) -> int:
    report = services.themes.set_random_theme()
    print(f"Selected theme {report.theme}")
    return _print_theme_report(args.command, report)


def _clean_cmd(args: argparse.Namespace, services: Services) -> int:
    removed = services.store.clean_empty()
    for path in removed:
        print(f"Removed {path}")
    if not removed:
        print("Nothing to clean")
    record_event(services.settings, "clean", {"removed": len(removed)}, status="ok")
    return 0


def _log_cmd(args: argparse.Namespace, services: Services) -> int:
    settings = services.settings
    if args.log_command == "report":
        summary = telemetry_summarize(telemetry_iter(settings))
        print(json.dumps(summary, indent=2, ensure_ascii=False))
        return 0
    if args.log_command == "clear":
        print("Event log cleared" if telemetry_clear(settings) else "Event log is already empty")
        return 0
    if args.log_command == "tail":
        window: deque = deque(maxlen=args.limit)
        for evt in telemetry_iter(settings):
            window.append(evt)
        for evt in window:
            print(json.dumps(evt, ensure_ascii=False))
        return 0
    print("log: expected one of report, tail, clear", file=sys.stderr)
    return 1


def _completion_cmd(args: argparse.Namespace, services: Services) -> int:
    sys.stdout.write(completion_script(args.shell))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="base16-manager",
        description=HELP_OVERVIEW,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"base16-manager {__version__}")

    sub = parser.add_subparsers(dest="command")

    install_cmd = sub.add_parser("install", help="Install a template repository (maintainer/name)")
    install_cmd.add_argument("repository", nargs="?", help="Repository identifier, e.g. chriskempson/base16-vim")
    install_cmd.set_defaults(func=_install_cmd)

    uninstall_cmd = sub.add_parser("uninstall", help="Remove an installed template repository")
    uninstall_cmd.add_argument("repository", nargs="?", help="Repository identifier, e.g. chriskempson/base16-vim")
    uninstall_cmd.set_defaults(func=_uninstall_cmd)

    list_cmd = sub.add_parser("list", help="List installed template repositories")
    list_cmd.set_defaults(func=_list_cmd)

    list_themes_cmd = sub.add_parser("list-themes", help="List themes provided by installed repositories")
    list_themes_cmd.add_argument("--reverse", action="store_true", help="Sort themes in descending order")
    list_themes_cmd.set_defaults(func=_list_themes_cmd)

    list_support_cmd = sub.add_parser("list-support", help="List supported template repositories")
    list_support_cmd.set_defaults(func=_list_support_cmd)

    list_installable_cmd = sub.add_parser("list-installable", help="List supported repositories not yet installed")
    list_installable_cmd.set_defaults(func=_list_installable_cmd)

    update_cmd = sub.add_parser("update", help="Reset every installed repository to its remote tip")
    update_cmd.set_defaults(func=_update_cmd)

    set_cmd = sub.add_parser("set", help="Apply a theme to every installed repository")
    set_cmd.add_argument("theme", nargs="?", help="Theme name, e.g. default-dark")
    set_cmd.set_defaults(func=_set_cmd)

    set_random_cmd = sub.add_parser("set-random", help="Apply a randomly chosen installed theme")
    set_random_cmd.set_defaults(func=_set_random_cmd)

    clean_cmd = sub.add_parser("clean", help="Remove empty maintainer directories")
    clean_cmd.set_defaults(func=_clean_cmd)

    log_cmd = sub.add_parser("log", help="Inspect the local event log")
    log_sub = log_cmd.add_subparsers(dest="log_command")
    log_sub.add_parser("report", help="Print aggregated event counts")
    log_tail = log_sub.add_parser("tail", help="Print the last N events")
    log_tail.add_argument("--limit", type=int, default=20, help="Number of events to print (default: 20)")
    log_sub.add_parser("clear", help="Remove the event log")
    log_cmd.set_defaults(func=_log_cmd)

    completion_cmd = sub.add_parser("completion", help="Print a shell completion script")
    completion_cmd.add_argument("shell", choices=sorted(COMPLETION_SCRIPTS))
    completion_cmd.set_defaults(func=_completion_cmd)

    return parser


def main(argv: list[str] | None = None, settings: RuntimeSettings | None = None) -> int:
    parser = build_parser()
    raw_args = sys.argv[1:] if argv is None else list(argv)
    if not raw_args or (not raw_args[0].startswith("-") and raw_args[0] not in COMMANDS):
        parser.print_help()
        return 0
    args = parser.parse_args(raw_args)
    if getattr(args, "func", None) is None:
        parser.print_help()
        return 0
    try:
        services = _build_services(settings or load_settings())
        return args.func(args, services)
    except Base16ManagerError as exc:
        print(f"{args.command}: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
