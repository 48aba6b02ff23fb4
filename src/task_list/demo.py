"""Demo script for Task List.

Runs a fixed sequence against a fresh container and prints the task list
after each step.

Usage:
    python -m task_list                    # plain renderer
    python -m task_list --renderer csv     # id,text,level lines
    python -m task_list --log-level DEBUG  # show log events on stderr
"""

from __future__ import annotations

import argparse
from typing import Sequence

import structlog

from task_list.config import configure_logging, get_settings
from task_list.container import Container, build_container
from task_list.renderers import RENDERERS

logger = structlog.get_logger()


def run_demo(container: Container) -> None:
    echo = container.echo

    echo("Create 2 tasks:")
    container.add_task("A task example!")
    container.add_task("Another task!")
    container.raise_priority(1)
    container.print_tasks()

    echo("Edit task:")
    container.edit_task(1, "Text updated!")
    container.print_tasks()

    echo("Increase priority:")
    container.raise_priority(2)
    container.print_tasks()

    echo("Removing a task:")
    container.remove_task(1)
    container.print_tasks()

    logger.info("demo_finished", last_task_id=container.id_generator.last)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="task-list",
        description="Run the in-memory task list demo.",
    )
    parser.add_argument(
        "-r", "--renderer", choices=sorted(RENDERERS), help="Task output format"
    )
    parser.add_argument("--log-level", help="Log level for stderr output (default: INFO)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    overrides = {}
    if args.renderer:
        overrides["renderer"] = args.renderer
    if args.log_level:
        overrides["log_level"] = args.log_level
    if overrides:
        settings = settings.model_copy(update=overrides)

    try:
        configure_logging(settings.log_level, settings.log_format)
    except ValueError as e:
        parser.error(str(e))

    logger.info("demo_started", renderer=settings.renderer)
    run_demo(build_container(settings))
    return 0
