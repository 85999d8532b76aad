"""mdtodo command-line interface."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from .config import Config, load_config, write_default_config
from .display import render_item, render_list, show_all, show_done, show_pending
from .errors import TodoError
from .log import setup_logging
from .models import DEFAULT_CONFIG_PATH, TodoItem
from .storage import move_between, read_list, write_list

CONFIG_ENV = "MDTODO_CONFIG"

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)
logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not an item number")
    if number < 1:
        raise argparse.ArgumentTypeError(f"item numbers start at 1, got {number}")
    return number


def print_items(items: List[TodoItem], numbers: List[int]) -> None:
    for number, item in zip(numbers, items):
        console.print(render_item(number, item))


def load_selected(args: argparse.Namespace, missing_ok: bool = False):
    """Resolve the list named on the command line and read it."""
    name, path = args.settings.resolve(args.list, args.cwd)
    return path, read_list(path, name, missing_ok=missing_ok)


def cmd_add(args: argparse.Namespace) -> None:
    path, todo_list = load_selected(args, missing_ok=True)
    item = todo_list.add_item(args.title)
    write_list(path, todo_list)
    console.print(f"Added to [bold]{escape(todo_list.name)}[/bold]:")
    console.print(render_item(len(todo_list), item))


def cmd_list(args: argparse.Namespace) -> None:
    name, path = args.settings.resolve(args.name or args.list, args.cwd)
    todo_list = read_list(path, name)
    if not todo_list.elements:
        console.print("(no items yet)")
        return
    predicate = show_pending if args.pending else show_done if args.done else show_all
    rendered = render_list(todo_list, predicate, items_only=args.items_only)
    if not rendered.plain.strip():
        console.print("(no matching items)")
        return
    console.print(rendered)


def cmd_done(args: argparse.Namespace) -> None:
    path, todo_list = load_selected(args)
    items = todo_list.mark_done(args.numbers)
    write_list(path, todo_list)
    console.print("Marked done:")
    print_items(items, args.numbers)


def cmd_remove(args: argparse.Namespace) -> None:
    path, todo_list = load_selected(args)
    removed = todo_list.delete(args.numbers)
    write_list(path, todo_list)
    console.print(f"Removed {len(removed)} item(s):")
    print_items(removed, sorted(set(args.numbers), reverse=True))


def cmd_edit(args: argparse.Namespace) -> None:
    path, todo_list = load_selected(args)
    item = todo_list.edit(args.number, args.title)
    write_list(path, todo_list)
    console.print(f"Edited {args.number}.")
    console.print(render_item(args.number, item))


def cmd_move(args: argparse.Namespace) -> None:
    source_name, source_path = args.settings.resolve(args.list, args.cwd)
    dest_name, dest_path = args.settings.resolve(args.to, args.cwd)
    moved = move_between(source_path, dest_path, args.numbers, source_name, dest_name)
    console.print(
        f"Moved {len(moved)} item(s) from [bold]{escape(source_name)}[/bold] "
        f"to [bold]{escape(dest_name)}[/bold]."
    )


def cmd_clean(args: argparse.Namespace) -> None:
    path, todo_list = load_selected(args)
    removed = todo_list.clean()
    write_list(path, todo_list)
    console.print(f"Removed {len(removed)} done item(s) from {escape(todo_list.name)}.")


def cmd_lists(args: argparse.Namespace) -> None:
    lists = args.settings.existing_lists()
    if not lists:
        console.print("(no lists yet)")
        return
    for meta in lists:
        line = Text(meta.name, style="bold")
        if meta.name == args.settings.general_list:
            line.append(" (general)", style="dim")
        line.append(f": {meta.path}")
        console.print(line)


def cmd_link(args: argparse.Namespace) -> None:
    meta = args.settings.add_list(args.name, args.path)
    args.settings.save(args.config_path)
    console.print(f"Linked list [bold]{escape(meta.name)}[/bold] -> {escape(meta.path)}")


def cmd_path(args: argparse.Namespace) -> None:
    _, path = args.settings.resolve(args.name or args.list, args.cwd)
    console.print(os.path.abspath(path), markup=False)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    p = argparse.ArgumentParser(
        prog="todo", description="Manage todo lists kept as markdown checklists."
    )
    p.add_argument(
        "-c",
        "--config",
        default=None,
        help=f"Path to the config file (default: ${CONFIG_ENV} or {DEFAULT_CONFIG_PATH})",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")

    # Shared by every command that acts on one list
    list_opt = argparse.ArgumentParser(add_help=False)
    list_opt.add_argument(
        "-l", "--list", default=None, help="List name (default: ./todo.md or the general list)"
    )

    sub = p.add_subparsers(dest="cmd")

    s_add = sub.add_parser("add", parents=[list_opt], help="Append a new item")
    s_add.add_argument("title", help="Item title, quoted if it has spaces")
    s_add.set_defaults(func=cmd_add)

    s_list = sub.add_parser("list", parents=[list_opt], help="Show a list")
    s_list.add_argument("name", nargs="?", help="List to show")
    show = s_list.add_mutually_exclusive_group()
    show.add_argument("--pending", action="store_true", help="Only items not done yet")
    show.add_argument("--done", action="store_true", help="Only done items")
    s_list.add_argument(
        "--items-only", action="store_true", help="Hide headings and other non-item lines"
    )
    s_list.set_defaults(func=cmd_list)

    s_done = sub.add_parser("done", parents=[list_opt], help="Mark items done")
    s_done.add_argument("numbers", type=positive_int, nargs="+", metavar="N")
    s_done.set_defaults(func=cmd_done)

    s_remove = sub.add_parser(
        "remove", aliases=["rm"], parents=[list_opt], help="Delete items"
    )
    s_remove.add_argument("numbers", type=positive_int, nargs="+", metavar="N")
    s_remove.set_defaults(func=cmd_remove)

    s_edit = sub.add_parser("edit", parents=[list_opt], help="Change an item's title")
    s_edit.add_argument("number", type=positive_int, metavar="N")
    s_edit.add_argument("title", help="New title")
    s_edit.set_defaults(func=cmd_edit)

    s_move = sub.add_parser("move", parents=[list_opt], help="Move items to another list")
    s_move.add_argument("numbers", type=positive_int, nargs="+", metavar="N")
    s_move.add_argument("--to", required=True, help="Destination list name")
    s_move.set_defaults(func=cmd_move)

    s_clean = sub.add_parser("clean", parents=[list_opt], help="Remove all done items")
    s_clean.set_defaults(func=cmd_clean)

    s_lists = sub.add_parser("lists", help="Show known lists")
    s_lists.set_defaults(func=cmd_lists)

    s_link = sub.add_parser("link", help="Register a list file kept outside the main dir")
    s_link.add_argument("name", help="Name to use for the list")
    s_link.add_argument("path", help="Path to the markdown file")
    s_link.set_defaults(func=cmd_link)

    s_path = sub.add_parser("path", parents=[list_opt], help="Print the path to a list file")
    s_path.add_argument("name", nargs="?", help="List name")
    s_path.set_defaults(func=cmd_path)

    return p


def welcome(config_path: str, config: Config) -> None:
    """Explain the defaults written on first run."""
    err_console.print("Welcome to [green]todo[/green]!")
    err_console.print(f"Setting some defaults in your config at {escape(config_path)}")
    err_console.print(
        f"New lists will be stored in {escape(config.main_dir)}. "
        f"The general list is '{escape(config.general_list)}': it is used when no list "
        "is named and there is no todo.md in the current directory."
    )


def get_config(path: str) -> Config:
    if not os.path.exists(path):
        config = write_default_config(path)
        welcome(path, config)
        return config
    return load_config(path)


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    if args.cmd is None:
        parser.print_help()
        sys.exit(2)

    args.config_path = args.config or os.environ.get(CONFIG_ENV) or DEFAULT_CONFIG_PATH
    args.cwd = os.getcwd()
    try:
        args.settings = get_config(args.config_path)
        logger.debug("Running %s with config %s", args.cmd, args.config_path)
        args.func(args)
    except TodoError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
