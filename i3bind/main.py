"""Entry point for i3-bind.

Usage:
    i3-bind add '$mod+Return' exec alacritty
    i3-bind remove mod4+q
    i3-bind list
    i3-bind find firefox
    i3-bind comment mod4+r "restart i3"
    i3-bind interactive

Exit codes:
    0 = success
    1 = error (missing config, unknown or duplicate key, I/O failure)
    2 = bad arguments
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from . import __version__
from .config import BindingEditor, DuplicateKeyError, I3BindError
from .settings import Settings
from .ui import Output, run_interactive
from .ui.console import binding_text

logger = logging.getLogger("i3bind")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i3-bind",
        description="Manage i3 window manager keybindings",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="Path to i3 config file (default: ~/.config/i3/config)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--debug", action="store_true", help="Enable debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = parser.add_subparsers(dest="command", metavar="command", required=True)

    add = sub.add_parser("add", help="Add a new keybinding")
    add.add_argument("key", help="Key combo, e.g. mod4+d or '$mod+shift+q'")
    add.add_argument("action", nargs="+", help="i3 command to run")
    add.add_argument("--comment", "-m", help="Comment written above the binding")

    remove = sub.add_parser("remove", help="Remove a keybinding")
    remove.add_argument("key")

    list_cmd = sub.add_parser("list", help="List all keybindings")
    find = sub.add_parser("find", help="Find keybindings by key, action or comment")
    find.add_argument("term", help="Case-insensitive search term")
    for cmd in (list_cmd, find):
        cmd.add_argument(
            "--format",
            "-f",
            choices=["text", "tsv", "json"],
            default="text",
            help="Output format (default: text)",
        )

    comment = sub.add_parser("comment", help="Add or update the comment of a keybinding")
    comment.add_argument("key")
    comment.add_argument("text")

    show = sub.add_parser("show", help="Show details of one keybinding")
    show.add_argument("key")

    sub.add_parser("restore", help="Restore the config from its .backup file")

    sub.add_parser(
        "interactive",
        aliases=["tui", "menu"],
        help="Pick a keybinding with fzf and manage it",
    )

    return parser


def setup_logging(settings: Settings) -> None:
    """Send log records to stderr; DEBUG with --debug, warnings otherwise."""
    handler = RichHandler(
        console=Console(stderr=True, no_color=not settings.color),
        show_path=False,
    )
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if settings.debug else logging.WARNING)
    logger.propagate = False


def _print_list(output: Output, bindings, fmt: str, show_line: bool) -> None:
    if fmt == "json":
        output.json(bindings)
    elif fmt == "tsv":
        output.tsv(bindings)
    else:
        output.bindings(bindings, show_line=show_line)


def run(args: argparse.Namespace, settings: Settings, output: Output) -> int:
    """Dispatch a parsed command line."""
    editor = BindingEditor(settings.config_path)

    if args.command == "add":
        action = " ".join(args.action)
        binding = editor.add(args.key, action, comment=args.comment)
        output.success("Added keybinding", binding)

    elif args.command == "remove":
        binding = editor.remove(args.key)
        output.success("Removed keybinding", binding)

    elif args.command == "list":
        bindings = editor.list_bindings()
        if args.format == "text":
            if not bindings:
                output.line("No keybindings found in config file")
                return 0
            output.line(f"Found {len(bindings)} keybindings in {settings.config_path}:\n")
        _print_list(output, bindings, args.format, show_line=False)

    elif args.command == "find":
        matches = editor.find(args.term)
        if args.format == "text":
            if not matches:
                output.line(f"No keybindings found matching '{args.term}'")
                return 0
            output.line(f"Found {len(matches)} keybinding(s) matching '{args.term}':\n")
        _print_list(output, matches, args.format, show_line=True)

    elif args.command == "comment":
        binding = editor.comment(args.key, args.text)
        output.success("Added comment to keybinding", binding)

    elif args.command == "show":
        output.details(editor.get(args.key))

    elif args.command == "restore":
        backup = editor.restore_backup()
        output.line(f"✓ Restored {settings.config_path} from {backup}")

    elif args.command in ("interactive", "tui", "menu"):
        run_interactive(editor, output)

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Run the i3-bind command line."""
    args = build_parser().parse_args(argv)

    settings = Settings.resolve(
        config_path=args.config,
        no_color=args.no_color,
        debug=args.debug,
    )
    setup_logging(settings)
    logger.debug("Using config %s", settings.config_path)

    output = Output(color=settings.color)

    try:
        return run(args, settings, output)
    except DuplicateKeyError as e:
        output.error(str(e))
        output.err.print(Text("Current binding: ").append_text(binding_text(e.existing)))
        output.err.print("Use 'i3-bind remove' first or modify the config manually")
        return 1
    except I3BindError as e:
        output.error(str(e))
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
