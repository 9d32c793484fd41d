"""CLI entry point for consolehook.

consolehook is a library; the CLI only helps inspect its setup:
- config: create, locate, and show the config file
- methods: list the methods a registry would intercept on the default console
"""

import argparse

from .config import ensure_config_exists, get_config_path, load_config
from .registry import InterceptionRegistry


def cmd_config_init(args: argparse.Namespace) -> None:
    """Initialize config file with defaults."""
    config_path = ensure_config_exists()
    print(f"Config file at: {config_path}")


def cmd_config_path(args: argparse.Namespace) -> None:
    """Print config file path."""
    print(get_config_path())


def cmd_config_show(args: argparse.Namespace) -> None:
    """Show current config."""
    config_path = get_config_path()
    if config_path.exists():
        print(config_path.read_text())
    else:
        print(f"No config file at {config_path}")
        print("Run 'consolehook config init' to create one.")


def cmd_methods(args: argparse.Namespace) -> None:
    """List supported methods of the default console, honoring the config."""
    registry = InterceptionRegistry.from_config(load_config())
    for method in registry.supported_methods:
        print(method)


def setup_config_parser(subparsers: argparse._SubParsersAction) -> None:
    """Set up the config subcommand."""
    config_parser = subparsers.add_parser(
        "config",
        help="Manage consolehook configuration",
    )
    config_subparsers = config_parser.add_subparsers(dest="config_command")

    # config init
    init_parser = config_subparsers.add_parser("init", help="Create default config file")
    init_parser.set_defaults(func=cmd_config_init)

    # config path
    path_parser = config_subparsers.add_parser("path", help="Print config file path")
    path_parser.set_defaults(func=cmd_config_path)

    # config show
    show_parser = config_subparsers.add_parser("show", help="Show current config")
    show_parser.set_defaults(func=cmd_config_show)

    config_parser.set_defaults(func=cmd_config_show, config_command=None)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="consolehook",
        description="Intercept logging methods and run observers on every call",
    )
    subparsers = parser.add_subparsers(dest="command")

    setup_config_parser(subparsers)

    methods_parser = subparsers.add_parser(
        "methods", help="List interceptable methods of the default console"
    )
    methods_parser.set_defaults(func=cmd_methods)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
    elif hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
