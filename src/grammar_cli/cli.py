"""Command-line interface for the grammar shell."""

import argparse
import logging
import sys
from dataclasses import replace

import yaml

from .config import Config, ConfigurationError, load_config
from .console import GrammarCompleter, PromptToolkitConsole, StreamConsole
from .core import load_grammar
from .shell import GrammarShell


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Grammar shell - Validate command lines against a command grammar",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Use default config
  %(prog)s -c config.yaml           # Use specific config file
  %(prog)s -g translations.yml      # Use specific grammar file
  %(prog)s -p '> '                  # Use a different prompt
  %(prog)s --print-tree             # Show the grammar and exit
""",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-g", "--grammar",
        metavar="FILE",
        help="Path to YAML grammar file",
    )

    parser.add_argument(
        "-p", "--prompt",
        metavar="TEXT",
        help="Prompt literal shown after the navigation path",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--no-completion",
        action="store_true",
        help="Disable tab completion",
    )

    parser.add_argument(
        "--print-tree",
        action="store_true",
        help="Print the loaded grammar and exit",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    # Load configuration
    try:
        if args.config:
            config = load_config(args.config)
        else:
            config = Config()

        # Override config with command line arguments
        if args.grammar:
            config = replace(config, grammar_file=args.grammar)

        if args.prompt is not None:
            config = replace(config, prompt=args.prompt)

        if args.no_completion:
            config = replace(config, completion=False)
    except FileNotFoundError:
        logger.error(f"Config file not found: {args.config}")
        return 1
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    # Load grammar
    grammar_path = config.get_grammar_path()
    try:
        grammar = load_grammar(grammar_path)
    except FileNotFoundError:
        logger.error(f"Grammar file not found: {grammar_path}")
        return 1
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse grammar file {grammar_path}: {e}")
        return 1

    logger.info(f"Loaded {grammar.subtree_count(grammar.root)} commands from {grammar_path}")

    if args.print_tree:
        print(grammar.render())
        return 0

    # Create components
    interactive = sys.stdin.isatty()
    console = PromptToolkitConsole() if interactive else StreamConsole()
    shell = GrammarShell(grammar, console, config)

    if interactive and config.completion:
        console.completer = GrammarCompleter(grammar, lambda: shell.session.current_root)

    shell.run()
    print("Thanks for coming :)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
