"""Command-line interface for cryptify."""

import sys
import getpass
import logging
import argparse
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

from cryptify import __version__
from cryptify.codec.byte_shift import Mode
from cryptify.codec.key_deriver import KeyDerivationError, derive_shift
from cryptify.config.loader import load_config, get_config_value, ConfigError
from cryptify.config.validator import validate_config, ValidationError
from cryptify.files.processor import FileProcessor, ProcessingError
from cryptify.ui.console_ui import ConsoleUI
from cryptify.ui.headless_logger import HeadlessLogger


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog='cryptify',
        description='Obfuscate files with a numeric key (byte shift, NOT secure encryption)',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Encrypt a file (writes report.pdf.enc)
  cryptify encrypt report.pdf --key 1234

  # Decrypt it again (writes report.pdf)
  cryptify decrypt report.pdf.enc --key 1234

  # Prompt for the key instead of passing it on the command line
  cryptify encrypt notes.txt

  # Several files into another directory, replacing existing outputs
  cryptify encrypt a.bin b.bin --output-dir out/ --force

  # Show what would be written without touching the disk
  cryptify decrypt *.enc --key 1234 --dry-run

The shift applied to every byte is the sum of the digits in the key,
so "1234", "4321" and "a1b2c3d4" are interchangeable.
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        'mode',
        choices=[m.value for m in Mode],
        help='Transform direction'
    )

    parser.add_argument(
        'files',
        nargs='+',
        type=Path,
        metavar='FILE',
        help='Files to process'
    )

    parser.add_argument(
        '-k', '--key',
        metavar='KEY',
        help='Numeric key. Prompted for (hidden) when omitted on a terminal.'
    )

    parser.add_argument(
        '-o', '--output',
        type=Path,
        metavar='PATH',
        help='Output path (single input file only)'
    )

    parser.add_argument(
        '--output-dir',
        type=Path,
        metavar='DIR',
        help='Directory for output files. Overrides config.'
    )

    parser.add_argument(
        '--force',
        action='store_true',
        help='Overwrite existing output files. Overrides config.'
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Report output names without writing anything'
    )

    parser.add_argument(
        '--config',
        type=Path,
        metavar='PATH',
        help='Path to config file (default: ./cryptify.yaml if present)'
    )

    parser.add_argument(
        '--ui',
        choices=['rich', 'headless'],
        help='UI mode: rich (activity log, default) or headless (plain logging). Overrides config.'
    )

    return parser


def _setup_logging(config: dict, rich_ui: bool = False) -> None:
    """
    Setup logging configuration from config.

    Args:
        config: Configuration dictionary
        rich_ui: True when ConsoleUI is drawing the activity log
    """
    logging_config = config.get('logging', {})

    # Get log level
    level_str = logging_config.get('level', 'INFO').upper()
    level = getattr(logging, level_str, logging.INFO)

    handlers = []

    # Console handler for headless mode only
    # The rich activity log already shows progress on the terminal
    if logging_config.get('console', True) and not rich_ui:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        formatter = logging.Formatter('%(levelname)s: %(message)s')
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # File handler (if configured)
    log_file = logging_config.get('file')
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
        except (OSError, PermissionError) as e:
            print(f"Error: Could not create log file '{log_file}': {e}", file=sys.stderr)
            sys.exit(1)

    # Nothing configured: keep logging quiet instead of falling back to stderr
    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True  # Override any existing configuration
    )


def _read_key(args: argparse.Namespace) -> Optional[str]:
    """Key from --key, or a hidden prompt when attached to a terminal."""
    if args.key is not None:
        return args.key
    if sys.stdin.isatty():
        return getpass.getpass("Key: ")
    return None


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for cryptify CLI.

    Args:
        argv: Command-line arguments (default: sys.argv)

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.output is not None and len(args.files) != 1:
        parser.error("--output can only be used with a single input file")

    # Load and validate configuration
    try:
        config = load_config(args.config)
        validate_config(config)
    except (ConfigError, ValidationError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error loading config: {e}", file=sys.stderr)
        return 1

    # Apply CLI overrides
    if args.ui:
        config.setdefault('ui', {})['mode'] = args.ui

    if args.force:
        config.setdefault('output', {})['overwrite'] = True

    if args.output_dir is not None:
        config.setdefault('output', {})['directory'] = str(args.output_dir)

    rich_ui = get_config_value(config, 'ui.mode', 'rich') == 'rich'
    _setup_logging(config, rich_ui=rich_ui)

    ui = ConsoleUI(config) if rich_ui else HeadlessLogger(config)
    ui.start()

    try:
        return run(config, args, ui)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.debug("Fatal error", exc_info=True)
        print(f"\nFatal error: {e}", file=sys.stderr)
        return 1
    finally:
        ui.stop()


def run(config: dict, args: argparse.Namespace, ui) -> int:
    """
    Derive the shift and process every requested file.

    Args:
        config: Validated configuration with CLI overrides applied
        args: Parsed command-line arguments
        ui: ConsoleUI or HeadlessLogger

    Returns:
        Exit code
    """
    mode = Mode(args.mode)

    key_input = _read_key(args)
    if not key_input:
        ui.error("No key entered.")
        ui.print_summary()
        return 1

    try:
        shift = derive_shift(key_input)
    except KeyDerivationError as e:
        ui.error(str(e))
        ui.print_summary()
        return 1

    ui.key_derived(shift)

    processor = FileProcessor.from_config(config)
    output_dir = get_config_value(config, 'output.directory')
    output_dir = Path(output_dir).expanduser() if output_dir else None

    failures: List[Path] = []
    for source in args.files:
        try:
            if source.is_file():
                ui.file_loaded(source, source.stat().st_size)
            ui.operation_started(mode, source)
            result = processor.process(
                source,
                shift,
                mode,
                output=args.output,
                output_dir=output_dir,
                dry_run=args.dry_run
            )
        except (ProcessingError, OSError) as e:
            logger.debug(f"Failed to process {source}", exc_info=True)
            ui.operation_failed(source, str(e))
            failures.append(source)
            continue

        ui.operation_succeeded(result)

    ui.print_summary()
    return 1 if failures else 0


if __name__ == '__main__':
    sys.exit(main())
