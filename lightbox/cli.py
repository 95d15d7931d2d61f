"""
Command Line Interface for inspecting and replaying portfolio lightboxes.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .input_events import parse_event
from .initialize import init_lightbox
from .lightbox_config import LightboxConfig
from .markup_scanner import MarkupScanner
from .reporter import Reporter


def setup_logging(verbose: bool, level_name: str = 'INFO') -> logging.Logger:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.getLevelName(level_name.upper())

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    return logging.getLogger('lightbox')


def get_config(args: argparse.Namespace) -> LightboxConfig:
    """
    Get lightbox configuration from environment and CLI overrides.

    Raises:
        ValueError: If an environment value cannot be parsed
    """
    config = LightboxConfig.from_env()

    if getattr(args, 'swipe_threshold', None) is not None:
        config.swipe_threshold = args.swipe_threshold
    if getattr(args, 'item_selector', None):
        config.item_selector = args.item_selector
    if getattr(args, 'lightbox_id', None):
        config.lightbox_id = args.lightbox_id

    return config


def load_config(args: argparse.Namespace, logger: logging.Logger) -> Optional[LightboxConfig]:
    """Build and validate configuration, logging any problems."""
    try:
        config = get_config(args)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return None

    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(error)
        return None

    if not getattr(args, 'verbose', False):
        logger.setLevel(config.log_level.upper())
    return config


def add_markup_arguments(parser: argparse.ArgumentParser) -> None:
    """Add page markup options to a parser."""
    group = parser.add_argument_group('Page Markup')
    group.add_argument('--item-selector', help='Override LIGHTBOX_ITEM_SELECTOR (default: .gallery-item)')
    group.add_argument('--lightbox-id', help='Override LIGHTBOX_ELEMENT_ID (default: lightbox)')


def cmd_inspect(args: argparse.Namespace) -> int:
    """Execute inspect command."""
    logger = setup_logging(args.verbose)

    config = load_config(args, logger)
    if config is None:
        return 1

    scanner = MarkupScanner(config, logger)
    try:
        items = scanner.scan_file(args.page)
    except FileNotFoundError:
        logger.error(f"Page not found: {args.page}")
        return 1

    if args.json:
        json.dump([item.to_dict() for item in items], sys.stdout, indent=2)
        print()
    else:
        Reporter().report_items(items, source=args.page)

    return 0


def cmd_replay(args: argparse.Namespace) -> int:
    """Execute replay command."""
    logger = setup_logging(args.verbose)

    config = load_config(args, logger)
    if config is None:
        return 1

    try:
        html = Path(args.page).read_text(encoding='utf-8')
    except FileNotFoundError:
        logger.error(f"Page not found: {args.page}")
        return 1

    try:
        parsed = [(token, parse_event(token)) for token in args.events]
    except ValueError as e:
        logger.error(str(e))
        return 1

    try:
        controller = init_lightbox(MarkupScanner.parse(html), config=config, logger=logger)
        if controller is None:
            logger.error(f"No lightbox to replay against in {args.page}")
            return 1

        transcript = []
        for token, events in parsed:
            for event in events:
                label = token if len(events) == 1 else f"{token} ({type(event).__name__})"
                operation = controller.dispatch(event)
                state = controller.state
                transcript.append((label, operation, f"[{state.phase.value}] {state.counter_text}"))

        reporter = Reporter()
        reporter.report_transcript(transcript)
        print()
        reporter.report_state(controller)

        if args.html:
            Path(args.html).write_text(controller.display.render(), encoding='utf-8')
            logger.info(f"Rendered page written to: {args.html}")

        return 0

    except Exception as e:
        logger.exception(f"Replay failed: {e}")
        return 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='lightbox',
        description='Gallery lightbox tools for a static photography portfolio',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m lightbox inspect index.html
  python -m lightbox replay index.html item:0 next key:ArrowRight touch:300:100 key:Escape

Event tokens:
  item:N, close, prev, next, background, content, key:NAME, touch:START:END
"""
    )

    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Inspect command
    inspect_parser = subparsers.add_parser('inspect', help='List the gallery items of a page')
    inspect_parser.add_argument('page', help='HTML page to scan')
    inspect_parser.add_argument('--json', action='store_true', help='Print items as JSON')
    inspect_parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')
    add_markup_arguments(inspect_parser)

    # Replay command
    replay_parser = subparsers.add_parser('replay', help='Replay input events against a page lightbox')
    replay_parser.add_argument('page', help='HTML page containing the gallery and lightbox')
    replay_parser.add_argument('events', nargs='*', help='Event tokens to dispatch in order')
    replay_parser.add_argument('--html', metavar='OUT', help='Write the page with the final lightbox state')
    replay_parser.add_argument('--swipe-threshold', type=int, metavar='PX',
                               help='Override LIGHTBOX_SWIPE_THRESHOLD (default: 50)')
    replay_parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')
    add_markup_arguments(replay_parser)

    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'inspect':
        return cmd_inspect(parsed_args)
    elif parsed_args.command == 'replay':
        return cmd_replay(parsed_args)

    return 1
