"""Command line interface for AnkiTrans dictionary lookups"""

import argparse
import json
import sys
from pathlib import Path

from .config.settings import settings
from .core.composer import primary_meaning
from .core.dictionary_service import LookupResult
from .core.factory import create_dictionary_service
from .exceptions import AnkiTransError, MalformedInputError
from .logging_config import get_logger, setup_logging
from .templates.card_template import AnkiTransCardTemplate

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser"""
    prog_name = Path(sys.argv[0]).name
    parser = argparse.ArgumentParser(
        prog=prog_name,
        description="Look words up on Bing Dictionary and compose AnkiTrans card fields",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ankitrans application                       # Look up one word
  ankitrans apple banana --json               # Print card fields as JSON
  ankitrans applications --html saved.html    # Parse a saved results page
  ankitrans --show-template                   # Print the note type visuals
        """,
    )

    parser.add_argument("words", nargs="*", help="Words or phrases to look up")

    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "--html",
        type=Path,
        metavar="FILE",
        help="Parse a saved results page instead of fetching (one word only)",
    )
    output_group.add_argument(
        "--json", action="store_true", help="Print the card fields as JSON"
    )
    output_group.add_argument(
        "--record", action="store_true", help="Print the extracted record as JSON"
    )
    output_group.add_argument(
        "--show-template",
        action="store_true",
        help="Print the AnkiTrans note type front/back/CSS and exit",
    )

    log_group = parser.add_argument_group("logging options")
    log_group.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    log_group.add_argument("--debug", action="store_true", help="Enable debug logging")
    log_group.add_argument("--log-file", type=Path, help="Write logs to file")

    return parser


def print_result(result: LookupResult, as_json: bool, show_record: bool) -> None:
    """Print one lookup result"""
    if not result.success or result.fields is None or result.record is None:
        print(f"❌ {result.word}: {result.error}")
        return

    if show_record:
        print(result.record.model_dump_json(indent=2))
    if as_json:
        print(json.dumps(result.fields.to_dict(), ensure_ascii=False, indent=2))
        return

    print("=" * 60)
    print(f"📖 {result.word}  ->  {result.record.headword}")
    meaning = primary_meaning(result.record)
    if meaning:
        print(f"   {meaning}")
    print("=" * 60)
    for name, value in result.fields.to_dict().items():
        if value:
            print(f"{name}: {value}")


def show_template() -> None:
    """Print the note type visuals"""
    card_type = AnkiTransCardTemplate().create_card_type()
    template = card_type["cardTemplates"][0]
    print(f"Model: {card_type['modelName']}")
    print(f"Deck: {settings.anki.deck_name}")
    print(f"Fields: {', '.join(card_type['inOrderFields'])}")
    print("\n--- Front ---")
    print(template["Front"])
    print("\n--- Back ---")
    print(template["Back"])
    print("\n--- CSS ---")
    print(card_type["css"])


def lookup_words_main(args: argparse.Namespace) -> int:
    """Look up the requested words and print their fields; returns exit code"""
    service = create_dictionary_service()

    if args.html:
        if len(args.words) != 1:
            raise MalformedInputError("--html", "requires exactly one word")
        if not args.html.is_file():
            raise MalformedInputError("--html", f"file not found: {args.html}")
        html = args.html.read_text(encoding="utf-8", errors="ignore")
        word = args.words[0]
        try:
            record = service.lookup_html(word, html)
            fields = service.composer.compose(word.strip(), record)
            results = [LookupResult(word, True, record=record, fields=fields)]
        except AnkiTransError as e:
            results = [LookupResult(word, False, error=str(e))]
    else:
        results = service.build_cards(args.words)

    for result in results:
        print_result(result, args.json, args.record)

    failed = [r.word for r in results if not r.success]
    if failed:
        logger.warning(f"Failed words: {', '.join(failed)}")
        return 1
    return 0


def main() -> None:
    """Main entry point for the CLI"""
    parser = create_parser()

    # Handle no arguments case
    if len(sys.argv) == 1:
        parser.print_help()
        sys.exit(0)

    args = parser.parse_args()

    # Setup logging, flags first, then environment settings
    if args.debug or settings.debug:
        log_level = "DEBUG"
    elif args.verbose or settings.verbose:
        log_level = "INFO"
    else:
        log_level = settings.logging.level
    log_file = args.log_file or settings.logging.file
    setup_logging(log_level, str(log_file) if log_file else None)

    try:
        if args.show_template:
            show_template()
            return

        if not args.words:
            parser.error("Provide at least one word, or use --show-template")

        sys.exit(lookup_words_main(args))

    except AnkiTransError as e:
        logger.error(f"Application error: {e}")
        if log_level == "DEBUG":
            logger.exception("Full traceback:")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
