"""Main entry point for the language gate."""
import json
import logging
import sys
from config.settings import get_settings

settings = get_settings()

# Setup logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stderr)]
)

logger = logging.getLogger(__name__)


def read_texts(path: str):
    """Read one text per line from a file, or stdin for '-'."""
    handle = sys.stdin if path == '-' else open(path, encoding='utf-8')
    try:
        return [line.rstrip('\n') for line in handle if line.strip()]
    finally:
        if handle is not sys.stdin:
            handle.close()


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description='English / non-English text classifier')
    parser.add_argument('texts', nargs='*', help='Texts to classify')
    parser.add_argument(
        '--file',
        default=None,
        help="File with one text per line ('-' for stdin)"
    )
    parser.add_argument(
        '--threshold',
        type=float,
        default=None,
        help='Ratio of English words needed to classify as English'
    )
    parser.add_argument(
        '--min-word-length',
        type=int,
        default=None,
        help='Minimum word length to consider'
    )
    parser.add_argument(
        '--no-numbers',
        action='store_true',
        help='Do not treat numeric tokens as English'
    )
    parser.add_argument(
        '--explain',
        action='store_true',
        help='Print the full analysis as JSON lines'
    )
    return parser


def main(argv=None):
    """Main entry point."""
    from src.utils.language_detector import analyze_text

    args = build_parser().parse_args(argv)

    texts = list(args.texts)
    if args.file:
        texts.extend(read_texts(args.file))
    if not texts:
        logger.error("No input texts given")
        return 2

    overrides = {}
    if args.threshold is not None:
        overrides['english_threshold'] = args.threshold
    if args.min_word_length is not None:
        overrides['min_word_length'] = args.min_word_length
    if args.no_numbers:
        overrides['allow_numbers'] = False

    non_english_count = 0
    for text in texts:
        analysis = analyze_text(text, overrides)
        non_english_count += analysis.non_english
        if args.explain:
            print(json.dumps({'text': text, **analysis.to_dict()}, ensure_ascii=False))
        else:
            label = 'NON-EN' if analysis.non_english else 'EN'
            print(f"{label}\t{text}")

    logger.info(f"Classified {len(texts)} texts: {non_english_count} non-English")
    return 0


if __name__ == "__main__":
    sys.exit(main())
