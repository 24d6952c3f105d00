import argparse
import logging
from typing import List, Optional

from .config import DATASET_URL, GeneratorConfig, default_output_dir
from .errors import EmojiGeneratorError
from .pipeline import GenerationPipeline

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="emoji-generator",
        description="Generate the Emoji enum sources from the emoji-data dataset.",
    )
    parser.add_argument("--output-dir", help="directory for the generated files "
                        "(default: ../Signal/src/util/Emoji next to the emoji_generator package)")
    parser.add_argument("--url", default=DATASET_URL, help="emoji-data json location")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # The package sits at the repository root, beside the app directory.
    config = GeneratorConfig(
        output_dir=args.output_dir or default_output_dir(__file__),
        dataset_url=args.url,
    )
    try:
        GenerationPipeline(config).run()
    except EmojiGeneratorError as e:
        logger.error("%s failed: %s", e.stage, e)
        return 1
    return 0
