import os
from dataclasses import dataclass
from typing import Optional, Tuple

DATASET_URL = "https://unicodey.com/emoji-data/emoji.json"
APP_EMOJI_DIR = os.path.join("..", "Signal", "src", "util", "Emoji")
FILE_NAMES = ("Emoji.swift", "Emoji+Category.swift", "Emoji+Value.swift")


def default_output_dir(script: str) -> str:
    """``../Signal/src/util/Emoji`` relative to the directory holding ``script``."""
    here = os.path.dirname(os.path.abspath(script))
    return os.path.normpath(os.path.join(here, APP_EMOJI_DIR))


@dataclass(frozen=True)
class GeneratorConfig:
    output_dir: str
    dataset_url: str = DATASET_URL
    # None blocks until the server answers, as the generator always has.
    timeout: Optional[float] = None
    file_names: Tuple[str, str, str] = FILE_NAMES
