"""Generate the Swift ``Emoji`` enum and its extensions from emoji-data."""

from .categories import CategoryIndex
from .codepoints import decode
from .config import GeneratorConfig
from .dataset import Category, DatasetEntry, parse_dataset, sort_and_filter
from .emitter import CodeEmitter, GeneratedFiles
from .errors import DecodeError, EmojiGeneratorError, FetchError, ParseError, WriteError
from .names import normalize
from .pipeline import GenerationPipeline

__version__ = "0.1.0"
