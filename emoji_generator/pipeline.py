import logging
import os
from typing import List, Optional, Union

import requests

from .categories import CategoryIndex
from .config import GeneratorConfig
from .dataset import parse_dataset, sort_and_filter
from .emitter import CodeEmitter, GeneratedFiles
from .errors import FetchError, WriteError

logger = logging.getLogger(__name__)


def fetch_dataset(url: str, timeout: Optional[float] = None) -> bytes:
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"failed to download emoji-data json from {url}: {e}") from e
    logger.info("fetched %d bytes from %s", len(response.content), url)
    return response.content


def write_file(directory: str, name: str, text: str) -> str:
    """Replace ``directory/name`` with ``text``, creating ``directory`` if needed."""
    path = os.path.join(directory, name)
    try:
        os.makedirs(directory, exist_ok=True)
        if os.path.exists(path):
            os.remove(path)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        raise WriteError(f"cannot write {path}: {e}") from e
    logger.info("wrote %s", path)
    return path


class GenerationPipeline:
    def __init__(self, config: GeneratorConfig, emitter: Optional[CodeEmitter] = None):
        self.config = config
        self.emitter = emitter or CodeEmitter()

    def render(self, raw: Union[bytes, str]) -> GeneratedFiles:
        entries = sort_and_filter(parse_dataset(raw))
        logger.info("%d named emoji", len(entries))
        index = CategoryIndex.build(entries)
        return self.emitter.emit(entries, index)

    def run(self) -> List[str]:
        raw = fetch_dataset(self.config.dataset_url, self.config.timeout)
        files = self.render(raw)
        return [
            write_file(self.config.output_dir, name, text)
            for name, text in zip(self.config.file_names, files)
        ]
