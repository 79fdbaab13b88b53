# --- Directory scanning convenience -----------------------------------------
import os
from typing import Optional

from decl_index.src.decl_index.config import FileKind, ScanConfig
from decl_index.src.decl_index.indexer import JavaIndexer
from decl_index.src.decl_index.log_setup import get_logger
from decl_index.src.decl_index.models.ast_models import ExtractionResult

logger = get_logger("scanning")


def read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def index_file(indexer: JavaIndexer, path: str, config: ScanConfig) -> Optional[ExtractionResult]:
    """
    Extracts a single file. Returns None when the file has no extractor
    (recognized-but-unimplemented languages, data files, unknown types).
    """
    kind = config.classify(path)
    if kind is not FileKind.EXTRACTABLE:
        if kind is FileKind.NOT_IMPLEMENTED:
            logger.debug("No extractor yet for %s", path)
        return None
    source = read_text(path)
    logger.info("Indexing %s", path)
    return indexer.index_source(source, path, config.default_package)


def index_directory(indexer: JavaIndexer, root_dir: str, config: ScanConfig) -> dict[str, ExtractionResult]:
    """
    Recursively extracts every file under `root_dir` that has an extractor.
    Files that can't be read are logged and left out; one bad file never
    stops the scan.
    """
    results: dict[str, ExtractionResult] = {}
    for dirpath, dirnames, filenames in os.walk(root_dir):
        dirnames.sort()
        for fn in sorted(filenames):
            full = os.path.join(dirpath, fn)
            try:
                result = index_file(indexer, full, config)
            except OSError as e:
                logger.warning("Failed to read %s: %s", full, e)
                continue
            if result is not None:
                results[full] = result
    return results


def index_path(indexer: JavaIndexer, path: str, config: ScanConfig) -> dict[str, ExtractionResult]:
    """Indexes a single file or a whole directory tree."""
    if os.path.isdir(path):
        return index_directory(indexer, path, config)
    result = index_file(indexer, path, config)
    return {path: result} if result is not None else {}
