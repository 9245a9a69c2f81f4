"""Batch sentence extraction with per-document failure isolation."""

from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..core.abc import Logger, Segmenter
from ..core.errors import DocumentLoadError
from ..core.types import DocumentResult


def extract_documents(extractor: Segmenter, paths: Iterable[Union[str, Path]], *,
                      encoding: str = "utf-8",
                      logger: Optional[Logger] = None) -> List[DocumentResult]:
    """
    Extract sentences from several documents.

    A document that cannot be found, read or decoded is reported on its own
    result and processing continues with the next one.

    Args:
        extractor: Segmenter used for every document
        paths: Document paths, processed in order
        encoding: Expected text encoding of the documents
        logger: Optional structured logger

    Returns:
        List[DocumentResult]: One result per path, in input order
    """
    results: List[DocumentResult] = []

    for path in paths:
        file_name = str(path)
        try:
            sentences = list(extractor.extract_file(path, encoding=encoding))
        except DocumentLoadError as e:
            if logger:
                logger.error("document_failed", file_name=file_name, error=str(e))
            results.append(DocumentResult(file_name=file_name, error=str(e)))
            continue

        if logger:
            logger.info("document_extracted", file_name=file_name, sentences=len(sentences))
        results.append(DocumentResult(file_name=file_name, sentences=sentences))

    return results
