"""Build catalogs and extractors from a validated configuration."""

from typing import Optional

from ..core.abc import Logger
from ..segmenters.sentence import DEFAULT_ABBREVIATIONS, SentenceExtractor
from ..symbols.catalog import SymbolCatalog, resolve
from .schema import SymbolConfig


def build_catalog(config: SymbolConfig, logger: Optional[Logger] = None) -> SymbolCatalog:
    """
    Resolve the symbol catalog described by a configuration.

    Args:
        config: Validated symbol configuration
        logger: Optional structured logger

    Returns:
        SymbolCatalog: Built-in table for lang/variant with custom symbols applied
    """
    return resolve(config.lang, config.variant, config.to_symbols(), logger=logger)


def build_extractor(config: SymbolConfig, catalog: Optional[SymbolCatalog] = None,
                    logger: Optional[Logger] = None) -> SentenceExtractor:
    """
    Create a sentence extractor from a configuration.

    Args:
        config: Validated symbol configuration
        catalog: Already-built catalog to reuse (built from config when omitted)
        logger: Optional structured logger

    Returns:
        SentenceExtractor: Extractor using the configured terminators and options
    """
    if catalog is None:
        catalog = build_catalog(config, logger=logger)

    abbreviations = config.segmentation.abbreviations
    if abbreviations is None:
        abbreviations = DEFAULT_ABBREVIATIONS

    return SentenceExtractor(
        catalog,
        track_pairs=config.segmentation.track_pairs,
        abbreviations=abbreviations,
        logger=logger,
    )
