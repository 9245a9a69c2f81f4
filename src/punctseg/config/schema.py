"""Pydantic schemas for YAML symbol configuration."""

from pydantic import BaseModel, Field
from typing import List, Optional

from ..symbols.types import Symbol, SymbolType


class SymbolSpec(BaseModel):
    """Custom definition of one symbol role."""
    name: str = Field(description="Symbol role name, e.g. FULL_STOP")
    value: str = Field(min_length=1, max_length=1, description="Character used for this role")
    invalid_chars: str = Field(default="", description="Characters that must not be used for this role")
    before_space: bool = Field(default=False, description="A space is expected before the symbol")
    after_space: bool = Field(default=False, description="A space is expected after the symbol")

    class Config:
        extra = "forbid"  # Strict validation

    def to_symbol(self) -> Symbol:
        """Convert to a catalog Symbol. Raises ValueError for an unknown role name."""
        return Symbol(
            SymbolType.coerce(self.name),
            self.value,
            self.invalid_chars,
            self.before_space,
            self.after_space,
        )


class SegmentationCfg(BaseModel):
    """Sentence extraction options."""
    track_pairs: bool = Field(default=False,
                              description="Do not split inside open brackets and quotes")
    abbreviations: Optional[List[str]] = Field(default=None,
                                               description="Tokens whose full stop does not end a sentence "
                                                           "(None keeps the built-in list)")

    class Config:
        extra = "forbid"


class SymbolConfig(BaseModel):
    """Complete symbol and segmentation configuration for one document set."""
    lang: str = Field(default="en", description="Language code")
    variant: Optional[str] = Field(default=None, description="Language variant, e.g. hankaku")
    symbols: List[SymbolSpec] = Field(default_factory=list,
                                      description="Custom symbols applied in order over the built-in table")
    segmentation: SegmentationCfg = Field(default_factory=SegmentationCfg)

    class Config:
        extra = "forbid"  # Strict validation

    def validate_symbols(self) -> List[str]:
        """Validate custom symbol definitions and return any issues."""
        issues = []

        # Check role names
        known = {t.name for t in SymbolType}
        unknown = [s.name for s in self.symbols if s.name.strip().upper() not in known]
        if unknown:
            issues.append(f"Unknown symbol names: {unknown}")

        # A symbol cannot list its own value as invalid
        for spec in self.symbols:
            if spec.value in spec.invalid_chars:
                issues.append(f"Symbol '{spec.name}' lists its own value '{spec.value}' as invalid")

        empty = [a for a in (self.segmentation.abbreviations or []) if not a.strip()]
        if empty:
            issues.append("Abbreviations must not be empty")

        return issues

    def to_symbols(self) -> List[Symbol]:
        """Custom symbols as catalog Symbols, in configuration order."""
        return [spec.to_symbol() for spec in self.symbols]
