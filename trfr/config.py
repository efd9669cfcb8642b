"""
Configuration for reading TRF output.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, IO, Union

import yaml

from .core.variant import FormatVariant
from .reader import Reader


@dataclass
class ReaderConfig:
    """Reader configuration.

    Attributes:
        variant: TRF output dialect ('d' for -d data files, 'ngs' for -ngs output)
    """
    variant: FormatVariant = FormatVariant.CLASSIC

    def __post_init__(self):
        self.variant = FormatVariant.from_flag(self.variant)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'ReaderConfig':
        """Create from dictionary."""
        return cls(variant=d.get('variant', 'd'))

    @classmethod
    def from_yaml(cls, path: Path) -> 'ReaderConfig':
        """Load configuration from YAML file."""
        with open(path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping in {path}, got {type(data).__name__}")

        return cls.from_dict(data)

    def open(self, path: Union[str, Path]) -> Reader:
        """Open a TRF output file with this configuration."""
        return Reader.from_path(path, self.variant)

    def wrap(self, source: IO) -> Reader:
        """Wrap an already open source with this configuration."""
        return Reader.from_reader(source, self.variant)
