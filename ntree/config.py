"""Configuration for NTree.

Usage:
    from ntree import NTree, NTreeConfig, NumericComparator

    # Default config (branching factor 8)
    tree = NTree(NumericComparator())

    # Custom config
    config = NTreeConfig(default_branching=4, strict_empty_queries=True)
    tree = NTree(NumericComparator(), config=config)

    # From file
    config = NTreeConfig.from_json("my_config.json")
"""

from typing import Dict, Any
import json
from dataclasses import dataclass, asdict


# Branching factor used when neither the caller nor a config supplies one
DEFAULT_BRANCHING = 8


@dataclass
class NTreeConfig:
    """Configuration for NTree.

    Attributes:
        default_branching: Branching factor for trees built without an explicit one
        strict_empty_queries: Raise EmptyTreeError on containment queries against
            an empty tree instead of answering False
        config_name: Label used in repr and saved files
    """

    default_branching: int = DEFAULT_BRANCHING
    strict_empty_queries: bool = False

    # Metadata
    config_name: str = "default"

    def __post_init__(self):
        """Validate configuration."""
        if (
            not isinstance(self.default_branching, int)
            or isinstance(self.default_branching, bool)
            or self.default_branching < 1
        ):
            raise ValueError(
                f"default_branching must be a positive integer, got {self.default_branching!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def to_json(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'NTreeConfig':
        """Load configuration from dictionary."""
        return cls(**config_dict)

    @classmethod
    def from_json(cls, filepath: str) -> 'NTreeConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

    def __repr__(self) -> str:
        mode = "strict" if self.strict_empty_queries else "lenient"
        return (
            f"NTreeConfig("
            f"{self.config_name}, "
            f"branching={self.default_branching}, "
            f"{mode})"
        )


# Preset configurations

def get_default_config() -> NTreeConfig:
    """Default configuration: branching 8, containment on empty trees is False."""
    return NTreeConfig(config_name="default")


def get_strict_config() -> NTreeConfig:
    """Configuration that treats containment on an empty tree as an error."""
    return NTreeConfig(config_name="strict", strict_empty_queries=True)
