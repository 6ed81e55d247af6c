"""Configuration for the command-line tools.

Settings are stored as flat JSON objects::

    {
        "sieve_limit": 10000,
        "default_width": "u64",
        "log_level": "INFO",
        "log_file": null
    }
"""

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Union

from primality_test.core.widths import WIDTHS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EngineConfig:
    """Settings shared by the CLI commands."""
    sieve_limit: int = 10000
    default_width: str = "u64"
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'EngineConfig':
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})

    def validate(self) -> 'EngineConfig':
        """Check field values, returning self.

        Raises:
            ValueError: On a wrongly typed field, an out-of-range limit or an
                unknown name.
        """
        if not isinstance(self.sieve_limit, int) or isinstance(self.sieve_limit, bool):
            raise ValueError(f"sieve_limit must be an integer, got {self.sieve_limit!r}")
        for name in ("default_width", "log_level"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string, got {getattr(self, name)!r}")
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ValueError(f"log_file must be a string or null, got {self.log_file!r}")
        if self.sieve_limit < 2:
            raise ValueError(f"sieve_limit must be >= 2, got {self.sieve_limit}")
        if self.default_width not in WIDTHS:
            raise ValueError(
                f"Unknown width: {self.default_width!r}. Available: {list(WIDTHS.keys())}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        return self


def load_config(path: Union[str, Path]) -> EngineConfig:
    """Load and validate a configuration from a JSON file."""
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a JSON object, got {type(data).__name__}")
    return EngineConfig.from_dict(data).validate()


def save_config(config: EngineConfig, path: Union[str, Path]) -> Path:
    """Write a configuration to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
    return path
