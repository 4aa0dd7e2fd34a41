"""Configuration defaults for gomodwhy."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional


@dataclass
class WhyConfig:
    """Defaults for a dependency-chain query."""

    # Package pattern handed to `go list`
    pattern: str = "."

    # Maximum number of edges per reported chain; 0 means unlimited
    max_depth: int = 0

    # Executable used to list packages
    go_command: str = "go"

    # Merge test-only imports into the graph
    include_test: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WhyConfig":
        """Build a config from defaults overridden by ``GOMODWHY_*`` variables.

        Recognized variables: ``GOMODWHY_GO`` and ``GOMODWHY_PATTERN``. Empty
        values are ignored.
        """
        env = os.environ if environ is None else environ
        config = cls()
        go_command = env.get("GOMODWHY_GO", "").strip()
        if go_command:
            config = replace(config, go_command=go_command)
        pattern = env.get("GOMODWHY_PATTERN", "").strip()
        if pattern:
            config = replace(config, pattern=pattern)
        return config


# Global configuration instance
DEFAULT_CONFIG = WhyConfig()
