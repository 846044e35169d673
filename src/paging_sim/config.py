"""Simulator configuration — the three sizes that shape a run.

A configuration can come from a JSON file::

    {"physical_memory_size": 1024, "page_size": 64, "max_process_size": 512, "seed": 7}

Missing keys fall back to the defaults below.  The optional ``seed``
makes process images reproducible, which is handy for demos.
"""

from __future__ import annotations

import json
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from paging_sim.errors import ConfigError
from paging_sim.memory.manager import MemoryManager

if TYPE_CHECKING:
    from pathlib import Path

    from paging_sim.logging import Logger

DEFAULT_PHYSICAL_MEMORY_SIZE = 1024
DEFAULT_PAGE_SIZE = 64
DEFAULT_MAX_PROCESS_SIZE = 512


@dataclass(frozen=True)
class SimulatorConfig:
    """Sizes used to build a memory manager.

    Validation is left to ``MemoryManager`` so there is exactly one
    place that decides what a legal geometry is.
    """

    physical_memory_size: int = DEFAULT_PHYSICAL_MEMORY_SIZE
    page_size: int = DEFAULT_PAGE_SIZE
    max_process_size: int = DEFAULT_MAX_PROCESS_SIZE
    seed: int | None = None

    def build_manager(self, *, logger: Logger | None = None) -> MemoryManager:
        """Construct a memory manager from this configuration.

        Raises:
            InvalidConfigurationError: If the sizes are inconsistent.

        """
        rng = random.Random(self.seed) if self.seed is not None else None  # noqa: S311
        return MemoryManager(
            self.physical_memory_size,
            self.page_size,
            self.max_process_size,
            logger=logger,
            rng=rng,
        )


def load_config(path: Path) -> SimulatorConfig:
    """Read a configuration from a JSON file.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, or
            does not hold a JSON object of integers.

    """
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        msg = f"Cannot load configuration: {e}"
        raise ConfigError(msg) from e

    if not isinstance(data, dict):
        msg = f"Configuration must be a JSON object, not {type(data).__name__}"
        raise ConfigError(msg)

    values = {
        "physical_memory_size": data.get("physical_memory_size", DEFAULT_PHYSICAL_MEMORY_SIZE),
        "page_size": data.get("page_size", DEFAULT_PAGE_SIZE),
        "max_process_size": data.get("max_process_size", DEFAULT_MAX_PROCESS_SIZE),
        "seed": data.get("seed"),
    }
    for key, value in values.items():
        if value is None and key == "seed":
            continue
        # bool is an int subclass; reject it explicitly
        if not isinstance(value, int) or isinstance(value, bool):
            msg = f"Configuration key {key!r} must be an integer, not {value!r}"
            raise ConfigError(msg)
    return SimulatorConfig(**values)
