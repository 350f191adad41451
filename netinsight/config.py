"""Configuration management for the graph studio."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from netinsight.log_config import get_logger
from netinsight.params import GenerationParams

logger = get_logger(__name__)


@dataclass
class CanvasConfig:
    """Drawing area the placement hints are drawn in.

    The canvas is a square of side ``size``. The random geometric generator
    also uses ``size`` as the unit its radius is scaled by.
    """

    size: float = 600.0
    grid_spacing: float = 50.0  # Distance between grid lattice points
    grid_jitter: float = 10.0  # Max random offset added to grid points


@dataclass
class GenerationConfig:
    """Topology generation settings.

    Attributes:
        seed: Seed for the default random source; ``None`` is unseeded.
        max_attempts: Restart budget for constructions that can dead-end
            (random regular graph pairing).
        defaults: Parameter values used when a request omits a key.
    """

    seed: int | None = None
    max_attempts: int = 100
    defaults: GenerationParams = field(default_factory=GenerationParams)


@dataclass
class ExportConfig:
    """Output filenames for exported artefacts."""

    adjacency_list_filename: str = "graph_adjacency_list.csv"
    adjacency_matrix_filename: str = "graph_adjacency_matrix.csv"
    histogram_filename: str = "degree_distribution.png"


_SECTIONS = ("canvas", "generation", "export")


@dataclass
class StudioConfig:
    """Top-level configuration aggregating all sections."""

    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    export: ExportConfig = field(default_factory=ExportConfig)

    @classmethod
    def from_yaml(cls, config_path: Path) -> StudioConfig:
        """Load configuration from YAML file.

        Args:
            config_path: Path to YAML configuration file.

        Returns:
            Parsed configuration object.

        Raises:
            FileNotFoundError: If config file doesn't exist.
            yaml.YAMLError: If YAML is invalid.
            ValueError: If configuration is invalid.
        """
        config_path = Path(config_path)
        logger.info(f"Loading configuration from: {config_path}")

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r") as f:
                raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Invalid YAML in configuration: {e}")
            raise

        cfg = cls._from_dict(raw_config or {})
        cfg.validate()
        return cfg

    @classmethod
    def _from_dict(cls, config_dict: dict[str, Any]) -> StudioConfig:
        """Create configuration from dictionary.

        All sections are optional; unknown sections and keys are rejected so
        typos do not silently fall back to defaults.
        """
        if not isinstance(config_dict, dict):
            raise ValueError("Configuration root must be a mapping")

        unknown = set(config_dict) - set(_SECTIONS)
        if unknown:
            raise ValueError(
                f"Unknown configuration section(s): {', '.join(sorted(unknown))}"
            )

        canvas_dict = _section(config_dict, "canvas")
        generation_dict = dict(_section(config_dict, "generation"))
        export_dict = _section(config_dict, "export")

        try:
            canvas = CanvasConfig(**canvas_dict)
            export = ExportConfig(**export_dict)
            defaults_raw = generation_dict.pop("defaults", None) or {}
            if not isinstance(defaults_raw, dict):
                raise ValueError("'generation.defaults' must be a mapping")
            generation = GenerationConfig(
                defaults=GenerationParams.from_mapping(defaults_raw), **generation_dict
            )
        except TypeError as e:
            raise ValueError(f"Invalid configuration key: {e}") from e

        return cls(canvas=canvas, generation=generation, export=export)

    def validate(self) -> None:
        """Validate configuration parameters.

        Raises:
            ValueError: If configuration is invalid.
        """
        logger.debug("Validating configuration")

        if self.canvas.size <= 0:
            raise ValueError("canvas.size must be positive")
        if self.canvas.grid_spacing <= 0:
            raise ValueError("canvas.grid_spacing must be positive")
        if self.canvas.grid_jitter < 0:
            raise ValueError("canvas.grid_jitter must be non-negative")
        if self.generation.max_attempts < 1:
            raise ValueError("generation.max_attempts must be at least 1")
        if self.generation.seed is not None and int(self.generation.seed) < 0:
            raise ValueError("generation.seed must be non-negative")

        logger.debug("Configuration validation passed")

    def summary(self) -> str:
        """Generate configuration summary string."""
        d = self.generation.defaults
        lines = [
            "NETWORK INSIGHT STUDIO CONFIGURATION",
            "=" * 60,
            "",
            "CANVAS",
            "-" * 30,
            f"   Size: {self.canvas.size:g}",
            f"   Grid spacing / jitter: {self.canvas.grid_spacing:g} / {self.canvas.grid_jitter:g}",
            "",
            "GENERATION",
            "-" * 30,
            f"   Seed: {self.generation.seed if self.generation.seed is not None else 'random'}",
            f"   Max attempts: {self.generation.max_attempts}",
            f"   Default node count: {d.node_count}",
            "",
            "EXPORT",
            "-" * 30,
            f"   Adjacency list: {self.export.adjacency_list_filename}",
            f"   Adjacency matrix: {self.export.adjacency_matrix_filename}",
            f"   Degree histogram: {self.export.histogram_filename}",
            "",
            "=" * 60,
        ]
        return "\n".join(lines)


def _section(config_dict: dict[str, Any], name: str) -> dict[str, Any]:
    value = config_dict.get(name) or {}
    if not isinstance(value, dict):
        raise ValueError(f"'{name}' configuration section must be a mapping")
    return value
