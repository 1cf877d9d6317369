"""Configuration management for the legend builder."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from .models.legend import LegendDecoration, LegendStyle


class AppConfig(BaseModel):
    """Application-level configuration."""

    # Legend defaults
    symbol_size: int = Field(
        default=16,
        ge=0,
        le=512,
        description="Square symbol size in pixels (0 disables generic symbols)",
    )
    max_depth: int = Field(default=32, ge=1, description="Maximum layer group nesting")
    decoration: LegendDecoration = Field(default_factory=LegendDecoration)

    # Directories
    output_dir: Path = Field(
        default=Path.cwd() / "output",
        description="Default output directory for exported symbols",
    )

    @classmethod
    def load(cls) -> "AppConfig":
        """Load configuration from environment and defaults."""
        defaults = cls.model_fields
        return cls(
            symbol_size=int(os.environ.get("MAPLEGEND_SYMBOL_SIZE", defaults["symbol_size"].default)),
            max_depth=int(os.environ.get("MAPLEGEND_MAX_DEPTH", defaults["max_depth"].default)),
            output_dir=Path(os.environ.get("MAPLEGEND_OUTPUT_DIR", str(defaults["output_dir"].default))),
        )

    def legend_style(self, symbol_size: Optional[int] = None) -> LegendStyle:
        """Legend style for this configuration, optionally overriding the symbol size."""
        size = self.symbol_size if symbol_size is None else symbol_size
        return LegendStyle(symbol_size=(size, size), max_depth=self.max_depth)

    def ensure_directories(self) -> None:
        """Create necessary directories."""
        self.output_dir.mkdir(parents=True, exist_ok=True)


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get or create global configuration."""
    global _config
    if _config is None:
        _config = AppConfig.load()
    return _config
