"""
Logger configuration management
"""

from dataclasses import dataclass
from pathlib import Path

from daily_logger.writers.daily_file_writer import DEFAULT_ROTATION_SIZE


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    ``name`` doubles as the suffix of every generated log filename.
    """

    # Basic settings
    name: str = "logger"
    app_version: str = ""
    async_mode: bool = False

    # Queue settings (for async mode)
    queue_size: int = 10000
    batch_size: int = 100
    flush_interval_ms: int = 100

    # File settings
    target_root: Path = Path("logs")
    rotation_size: int = DEFAULT_ROTATION_SIZE
    auto_flush: bool = True
    encoding: str = "utf-8"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.name:
            raise ValueError("name cannot be empty")
        if "/" in self.name or "\\" in self.name:
            raise ValueError("name cannot contain path separators")
        if "\x00" in self.name or "\x00" in str(self.target_root):
            raise ValueError("name and target_root cannot contain NUL bytes")
        if self.queue_size <= 0:
            raise ValueError("queue_size must be positive")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if self.batch_size > self.queue_size:
            raise ValueError("batch_size cannot exceed queue_size")
        if self.flush_interval_ms < 0:
            raise ValueError("flush_interval_ms cannot be negative")
        if self.rotation_size <= 0:
            raise ValueError("rotation_size must be positive")

        # Convert target_root to Path if it's a string
        if isinstance(self.target_root, str):
            self.target_root = Path(self.target_root)

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            async_mode=False,  # Synchronous for debugging
            auto_flush=True,
        )

    @classmethod
    def performance_config(cls) -> "LoggerConfig":
        """Create configuration optimized for performance."""
        return cls(
            async_mode=True,
            queue_size=50000,
            batch_size=500,
            flush_interval_ms=50,
            auto_flush=False,
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            async_mode=True,
            queue_size=20000,
            batch_size=200,
            auto_flush=True,
        )
