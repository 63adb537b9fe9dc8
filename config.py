"""Configuration management for Spendbook.

Reads configuration from ~/.config/spendbook.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
import tomllib
import tomli_w


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    data_dir: Path
    data_filename: str
    log_level: str
    log_dir: Path
    currency_suffix: str = "Ft"
    decimal_places: int = 0

    @property
    def data_path(self) -> Path:
        """Get the full path of the expenses document (data_dir/filename)."""
        return self.data_dir / self.data_filename

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "spendbook"
        return cls(
            base_dir=base_dir,
            data_dir=base_dir,
            data_filename="expenses.json",
            log_level="INFO",
            log_dir=base_dir / "logs",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "spendbook.toml"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    # If config doesn't exist, create it with defaults
    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return config_from_dict(data)


def config_from_dict(data: dict) -> Config:
    """Build a Config from parsed TOML data, using defaults for missing values."""
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "spendbook"))

    storage_config = data.get("storage", {})
    data_dir = Path(storage_config.get("data_dir", base_dir))
    data_filename = storage_config.get("filename", "expenses.json")

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    display_config = data.get("display", {})
    currency_suffix = display_config.get("currency_suffix", "Ft")
    decimal_places = int(display_config.get("decimal_places", 0))

    return Config(
        base_dir=base_dir,
        data_dir=data_dir,
        data_filename=data_filename,
        log_level=log_level,
        log_dir=log_dir,
        currency_suffix=currency_suffix,
        decimal_places=decimal_places,
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "storage": {
            "data_dir": str(config.data_dir),
            "filename": config.data_filename,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "display": {
            "currency_suffix": config.currency_suffix,
            "decimal_places": config.decimal_places,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
