"""Configuration handling for git-branch-sweeper"""

from dataclasses import dataclass


DELETION_ORDERS = ["lifo", "fifo"]
FAILURE_POLICIES = ["continue", "abort"]


@dataclass
class Config:
    """Configuration for git-branch-sweeper with validation."""

    # Branch listing
    date_format: str = "%Y-%m-%d %H:%M"

    # Deletion behaviour
    deletion_order: str = "lifo"  # lifo: last selected goes first, fifo: selection order
    on_failure: str = "continue"  # continue, abort
    delete_remotes: bool = True  # Push deletes for upstreams the operator authored
    dry_run: bool = False

    # Seconds between loop ticks while deleting
    tick_interval: float = 0.016

    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_deletion_order()
        self._validate_on_failure()
        self._validate_tick_interval()
        self._validate_date_format()

    def _validate_deletion_order(self):
        """Validate deletion_order is one of allowed values."""
        if self.deletion_order not in DELETION_ORDERS:
            raise ValueError(
                f"deletion_order must be one of {DELETION_ORDERS}, got '{self.deletion_order}'"
            )

    def _validate_on_failure(self):
        """Validate on_failure is one of allowed values."""
        if self.on_failure not in FAILURE_POLICIES:
            raise ValueError(
                f"on_failure must be one of {FAILURE_POLICIES}, got '{self.on_failure}'"
            )

    def _validate_tick_interval(self):
        """Validate tick_interval is positive."""
        if self.tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {self.tick_interval}")

    def _validate_date_format(self):
        """Validate date_format is usable inside a git --format string."""
        if not self.date_format or not self.date_format.strip():
            raise ValueError("date_format cannot be empty")
        if ")" in self.date_format:
            raise ValueError("date_format cannot contain ')'")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "date_format": self.date_format,
            "deletion_order": self.deletion_order,
            "on_failure": self.on_failure,
            "delete_remotes": self.delete_remotes,
            "dry_run": self.dry_run,
            "tick_interval": self.tick_interval,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = set(cls.__dataclass_fields__)
        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
