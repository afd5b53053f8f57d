"""
Abstract base class for ping command-line builders
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import PingConfig


class BaseBuilder(ABC):
    """
    Translate a PingConfig into arguments for the platform's ping.

    DEFAULTS holds the values used for fields left as None in the
    caller's config.
    """

    DEFAULTS: dict = {}

    def resolve_config(self, config: Optional[PingConfig] = None) -> PingConfig:
        """
        Return a copy of config with platform defaults filled in.

        Only fields that are None are replaced; explicit False or 0 values
        are kept.
        """
        config = config or PingConfig()
        changes = {
            key: value for key, value in self.DEFAULTS.items()
            if getattr(config, key) is None
        }
        return config.copy(**changes)

    @abstractmethod
    def get_command_arguments(self, target: str, config: PingConfig) -> list[str]:
        """
        Build ping arguments (without the executable).

        Args:
            target: Hostname or IP address
            config: Resolved configuration

        Returns:
            Argument list ending with target
        """
        pass

    def get_spawn_options(self) -> dict:
        """Extra keyword arguments for subprocess.run"""
        return {}
