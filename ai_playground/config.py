"""Configuration settings for the AI playground."""
from typing import Dict, Any, Optional
import copy

DEFAULTS: Dict[str, Any] = {
    "app": {
        "name": "AI Playground",
        "version": "1.0.0",
        "tagline": "A Python project for experimenting with AI and LLM APIs",
        "debug": False,
    },
    "llm": {
        "model_name": "gpt-3.5-turbo",
        "max_tokens": 1000,
        "temperature": 0.7,
    },
    "logging": {
        "level": "WARNING",
    },
}

class Config:
    """Configuration manager for the AI playground.

    Values live in a nested dict seeded from ``DEFAULTS``. Nothing is read
    from files or the environment; callers pass overrides explicitly.
    """

    def __init__(self, overrides: Optional[Dict[str, Any]] = None):
        """Initialize configuration.

        Args:
            overrides: Nested values merged over the defaults
        """
        self._config = copy.deepcopy(DEFAULTS)
        if overrides:
            self.update(overrides)

    def update(self, overrides: Dict[str, Any]) -> 'Config':
        """Merge nested ``overrides`` into the current values.

        Returns:
            self for method chaining
        """
        _merge(self._config, overrides)
        return self

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dotted key, e.g. ``'llm.model_name'``."""
        node: Any = self._config
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def to_dict(self) -> Dict[str, Any]:
        """Return a deep copy of every value."""
        return copy.deepcopy(self._config)

def _merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        current = target.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            _merge(current, value)
        else:
            target[key] = copy.deepcopy(value)

# Global configuration instance
config = Config()
