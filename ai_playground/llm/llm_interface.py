"""
LLM Interface

Mock client standing in for a hosted large-language-model API.
"""
from typing import Dict, Any, Optional

from loguru import logger

from ..components import AIComponent
from ..config import config
from ..console import Console
from .errors import Sentinel

class LLMConfig:
    """Request settings for the LLM interface."""

    def __init__(
        self,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ):
        """Initialize LLM configuration, falling back to the app config."""
        self.model = model or config["llm.model_name"]
        self.max_tokens = int(max_tokens if max_tokens is not None else config["llm.max_tokens"])
        self.temperature = float(temperature if temperature is not None else config["llm.temperature"])

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'model': self.model,
            'max_tokens': self.max_tokens,
            'temperature': self.temperature,
        }

class LLMInterface(AIComponent):
    """Interface for Large Language Model interactions.

    No request ever leaves the process: once the interface is initialized and
    an API key is set, ``generate_response`` returns a canned reply naming the
    model and echoing the prompt.
    """

    def __init__(
        self,
        model: Optional[str] = None,
        llm_config: Optional[LLMConfig] = None,
        console: Optional[Console] = None,
    ):
        """Initialize the LLM interface.

        Args:
            model: Name of the model to use (default: ``llm.model_name`` from config)
            llm_config: Full request settings; ``model`` wins if both are given
            console: Where status notices are written
        """
        super().__init__("LLM Interface", "Interface for Large Language Models", console)
        base = llm_config or LLMConfig()
        # Own copy, so the caller's settings object is never modified
        self.config = LLMConfig(
            model=model or base.model,
            max_tokens=base.max_tokens,
            temperature=base.temperature,
        )
        self._api_key = ""
        self._connected = False

    @property
    def model_name(self) -> str:
        return self.config.model

    @property
    def is_connected(self) -> bool:
        return self._connected

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def has_api_key(self) -> bool:
        return bool(self._api_key)

    def initialize(self) -> None:
        """Mark the interface as connected.

        There is nothing to validate or reach yet, so this always succeeds.
        """
        self.notify(f"Initializing LLM Interface for model: {self.model_name}")
        self._connected = True
        logger.info(f"LLM Interface connected for model {self.model_name}")

    def process(self) -> None:
        """Report which model requests would go to."""
        if not self._connected:
            self.notify("LLM Interface not connected. Please initialize first.")
            return
        self.notify(f"Processing with LLM model: {self.model_name}")

    def set_api_key(self, key: str) -> None:
        """Store the API key verbatim. The format is not checked."""
        self._api_key = key
        self.notify(f"API key set for {self.model_name}")
        logger.debug(f"API key updated for {self.model_name} (set={bool(key)})")

    def generate_response(self, prompt: str) -> str:
        """Generate a response for a prompt.

        Args:
            prompt: Input prompt

        Returns:
            The mock response, or a sentinel error string when the interface
            is not initialized or has no API key (checked in that order)
        """
        if not self._connected:
            logger.warning("generate_response called before initialize()")
            return Sentinel.NOT_INITIALIZED.value

        if not self._api_key:
            logger.warning("generate_response called without an API key")
            return Sentinel.API_KEY_MISSING.value

        logger.debug(f"Generating mock response for prompt: {prompt!r}")
        return f"This is a mock response from {self.model_name} for: {prompt}"

    def to_dict(self) -> Dict[str, Any]:
        """Describe the interface state. The API key itself is never included."""
        return {
            **self.config.to_dict(),
            'connected': self._connected,
            'api_key_set': self.has_api_key,
        }
