"""
LLM Module

Provides the mock LLM interface and the prompt template manager.
"""

from .errors import Sentinel
from .llm_interface import LLMInterface, LLMConfig
from .prompt_manager import PromptManager, DEFAULT_TEMPLATES

__all__ = ['LLMInterface', 'LLMConfig', 'PromptManager', 'DEFAULT_TEMPLATES', 'Sentinel']
