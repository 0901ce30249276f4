"""
AI Playground.

A small scaffold for experimenting with LLM clients and prompt templates.
"""

from .app import AIPlayground, MenuOption
from .components import AIComponent
from .config import Config, config
from .console import Console
from .llm import LLMInterface, LLMConfig, PromptManager, Sentinel

__version__ = "1.0.0"

__all__ = [
    'AIPlayground',
    'MenuOption',
    'AIComponent',
    'Config',
    'config',
    'Console',
    'LLMInterface',
    'LLMConfig',
    'PromptManager',
    'Sentinel',
]
