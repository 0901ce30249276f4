"""Command-line entry point for the AI playground."""
from typing import Optional, List

from loguru import logger

from .app import AIPlayground
from .config import config
from .logging_setup import setup_logging

def main(args: Optional[List[str]] = None) -> int:
    """Run the interactive playground.

    Args:
        args: Command-line arguments; accepted for symmetry and ignored

    Returns:
        Process exit status
    """
    setup_logging(config)
    if args:
        logger.debug(f"Ignoring command-line arguments: {args}")

    logger.info("Starting AI Playground...")
    playground = AIPlayground()
    playground.run()
    logger.info("AI Playground finished successfully")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
