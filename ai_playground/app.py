"""Main application module for the AI playground."""
from enum import IntEnum
from typing import Optional, Tuple

from loguru import logger

from .components import AIComponent
from .config import Config, config as default_config
from .console import Console
from .llm import LLMConfig, LLMInterface, PromptManager

DEMO_PROMPT = "Hello, how are you?"

class MenuOption(IntEnum):
    """Entries of the interactive menu."""
    INITIALIZE = 1
    RUN_DEMO = 2
    SET_API_KEY = 3
    ADD_TEMPLATE = 4
    LIST_TEMPLATES = 5
    TEST_PROMPT = 6
    EXIT = 7

MENU_LABELS = {
    MenuOption.INITIALIZE: "Initialize components",
    MenuOption.RUN_DEMO: "Run demo",
    MenuOption.SET_API_KEY: "Set API key",
    MenuOption.ADD_TEMPLATE: "Add prompt template",
    MenuOption.LIST_TEMPLATES: "List all templates",
    MenuOption.TEST_PROMPT: "Test LLM response",
    MenuOption.EXIT: "Exit",
}

def parse_choice(raw: str) -> Optional[MenuOption]:
    """Turn a line of user input into a menu option.

    Returns None for anything that is not one of the menu numbers.
    """
    try:
        return MenuOption(int(raw.strip()))
    except ValueError:
        return None

class AIPlayground:
    """Owns the playground components and drives the menu loop."""

    def __init__(self, console: Optional[Console] = None, cfg: Config = default_config):
        """Initialize the playground.

        Args:
            console: Terminal I/O shared by the menu and the components
            cfg: Application configuration
        """
        self.config = cfg
        self.console = console or Console()
        self.llm_interface = LLMInterface(
            llm_config=LLMConfig(
                model=cfg["llm.model_name"],
                max_tokens=cfg["llm.max_tokens"],
                temperature=cfg["llm.temperature"],
            ),
            console=self.console,
        )
        self.prompt_manager = PromptManager(console=self.console)

        # Read-only view used for bulk operations; the attributes above own
        # the components.
        self.components: Tuple[AIComponent, ...] = (self.llm_interface, self.prompt_manager)

    def initialize(self) -> None:
        """Initialize all components, LLM interface first."""
        self.console.write("=== AI Playground Initialization ===")
        for component in self.components:
            component.initialize()
        self.console.write("Initialization complete!")
        logger.info("All components initialized")

    def run_demo(self) -> None:
        """Show a few templates, one mock LLM call and the component list."""
        self.console.write("\n=== AI Playground Demo ===")

        self.console.write("\n1. Prompt Management Demo:")
        for i in range(3):
            self.console.write(f"Template {i}: {self.prompt_manager.get_template(i)}")

        self.console.write("\n2. LLM Interaction Demo:")
        self.console.write(f"Sending prompt: {DEMO_PROMPT}")
        self.console.write(f"Response: {self.llm_interface.generate_response(DEMO_PROMPT)}")

        self.console.write("\n3. Component Information:")
        self.describe_components()

        self.console.write("\nDemo complete!")

    def describe_components(self) -> None:
        for component in self.components:
            self.console.write(f"- {component.name}: {component.description}")

    def show_banner(self) -> None:
        self.console.write(f"Welcome to {self.config['app.name']}!")
        self.console.write(self.config["app.tagline"])
        self.console.write(f"Version {self.config['app.version']}")

    def show_menu(self) -> None:
        """Print the menu; the choice prompt is shown by the read that follows."""
        self.console.write(f"\n=== {self.config['app.name']} Menu ===")
        for option in MenuOption:
            self.console.write(f"{option.value}. {MENU_LABELS[option]}")

    def _read_payload(self, prompt: str) -> str:
        """Read one line of free text; end of input counts as an empty line."""
        try:
            return self.console.read_line(prompt)
        except EOFError:
            self.console.write("")
            return ""

    def _set_api_key(self) -> None:
        self.llm_interface.set_api_key(self._read_payload("Enter API key: "))

    def _add_template(self) -> None:
        self.prompt_manager.add_template(self._read_payload("Enter new prompt template: "))

    def _list_templates(self) -> None:
        self.console.write("\nAll available templates:")
        for i, template in enumerate(self.prompt_manager.all_templates()):
            self.console.write(f"{i}: {template}")

    def _test_prompt(self) -> None:
        prompt = self._read_payload("Enter a test prompt: ")
        self.console.write(f"Response: {self.llm_interface.generate_response(prompt)}")

    def handle_choice(self, raw_choice: str) -> bool:
        """Dispatch one menu choice.

        Args:
            raw_choice: The line the user typed

        Returns:
            False if the user chose to exit, True otherwise
        """
        choice = parse_choice(raw_choice)
        logger.debug(f"Menu choice {raw_choice!r} -> {choice}")

        if choice is None:
            self.console.write("Invalid option. Please try again.")
        elif choice is MenuOption.INITIALIZE:
            self.initialize()
        elif choice is MenuOption.RUN_DEMO:
            self.run_demo()
        elif choice is MenuOption.SET_API_KEY:
            self._set_api_key()
        elif choice is MenuOption.ADD_TEMPLATE:
            self._add_template()
        elif choice is MenuOption.LIST_TEMPLATES:
            self._list_templates()
        elif choice is MenuOption.TEST_PROMPT:
            self._test_prompt()
        elif choice is MenuOption.EXIT:
            self.console.write("Goodbye!")
            return False
        return True

    def run(self) -> None:
        """Run the menu loop until the user exits or input ends."""
        self.show_banner()

        while True:
            self.show_menu()
            try:
                raw_choice = self.console.read_line("Choose an option: ")
            except (EOFError, KeyboardInterrupt):
                self.console.write("\nGoodbye!")
                logger.info("Input closed, leaving menu loop")
                break

            try:
                if not self.handle_choice(raw_choice):
                    break
            except KeyboardInterrupt:
                self.console.write("\nGoodbye!")
                break
