"""
Tests for the playground shell and its menu loop.
"""
import io
import os
import sys
import unittest

from loguru import logger

# Add parent directory to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ai_playground.app import AIPlayground, MenuOption, parse_choice
from ai_playground.cli import main
from ai_playground.components import AIComponent
from ai_playground.console import Console

def make_playground(script: str = ""):
    """Build a playground reading ``script`` and writing to a buffer."""
    output = io.StringIO()
    console = Console(stdin=io.StringIO(script), stdout=output)
    return AIPlayground(console=console), output

class TestParseChoice(unittest.TestCase):

    def test_valid_choices(self):
        self.assertIs(parse_choice("1"), MenuOption.INITIALIZE)
        self.assertIs(parse_choice(" 7 "), MenuOption.EXIT)

    def test_invalid_choices(self):
        for raw in ("", "0", "8", "-1", "abc", "2.5", "1 2"):
            self.assertIsNone(parse_choice(raw))

class TestAIPlayground(unittest.TestCase):
    """Test cases for AIPlayground."""

    def test_components_view(self):
        playground, _ = make_playground()
        self.assertEqual(len(playground.components), 2)
        self.assertIs(playground.components[0], playground.llm_interface)
        self.assertIs(playground.components[1], playground.prompt_manager)
        for component in playground.components:
            self.assertIsInstance(component, AIComponent)

    def test_initialize_order(self):
        playground, output = make_playground()
        playground.initialize()
        text = output.getvalue()
        self.assertLess(
            text.index("Initializing LLM Interface"),
            text.index("Initializing Prompt Manager"),
        )
        self.assertIn("Initialization complete!", text)
        self.assertTrue(playground.llm_interface.is_connected)

    def test_demo_without_api_key(self):
        playground, output = make_playground()
        playground.initialize()
        playground.run_demo()
        text = output.getvalue()
        self.assertIn("Template 0: Explain {topic} in simple terms", text)
        self.assertIn("Template 2: Analyze the following: {content}", text)
        self.assertNotIn("Template 3:", text)
        self.assertIn("Response: Error: API key not set", text)
        self.assertIn("- LLM Interface: Interface for Large Language Models", text)
        self.assertIn("- Prompt Manager: Manages and templates prompts", text)

    def test_demo_with_api_key(self):
        playground, output = make_playground()
        playground.initialize()
        playground.llm_interface.set_api_key("sk-test")
        playground.run_demo()
        self.assertIn(
            "Response: This is a mock response from gpt-3.5-turbo for: Hello, how are you?",
            output.getvalue(),
        )

    def test_invalid_option_leaves_state_alone(self):
        playground, output = make_playground()
        self.assertTrue(playground.handle_choice("banana"))
        self.assertTrue(playground.handle_choice("42"))
        self.assertEqual(output.getvalue().count("Invalid option. Please try again."), 2)
        self.assertFalse(playground.llm_interface.is_connected)
        self.assertEqual(playground.prompt_manager.template_count, 8)

    def test_exit_choice(self):
        playground, output = make_playground()
        self.assertFalse(playground.handle_choice("7"))
        self.assertIn("Goodbye!", output.getvalue())

    def test_scripted_session(self):
        script = "\n".join([
            "1",
            "3", "sk-test",
            "4", "Write a haiku about {season}",
            "4", "",
            "5",
            "6", "Hi there",
            "7",
        ]) + "\n"
        playground, output = make_playground(script)
        playground.run()
        text = output.getvalue()

        self.assertIn("Welcome to AI Playground!", text)
        self.assertIn("Version 1.0.0", text)
        self.assertIn("Added template: Write a haiku about {season}", text)
        self.assertIn("Cannot add empty template", text)
        self.assertIn("8: Write a haiku about {season}", text)
        self.assertNotIn("9: ", text)
        self.assertIn("Response: This is a mock response from gpt-3.5-turbo for: Hi there", text)
        self.assertTrue(text.rstrip().endswith("Goodbye!"))
        self.assertEqual(playground.llm_interface.api_key, "sk-test")

    def test_prompt_before_initialize(self):
        playground, output = make_playground("6\nHello\n7\n")
        playground.run()
        self.assertIn("Response: Error: LLM Interface not initialized", output.getvalue())

    def test_end_of_input_exits_loop(self):
        playground, output = make_playground("5\n")
        playground.run()
        text = output.getvalue()
        self.assertIn("All available templates:", text)
        self.assertTrue(text.rstrip().endswith("Goodbye!"))

    def test_end_of_input_during_payload(self):
        playground, output = make_playground("4")
        playground.run()
        text = output.getvalue()
        self.assertIn("Cannot add empty template", text)
        self.assertTrue(text.rstrip().endswith("Goodbye!"))
        self.assertEqual(playground.prompt_manager.template_count, 8)

    def test_undecodable_choice_is_invalid(self):
        output = io.StringIO()
        stdin = io.TextIOWrapper(io.BytesIO(b"\xff\n7\n"), encoding="utf-8")
        playground = AIPlayground(console=Console(stdin=stdin, stdout=output))
        playground.run()
        text = output.getvalue()
        self.assertIn("Invalid option. Please try again.", text)
        self.assertLess(text.index("Invalid option"), text.rindex("Goodbye!"))
        self.assertTrue(text.rstrip().endswith("Goodbye!"))

    def test_undecodable_payload_is_replaced(self):
        output = io.StringIO()
        stdin = io.TextIOWrapper(io.BytesIO(b"1\n3\nkey\n6\nhi \xfe\n7\n"), encoding="utf-8")
        playground = AIPlayground(console=Console(stdin=stdin, stdout=output))
        playground.run()
        self.assertIn(
            "Response: This is a mock response from gpt-3.5-turbo for: hi \ufffd",
            output.getvalue(),
        )

    def test_menu_lists_every_option(self):
        playground, output = make_playground()
        playground.show_menu()
        text = output.getvalue()
        for line in ("1. Initialize components", "3. Set API key", "6. Test LLM response", "7. Exit"):
            self.assertIn(line, text)

class TestMain(unittest.TestCase):

    def test_main_ignores_arguments(self):
        stdin, stdout = sys.stdin, sys.stdout
        try:
            sys.stdin = io.StringIO("7\n")
            sys.stdout = io.StringIO()
            self.assertEqual(main(["--anything", "x"]), 0)
            self.assertIn("Goodbye!", sys.stdout.getvalue())
        finally:
            sys.stdin, sys.stdout = stdin, stdout
            logger.remove()
            logger.add(sys.stderr)

if __name__ == '__main__':
    unittest.main()
