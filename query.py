#!/usr/bin/env python3
"""Ad hoc recipe generation runner.

Generate a recipe without starting the API server.

Usage:
    python query.py chicken rice "bell peppers"
    python query.py --debug chicken rice   # Also show the prompt and outcome JSON

Each argument is one ingredient. The recipe text is rendered as markdown.
"""

import asyncio
import sys

from rich.console import Console
from rich.markdown import Markdown

from pantry_chef.orchestrator.generator import RecipeGenerator
from pantry_chef.models.outcomes import SuccessOutcome
from pantry_chef.prompts.prompts import build_recipe_prompt
from pantry_chef.utils.errors import PantryChefError, error_from_outcome
from pantry_chef.utils.logger import logger

console = Console()


def run_query(ingredient_names: list[str], debug: bool = False) -> int:
    """Generate one recipe and print it.

    Args:
        ingredient_names: Ingredient names in the order given on the command line.
        debug: If True, print the prompt and the full outcome as JSON.

    Returns:
        Process exit code: 0 on success, 1 on any failure.
    """
    generator = RecipeGenerator()

    if debug:
        console.print("[bold cyan]Prompt[/bold cyan]")
        console.print(build_recipe_prompt(ingredient_names), markup=False)

    try:
        outcome = asyncio.run(generator.run(ingredient_names))
    except PantryChefError as e:
        console.print(f"[red]✗ {e.message}[/red]")
        return 1

    if debug:
        console.print("[bold cyan]Outcome[/bold cyan]")
        console.print_json(outcome.model_dump_json())

    if isinstance(outcome, SuccessOutcome):
        console.print()
        console.print(Markdown(outcome.text))
        return 0

    console.print(f"[red]✗ {error_from_outcome(outcome).message}[/red]")
    return 1


if __name__ == "__main__":
    args = sys.argv[1:]
    debug_mode = False
    if args and args[0] == "--debug":
        debug_mode = True
        args = args[1:]

    if not args:
        print('Usage: python query.py [--debug] <ingredient> [<ingredient> ...]')
        print("")
        print("Examples:")
        print("  python query.py chicken rice")
        print('  python query.py --debug eggs milk "bell peppers"')
        sys.exit(1)

    try:
        sys.exit(run_query(args, debug=debug_mode))
    except KeyboardInterrupt:
        logger.info("Query interrupted by user.")
        sys.exit(0)
