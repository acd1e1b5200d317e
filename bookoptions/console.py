"""Rich console shared by the CLI and the user defaults loader.

Import ``console`` from here so output of every command goes through one
Console and is captured consistently by the test runner.
"""

from rich.console import Console

console = Console()
