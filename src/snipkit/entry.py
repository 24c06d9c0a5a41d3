"""Console script entry point (``snipkit`` on the PATH).

Lives at package level rather than under ``adapters`` so the CLI adapter
never imports the composition root itself.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with production services and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
