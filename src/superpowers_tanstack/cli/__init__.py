"""superpowers-tanstack CLI - session-start project detection.

Uses tyro for type-driven CLI generation from dataclasses.
"""

from __future__ import annotations

from collections.abc import Sequence

import tyro

from superpowers_tanstack.cli.commands.detect import Detect


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI."""
    # configure structlog (respects SUPERPOWERS_TANSTACK_DEBUG env var)
    from superpowers_tanstack.logging_config import (
        configure_logging,
        get_logger,
    )

    configure_logging()

    try:
        cmd = tyro.cli(
            Detect,
            args=argv,
            prog="superpowers-tanstack-detect",
            description="Detect TanStack Start projects and their tooling.",
        )
        return cmd.run()
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        get_logger(__name__).error("detection failed", error=str(e))
        return 1
