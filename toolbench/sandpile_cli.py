"""Command that runs the sandpile model and saves BMP snapshots."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from toolbench.sandpile import simulate
from toolbench.sandpile_image import write_bmp
from toolbench.sandpile_options import parse_args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation; the final pile reuses the last snapshot number."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(args)
        if options.output_path is None:
            raise ValueError("no output prefix given")
        prefix = options.output_path
        pile, snapshots = simulate(
            options, lambda snapshot, number: write_bmp(snapshot, prefix, number)
        )
        write_bmp(pile, prefix, snapshots)
    except (ValueError, OSError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())