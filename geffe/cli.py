"""Command that prints keystream bits from a fixed Geffe key."""

from __future__ import annotations

import sys

from geffe.generator import GeffeGenerator

DEFAULT_KEY = (806014269, 55649069, 2352825186)


def main(argv: list[str] | None = None) -> int:
    """Print the requested number of keystream bits; return the exit status."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        return 1
    try:
        count = int(args[0])
    except ValueError:
        return 1
    generator = GeffeGenerator()
    for index, value in enumerate(DEFAULT_KEY):
        generator.set_register(value, index)
    sys.stdout.write("".join(str(int(generator.clock())) for _ in range(max(count, 0))))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())