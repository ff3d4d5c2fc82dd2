"""
Console entry point for ``foldline [path] [--debug]``.
"""
from __future__ import annotations

from typing import Sequence

from foldline.app import FoldlineApplication


def main(argv: Sequence[str] | None = None) -> int:
    return FoldlineApplication(argv).run()


if __name__ == "__main__":
    raise SystemExit(main())
