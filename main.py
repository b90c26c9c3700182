"""Run the zoo-store CLI from a source checkout.

`python -m main save "Kyiv Zoo" -o zoo.json` works without installing the
package: `src/` is put on `sys.path` before `cli.main` is imported.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
