"""Render the ``pastebox`` API reference with pdoc."""

from pathlib import Path

import pdoc


def main() -> None:
    """Write HTML documentation for the ``pastebox`` package into ``docs/``."""

    output_dir = Path("docs")
    output_dir.mkdir(exist_ok=True)
    pdoc.pdoc("pastebox.paste", "pastebox.services", "pastebox.core.config", output_directory=output_dir)


if __name__ == "__main__":
    main()
