"""Allow running the generator as ``python -m shscaffold``."""

from shscaffold.cli import main

main(prog_name="shscaffold")
