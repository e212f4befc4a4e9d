"""Allow running treeplate as ``python -m treeplate``."""

from treeplate.cli.main import app

if __name__ == "__main__":
    app()
