"""Entry-point for ``python -m cardtext.cli``."""

from .main import main

if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
