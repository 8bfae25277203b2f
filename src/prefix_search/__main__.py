"""Allow ``python -m prefix_search``."""

from .cli import main

if __name__ == '__main__':
    main()
