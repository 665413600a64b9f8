"""Command-line interface."""
from elasticnet.main import main

if __name__ == "__main__":
    main()
