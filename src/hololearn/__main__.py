"""Allows `python -m hololearn`."""
from hololearn.main import main

if __name__ == "__main__":
    main()
