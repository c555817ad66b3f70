"""Root shim so `python main.py` runs the DevFlow CLI."""

from devflow import main

if __name__ == "__main__":
    main()
