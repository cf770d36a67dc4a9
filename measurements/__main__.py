"""Entrypoint for running the measurements command line."""

from . import run

if __name__ == "__main__":
    run()
