"""Allow ``python -m mruby_cli``."""

from mruby_cli.cli import run

if __name__ == "__main__":
    run()
