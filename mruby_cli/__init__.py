"""mruby-cli -- scaffolding for mruby command-line applications."""

__version__ = "0.1.0"
