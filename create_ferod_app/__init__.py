"""create-ferod-app: scaffold new Ferod Discord bot projects."""

__version__ = "0.1.0"
