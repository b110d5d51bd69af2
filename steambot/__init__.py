"""steambot: a throttled Steam client with Steam Guard code generation."""

__version__ = "0.1.0"
