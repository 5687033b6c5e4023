"""Error raised for fatal configuration problems."""


class ConfigError(Exception):
    """A configuration, mapping or resource file problem that aborts the run."""
