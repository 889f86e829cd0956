"""tapedeck: name, stage and finalize recorded tracks."""

__version__ = "0.1.0"
