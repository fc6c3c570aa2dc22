"""Board game tournament organizer: catalog enrichment, weighted pairings and bracket rounds."""

__version__ = "0.1.0"
