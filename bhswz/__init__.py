"""Read, verify and write Brawlhalla SWZ archives, with a dump/pack command line."""

__version__ = "0.1.0"