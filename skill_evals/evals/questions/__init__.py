"""Built-in question sets, one module per skill family.

Each per-skill mapping is keyed by skill directory name; `dataset` merges
them and validates the records into TestCase objects.
"""
