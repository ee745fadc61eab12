"""Vaultmend: create the notes an Obsidian vault links to but does not have."""

import logging

logging.getLogger("vaultmend").addHandler(logging.NullHandler())
