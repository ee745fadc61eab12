"""Constants for vault link reconciliation (private)."""

import re

DOCUMENT_EXTENSION = ".md"

# Target is everything up to the first closing bracket; no escapes, no nesting
WIKILINK_PATTERN = re.compile(r"\[\[([^\]]+)\]\]")

# Phase names used in user-facing error messages
PHASE_SCAN = "finding markdown files"
PHASE_EXTRACT = "extracting links from files"
PHASE_INDEX = "finding missing files"
PHASE_VALIDATE = "validating link targets"
PHASE_CREATE = "creating missing files"
