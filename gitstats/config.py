"""Configuration constants for gitstats."""

import os

from dotenv import load_dotenv

# Load .env file from project root
load_dotenv()

# Revision used when no last commit is given
DEFAULT_REVISION = "HEAD"

# Git commands; {range} is replaced by the commit range
AUTHORS_COMMAND = "git shortlog -se {range}"
COMMITS_COMMAND = "git rev-list --pretty=format:'%h|%at|%ai|%aE' {range} | grep -v commit"
VERSION_COMMAND = "git rev-parse --short {range}"

# Default range boundaries for the CLI
FIRST_COMMIT = os.getenv("GITSTATS_FIRST_COMMIT") or None
LAST_COMMIT = os.getenv("GITSTATS_LAST_COMMIT") or None

# Logging
LOG_LEVEL = os.getenv("GITSTATS_LOG_LEVEL", "WARNING").upper()
