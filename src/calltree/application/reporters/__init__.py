"""Call tree reporters."""

from calltree.application.reporters.console import ConsoleConfig, ConsoleReporter
from calltree.application.reporters.plain_text import PlainTextReporter

__all__ = ["ConsoleConfig", "ConsoleReporter", "PlainTextReporter"]
