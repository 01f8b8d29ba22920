"""
Formatters for deprecation check output.
"""

from configparser import SectionProxy
from html.parser import HTMLParser
import inspect
import json
import re
import sys
import textwrap
from typing import Any, Callable, Dict, List, Optional, Type

from http_deprecation import __version__
from http_deprecation.message import Deprecation
from http_deprecation.speak import Note, categories, levels

NL = "\n"


def find_formatter(name: str, default: str = "text") -> Type["Formatter"]:
    """
    Find the formatter for name, and use default if it can't be found.
    """
    candidates = {
        v.name: v
        for v in list(sys.modules[__name__].__dict__.values())
        if inspect.isclass(v) and issubclass(v, Formatter) and v is not Formatter
    }
    if name in candidates:
        return candidates[name]
    if default in candidates:
        return candidates[default]
    raise RuntimeError(f"Can't find a format in {available_formatters()}")


def available_formatters() -> List[str]:
    "Return a list of the available formatter names."
    return ["text", "json"]


class Formatter:
    """
    A formatter for deprecation check results.
    """

    name: str = "base class"  # the name of the format.

    def __init__(
        self,
        config: SectionProxy,
        output: Callable[[str], None],
        params: Dict[str, Any],
    ) -> None:
        """
        Formatter writing to the callable output(uni_str). Output is Unicode;
        callee is responsible for encoding correctly.
        """
        self.config = config
        self.output = output
        self.kw = params
        self.show_notes = config.getboolean("show_notes", fallback=False)

    def finish_output(self, result: Optional[Deprecation], notes: List[Note]) -> None:
        """
        Output the result of a check.
        """
        raise NotImplementedError

    def error_output(self, message: str) -> None:
        """
        Output an error.
        """
        raise NotImplementedError


class TextFormatter(Formatter):
    """
    Format a result as text.
    """

    name = "text"

    note_categories = [categories.DEPRECATION, categories.GENERAL]

    error_template = "Error: %s\n"

    def finish_output(self, result: Optional[Deprecation], notes: List[Note]) -> None:
        if result is None:
            self.output("Not deprecated." + NL)
        else:
            out = ["Deprecated."]
            if result.timestamp is not None:
                out.append(f"Date: {result.to_dict()['timestamp']}")
            if result.deprecation_link is not None:
                out.append(f"Link: {result.deprecation_link}")
            self.output(NL.join(out) + NL)
        if self.show_notes and notes:
            self.output(NL + self.format_notes(notes))

    def error_output(self, message: str) -> None:
        self.output(self.error_template % message)

    def format_notes(self, notes: List[Note]) -> str:
        return "".join(
            [self.format_category(notes, category) for category in self.note_categories]
        )

    def format_category(self, notes: List[Note], category: categories) -> str:
        notes = [note for note in notes if note.category == category]
        if not notes:
            return ""
        out = [f"* {category.value}:"]
        for note in notes:
            out.append(f"  * {self.colorize(note.level, note.show_summary())}")
            if self.kw.get("verbose", False):
                out.append("")
                out.extend("    " + line for line in self.format_text(note))
                out.append("")
        return NL.join(out) + NL

    @staticmethod
    def format_text(note: Note) -> List[str]:
        return textwrap.wrap(strip_tags(re.sub(r"(?m)\s\s+", " ", note.show_text())))

    def colorize(self, level: Optional[levels], instr: str) -> str:
        if not self.kw.get("tty_out", False):
            return instr
        color_start = {
            levels.GOOD: "\033[1;32m",
            levels.BAD: "\033[1;31m",
            levels.WARN: "\033[1;33m",
        }.get(level, "\033[1;34m")
        return color_start + instr + "\033[0;39m"


class JsonFormatter(Formatter):
    """
    Format a result as JSON.
    """

    name = "json"

    def finish_output(self, result: Optional[Deprecation], notes: List[Note]) -> None:
        doc = {
            "version": __version__,
            "deprecated": result is not None,
            "deprecation": result.to_dict() if result is not None else None,
        }  # type: Dict[str, Any]
        if self.show_notes:
            doc["notes"] = [
                {
                    "id": note.__class__.__name__,
                    "subject": note.subject,
                    "category": note.category.value,
                    "level": note.level.value,
                    "summary": note.show_summary(),
                }
                for note in notes
            ]
        self.output(json.dumps(doc, indent=2) + NL)

    def error_output(self, message: str) -> None:
        self.output(json.dumps({"error": message}) + NL)


class MLStripper(HTMLParser):
    def __init__(self) -> None:
        HTMLParser.__init__(self)
        self.reset()
        self.fed: List[str] = []

    def handle_data(self, data: str) -> None:
        self.fed.append(data)

    def get_data(self) -> str:
        return "".join(self.fed)


def strip_tags(html: str) -> str:
    stripper = MLStripper()
    stripper.feed(html)
    return stripper.get_data()
