"""
A collection of notes that a deprecation check can emit.

PLEASE NOTE: the summary field is not escaped when rendered, so only use it
for plain text output.

The longer text field is markdown; variables interpolated into it are HTML
escaped by show_text().
"""

from enum import Enum
from typing import Any, Dict, List, Type, Union

from markdown import markdown
from markupsafe import Markup, escape


class categories(Enum):
    "Note classifications."
    GENERAL = "General"
    DEPRECATION = "Deprecation"


class levels(Enum):
    "Note levels."
    GOOD = "good"
    WARN = "warning"
    BAD = "bad"
    INFO = "info"


class Note:
    """
    A note about a response's deprecation headers.
    """

    category = None  # type: categories
    level = None  # type: levels
    summary = ""
    text = ""

    def __init__(self, subject: str, vrs: Dict[str, Union[str, int]] = None) -> None:
        self.subject = subject
        self.vars = vrs or {}

    def __eq__(self, other: Any) -> bool:
        return bool(
            self.__class__ == other.__class__
            and self.vars == other.vars
            and self.subject == other.subject
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.subject}>"

    def show_summary(self) -> str:
        """
        Output a textual summary of the note as a Unicode string.

        Note that if it is displayed in an environment that needs
        encoding (e.g., HTML), that is *NOT* done.
        """
        return self.summary % self.vars

    def show_text(self) -> Markup:
        """
        Show the HTML text for the note as a Unicode string.

        The resulting string is already HTML-encoded.
        """
        return Markup(
            markdown(
                self.text % {k: escape(str(v)) for k, v in self.vars.items()},
                output_format="html",
            )
        )


class NoteCollector:
    """
    An add_note callable that keeps the notes it is given, in order.
    """

    def __init__(self) -> None:
        self.notes = []  # type: List[Note]

    def __call__(self, subject: str, note: Type[Note], **kw: Union[str, int]) -> None:
        self.notes.append(note(subject, kw))

    @property
    def note_classes(self) -> List[str]:
        return [n.__class__.__name__ for n in self.notes]


def null_add_note(subject: str, note: Type[Note], **kw: Union[str, int]) -> None:
    "Discard a note."
