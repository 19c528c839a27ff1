"""A text alert dialog built with chained setters."""

from __future__ import annotations

import sys
from enum import Enum

_MAX_TITLE = 511
_MAX_TEXT = 1023


class AlertDialogButton(Enum):
    """Buttons a dialog can offer."""

    NONE = "None"
    YES_NO = "YesNo"
    YES_NO_CANCEL = "YesNoCancel"
    OK = "Ok"


class AlertDialogIcon(Enum):
    """Icons a dialog can show."""

    NONE = "None"
    INFORMATION = "Information"
    WARNING = "Warning"
    CRITICAL = "Critical"
    QUESTION = "Question"


class AlertDialog:
    """A dialog with a title, text, buttons and an icon."""

    def __init__(self) -> None:
        self.title = ""
        self.text = ""
        self.button = AlertDialogButton.OK
        self.icon = AlertDialogIcon.NONE

    def set_title(self, title: str) -> AlertDialog:
        """Set the title and return the dialog."""
        if len(title) > _MAX_TITLE:
            raise ValueError(f"title longer than {_MAX_TITLE} characters")
        self.title = title
        return self

    def set_text(self, text: str) -> AlertDialog:
        """Set the text and return the dialog."""
        if len(text) > _MAX_TEXT:
            raise ValueError(f"text longer than {_MAX_TEXT} characters")
        self.text = text
        return self

    def set_button(self, button: AlertDialogButton) -> AlertDialog:
        """Set the buttons and return the dialog."""
        self.button = AlertDialogButton(button)
        return self

    def set_icon(self, icon: AlertDialogIcon) -> AlertDialog:
        """Set the icon and return the dialog."""
        self.icon = AlertDialogIcon(icon)
        return self

    def render(self) -> str:
        """Return the dialog as lines of text; empty parts are left out."""
        lines = []
        if self.title:
            lines.append(f"Title:{self.title}\n")
        if self.text:
            lines.append(f"Text:{self.text}\n")
        if self.button is not AlertDialogButton.NONE:
            lines.append(f"Button:{self.button.value}\n")
        if self.icon is not AlertDialogIcon.NONE:
            lines.append(f"Icon:{self.icon.value}\n")
        return "".join(lines)

    def show(self) -> str:
        """Write the dialog to standard output and return what was written."""
        rendered = self.render()
        sys.stdout.write(rendered)
        sys.stdout.flush()
        return rendered