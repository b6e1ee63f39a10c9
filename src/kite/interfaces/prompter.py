"""Interactive prompt interface."""

import abc

# pylint: disable=too-few-public-methods


class Prompter(abc.ABC):
    """Interface for asking the user for a single line of input."""

    @abc.abstractmethod
    def ask(self, guidance: str, label: str) -> str:
        """Show guidance and a label, then read one line.

        Args:
            guidance: Explanatory text shown before the label.
            label: Short prompt shown on the input line (e.g. ``"API Key: "``).

        Returns:
            str: The raw line read, including its line terminator.

        Raises:
            InputError: If the input stream is closed or ends mid-line.
        """
