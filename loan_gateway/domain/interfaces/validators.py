"""Personal identity code validation interface."""

from abc import ABC, abstractmethod


class PersonalCodeValidator(ABC):
    """
    Abstract validator for personal identity codes.

    The decision engine only needs a yes/no answer; how structure and
    checksum are verified is up to the implementation.
    """

    @abstractmethod
    def is_valid(self, personal_code: str) -> bool:
        """
        Check whether a personal identity code is well-formed.

        Args:
            personal_code: The 11-character identity code to check

        Returns:
            True if the code is structurally valid and its checksum matches
        """
        ...
