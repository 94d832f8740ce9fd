import re
from typing import Optional, Protocol


class InvalidPatternError(ValueError):
    pass


class EmailMatcher(Protocol):
    def match(self, email: Optional[str]) -> bool: ...


class RegexEmailMatcher:
    """Matches emails with a Python ``re`` pattern given without delimiters.

    Matching is an unanchored, case-sensitive search: ``@.*\\.edu`` accepts
    any address containing an ``@`` later followed by ``.edu``.
    """

    def __init__(self, pattern: str):
        try:
            self.regex = re.compile(pattern)
        except (re.error, OverflowError, RecursionError) as e:
            raise InvalidPatternError(f"Invalid email pattern: {e}") from e
        self.pattern = pattern

    def match(self, email: Optional[str]) -> bool:
        if email is None:
            return False
        return self.regex.search(email) is not None


def create_matcher(pattern: str) -> EmailMatcher:
    return RegexEmailMatcher(pattern)


def is_valid_pattern(pattern: str) -> bool:
    try:
        create_matcher(pattern).match("")
    except InvalidPatternError:
        return False
    return True
