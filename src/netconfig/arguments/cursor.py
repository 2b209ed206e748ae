"""Token cursor over the command line arguments."""
from typing import Optional, Sequence

from ..errors import InvalidArgument


class TokenCursor:
    """Forward-only cursor over an immutable list of tokens.

    Each command invocation builds its own cursor; the position only moves
    on explicit consumption and never rewinds.
    """

    def __init__(self, tokens: Sequence[str]):
        self._tokens: tuple[str, ...] = tuple(tokens)
        self._index = 0

    @property
    def position(self) -> int:
        return self._index

    def peek(self) -> Optional[str]:
        """Current token, or None if all tokens are consumed."""
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def peek_next(self) -> Optional[str]:
        """Token after the current one, or None if there is none."""
        if self._index + 1 < len(self._tokens):
            return self._tokens[self._index + 1]
        return None

    def advance(self) -> "TokenCursor":
        """Move to the next token.

        Raises:
            InvalidArgument: If no tokens are left
        """
        if self._index >= len(self._tokens):
            raise InvalidArgument("Not enough arguments")
        self._index += 1
        return self

    def as_text(self) -> str:
        """Consume the current token and return it as is."""
        arg = self.peek()
        self.advance()
        return arg  # type: ignore[return-value]

    def expect_end(self) -> None:
        """Ensure every token has been handled.

        Raises:
            InvalidArgument: Naming the first unconsumed token
        """
        arg = self.peek()
        if arg is not None:
            raise InvalidArgument(f"Unexpected arguments: {arg}")

    def remaining(self) -> int:
        """Number of tokens not consumed yet."""
        return len(self._tokens) - self._index

    def pending(self) -> tuple[str, ...]:
        """Tokens not consumed yet."""
        return self._tokens[self._index:]
