from enum import Enum

FERRIS = rb"""
        \
         \
            _~^~^~_
        \) /  o o  \ (/
          '_   -   _'
          / '-----' \
"""

CLIPPY = rb"""
        \
         \
            __
           /  \
           |  |
           @  @
           |  |
           || |/
           || ||
           |\_/|
           \___/
"""


class Mascot(Enum):
    """The characters that can sit under the speech bubble."""
    FERRIS = 'ferris'
    CLIPPY = 'clippy'

    @property
    def art(self) -> bytes:
        return _ART[self]

    @classmethod
    def from_name(cls, name: str) -> 'Mascot':
        """Looks up a mascot by its config/CLI name, ignoring case."""
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            valid = ', '.join(m.value for m in cls)
            raise ValueError(f"Unknown mascot '{name}'. Expected one of: {valid}") from None

    @classmethod
    def names(cls):
        return [m.value for m in cls]


_ART = {
    Mascot.FERRIS: FERRIS,
    Mascot.CLIPPY: CLIPPY,
}
