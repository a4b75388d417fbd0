from dataclasses import dataclass
from enum import Enum


class CommandKind(Enum):
    BATTED_BALL = "batted_ball"
    STANDINGS = "standings"
    PERCENTILES = "percentiles"
    HELP = "help"


_VERBS: dict[str, CommandKind] = {
    "ev": CommandKind.BATTED_BALL,
    "st": CommandKind.STANDINGS,
    "standings": CommandKind.STANDINGS,
    "wc": CommandKind.STANDINGS,
    "wildcard": CommandKind.STANDINGS,
    "sav": CommandKind.PERCENTILES,
    "savant": CommandKind.PERCENTILES,
    "h": CommandKind.HELP,
    "help": CommandKind.HELP,
}


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    verb: str
    argument: str

    @property
    def words(self) -> list[str]:
        """The verb followed by the whitespace-separated argument words."""
        return [self.verb, *self.argument.split()]


def parse_command(content: str, prefix: str = "~") -> Command | None:
    """Match a message against the command table; None when it is not a command."""
    if not content.startswith(prefix):
        return None
    parts = content[len(prefix) :].split(maxsplit=1)
    if not parts:
        return None
    verb = parts[0].lower()
    kind = _VERBS.get(verb)
    if kind is None:
        return None
    return Command(kind=kind, verb=verb, argument=parts[1].strip() if len(parts) > 1 else "")
