"""Team Shuffler - A tool to split attendees into teams, each with one leader."""

__version__ = "0.1.0"

from .assigner import TeamAssigner
from .config import FormationConfig
from .models import Attendee, Person, Team, Teams
from .shuffle import NoShuffle, RandomShuffle, ShuffleStrategy
from .validators import ConfigurationError, InsufficientLeadersError, ZeroTeamsError

__all__ = [
    "TeamAssigner",
    "FormationConfig",
    "Attendee",
    "Person",
    "Team",
    "Teams",
    "NoShuffle",
    "RandomShuffle",
    "ShuffleStrategy",
    "ConfigurationError",
    "InsufficientLeadersError",
    "ZeroTeamsError",
]
