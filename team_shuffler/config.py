"""Configuration management for Team Shuffler."""

from pathlib import Path
from typing import List, Optional

import yaml

from .models import Attendee, Person
from .validators import validate_attendee_names, validate_attendees_csv

TRUE_STRINGS = {'true', 'yes', 'y', '1'}
FALSE_STRINGS = {'false', 'no', 'n', '0'}


class FormationConfig:
    """Attendees and settings for one team formation."""

    def __init__(
        self,
        attendees: Optional[List[Attendee]] = None,
        num_of_teams: int = 2,
        flat: Optional[bool] = None,
    ):
        """Initialize the configuration.

        Args:
            attendees: Attendees in input order
            num_of_teams: Number of teams to form
            flat: Treat every attendee as a leader candidate
        """
        self.attendees: List[Attendee] = list(attendees or [])
        self.num_of_teams: int = num_of_teams
        self.flat: Optional[bool] = flat

    @classmethod
    def from_file(cls, config_path: Path) -> 'FormationConfig':
        config = cls()
        config.load_from_file(config_path)
        return config

    def is_flat(self) -> bool:
        return bool(self.flat)

    def leader_candidates(self) -> List[Person]:
        """People who may lead a team, in input order."""
        if self.is_flat():
            return self.all_people()
        return [a.person for a in self.attendees if a.is_leader()]

    def normal_attendees(self) -> List[Person]:
        """People who never lead a team, in input order."""
        if self.is_flat():
            return []
        return [a.person for a in self.attendees if not a.is_leader()]

    def all_people(self) -> List[Person]:
        return [a.person for a in self.attendees]

    def load_from_file(self, config_path: Path) -> None:
        """Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            FileNotFoundError: If the config file doesn't exist
            yaml.YAMLError: If the YAML file is invalid
            ValueError: If the configuration structure is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)

        if not isinstance(config_data, dict):
            raise ValueError("Configuration file must contain a YAML dictionary")

        teams_config = config_data.get('teams', {})
        if not isinstance(teams_config, dict):
            raise ValueError("teams must be a dictionary")

        if 'count' not in teams_config:
            raise ValueError("teams.count is required")
        count = teams_config['count']
        # bool is a subclass of int
        if not isinstance(count, int) or isinstance(count, bool) or count < 0:
            raise ValueError("teams.count must be a non-negative integer")
        self.num_of_teams = count

        flat = teams_config.get('flat')
        if flat is not None and not isinstance(flat, bool):
            raise ValueError("teams.flat must be true or false")
        self.flat = flat

        attendees = config_data.get('attendees', [])
        if not isinstance(attendees, list):
            raise ValueError("attendees must be a list")

        self.attendees = [self._parse_attendee(entry) for entry in attendees]
        validate_attendee_names(a.person.name for a in self.attendees)

    def load_attendees_csv(self, csv_path: Path) -> None:
        """Replace the attendees with those listed in a CSV file.

        Args:
            csv_path: CSV with a ``name`` column and an optional ``leader`` column

        Raises:
            FileNotFoundError: If the CSV file doesn't exist
            ValueError: If the CSV is malformed or a leader cell is not a boolean
        """
        self.attendees = load_attendees_csv(csv_path)

    @staticmethod
    def _parse_attendee(entry) -> Attendee:
        if not isinstance(entry, dict):
            raise ValueError("Each attendee must be a dictionary")

        # Both `name: X` and the nested `person: {name: X}` form are accepted
        person = entry.get('person', entry)
        if not isinstance(person, dict) or 'name' not in person:
            raise ValueError(f"Attendee is missing a name: {entry}")

        name = person['name']
        if not isinstance(name, str):
            raise ValueError(f"Attendee name must be a string: {name!r}")

        leader = entry.get('leader')
        if leader is not None and not isinstance(leader, bool):
            raise ValueError(f"Attendee '{name}': leader must be true or false")

        return Attendee(Person(name.strip()), leader)

    def to_dict(self) -> dict:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary representation of the configuration
        """
        teams_dict = {'count': self.num_of_teams}
        if self.flat is not None:
            teams_dict['flat'] = self.flat

        attendees = []
        for attendee in self.attendees:
            entry = {'name': attendee.person.name}
            if attendee.leader is not None:
                entry['leader'] = attendee.leader
            attendees.append(entry)

        return {'teams': teams_dict, 'attendees': attendees}

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a YAML file.

        Args:
            config_path: Path where to save the configuration
        """
        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


def parse_leader_flag(value: str) -> Optional[bool]:
    """Parse a leader cell from a CSV file; an empty cell means unset."""
    text = value.strip().lower()
    if not text:
        return None
    if text in TRUE_STRINGS:
        return True
    if text in FALSE_STRINGS:
        return False
    raise ValueError(f"Invalid leader value: '{value}'")


def load_attendees_csv(csv_path: Path) -> List[Attendee]:
    """Read attendees from a CSV file, keeping row order."""
    df = validate_attendees_csv(csv_path)

    attendees = []
    for row in df.to_dict('records'):
        leader = parse_leader_flag(row['leader']) if 'leader' in row else None
        attendees.append(Attendee(Person(row['name'].strip()), leader))

    return attendees
