"""Core team formation logic for Team Shuffler."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
import yaml

from .config import FormationConfig
from .models import Person, Team, Teams
from .shuffle import RandomShuffle, ShuffleStrategy
from .validators import validate_config


def create_by_leader_candidates(
    leader_candidates: List[Person],
    num_of_teams: int
) -> Tuple[List[Team], List[Person]]:
    """Start one team per leader, taking leaders from the end of the list.

    The first person popped leads team 0. The list is consumed in place.

    Args:
        leader_candidates: Shuffled leader candidates, at least num_of_teams long
        num_of_teams: Number of teams to start

    Returns:
        The new teams and the candidates that were not picked
    """
    teams = []
    while len(teams) < num_of_teams:
        teams.append(Team(leader_candidates.pop()))
    return teams, leader_candidates


def assign_round_robin(teams: List[Team], pool: List[Person]) -> None:
    """Hand out the pool one person per team, in team order, until it is empty.

    A pass that runs out of people stops where it is, so earlier teams end up
    with the extra members.
    """
    while pool:
        for team in teams:
            if not pool:
                break
            team.assign(pool.pop())


class TeamAssigner:
    """Main class for forming teams around leaders."""

    def __init__(self, config: FormationConfig):
        """Initialize the team assigner.

        Args:
            config: Configuration with attendees and team settings
        """
        self.config = config

    def create_teams(self, strategy: Optional[ShuffleStrategy] = None) -> Teams:
        """Form teams from the configuration.

        Leaders are drawn from the shuffled leader candidates. Candidates left
        over join the other attendees, and that pool is shuffled again and dealt
        out round-robin.

        Args:
            strategy: How pools are shuffled; random when not given

        Returns:
            Exactly num_of_teams teams holding every attendee once

        Raises:
            ZeroTeamsError: If no teams are requested
            InsufficientLeadersError: If there are fewer candidates than teams
        """
        if strategy is None:
            strategy = RandomShuffle()

        validate_config(self.config)

        leader_candidates = self.config.leader_candidates()
        strategy.shuffle(leader_candidates)

        teams, rest = create_by_leader_candidates(
            leader_candidates, self.config.num_of_teams
        )
        rest.extend(self.config.normal_attendees())
        strategy.shuffle(rest)

        assign_round_robin(teams, rest)

        return Teams(teams)

    def save_teams_yaml(self, teams: Teams, output_path: Path) -> None:
        """Save teams to a YAML file.

        Args:
            teams: Formed teams
            output_path: Path where to save the YAML
        """
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(dump_teams_yaml(teams))

    def save_teams_csv(self, teams: Teams, output_path: Path) -> None:
        """Save teams to CSV, one row per person.

        Columns are ``team`` (1-based), ``role`` and ``name``.

        Args:
            teams: Formed teams
            output_path: Path where to save the CSV
        """
        teams_to_dataframe(teams).to_csv(output_path, index=False)

    def get_team_summary(self, teams: Teams) -> Dict[str, Any]:
        """Get a summary of the formed teams.

        Args:
            teams: Formed teams

        Returns:
            Dictionary with team statistics
        """
        if len(teams) == 0:
            return {
                'total_people': 0,
                'num_teams': 0,
                'leaders': [],
                'team_sizes': {},
                'average_team_size': 0.0
            }

        team_sizes = {index: team.size for index, team in enumerate(teams, start=1)}
        total = sum(team_sizes.values())

        return {
            'total_people': total,
            'num_teams': len(teams),
            'leaders': [team.leader.name for team in teams],
            'team_sizes': team_sizes,
            'average_team_size': round(total / len(teams), 2)
        }


def dump_teams_yaml(teams: Teams) -> str:
    return yaml.dump(teams.to_dict(), default_flow_style=False, sort_keys=False,
                     allow_unicode=True)


def teams_to_dataframe(teams: Teams) -> pd.DataFrame:
    rows = []
    for index, team in enumerate(teams, start=1):
        rows.append({'team': index, 'role': 'leader', 'name': team.leader.name})
        for member in team.members:
            rows.append({'team': index, 'role': 'member', 'name': member.name})
    return pd.DataFrame(rows, columns=['team', 'role', 'name'])
