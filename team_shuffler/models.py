"""Data holders for people, attendees and formed teams."""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence


@dataclass(frozen=True)
class Person:
    """A participant, identified only by name."""

    name: str

    def to_dict(self) -> dict:
        return {'name': self.name}


@dataclass(frozen=True)
class Attendee:
    """A person plus an optional leader-eligibility flag."""

    person: Person
    leader: Optional[bool] = None

    def is_leader(self) -> bool:
        """Return the eligibility flag, treating an unset flag as False."""
        return bool(self.leader)


class Team:
    """One leader and the members assigned to them."""

    def __init__(self, leader: Person):
        self.leader = leader
        self.members: List[Person] = []

    def assign(self, member: Person) -> None:
        """Append a member. Callers make sure nobody is assigned twice."""
        self.members.append(member)

    @property
    def size(self) -> int:
        return len(self.members) + 1

    def people(self) -> List[Person]:
        return [self.leader] + self.members

    def to_dict(self) -> dict:
        return {
            'leader': self.leader.to_dict(),
            'member': [member.to_dict() for member in self.members],
        }

    def __repr__(self) -> str:
        names = ', '.join(member.name for member in self.members)
        return f"Team(leader={self.leader.name!r}, members=[{names}])"


class Teams:
    """Ordered, read-only collection of teams in creation order."""

    def __init__(self, teams: Sequence[Team]):
        self._teams = tuple(teams)

    @property
    def teams(self) -> tuple:
        return self._teams

    def __len__(self) -> int:
        return len(self._teams)

    def __iter__(self) -> Iterator[Team]:
        return iter(self._teams)

    def __getitem__(self, index: int) -> Team:
        return self._teams[index]

    def to_dict(self) -> dict:
        return {'team': [team.to_dict() for team in self._teams]}
