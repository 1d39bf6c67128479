"""Validation utilities for Team Shuffler."""

from pathlib import Path
from typing import Iterable

import pandas as pd


class ConfigurationError(ValueError):
    """Raised when a formation config cannot produce teams."""


class ZeroTeamsError(ConfigurationError):
    """Raised when zero teams are requested."""

    def __init__(self):
        super().__init__("num_of_teams must be more than zero.")


class InsufficientLeadersError(ConfigurationError):
    """Raised when there are fewer leader candidates than teams."""

    def __init__(self, available: int, required: int):
        self.available = available
        self.required = required
        super().__init__(
            f"num of leader candidates({available}) must be equal or greater "
            f"than num of teams({required})"
        )


def validate_config(config) -> None:
    """Check that a formation config can produce the requested teams.

    Leader candidates are counted after the flat setting is applied, so a
    flat config only needs as many attendees as teams.

    Args:
        config: FormationConfig to check

    Raises:
        ZeroTeamsError: If no teams are requested
        ConfigurationError: If a negative number of teams is requested
        InsufficientLeadersError: If leader candidates < number of teams
    """
    num_of_teams = config.num_of_teams
    if num_of_teams == 0:
        raise ZeroTeamsError()
    if num_of_teams < 0:
        raise ConfigurationError(
            f"num_of_teams must be a positive integer, got {num_of_teams}"
        )

    available = len(config.leader_candidates())
    if available < num_of_teams:
        raise InsufficientLeadersError(available, num_of_teams)


def validate_attendee_names(names: Iterable[str]) -> None:
    """Validate attendee names.

    Duplicate names are allowed; a name is only a label.

    Args:
        names: Attendee names to validate

    Raises:
        ValueError: If a name is empty, whitespace-only or too long
    """
    for name in names:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Attendee names cannot be empty or whitespace-only")

        # Very long names are likely a data issue
        if len(name) > 100:
            raise ValueError(f"Attendee name too long (max 100 chars): '{name[:50]}...'")


def validate_attendees_csv(csv_path: Path) -> pd.DataFrame:
    """Validate an attendee CSV file and return its contents.

    The file needs a ``name`` column and may have a ``leader`` column.

    Args:
        csv_path: Path to the CSV file to validate

    Returns:
        The parsed DataFrame with string cells

    Raises:
        FileNotFoundError: If the CSV file doesn't exist
        ValueError: If the CSV structure or content is invalid
    """
    if not csv_path.exists():
        raise FileNotFoundError(f"Attendees file not found: {csv_path}")

    try:
        df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        raise ValueError("Attendees CSV file is empty")
    except Exception as e:
        raise ValueError(f"Failed to read CSV file: {e}")

    df.columns = [str(column).strip().lower() for column in df.columns]

    if 'name' not in df.columns:
        raise ValueError("Attendees CSV must contain a 'name' column")

    if df.shape[0] == 0:
        raise ValueError("Attendees CSV must contain at least 1 attendee row")

    validate_attendee_names(df['name'].tolist())

    return df
