"""Command line interface for Team Shuffler."""

import sys
from pathlib import Path
from typing import Optional

import click
import yaml

from team_shuffler.assigner import TeamAssigner, dump_teams_yaml, teams_to_dataframe
from team_shuffler.config import FormationConfig, load_attendees_csv
from team_shuffler.shuffle import STRATEGIES, get_strategy
from team_shuffler.validators import validate_config


def load_config(config_file: Path) -> FormationConfig:
  """Load a config file, exiting with a red message if it is unusable."""
  try:
    return FormationConfig.from_file(config_file)
  except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
    click.secho(f"Error: {e}", fg="red", err=True)
    sys.exit(1)

@click.group()
def cli():
  """Team Shuffler CLI for forming teams around leaders."""
  pass

@cli.command()
@click.argument("config_file", type=click.Path(path_type=Path))
@click.option("--output", "output_file", type=click.Path(path_type=Path),
              help="Write teams to this file instead of stdout")
@click.option("--format", "output_format", type=click.Choice(["yaml", "csv"]),
              default="yaml", show_default=True, help="Output format")
@click.option("--shuffle", "shuffle_name", type=click.Choice(sorted(STRATEGIES)),
              default="random", show_default=True, help="Shuffle strategy")
@click.option("--seed", type=int, default=None, help="Seed for a reproducible random shuffle")
def create(config_file: Path, output_file: Optional[Path], output_format: str,
           shuffle_name: str, seed: Optional[int]):
  """Form teams from CONFIG_FILE."""
  config = load_config(config_file)
  click.secho(
    f"Loaded {len(config.attendees)} attendees, {config.num_of_teams} teams from {config_file}",
    fg="blue", err=True,
  )

  assigner = TeamAssigner(config)
  try:
    teams = assigner.create_teams(get_strategy(shuffle_name, seed))
  except ValueError as e:
    click.secho(f"Error: {e}", fg="red", err=True)
    sys.exit(1)

  summary = assigner.get_team_summary(teams)
  click.secho(f"Team sizes: {summary['team_sizes']}", fg="blue", err=True)

  if output_file is None:
    if output_format == "csv":
      click.echo(teams_to_dataframe(teams).to_csv(index=False), nl=False)
    else:
      click.echo(dump_teams_yaml(teams), nl=False)
    return

  if output_format == "csv":
    assigner.save_teams_csv(teams, output_file)
  else:
    assigner.save_teams_yaml(teams, output_file)
  click.secho(f"Saved {len(teams)} teams to {output_file}", fg="green", err=True)

@cli.command()
@click.argument("config_file", type=click.Path(path_type=Path))
def validate(config_file: Path):
  """Check that CONFIG_FILE can produce the requested teams."""
  config = load_config(config_file)
  try:
    validate_config(config)
  except ValueError as e:
    click.secho(f"❌ {e}", fg="red", err=True)
    sys.exit(1)

  num_candidates = len(config.leader_candidates())
  if num_candidates > config.num_of_teams:
    click.secho(
      f"{num_candidates - config.num_of_teams} leader candidates will join teams as members",
      fg="yellow",
    )
  click.secho(f"✅ {config_file} is valid!", fg="green")

@cli.command("import-csv")
@click.argument("csv_file", type=click.Path(path_type=Path))
@click.argument("config_file", type=click.Path(path_type=Path))
@click.option("--teams", "num_of_teams", type=click.IntRange(min=0), required=True,
              help="Number of teams to form")
@click.option("--flat", is_flag=True, default=False, help="Let every attendee lead")
def import_csv(csv_file: Path, config_file: Path, num_of_teams: int, flat: bool):
  """Build CONFIG_FILE from the attendees listed in CSV_FILE."""
  try:
    attendees = load_attendees_csv(csv_file)
  except (FileNotFoundError, ValueError) as e:
    click.secho(f"Error: {e}", fg="red", err=True)
    sys.exit(1)

  if config_file.exists() and not click.confirm(f"{config_file} exists; overwrite?", default=False):
    click.secho(f"Skipping {config_file}", fg="green")
    return

  config = FormationConfig(attendees, num_of_teams, True if flat else None)
  config.save_to_file(config_file)
  click.secho(f"Wrote {len(attendees)} attendees from {csv_file} into {config_file}", fg="green")

if __name__ == "__main__":
  cli()
