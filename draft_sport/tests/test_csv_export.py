"""Tests for composition CSV export."""

from datetime import datetime

import pandas as pd
import pytest

from draft_sport.config import ConfigManager
from draft_sport.io.csv_export import COLUMNS, CSVExporter
from draft_sport.io.files import FileManager
from draft_sport.models.composition import CategoryRequirement, Composition, PositionRequirement
from draft_sport.models.pick import Pick
from draft_sport.models.player import Category, Player, Position
from draft_sport.models.team import LeagueTeam

FORWARD = Category(name="Forward")


def make_team(as_at_round=None) -> LeagueTeam:
    prop = Position(name="Prop", categories=[FORWARD])
    return LeagueTeam(
        league_id="L1",
        manager_id="m/1",
        manager_display_name="Jo",
        as_at_round=as_at_round,
        picks=[
            Pick(
                public_id="p1",
                player=Player(public_id="pl1", first_name="Ofa", last_name="Tu'ungafasi", position=prop),
                created=datetime(2024, 9, 1, 9, 0)
            ),
            Pick(
                public_id="p2",
                player=Player(public_id="pl2", first_name="Tyrel", last_name="Lomax", position=prop),
                benched=True,
                created=datetime(2024, 9, 1, 9, 5)
            ),
        ],
        composition=Composition(
            position_requirements=[PositionRequirement(position_name="Prop", count=2)],
            category_requirements=[CategoryRequirement(category=FORWARD, count=1)]
        )
    )


@pytest.fixture
def file_manager(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return FileManager(ConfigManager(tmp_path / "config"))


class TestBuildCompositionDataframe:
    """Test dataframe construction."""

    def test_one_row_per_slot(self):
        df = CSVExporter.build_composition_dataframe(make_team())

        assert list(df.columns) == COLUMNS
        assert len(df) == 3
        assert list(df["requirement_type"]) == ["position", "position", "category"]
        assert list(df["requirement"]) == ["Prop", "Prop", "Forward"]
        assert list(df["slot"]) == [1, 2, 1]

    def test_filled_and_empty_slots(self):
        df = CSVExporter.build_composition_dataframe(make_team())

        assert df.iloc[0]["player_name"] == "Ofa Tu'ungafasi"
        assert df.iloc[0]["created"] == "2024-09-01T09:00:00"
        assert df.iloc[1]["pick_id"] == ""
        assert df.iloc[2]["pick_id"] == "p2"
        assert df.iloc[2]["benched"] == True  # noqa: E712

    def test_empty_composition(self):
        team = make_team().model_copy(update={"composition": Composition()})

        df = CSVExporter.build_composition_dataframe(team)

        assert df.empty
        assert list(df.columns) == COLUMNS


class TestExportFilledComposition:
    """Test CSV file output."""

    def test_export(self, file_manager):
        path = CSVExporter(file_manager).export_filled_composition(make_team(as_at_round=4))

        assert path.name == "composition_L1_m1_round4.csv"
        assert path.exists()
        df = pd.read_csv(path, keep_default_na=False)
        assert len(df) == 3
        assert list(df["pick_id"]) == ["p1", "", "p2"]

    def test_export_without_round(self, file_manager):
        path = CSVExporter(file_manager).export_filled_composition(make_team())

        assert path.name == "composition_L1_m1.csv"

    def test_export_empty_raises(self, file_manager):
        team = make_team().model_copy(update={"composition": Composition()})

        with pytest.raises(ValueError, match="No composition slots"):
            CSVExporter(file_manager).export_filled_composition(team)


class TestCompositionFilename:
    """Test export filename generation."""

    def test_cleans_league_and_manager(self, file_manager):
        assert file_manager.composition_filename("L/1", "m 1", 2) == "composition_L1_m1_round2.csv"

    def test_path_traversal_in_league(self, file_manager):
        name = file_manager.composition_filename("../../etc", "m1")

        assert "/" not in name
        assert name == "composition_....etc_m1.csv"
