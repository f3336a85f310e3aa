"""
Tests for loading regions and storing brackets.
"""

import json

import pytest

import config
from engine.autofill import auto_fill
from engine.picks import select_winner
from engine.results import new_tournament, record_result
from ingestion.bracket_store import (
    bracket_from_json,
    load_bracket,
    load_results,
    save_bracket,
    save_results,
)
from ingestion.regions_loader import (
    load_regions_from_csv,
    load_regions_from_json,
    save_regions_to_json,
)
from models.errors import InvalidInput
from conftest import AUBURN


class TestRegionsLoader:
    """Tests for reading the field from JSON and CSV."""

    def test_default_field(self, regions):
        assert regions.names == config.REGION_NAMES
        assert len(regions.teams) == 64
        assert regions[0].teams[0] == AUBURN

    def test_seed_map_json(self, tmp_path, regions):
        data = {
            "regions": [
                {"name": r.name, "teams": {str(t.seed): t.name for t in r.teams}}
                for r in regions
            ]
        }
        path = tmp_path / "regions.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        assert load_regions_from_json(str(path)) == regions

    def test_save_and_load(self, tmp_path, regions):
        path = tmp_path / "out" / "regions.json"
        save_regions_to_json(regions, str(path))
        assert load_regions_from_json(str(path)) == regions

    def test_csv(self, tmp_path, regions):
        lines = ["region,seed,team"]
        for r in regions:
            for t in sorted(r.teams, key=lambda t: t.seed):
                lines.append(f'{r.name},{t.seed},"{t.name}"')
        path = tmp_path / "regions.csv"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        assert load_regions_from_csv(str(path)) == regions

    def test_csv_missing_columns(self, tmp_path):
        path = tmp_path / "regions.csv"
        path.write_text("region,team\nSouth,Auburn\n", encoding="utf-8")
        with pytest.raises(InvalidInput):
            load_regions_from_csv(str(path))

    def test_too_few_regions(self, tmp_path, regions):
        data = regions.to_dict()
        data["regions"] = data["regions"][:3]
        path = tmp_path / "regions.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(InvalidInput):
            load_regions_from_json(str(path))

    def test_malformed_team(self, tmp_path, regions):
        data = regions.to_dict()
        del data["regions"][0]["teams"][0]["seed"]
        path = tmp_path / "regions.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(InvalidInput):
            load_regions_from_json(str(path))


class TestBracketStore:
    """Tests for the persisted bracket shape."""

    def test_persisted_keys(self, bracket):
        data = bracket.to_dict()
        assert list(data) == ["1", "2", "3", "4", "5", "6"]
        assert set(data["1"][0]) == {
            "id", "region", "round", "matchupIndex", "teamA", "teamB",
            "winner", "nextMatchupId", "position",
        }
        assert data["6"][0]["nextMatchupId"] is None

    def test_picked_bracket_survives_save(self, tmp_path, bracket):
        picked = select_winner(auto_fill(bracket, "random", seed=5), 0, AUBURN)
        path = tmp_path / "bracket.json"
        save_bracket(picked, str(path))
        assert load_bracket(str(path)) == picked

    def test_extra_keys_ignored(self, bracket):
        data = bracket.to_dict()
        data["teams"] = {"Auburn": {"seed": 1}}
        assert bracket_from_json(data) == bracket

    def test_broken_bracket_rejected(self, bracket):
        data = bracket.to_dict()
        data["3"] = data["3"][:4]
        with pytest.raises(InvalidInput):
            bracket_from_json(data)

    def test_missing_field_rejected(self, bracket):
        data = bracket.to_dict()
        del data["1"][0]["position"]
        with pytest.raises(InvalidInput):
            bracket_from_json(data)

    def test_results_survive_save(self, tmp_path, regions):
        t = record_result(new_tournament(regions), 0, AUBURN)
        path = tmp_path / "results.json"
        save_results(t, str(path))
        assert load_results(str(path)) == t

    def test_results_without_bracket(self, tmp_path):
        path = tmp_path / "results.json"
        path.write_text(json.dumps({"teams": {}}), encoding="utf-8")
        with pytest.raises(InvalidInput):
            load_results(str(path))

    def test_relinked_bracket_rejected(self, bracket):
        data = bracket.to_dict()
        data["1"][0]["nextMatchupId"] = 33
        with pytest.raises(InvalidInput, match="Matchup 0 links to 33, expected 32"):
            bracket_from_json(data)

    @pytest.mark.parametrize("data", [[], [{"id": 0}], 63, "bracket"])
    def test_non_object_bracket_rejected(self, data):
        with pytest.raises(InvalidInput):
            bracket_from_json(data)

    def test_non_object_matchup_rejected(self, bracket):
        data = bracket.to_dict()
        data["1"][0] = "Auburn"
        with pytest.raises(InvalidInput):
            bracket_from_json(data)

    @pytest.mark.parametrize("data", [[], 1, {"results": []}])
    def test_non_object_results_rejected(self, tmp_path, data):
        path = tmp_path / "results.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(InvalidInput):
            load_results(str(path))

    def test_broken_results_bracket_rejected(self, tmp_path, regions):
        data = new_tournament(regions).to_dict()
        data["results"]["1"][0]["nextMatchupId"] = 33
        path = tmp_path / "results.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(InvalidInput, match="Invalid bracket"):
            load_results(str(path))
