import json

from journey.cli import main


def test_cli_prints_journey_json(capsys):
    code = main(["--seed", "9", "--duration", "20", "--category", "coffee"])
    out = capsys.readouterr().out
    data = json.loads(out)

    assert code == 0
    assert data["journey"]["budget_minutes"] == 20
    assert data["journey"]["travel_mode"] == "cycling"
    assert data["waypoints"]["origin"] == [-122.2685, 47.5505]


def test_cli_geojson_round_trip(capsys):
    code = main(["--origin", "-122.2685", "47.5505", "--round-trip", "--geojson", "--seed", "1"])
    data = json.loads(capsys.readouterr().out)

    assert code == 0
    assert data["type"] == "FeatureCollection"
    assert data["features"][1]["properties"]["budget_minutes"] == 15


def test_cli_reports_failure(capsys):
    code = main(["--category", "hovercraft rental", "--attempts", "1"])
    err = capsys.readouterr().err

    assert code == 1
    assert "NoCandidateError" in err


def test_cli_accepts_negative_longitude(capsys):
    code = main(["--origin", "-122.2780", "47.5535", "--seed", "4"])
    data = json.loads(capsys.readouterr().out)

    assert code == 0
    assert data["waypoints"]["origin"] == [-122.278, 47.5535]


def test_cli_rejects_out_of_range_origin(capsys):
    code = main(["--origin", "-122.2685", "95"])

    assert code == 1
    assert "ValidationError" in capsys.readouterr().err


def test_cli_rejects_one_way_budget_over_an_hour(capsys):
    code = main(["--duration", "90"])

    assert code == 1
    assert "exceeds 60" in capsys.readouterr().err
