import random

import pandas as pd
import pytest

from data_generator import generate_random_points, write_points
from main import EXIT_READ_ERROR, main


@pytest.fixture
def points_file(tmp_path):
    path = tmp_path / "points.txt"
    write_points(path, generate_random_points(15, rng=random.Random(21)))
    return path


def test_run_writes_tour_and_reports(tmp_path, points_file, capsys):
    output = tmp_path / "best_tour.csv"

    code = main([
        "--input", str(points_file), "--output", str(output),
        "--iterations", "2500", "--report-every", "1000", "--seed", "3",
    ])

    out = capsys.readouterr().out
    assert code == 0
    assert "Points read successfully" in out
    assert "Iteration 0- Best Distance: " in out
    assert "Iteration 2000- Best Distance: " in out
    assert "Iteration 3000" not in out
    assert "Best tour found:" in out
    assert "Best Distance: " in out

    df = pd.read_csv(output)
    assert len(df) == 16
    assert sorted(df["Index"].iloc[:-1]) == list(range(1, 16))


def test_summary_lists_one_based_positions(tmp_path, points_file, capsys):
    main(["--input", str(points_file), "--output", str(tmp_path / "o.csv"),
          "--iterations", "100", "--seed", "1", "--quiet"])

    lines = capsys.readouterr().out.splitlines()
    labels = lines[lines.index("Best tour found: ") + 1].split()
    assert sorted(int(s) for s in labels) == list(range(1, 16))


def test_missing_input_is_fatal(tmp_path, capsys):
    output = tmp_path / "best_tour.csv"

    code = main(["--input", str(tmp_path / "missing.txt"), "--output", str(output)])

    assert code == EXIT_READ_ERROR
    assert "Could not read points" in capsys.readouterr().err
    assert not output.exists()


def test_malformed_input_is_fatal(tmp_path, capsys):
    path = tmp_path / "points.txt"
    path.write_text("1 0 0\n2 x 1\n")

    assert main(["--input", str(path), "--output", str(tmp_path / "o.csv")]) == EXIT_READ_ERROR


def test_write_failure_is_not_fatal(tmp_path, points_file, capsys):
    output = tmp_path / "no_such_dir" / "best_tour.csv"

    code = main(["--input", str(points_file), "--output", str(output),
                 "--iterations", "200", "--seed", "2", "--quiet"])

    captured = capsys.readouterr()
    assert code == 0
    assert "for writing" in captured.err
    assert "Best Distance: " in captured.out


def test_invalid_cooling_rate_exits_with_usage_error(points_file):
    with pytest.raises(SystemExit) as exc:
        main(["--input", str(points_file), "--cooling-rate", "1.2"])
    assert exc.value.code == 2


def test_repeated_runs_append_statistics(tmp_path, points_file, capsys):
    results = tmp_path / "runs.csv"
    args = ["--input", str(points_file), "--output", str(tmp_path / "o.csv"),
            "--iterations", "300", "--runs", "3", "--seed", "5",
            "--results", str(results), "--quiet"]

    assert main(args) == 0
    assert main(args) == 0

    df = pd.read_csv(results)
    assert len(df) == 2
    assert list(df["N_Runs"]) == [3, 3]
    assert "| Best Dist" in capsys.readouterr().out


def test_non_finite_input_is_fatal(tmp_path, capsys):
    path = tmp_path / "points.txt"
    path.write_text("1 0 0\n2 nan 1\n3 5 5\n4 inf 2\n")
    output = tmp_path / "o.csv"

    code = main(["--input", str(path), "--output", str(output),
                 "--iterations", "50", "--seed", "1"])

    captured = capsys.readouterr()
    assert code == EXIT_READ_ERROR
    assert "Could not read points" in captured.err
    assert "Best Distance" not in captured.out
    assert not output.exists()


@pytest.mark.parametrize("temperature", ["nan", "inf"])
def test_non_finite_temperature_exits_with_usage_error(points_file, temperature):
    with pytest.raises(SystemExit) as exc:
        main(["--input", str(points_file), "--temperature", temperature])
    assert exc.value.code == 2
