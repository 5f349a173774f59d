import re

from kruskal_variants.cli import main


def _parse(out):
    lines = out.splitlines()
    total = int(re.fullmatch(r"Total Cost: (\d+)", lines[2]).group(1))
    count = int(re.fullmatch(r"Edges in MST: (\d+)", lines[3]).group(1))
    edges = [
        tuple(int(x) for x in re.fullmatch(r"  (\d+) -> (\d+) \(cost: (\d+)\)", line).groups())
        for line in lines[4:]
    ]
    return lines, total, count, edges


def test_default_run_output(capsys):
    assert main(["--seed", "1"]) == 0
    lines, total, count, edges = _parse(capsys.readouterr().out)
    assert lines[0] == "Generated a random graph with 10 vertices."
    assert lines[1] == "MST Calculation complete."
    assert count == len(edges)
    assert total == sum(w for _, _, w in edges)
    assert all(1 <= w <= 100 for _, _, w in edges)


def test_same_seed_same_output(capsys):
    main(["--seed", "5", "--vertices", "20"])
    first = capsys.readouterr().out
    main(["--seed", "5", "--vertices", "20"])
    assert capsys.readouterr().out == first


def test_full_probability_gives_spanning_tree(capsys):
    assert main(["--seed", "3", "--vertices", "12", "--probability", "1.0"]) == 0
    _, _, count, edges = _parse(capsys.readouterr().out)
    assert count == 11
    assert len({v for a, b, _ in edges for v in (a, b)}) == 12


def test_invalid_probability(capsys):
    assert main(["--probability", "2.0"]) == 1
    assert "Probability must be between 0.0 and 1.0, got 2.0" in capsys.readouterr().err


def test_invalid_cost_range(capsys):
    assert main(["--min-cost", "5", "--max-cost", "1"]) == 1
    assert "Invalid cost range: min (5) > max (1)" in capsys.readouterr().err