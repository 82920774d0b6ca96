from mazeroute.report import format_results, save_results


def test_format_success_line():
    assert format_results({1: 5}) == "route id: 1 => steps: 5\n"


def test_format_failure_line():
    assert format_results({2: -1}) == "Routing failed for net_id 2\n"


def test_format_keeps_mapping_order():
    text = format_results({3: 4, 1: -1, 2: 7})
    lines = text.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("route id: 3")
    assert lines[1] == "Routing failed for net_id 1"
    assert lines[2].startswith("route id: 2")


def test_format_empty():
    assert format_results({}) == ""


def test_save_round_trip(tmp_path):
    results = {1: 5, 2: -1}
    target = tmp_path / "out.txt"
    written = save_results(results, target)
    assert written == target
    assert target.read_text() == format_results(results)