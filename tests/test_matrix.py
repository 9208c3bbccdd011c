from handycalc.matrix import DEFAULT_MATRIX, format_matrix, main


def test_small_matrix_layout():
    assert format_matrix([[1, 2], [3, 4]]) == "1\t2\t\n3\t4\t\n"


def test_row_count_matches_lines():
    text = format_matrix(DEFAULT_MATRIX)
    assert len(text.splitlines()) == len(DEFAULT_MATRIX)


def test_elements_round_trip():
    text = format_matrix(DEFAULT_MATRIX)
    rows = [
        tuple(int(cell) for cell in line.split("\t") if cell)
        for line in text.splitlines()
    ]
    assert tuple(rows) == DEFAULT_MATRIX


def test_every_line_ends_with_tab():
    for line in format_matrix(DEFAULT_MATRIX).splitlines():
        assert line.endswith("\t")


def test_empty_matrix():
    assert format_matrix([]) == ""


def test_main_prints_default_matrix(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == format_matrix(DEFAULT_MATRIX)