from venue_catalog.normalize import parse_csv_line


def test_quoted_comma_stays_in_cell():
    assert parse_csv_line('"Ramen, Noodle",123') == ["Ramen, Noodle", "123"]


def test_empty_middle_field():
    assert parse_csv_line("a,,c") == ["a", "", "c"]


def test_empty_line_is_one_empty_cell():
    assert parse_csv_line("") == [""]


def test_cells_are_trimmed():
    assert parse_csv_line("  a , b ,c  ") == ["a", "b", "c"]


def test_unterminated_quote_runs_to_end_of_line():
    assert parse_csv_line('x,"open, still open') == ["x", "open, still open"]


def test_doubled_quotes_are_not_unescaped():
    # "" just toggles twice, so nothing is kept from it
    assert parse_csv_line('"say ""hi""",2') == ["say hi", "2"]


def test_trailing_carriage_return_is_trimmed():
    assert parse_csv_line("店名,地名\r") == ["店名", "地名"]


def test_quote_characters_never_reach_the_cell():
    assert parse_csv_line('" padded ",x') == ["padded", "x"]
