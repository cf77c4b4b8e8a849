from utils.huffman_encoder import calculate_huffman_codes
from utils.tables import original_bit_dataframe, huffman_code_dataframe, format_table


def test_original_bit_table():
    frequencies, _, _ = calculate_huffman_codes("a bb")
    df = original_bit_dataframe(frequencies)

    assert list(df.columns) == ["Char", "ASCII", "Bits", "Count"]
    assert df["Char"].tolist() == ["a", "' '", "b"]
    assert df["ASCII"].tolist() == [97, 32, 98]
    assert df["Bits"].tolist() == [8, 8, 8]
    assert df["Count"].tolist() == [1, 1, 2]


def test_huffman_code_table():
    frequencies, _, codes = calculate_huffman_codes("aaabb")
    df = huffman_code_dataframe(frequencies, codes)

    assert list(df.columns) == ["Char", "Huffman Code", "Count"]
    assert df.to_dict("records") == [
        {"Char": "a", "Huffman Code": "1", "Count": 3},
        {"Char": "b", "Huffman Code": "0", "Count": 2},
    ]


def test_empty_original_bit_table():
    df = original_bit_dataframe({})

    assert df.empty
    assert list(df.columns) == ["Char", "ASCII", "Bits", "Count"]


def test_format_table():
    frequencies, _, codes = calculate_huffman_codes("abracadabra")
    rendered = format_table(huffman_code_dataframe(frequencies, codes))
    lines = rendered.splitlines()

    assert "Char" in lines[0] and "Huffman Code" in lines[0] and "Count" in lines[0]
    assert len(lines) == 1 + len(frequencies)
    assert "100" in lines[4]


def test_format_table_left_aligns_cells():
    frequencies, _, codes = calculate_huffman_codes("abracadabra")
    header, *rows = format_table(huffman_code_dataframe(frequencies, codes)).splitlines()
    start = header.index("Huffman Code")

    for symbol, row in zip(frequencies, rows):
        code = codes[symbol]
        assert row[start:start + len(code)] == code
        assert row[start + len(code)] == " "
        assert row.index(symbol) == header.index("Char")


def test_format_empty_table_is_header_only():
    assert format_table(original_bit_dataframe({})) == "Char ASCII Bits Count"
    assert format_table(huffman_code_dataframe({}, {})) == "Char Huffman Code Count"
