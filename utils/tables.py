import pandas as pd
from .types import Symbol, FrequencyTable, CodeTable, BITS_PER_SYMBOL


def display_symbol(symbol: Symbol) -> str:
    return "' '" if symbol == " " else symbol


def original_bit_dataframe(frequencies: FrequencyTable) -> pd.DataFrame:
    rows = []
    for symbol, count in frequencies.items():
        rows.append({
            "Char": display_symbol(symbol),
            "ASCII": ord(symbol),
            "Bits": BITS_PER_SYMBOL,
            "Count": count,
        })
    return pd.DataFrame(rows, columns=["Char", "ASCII", "Bits", "Count"])


def huffman_code_dataframe(frequencies: FrequencyTable, codes: CodeTable) -> pd.DataFrame:
    rows = []
    for symbol, count in frequencies.items():
        rows.append({
            "Char": display_symbol(symbol),
            "Huffman Code": codes[symbol],
            "Count": count,
        })
    return pd.DataFrame(rows, columns=["Char", "Huffman Code", "Count"])


def format_table(df: pd.DataFrame) -> str:
    """
    Renders the table with every cell left aligned under its header.

    An empty table renders as its header line only.
    """
    if df.empty:
        return " ".join(str(column) for column in df.columns)

    formatters = {}
    for column in df.columns:
        width = max(len(str(column)), int(df[column].astype(str).str.len().max()))
        formatters[column] = lambda value, width=width: str(value).ljust(width)

    return df.to_string(index=False, justify="left", formatters=formatters)
