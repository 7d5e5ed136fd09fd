# src/api/core/csv_parser.py
"""
Parsers for the product import feed.

Both the CSV and the Excel reader return one flat ``{header: value}`` dict per
data row, with every value a string. Boolean and numeric columns are
normalised so the import service can compare them without caring where the
row came from:

* boolean columns become ``"true"`` or ``"false"`` (only a case-insensitive
  ``TRUE`` counts as true)
* numeric columns become the parsed number re-printed as text, or ``"0"``
  when the cell does not start with a number
"""
import io
import math
import re
from typing import Dict, List

import pandas as pd

REQUIRED_COLUMNS = [
    "Product Name",
    "Description",
    "Ingredients",
    "Price",
    "Discount (%)",
    "Slug",
    "Active",
    "Out of Stock",
    "Featured",
    "Top Selling",
    "New Arrival",
    "Best Selling",
    "Special",
    "Grocery",
    "Brand",
    "Categories",
    "Images",
    "Variant SKU",
    "Variant Label",
    "Variant Slug",
    "Variant Price",
    "Variant Discount (%)",
    "Variant Stock",
    "Variant Active",
    "Variant Out of Stock",
]

BOOLEAN_COLUMNS = {
    "Active",
    "Out of Stock",
    "Featured",
    "Top Selling",
    "New Arrival",
    "Best Selling",
    "Special",
    "Grocery",
    "Variant Active",
    "Variant Out of Stock",
}

NUMERIC_COLUMNS = {
    "Price",
    "Discount (%)",
    "Variant Price",
    "Variant Discount (%)",
    "Variant Stock",
}

EXCEL_EXTENSIONS = (".xlsx", ".xls")

_LEADING_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_float(value) -> float:
    """Parse the leading number of a cell, 0 when there is none"""
    match = _LEADING_NUMBER.match(str(value or "").strip())
    if not match:
        return 0.0
    return float(match.group(0))


def number_to_string(number: float) -> str:
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == int(number):
        return str(int(number))
    return repr(number)


def normalize_value(header: str, value: str) -> str:
    if header in BOOLEAN_COLUMNS:
        return "true" if value.upper() == "TRUE" else "false"
    if header in NUMERIC_COLUMNS:
        return number_to_string(parse_float(value))
    return value


def split_csv_line(line: str) -> List[str]:
    """
    Split one CSV line on commas outside double quotes.
    Quote characters only toggle the quoted state, they are never kept.
    """
    values = []
    current = ""
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            values.append(current.strip())
            current = ""
        else:
            current += char
    values.append(current.strip())

    return values


def parse_csv(csv_text: str) -> List[Dict[str, str]]:
    lines = csv_text.split("\n")
    headers = [h.strip().replace('"', "") for h in lines[0].split(",")]

    rows = []
    for raw_line in lines[1:]:
        line = raw_line.strip()
        if not line:
            continue

        values = split_csv_line(line)
        # short rows are dropped, not reported
        if len(values) < len(headers):
            continue

        rows.append(
            {
                header: normalize_value(header, values[index].replace('"', ""))
                for index, header in enumerate(headers)
            }
        )

    return rows


def parse_excel(contents: bytes) -> List[Dict[str, str]]:
    """Read the first sheet of a workbook into the same records as parse_csv"""
    df = pd.read_excel(io.BytesIO(contents), sheet_name=0, dtype=str)
    df = df.fillna("")
    df.columns = [str(col).strip() for col in df.columns]

    rows = []
    for _, row in df.iterrows():
        values = {header: str(row[header]).strip() for header in df.columns}
        if not any(values.values()):
            continue
        rows.append(
            {header: normalize_value(header, value) for header, value in values.items()}
        )

    return rows


def parse_upload(filename: str, contents: bytes) -> List[Dict[str, str]]:
    if (filename or "").lower().endswith(EXCEL_EXTENSIONS):
        return parse_excel(contents)
    return parse_csv(contents.decode("utf-8-sig", errors="replace"))

