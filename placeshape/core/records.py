"""Loading address rows exported from the address backend."""
from pathlib import Path
from typing import List, Union

import pandas as pd

from placeshape.core.models import AddressRecord
from placeshape.utils.logging import log_error


def records_from_frame(df: pd.DataFrame) -> List[AddressRecord]:
    """
    Build address records from a DataFrame of address rows.

    Empty cells become absent fields. The ``name`` column may hold dicts or
    JSON object strings. Rows that cannot be read are logged and skipped.

    Args:
        df: One row per address row, columns as in get_addressdata

    Returns:
        List of AddressRecord in frame order
    """
    records = []
    for index, row in df.iterrows():
        try:
            records.append(AddressRecord.from_row(row.to_dict()))
        except (TypeError, ValueError) as e:
            log_error(e, {
                "module": "records",
                "function": "records_from_frame",
                "row": index,
            })
    return records


def load_address_rows_csv(csv_path: Union[str, Path]) -> List[AddressRecord]:
    """
    Load address records from a CSV export.

    Args:
        csv_path: Path to the CSV file

    Returns:
        List of AddressRecord; empty if the file does not exist
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        return []

    # Read as text; keeps postcodes such as "01067" intact
    df = pd.read_csv(csv_path, dtype=str)
    return records_from_frame(df)
