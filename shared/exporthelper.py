import re
from enum import Enum
from typing import Any, Dict, List
from io import BytesIO
import pandas as pd
from fastapi.responses import StreamingResponse

DELIMITER = ","
UNSAFE_CHARS = re.compile(r"[,\r\n]")


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _cell(value: Any) -> str:
    if value is None or pd.isna(value):
        return ""
    if hasattr(value, "isoformat"):
        return value.isoformat()
    # Lossy but deterministic: no delimiter or line break inside a cell
    return UNSAFE_CHARS.sub(" ", str(value))


def export_to_table(
    data: List[Dict],
    column_map: Dict[str, str],
) -> str:
    """
    Render a list of dictionaries as a delimiter-separated text table.

    Args:
        data: List of dictionaries (each dict = row)
        column_map: Mapping of data keys -> header names, in column order.
            Keys missing from a row render as empty cells.
    """
    rows = [{k: _plain(v) for k, v in row.items()} for row in data]

    df = pd.DataFrame(rows, columns=list(column_map.keys()))
    df = df.rename(columns=column_map)

    lines = [DELIMITER.join(df.columns)]
    for row in df.itertuples(index=False, name=None):
        lines.append(DELIMITER.join(_cell(v) for v in row))

    return "\n".join(lines) + "\n"


def table_download_response(content: str, filename: str) -> StreamingResponse:
    output = BytesIO(content.encode("utf-8"))

    headers = {
        "Content-Disposition": f'attachment; filename="{filename}"'
    }

    return StreamingResponse(
        output,
        media_type="text/csv",
        headers=headers
    )
