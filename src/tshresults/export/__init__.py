from tshresults.export.formatter import (
    format_result_row,
    write_csv,
    write_json,
    write_results,
)

__all__ = ["format_result_row", "write_csv", "write_json", "write_results"]
