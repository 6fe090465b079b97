"""JSON formatting utilities for decoded positions."""

from aprsposition import Position

__all__ = ["format_fault_message", "format_position_message"]


def format_position_message(position: Position) -> dict:
    """Serialize a position into the ``/decode`` success body."""
    dms = (
        f"{position.to_dms(position.latitude, True)} "
        f"{position.to_dms(position.longitude, False)}"
    )
    return {
        "ok": True,
        "position": {
            "latitude": position.latitude,
            "longitude": position.longitude,
            "altitude": position.altitude,
            "ambiguity": position.ambiguity,
            "symbol_table": position.symbol_table,
            "symbol_code": position.symbol_code,
            "dms": dms,
            "decimal": position.to_decimal_string(),
            "compressed": position.to_compressed_string(),
        },
    }


def format_fault_message(fault: str) -> dict:
    return {"ok": False, "fault": fault}
