"""
models/procedure.py
-------------------
Outcome of a stored procedure call.
"""

from dataclasses import dataclass, field


@dataclass
class ProcedureResult:
    """
    What the server reported back for one CALL.

    Attributes:
        procedure: Name of the procedure that was called.
        status: Driver status message, e.g. 'CALL'.
        rowcount: Rows affected as reported by the driver (-1 if unknown).
        rows: Rows returned by the call (OUT/INOUT parameters).
        notices: Server NOTICE messages raised during the call.
    """
    procedure: str
    status: str
    rowcount: int = -1
    rows: list[tuple] = field(default_factory=list)
    notices: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.status} (rows={self.rowcount})"
