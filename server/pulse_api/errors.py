"""HTTP error helpers shared by the route modules."""
from fastapi import HTTPException


def validation_failed(errors: dict[str, str]) -> HTTPException:
    """422 carrying field-level messages, e.g. {"errors": {"duration": "..."}}."""
    return HTTPException(status_code=422, detail={"errors": errors})


def not_found(kind: str, record_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"{kind} {record_id} not found")
