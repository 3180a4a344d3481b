from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from src.auth.dependencies import get_tenant_context
from src.seating.features.assign_guest.write_model import (
    SeatAssignmentWriteModel,
    SqlSeatAssignmentWriteModel,
)
from src.seating.urls import ASSIGN_GUEST_URL
from src.tenants.dtos import TenantContext

router = APIRouter()


class AssignSubmit(BaseModel):
    table_id: UUID | None = None


def get_seat_assignment_write_model() -> SeatAssignmentWriteModel:
    return SqlSeatAssignmentWriteModel()


@router.put(ASSIGN_GUEST_URL, status_code=status.HTTP_204_NO_CONTENT)
async def assign_guest_to_table(
    guest_id: UUID,
    request: AssignSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: SeatAssignmentWriteModel = Depends(get_seat_assignment_write_model),
) -> Response:
    """
    Seat a guest, or send them back to the unassigned pool with ``table_id: null``.
    Answers 409 when the table cannot fit the guest and their plus-ones.
    """
    await write_model.assign_guest_to_table(context, guest_id, request.table_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
