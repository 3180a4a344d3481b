from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from src.auth.dependencies import get_tenant_context
from src.seating.dtos import TableDTO, clean_table_input
from src.seating.features.manage_tables.write_model import SqlTableWriteModel, TableWriteModel
from src.seating.urls import REORDER_TABLES_URL, TABLE_URL, TABLES_URL
from src.tenants.dtos import TenantContext

router = APIRouter()


class TableSubmit(BaseModel):
    name: str
    capacity: int


class ReorderSubmit(BaseModel):
    ordered_ids: list[UUID]


class TableResponse(BaseModel):
    id: UUID
    name: str
    capacity: int
    order: int

    @classmethod
    def from_dto(cls, table: TableDTO) -> "TableResponse":
        return cls(id=table.id, name=table.name, capacity=table.capacity, order=table.order)


def get_table_write_model() -> TableWriteModel:
    return SqlTableWriteModel()


@router.post(TABLES_URL, response_model=TableResponse, status_code=status.HTTP_201_CREATED)
async def create_table(
    request: TableSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: TableWriteModel = Depends(get_table_write_model),
) -> TableResponse:
    table = await write_model.create_table(context, clean_table_input(request.name, request.capacity))
    return TableResponse.from_dto(table)


@router.post(REORDER_TABLES_URL, status_code=status.HTTP_204_NO_CONTENT)
async def reorder_tables(
    request: ReorderSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: TableWriteModel = Depends(get_table_write_model),
) -> Response:
    await write_model.reorder_tables(context, request.ordered_ids)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(TABLE_URL, response_model=TableResponse)
async def update_table(
    table_id: UUID,
    request: TableSubmit,
    context: TenantContext = Depends(get_tenant_context),
    write_model: TableWriteModel = Depends(get_table_write_model),
) -> TableResponse:
    table = await write_model.update_table(
        context, table_id, clean_table_input(request.name, request.capacity)
    )
    return TableResponse.from_dto(table)


@router.delete(TABLE_URL, status_code=status.HTTP_204_NO_CONTENT)
async def delete_table(
    table_id: UUID,
    context: TenantContext = Depends(get_tenant_context),
    write_model: TableWriteModel = Depends(get_table_write_model),
) -> Response:
    await write_model.delete_table(context, table_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
