"""
FastAPI Integration Example

Demonstrates serving slicepage pages from an API endpoint, with PageRequest
validating the query parameters.

Requires the `examples` extra: fastapi, plus uvicorn as the ASGI server used to
run it (see the command at the bottom of this file).
"""

from datetime import datetime, timedelta, timezone

from fastapi import Depends, FastAPI, HTTPException, status
from pydantic import BaseModel

from slicepage import CursorNotFoundError, InvalidArgumentError, PageRequest, Paginator


class Order(BaseModel):
    """Order record, sorted by order_id"""

    order_id: str
    customer: str
    total: float
    created_at: datetime


class OrderPage(BaseModel):
    """Response model mirroring PageResult.to_dict()"""

    data: list[Order]
    first: str | None
    last: str | None
    hasMore: bool


_start = datetime(2024, 1, 1, tzinfo=timezone.utc)
ORDERS = [
    Order(
        order_id=f"ord-{i:04d}",
        customer=f"customer-{i % 7}",
        total=round(9.99 * i, 2),
        created_at=_start + timedelta(hours=i),
    )
    for i in range(1, 101)
]

paginator = Paginator("order_id", default_take=20, strict_cursor=True)

app = FastAPI(title="slicepage + FastAPI Example")


def page_request(cursor: str | None = None, take: int | None = None) -> PageRequest:
    """Validates query parameters into a PageRequest"""
    try:
        return PageRequest.parse(cursor=cursor, take=take)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@app.get("/orders", response_model=OrderPage)
def list_orders(request: PageRequest = Depends(page_request)) -> dict:
    """
    List orders.

    - `take` > 0: orders after `cursor` (or the first ones)
    - `take` < 0: orders before `cursor` (or the last ones)
    """
    try:
        return paginator.page_for(ORDERS, request).to_dict()
    except CursorNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


# Run with: uvicorn main:app --reload
