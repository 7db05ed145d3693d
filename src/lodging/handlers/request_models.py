from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lodging.shared.utils.validators import to_decimal


class _Request(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class AddRoomRequest(_Request):
    """客室追加リクエストモデル"""

    room_number: int
    room_type: str = Field(..., min_length=1, description="客室タイプ")


class AddEmployeeRequest(_Request):
    """従業員追加リクエストモデル"""

    name: str = Field(..., min_length=1, max_length=100)
    age: int = Field(..., ge=0)
    employee_id: int
    position: str = Field(..., min_length=1)


class MakeReservationRequest(_Request):
    """予約リクエストモデル"""

    name: str = Field(..., min_length=1, max_length=100)
    age: int = Field(..., ge=0)
    guest_id: int
    room_number: int
    duration_days: int = Field(..., ge=1, description="滞在日数")


class CheckoutRoomRequest(_Request):
    """チェックアウトリクエストモデル"""

    room_number: int


class UpdateEmployeePositionRequest(_Request):
    """役職変更リクエストモデル"""

    employee_id: int
    new_position: str = Field(..., min_length=1)


class AddOrderRequest(_Request):
    """飲食・サービス注文リクエストモデル"""

    guest_id: int
    item: str = Field(..., min_length=1, max_length=100)
    quantity: int = Field(..., ge=1)
    price: Decimal = Field(
        ...,
        ge=0,
        description="単価（0以上）",
    )

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v: object) -> Decimal:
        return to_decimal(v)
