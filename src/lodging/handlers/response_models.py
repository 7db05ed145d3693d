from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from lodging.directory import DirectorySnapshot
from lodging.order.domain.entity import Order
from lodging.person.domain.entity import Employee, Guest
from lodging.reservation.domain.entity import Reservation
from lodging.room.domain.entity import Room


class RoomData(BaseModel):
    """客室データのレスポンスモデル"""

    room_number: int
    room_type: str
    status: str
    occupant_guest_id: int | None


class GuestData(BaseModel):
    guest_id: int
    name: str
    age: int


class EmployeeData(BaseModel):
    employee_id: int
    name: str
    age: int
    position: str


class ReservationData(BaseModel):
    """予約データのレスポンスモデル"""

    reservation_id: int
    guest: GuestData
    room: RoomData | None
    duration_days: int


class OrderData(BaseModel):
    """注文データのレスポンスモデル"""

    order_id: int
    guest_id: int
    item: str
    quantity: int
    price_amount: str
    total_amount: str
    currency: str
    placed_at: str


class HotelData(BaseModel):
    hotel_name: str
    rooms: list[RoomData]
    employees: list[EmployeeData]
    reservations: list[ReservationData]
    orders: list[OrderData]


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    message: str | None = None
    data: dict[str, Any] | list[dict[str, Any]] | None = None


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル（error_kind と利用者向けメッセージ）"""

    status: str = "error"
    error_kind: str
    message: str


def room_data(room: Room) -> RoomData:
    return RoomData(
        room_number=room.number.value,
        room_type=str(room.room_type),
        status=room.status.value,
        occupant_guest_id=(
            room.occupant.value if room.occupant is not None else None
        ),
    )


def guest_data(guest: Guest) -> GuestData:
    return GuestData(
        guest_id=guest.id.value, name=str(guest.name), age=guest.age.value
    )


def employee_data(employee: Employee) -> EmployeeData:
    return EmployeeData(
        employee_id=employee.id.value,
        name=str(employee.name),
        age=employee.age.value,
        position=str(employee.position),
    )


def reservation_data(reservation: Reservation, room: Room | None) -> ReservationData:
    """予約を変換する（客室は部屋番号で引き直したものを渡す）"""
    return ReservationData(
        reservation_id=reservation.id.value,
        guest=guest_data(reservation.guest),
        room=room_data(room) if room is not None else None,
        duration_days=reservation.duration.days,
    )


def order_data(order: Order) -> OrderData:
    return OrderData(
        order_id=order.id.value,
        guest_id=order.guest_id.value,
        item=str(order.item),
        quantity=order.quantity.value,
        price_amount=str(order.price.amount),
        total_amount=str(order.total.amount),
        currency=str(order.price.currency),
        placed_at=str(order.placed_at),
    )


def hotel_data(
    snapshot: DirectorySnapshot, rooms_by_number: dict[int, Room]
) -> HotelData:
    return HotelData(
        hotel_name=snapshot.hotel_name,
        rooms=[room_data(r) for r in snapshot.rooms],
        employees=[employee_data(e) for e in snapshot.employees],
        reservations=[
            reservation_data(r, rooms_by_number.get(r.room_number.value))
            for r in snapshot.reservations
        ],
        orders=[order_data(o) for o in snapshot.orders],
    )
