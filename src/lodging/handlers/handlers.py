"""プレゼンテーション層との境界

各ハンドラは payload(dict) を受け取り、リクエストモデルで検証してから
Directory を呼び出し、レスポンス dict を返す。例外はここでのみ捕捉する。
"""

from collections.abc import Callable
from functools import wraps

from pydantic import ValidationError

from lodging.directory import Directory
from lodging.handlers.request_models import (
    AddEmployeeRequest,
    AddOrderRequest,
    AddRoomRequest,
    CheckoutRoomRequest,
    MakeReservationRequest,
    UpdateEmployeePositionRequest,
)
from lodging.handlers.response_models import (
    ErrorResponse,
    SuccessResponse,
    employee_data,
    hotel_data,
    order_data,
    reservation_data,
    room_data,
)
from lodging.shared.domain.exception import DomainException
from lodging.shared.utils.logger import get_logger

logger = get_logger()

INVALID_INPUT = "InvalidInput"
UNKNOWN_ERROR = "UnknownError"

Handler = Callable[..., dict]


def _invalid_input_message(error: ValidationError) -> str:
    first = error.errors()[0]
    field = ".".join(str(loc) for loc in first["loc"])
    return f"Invalid input. {field}: {first['msg']}"


def handle_errors(func: Handler) -> Handler:
    """例外をエラーレスポンスに変換するデコレータ"""

    @wraps(func)
    def wrapper(*args, **kwargs) -> dict:
        try:
            return func(*args, **kwargs)
        except DomainException as e:
            logger.warning(
                "Request rejected",
                extra={"handler": func.__name__, "error_kind": e.error_kind},
            )
            return ErrorResponse(
                error_kind=e.error_kind, message=e.message
            ).model_dump()
        except ValidationError as e:
            return ErrorResponse(
                error_kind=INVALID_INPUT, message=_invalid_input_message(e)
            ).model_dump()
        except ValueError as e:
            return ErrorResponse(
                error_kind=INVALID_INPUT, message=f"Invalid input. {e}"
            ).model_dump()
        except Exception:
            logger.exception("Unexpected failure", extra={"handler": func.__name__})
            return ErrorResponse(
                error_kind=UNKNOWN_ERROR, message="An unknown error occurred."
            ).model_dump()

    return wrapper


@handle_errors
def add_room(directory: Directory, payload: dict) -> dict:
    logger.info("Received add room request")
    request = AddRoomRequest.model_validate(payload)
    room = directory.add_room(request.room_number, request.room_type)
    return SuccessResponse(
        message="Room Added Successfully!!", data=room_data(room).model_dump()
    ).model_dump()


@handle_errors
def add_employee(directory: Directory, payload: dict) -> dict:
    logger.info("Received add employee request")
    request = AddEmployeeRequest.model_validate(payload)
    employee = directory.add_employee(
        name=request.name,
        age=request.age,
        employee_id=request.employee_id,
        position=request.position,
    )
    return SuccessResponse(
        message="Employee added successfully!",
        data=employee_data(employee).model_dump(),
    ).model_dump()


@handle_errors
def make_reservation(directory: Directory, payload: dict) -> dict:
    logger.info("Received make reservation request")
    request = MakeReservationRequest.model_validate(payload)
    reservation = directory.make_reservation(
        name=request.name,
        age=request.age,
        guest_id=request.guest_id,
        room_number=request.room_number,
        duration_days=request.duration_days,
    )
    room = directory.find_room(reservation.room_number.value)
    return SuccessResponse(
        message="Reservation successful!",
        data=reservation_data(reservation, room).model_dump(),
    ).model_dump()


@handle_errors
def checkout_room(directory: Directory, payload: dict) -> dict:
    logger.info("Received checkout room request")
    request = CheckoutRoomRequest.model_validate(payload)
    room = directory.checkout_room(request.room_number)
    return SuccessResponse(
        message="Room checked out successfully!", data=room_data(room).model_dump()
    ).model_dump()


@handle_errors
def update_employee_position(directory: Directory, payload: dict) -> dict:
    logger.info("Received update employee position request")
    request = UpdateEmployeePositionRequest.model_validate(payload)
    employee = directory.update_employee_position(
        request.employee_id, request.new_position
    )
    return SuccessResponse(
        message="Employee position updated successfully!",
        data=employee_data(employee).model_dump(),
    ).model_dump()


@handle_errors
def add_order(directory: Directory, payload: dict) -> dict:
    logger.info("Received add order request")
    request = AddOrderRequest.model_validate(payload)
    order = directory.add_order(
        guest_id=request.guest_id,
        item=request.item,
        quantity=request.quantity,
        price=request.price,
    )
    return SuccessResponse(
        message="Food order placed successfully!", data=order_data(order).model_dump()
    ).model_dump()


@handle_errors
def list_rooms(directory: Directory) -> dict:
    rooms = directory.list_rooms()
    return SuccessResponse(data=[room_data(r).model_dump() for r in rooms]).model_dump()


@handle_errors
def list_employees(directory: Directory) -> dict:
    employees = directory.list_employees()
    return SuccessResponse(
        data=[employee_data(e).model_dump() for e in employees]
    ).model_dump()


@handle_errors
def list_reservations(directory: Directory) -> dict:
    data = [
        reservation_data(r, directory.find_room(r.room_number.value)).model_dump()
        for r in directory.list_reservations()
    ]
    return SuccessResponse(data=data).model_dump()


@handle_errors
def list_orders(directory: Directory) -> dict:
    orders = directory.list_orders()
    return SuccessResponse(
        data=[order_data(o).model_dump() for o in orders]
    ).model_dump()


@handle_errors
def hotel_details(directory: Directory) -> dict:
    snapshot = directory.snapshot()
    rooms_by_number = {r.number.value: r for r in snapshot.rooms}
    return SuccessResponse(
        data=hotel_data(snapshot, rooms_by_number).model_dump()
    ).model_dump()
